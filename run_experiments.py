#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run("Manhattan both", f"{py} -m tilesolver.experiments.runner --depths 6 10 14 18 --per_depth 20 --heuristic manhattan --algo both --out results/p8_manhattan.csv")
    run("LinearConflict both", f"{py} -m tilesolver.experiments.runner --depths 6 10 14 18 --per_depth 20 --heuristic linear_conflict --algo both --out results/p8_linear_conflict.csv")
    run("A* tie-breaking (fifo)", f"{py} -m tilesolver.experiments.runner --depths 6 10 14 18 --per_depth 20 --algo a --tie_break fifo --out results/p8_manhattan_tie_fifo.csv")
    run("Summary", f"{py} -m tilesolver.experiments.analyze 'results/p8_*.csv' --out results/summary.csv")
    run("Plots", f"{py} -m tilesolver.experiments.plot results/p8_manhattan.csv results/p8_linear_conflict.csv --save results/plots")

if __name__ == "__main__":
    main()
