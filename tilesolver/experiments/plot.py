#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from tilesolver.experiments.analyze import load_results, sem

METRICS = ["expanded", "generated", "duplicates", "time_sec"]

def plot_metric(ax, df: pd.DataFrame, metric: str):
    ok = df[(df["termination"] == "ok") & (df["solvable"] == 1)]
    g = (ok.groupby(["algorithm", "heuristic", "depth"], as_index=False)
           .agg(mean=(metric, "mean"), err=(metric, sem)))
    for (algo, heur), part in g.groupby(["algorithm", "heuristic"]):
        # offset A*/IDA* a tiny bit so curves don't overlap
        offset = -0.12 if algo == "A*" else (0.12 if algo == "IDA*" else 0.0)
        ax.errorbar(part["depth"] + offset, part["mean"], yerr=part["err"],
                    marker="o", capsize=3, label=f"{algo} | {heur}")
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± SEM)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def plot_all(df: pd.DataFrame, outdir: Path, base: str):
    saved = []
    # Combined 3-panel figure
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, df, metric)
    fig.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    plt.close(fig)

    # Separate single-panel figures
    for metric in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)
    return saved

def main():
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args()

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    plot_all(df, Path(args.save), base)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
