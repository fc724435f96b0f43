#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Sequence

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tilesolver.domains.puzzlen import NPuzzle
from tilesolver.domains.state import PuzzleState
from tilesolver.experiments.runner import HEURISTICS
from tilesolver.search.a_star import a_star
from tilesolver.search.ida_star import ida_star

def draw_board(state: PuzzleState, out_path: Path):
    n = state.n
    fig = plt.figure(figsize=(3, 3))
    ax = fig.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for idx, t in enumerate(state.cells):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)

def save_frames(path: Sequence[PuzzleState], outdir: Path) -> List[Path]:
    frames = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, p)
        frames.append(p)
    return frames

def main():
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=["a", "ida"], default="a")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--domain", choices=["p8", "p15"], default="p8")
    p.add_argument("--n", type=int, default=None)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args()

    dom = NPuzzle(args.n) if args.n else (NPuzzle(4) if args.domain == "p15" else NPuzzle(3))
    start = dom.scramble(args.depth, args.seed)
    h = HEURISTICS[args.heuristic]

    if args.algo == "a":
        res = a_star(start, h, tie_break="h", return_path=True)
    else:
        res = ida_star(start, h, return_path=True)

    if not res.get("path"):
        print("No path (timeout or exhausted). Try smaller depth.")
        return

    outdir = Path(args.outdir)
    save_frames(res["path"], outdir)
    print(f"Saved {len(res['path'])} frames to {outdir}")

if __name__ == "__main__":
    main()
