from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from tilesolver.domains.puzzlen import NPuzzle, make_unsolvable_variant
from tilesolver.domains.state import PuzzleState
from tilesolver.heuristics.linear_conflict import linear_conflict
from tilesolver.heuristics.manhattan import manhattan
from tilesolver.search.a_star import a_star
from tilesolver.search.bfs import bfs
from tilesolver.search.ida_star import ida_star

HEURISTICS = {"manhattan": manhattan, "linear_conflict": linear_conflict}

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed",
    "expanded", "generated", "duplicates", "g", "time_sec",
    "peak_open", "reached", "peak_stack", "iterations", "bound_final", "tie_break",
    "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: PuzzleState

def generate_instances(dom: NPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            used = seed
            s = dom.scramble(d, used)
            seed += 1
            attempts += 1
            if dom.is_solvable(s):
                out.append(Instance(seed=used, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def choose_domain(args) -> NPuzzle:
    """--n wins over --domain (p8|p15)."""
    if args.n is not None:
        return NPuzzle(args.n)
    return NPuzzle(4) if args.domain == "p15" else NPuzzle(3)

def result_row(res, heur: str, n: int, inst: Instance, solvable_flag: int) -> list:
    return [
        res.get("algorithm", ""), heur, n, inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("reached", ""), res.get("peak_stack", ""),
        res.get("iterations", ""), res.get("bound_final", ""), res.get("tie_break", ""),
        res.get("termination", "ok"), solvable_flag,
    ]

def run_instance(state: PuzzleState, algos: Sequence[str], hfun: Callable[[PuzzleState], int],
                 tie_break: str = "h", timeout_sec: Optional[float] = None,
                 ida_max_bound: Optional[int] = None, solvable: bool = True):
    """Yield one result dict per requested algorithm ('a', 'ida', 'bfs')."""
    for algo in algos:
        if algo == "a":
            yield a_star(state, hfun, tie_break=tie_break, return_path=False, timeout_sec=timeout_sec)
        elif algo == "ida":
            # IDA* only stops on an unsolvable board when something bounds it
            if not solvable and timeout_sec is None and ida_max_bound is None:
                continue
            yield ida_star(state, hfun, return_path=False, max_bound=ida_max_bound, timeout_sec=timeout_sec)
        elif algo == "bfs":
            yield bfs(state, timeout_sec=timeout_sec)
        else:
            raise ValueError(f"unknown algorithm {algo!r}")

def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="A*/IDA* (+BFS) N-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "ida", "bfs", "both", "all"], default="both",
                    help="'both' = A*+IDA*, 'all' = A*+IDA*+BFS")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22, 26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--tie_break", choices=["h", "g", "fifo", "lifo"], default="h")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--ida_max_bound", type=int, default=None, help="Give up IDA* past this f bound")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))

    # domain selection
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")

    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (IDA* needs --timeout_sec or --ida_max_bound)")
    args = ap.parse_args(argv)

    dom = choose_domain(args)
    hfun = HEURISTICS[args.heuristic]
    algos = {"both": ["a", "ida"], "all": ["a", "ida", "bfs"]}.get(args.algo, [args.algo])

    insts = generate_instances(dom, args.depths, args.per_depth, start_seed=args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for r in run_instance(inst.state, algos, hfun, args.tie_break, args.timeout_sec, args.ida_max_bound):
                w.writerow(result_row(r, args.heuristic, dom.N, inst, 1))
            if args.include_unsolvable:
                u = make_unsolvable_variant(inst.state)
                for r in run_instance(u, algos, hfun, args.tie_break, args.timeout_sec, args.ida_max_bound,
                                      solvable=False):
                    w.writerow(result_row(r, args.heuristic, dom.N, inst, 0))

    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
