#!/usr/bin/env python3
"""Interactive sliding-puzzle solver: read a board, solve it, save and replay the solution."""
from __future__ import annotations
import argparse, sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from tilesolver.domains.board_io import BoardFormatError, parse_board, validate_line, write_solution
from tilesolver.domains.puzzlen import NPuzzle
from tilesolver.domains.state import PuzzleState
from tilesolver.search.solve import SOLVERS, NoSolutionError

Prompt = Callable[[str], str]

class PlaybackAborted(RuntimeError):
    pass

def clear_screen():
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)

def read_from_command_line(n: int, readline: Optional[Prompt] = None) -> PuzzleState:
    readline = readline or input
    print("Enter the puzzle state line by line, separated by spaces. Use 0 for the empty tile.")
    lines = []
    while len(lines) < n:
        line = readline("Enter line: ")
        try:
            validate_line(line, n)
        except BoardFormatError as e:
            print(f"Error: {e}")
            continue
        lines.append(line)
    return parse_board("\n".join(lines), n)

def confirm(question: str, readline: Optional[Prompt] = None, default: bool = True) -> bool:
    readline = readline or input
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        answer = readline(f"{question} {hint} ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False

def solution_step_by_step(solution: Sequence[PuzzleState], readline: Optional[Prompt] = None):
    for step in solution:
        if not confirm("Do you want to continue?", readline):
            raise PlaybackAborted("Aborted by user")
        print(step)

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve an N×N sliding-tile puzzle (0 is the blank, goal is 0..N²-1 row-major).")
    ap.add_argument("--n", type=int, default=4, help="Board side (default 4)")
    ap.add_argument("--algo", choices=sorted(SOLVERS), default="astar")
    ap.add_argument("--board-file", type=Path, default=None, help="Read the board from a file instead of stdin")
    ap.add_argument("--output", type=Path, default=Path("solution.txt"))
    ap.add_argument("--no-playback", action="store_true", help="Skip the step-by-step replay")
    args = ap.parse_args(argv)

    try:
        if args.board_file is not None:
            start = parse_board(args.board_file.read_text(encoding="utf-8"), args.n)
        else:
            start = read_from_command_line(args.n)
    except BoardFormatError as e:
        print(f"Error: {e}")
        return 1
    except EOFError:
        print("Error: unexpected end of input")
        return 1

    if not NPuzzle(start.n).is_solvable(start):
        print(f"Error: this board cannot reach the goal\n{start}")
        return 1

    clear_screen()
    print(f"Starting solution with state:\n{start}")
    print("Solving...(this may take a long while and a lot of memory)")

    try:
        solution = SOLVERS[args.algo](start)
    except NoSolutionError as e:
        print(f"Error: {e}")
        return 1

    clear_screen()
    print(f"Solution found for \n{solution[0]}!")
    print(f"Solution length: {len(solution)}")
    out = write_solution(args.output, solution)
    print(f"Solution written to {out}")

    if not args.no_playback:
        try:
            solution_step_by_step(solution)
        except PlaybackAborted as e:
            print(f"Error: {e}")
            return 1
        except EOFError:
            print("Error: unexpected end of input")
            return 1

    print("Done!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
