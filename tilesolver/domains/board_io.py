from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Sequence

from tilesolver.domains.state import PuzzleState

class BoardFormatError(ValueError):
    pass

def _parse_numbers(line: str) -> List[int]:
    try:
        return [int(tok) for tok in line.split()]
    except ValueError as e:
        raise BoardFormatError(f"Not a number: {e}") from e

def validate_line(line: str, n: int) -> List[int]:
    """One board row: exactly n integers in 0..n*n-1."""
    numbers = _parse_numbers(line)
    if len(numbers) != n:
        raise BoardFormatError(f"Line must contain {n} numbers")
    hi = n * n - 1
    for v in numbers:
        if v < 0 or v > hi:
            raise BoardFormatError(f"Number must be between 0 and {hi}")
    return numbers

def parse_board(text: str, n: Optional[int] = None) -> PuzzleState:
    """Full board: n lines of n unique integers (side inferred from the line count)."""
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if n is None:
        n = len(lines)
    if n < 2:
        raise BoardFormatError("Board must be at least 2x2")
    if len(lines) != n:
        raise BoardFormatError(f"Input must contain {n} lines")
    rows = [validate_line(ln, n) for ln in lines]
    flat = [v for row in rows for v in row]
    if len(set(flat)) != n * n:
        raise BoardFormatError("Numbers must be unique")
    return PuzzleState.from_rows(rows)

def write_solution(path: Path, solution: Sequence[PuzzleState]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for step in solution:
            f.write(f"{step.render()}\n")
    return path
