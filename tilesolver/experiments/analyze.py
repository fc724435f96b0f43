#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob, os
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

NUMERIC = ("n", "depth", "seed", "expanded", "generated", "duplicates", "g", "time_sec",
           "peak_open", "reached", "peak_stack", "iterations", "bound_final")

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load_results(patterns: Iterable[str]) -> pd.DataFrame:
    """Concatenate runner CSVs (globs allowed), normalised and deduplicated."""
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)):
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Normalize schema
    if "algorithm" not in df.columns and "algo" in df.columns:
        df = df.rename(columns={"algo": "algorithm"})
    if "time_sec" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time": "time_sec"})
    if "termination" not in df.columns:
        df["termination"] = "ok"
    df["termination"] = df["termination"].fillna("ok")
    if "solvable" not in df.columns:
        df["solvable"] = 1

    for c in NUMERIC:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")

    keep_cols = [c for c in ("algorithm", "heuristic", "tie_break", "n", "depth", "seed", "solvable") if c in df.columns]
    if keep_cols:
        df = df.drop_duplicates(subset=keep_cols, keep="last")
    return df.reset_index(drop=True)

def summarize(df: pd.DataFrame, only_ok: bool = True) -> pd.DataFrame:
    """Mean ± SEM of time/expanded/generated per (algorithm, heuristic, depth)."""
    if df.empty:
        return df
    if only_ok:
        df = df[(df["termination"] == "ok") & (df["solvable"] == 1)]
    by = [c for c in ("algorithm", "heuristic", "depth") if c in df.columns]
    g = (df.groupby(by, as_index=False)
           .agg(time_mean=("time_sec", "mean"),
                time_sem=("time_sec", sem),
                expanded_mean=("expanded", "mean"),
                expanded_sem=("expanded", sem),
                generated_mean=("generated", "mean"),
                g_mean=("g", "mean"),
                runs=("time_sec", "count")))
    return g.sort_values(by).reset_index(drop=True)

def ratio_table(summary: pd.DataFrame, metric: str = "time_mean") -> pd.DataFrame:
    """IDA*/A* ratio of ``metric`` per (heuristic, depth) where both ran."""
    if summary.empty:
        return pd.DataFrame(columns=["heuristic", "depth", "ratio"])
    piv = summary.pivot_table(index=["heuristic", "depth"], columns="algorithm", values=metric)
    if "A*" not in piv.columns or "IDA*" not in piv.columns:
        return pd.DataFrame(columns=["heuristic", "depth", "ratio"])
    piv = piv.dropna(subset=["A*", "IDA*"])
    piv = piv[piv["A*"] > 0]
    out = (piv["IDA*"] / piv["A*"]).rename("ratio").reset_index()
    return out

def first_flip(table: pd.DataFrame):
    """First depth where the ratio crosses 1 -> (depth, ratio, 'down'|'up') or None.
    'down' means IDA* became faster."""
    rows = list(table.sort_values("depth")[["depth", "ratio"]].itertuples(index=False))
    for prev, cur in zip(rows, rows[1:]):
        if prev.ratio > 1.0 and cur.ratio <= 1.0:
            return (int(cur.depth), float(cur.ratio), "down")
        if prev.ratio <= 1.0 and cur.ratio > 1.0:
            return (int(cur.depth), float(cur.ratio), "up")
    return None

def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (A* vs IDA*).")
    ap.add_argument("csv", nargs="+", help="Result CSVs or glob patterns")
    ap.add_argument("--out", type=Path, default=None, help="Also write the summary CSV here")
    args = ap.parse_args()

    df = load_results(args.csv)
    if df.empty:
        print("No rows found. Are your CSVs empty?")
        return

    summary = summarize(df)
    with pd.option_context("display.max_rows", None, "display.width", 160):
        print("=" * 80)
        print("Mean per algorithm / heuristic / depth (solved runs only)")
        print("=" * 80)
        print(summary.to_string(index=False))

        ratios = ratio_table(summary)
        for heur, part in ratios.groupby("heuristic"):
            print(f"\n== IDA*/A* time ratio [{heur}] ==")
            print(part[["depth", "ratio"]].to_string(index=False))
            cross = first_flip(part)
            if cross:
                who = "IDA* becomes faster" if cross[2] == "down" else "A* becomes faster"
                print(f"-> crossover at depth {cross[0]} ({who}, ratio={cross[1]:.3f})")
            else:
                print("-> no crossover within these depths")

    unsolved = df[df["termination"] != "ok"]
    if not unsolved.empty:
        print("\n== Terminations other than ok ==")
        print(unsolved.groupby(["algorithm", "termination"]).size().to_string())

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
