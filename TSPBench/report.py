from __future__ import annotations

import argparse
import json
import pathlib
from typing import List, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from TSPBench.solvers.base import STATUS_COMPLETE

PROBLEM_KEY = ["seed", "num_cities", "instance"]


def parse_args(raw_args: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tspbench-report",
        description="Summarise and plot TSPBench results.",
    )
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=pathlib.Path("data/results.jsonl"),
        help="Input JSONL file written by tspbench --results.",
    )
    parser.add_argument(
        "--figure",
        type=pathlib.Path,
        default=pathlib.Path("data/results.png"),
        help="Destination for the runtime and distance plot.",
    )
    return parser.parse_args(raw_args)


def load_records(path: pathlib.Path) -> List[dict]:
    records: List[dict] = []
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    return records


def build_dataframe(records: List[dict]) -> pd.DataFrame:
    df = pd.DataFrame(records)
    for col in ["num_cities", "elapsed", "cost"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def add_optimality_gap(df: pd.DataFrame) -> pd.DataFrame:
    """Attach ``optimum`` and ``gap`` (cost / optimum - 1) where an exact run completed."""
    df = df.copy()
    exact = df[(df["family"] == "exact") & (df["status"] == STATUS_COMPLETE)]
    if exact.empty:
        df["optimum"] = float("nan")
        df["gap"] = float("nan")
        return df
    optimum = exact.groupby(PROBLEM_KEY)["cost"].min().rename("optimum").reset_index()
    df = df.merge(optimum, on=PROBLEM_KEY, how="left")
    df["gap"] = df["cost"] / df["optimum"] - 1.0
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    df = add_optimality_gap(df)
    completed = df[df["status"] == STATUS_COMPLETE]
    summary = (
        completed.groupby("algorithm")
        .agg(
            runs=("elapsed", "count"),
            avg_elapsed=("elapsed", "mean"),
            avg_cost=("cost", "mean"),
            avg_gap=("gap", "mean"),
        )
        .reset_index()
    )
    not_run = df[df["status"] != STATUS_COMPLETE].groupby("algorithm").size().rename("not_run").reset_index()
    summary = summary.merge(not_run, on="algorithm", how="outer")
    summary["runs"] = summary["runs"].fillna(0).astype(int)
    summary["not_run"] = summary["not_run"].fillna(0).astype(int)
    return summary.sort_values("algorithm").reset_index(drop=True)


def print_summary(summary: pd.DataFrame) -> None:
    if summary.empty:
        print("No runs available for summary.")
        return
    for _, row in summary.iterrows():
        if row["runs"] == 0:
            print(f"{row['algorithm']}: runs=0 not_run={row['not_run']}")
            continue
        gap = "n/a" if pd.isna(row["avg_gap"]) else f"{row['avg_gap'] * 100:.2f}%"
        print(
            f"{row['algorithm']}: runs={row['runs']} not_run={row['not_run']} "
            f"avg_elapsed={row['avg_elapsed']:.6f}s avg_cost={row['avg_cost']:.1f} avg_gap={gap}"
        )


def render(df: pd.DataFrame, path: pathlib.Path) -> pathlib.Path:
    completed = df[df["status"] == STATUS_COMPLETE]
    if completed.empty:
        raise SystemExit("No completed runs to plot.")
    if not path.suffix:
        path = path.with_suffix(".png")

    sns.set_theme(style="whitegrid")
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    sns.lineplot(data=completed, x="num_cities", y="elapsed", hue="algorithm", marker="o", ax=axes[0])
    axes[0].set_title("Runtime")
    axes[0].set_xlabel("Number of Cities")
    axes[0].set_ylabel("Elapsed Time (s)")
    axes[0].set_yscale("log")

    sns.lineplot(data=completed, x="num_cities", y="cost", hue="algorithm", marker="o", ax=axes[1])
    axes[1].set_title("Route Distance")
    axes[1].set_xlabel("Number of Cities")
    axes[1].set_ylabel("Distance")

    fig.tight_layout()
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Saved figure to {path}")
    return path


def main(raw_args: Sequence[str] | None = None) -> int:
    args = parse_args(raw_args)
    if not args.results.exists():
        raise SystemExit(f"No results file found at {args.results}")
    records = load_records(args.results)
    if not records:
        raise SystemExit("Results file is empty.")
    df = build_dataframe(records)
    print_summary(summarize(df))
    render(df, args.figure)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
