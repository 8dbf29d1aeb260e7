from __future__ import annotations

import argparse
import json
import logging
import pathlib
from dataclasses import asdict
from typing import Iterable

from TSPBench.config import (
    DEFAULT_LOOKAHEAD,
    DEFAULT_SEED,
    DEFAULT_START_CITY,
    GRID_SIZE,
    MAX_CITY,
    BenchmarkConfig,
)
from TSPBench.core import Benchmark
from TSPBench.graph import CityGraph
from TSPBench.solvers import SOLVER_FAMILIES, SOLVER_SPECS, AlgorithmResult
from TSPBench.solvers.base import STATUS_NOT_RUN


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tspbench",
        description="Compare exact and heuristic open-path TSP algorithms on random cities.",
    )
    parser.add_argument(
        "--cities",
        nargs="+",
        type=int,
        default=[10],
        help=f"City counts to benchmark, each in range 2 to {MAX_CITY}.",
    )
    parser.add_argument(
        "--instances-per-count",
        type=int,
        default=1,
        help="How many random instances to run per city count.",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"Random seed (default: {DEFAULT_SEED}).")
    parser.add_argument(
        "--grid-size",
        type=int,
        default=GRID_SIZE,
        help="Coordinates drawn uniformly in [0, grid-size).",
    )
    parser.add_argument("--start-city", type=int, default=DEFAULT_START_CITY, help="City every route starts from.")
    parser.add_argument(
        "--lookahead",
        type=int,
        default=DEFAULT_LOOKAHEAD,
        help="Top-level candidate budget for the bounded heuristic.",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=list(SOLVER_SPECS.keys()),
        help="Subset of algorithms to execute (default: all).",
    )
    parser.add_argument("--max-brute-force", type=int, help="Override the brute force city limit.")
    parser.add_argument("--max-dyn-prog", type=int, help="Override the dynamic programming city limit.")
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        help="Append one JSONL record per algorithm run to this file.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> BenchmarkConfig:
    city_limits: dict[str, int] = {}
    if args.max_brute_force is not None:
        city_limits["brute_force"] = args.max_brute_force
    if args.max_dyn_prog is not None:
        city_limits["dyn_prog"] = args.max_dyn_prog
    return BenchmarkConfig(
        counts=list(args.cities),
        instances_per_count=args.instances_per_count,
        seed=args.seed,
        grid_size=args.grid_size,
        start_city=args.start_city,
        lookahead=args.lookahead,
        algorithms=args.algorithms,
        city_limits=city_limits,
    ).validate()


def format_result(result: AlgorithmResult) -> str:
    if result.status == STATUS_NOT_RUN:
        return f"  {result.name:<16} {STATUS_NOT_RUN:>12}"
    return f"  {result.name:<16} {result.cost:>12d} {result.elapsed:10.6f}"


def serialize_result(graph: CityGraph, instance: int, seed: int, result: AlgorithmResult) -> dict:
    record = asdict(result)
    record.update(
        {
            "algorithm": result.name,
            "family": SOLVER_FAMILIES[result.name].value,
            "num_cities": graph.num_cities,
            "instance": instance,
            "seed": seed,
            "coordinates": graph.to_records(),
        }
    )
    return record


def main(raw_args: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(raw_args)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    benchmark = Benchmark(config)
    out = None
    if args.results is not None:
        args.results.parent.mkdir(parents=True, exist_ok=True)
        out = args.results.open("a", encoding="utf-8")

    try:
        for instance, graph, results in benchmark.run_many():
            print(f"max_city {graph.num_cities} ...")
            for result in results:
                print(format_result(result))
                if out is not None:
                    out.write(json.dumps(serialize_result(graph, instance, config.seed, result)))
                    out.write("\n")
    finally:
        if out is not None:
            out.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
