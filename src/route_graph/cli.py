"""
Degrees-of-separation report for a flight route file.

Usage:
    route-graph --data flight_data.csv --start mumbai --end chennai
    route-graph --config route_graph.yaml        # prompts for the cities
"""

import argparse
import logging
import sys

from .config import LOG_LEVELS, RouteGraphConfig, load_config
from .graph_store import GraphStore
from .handlers import (
    betweenness_centrality,
    closeness_centrality,
    degree_centrality,
    hop_distance,
)
from .ingest import load_routes, normalize_label
from .metrics import mean_absolute_error

# Fixed sample used to report the MAE line
SAMPLE_PREDICTIONS = [100.0, 200.0, 300.0, 400.0]
SAMPLE_ACTUALS = [110.0, 190.0, 310.0, 390.0]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="route-graph",
        description="Degrees of separation and centrality for a flight route network",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (default: $ROUTE_GRAPH_CONFIG, else built-in defaults)"
    )
    parser.add_argument(
        "--data",
        help="Route CSV file (overrides data_path from the config)"
    )
    parser.add_argument(
        "--start",
        help="Start city (prompted for if omitted)"
    )
    parser.add_argument(
        "--end",
        help="Destination city (prompted for if omitted)"
    )
    parser.add_argument(
        "--top-n",
        type=int,
        help="Only print the N highest-scoring nodes for each centrality"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (overrides log_level from the config)"
    )
    return parser


def _prompt(message: str) -> str:
    print(message)
    return input()


def _top(scores: dict, top_n: int | None) -> dict:
    if top_n is None:
        return scores
    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
    return dict(ranked[:top_n])


def report(
    store: GraphStore,
    start: str,
    end: str,
    config: RouteGraphConfig,
    top_n: int | None = None,
) -> None:
    """Print the separation, MAE and centrality report for one city pair."""
    mae = mean_absolute_error(SAMPLE_PREDICTIONS, SAMPLE_ACTUALS)
    print(f"Mean Absolute Error (MAE): {mae:.2f}")

    separation = hop_distance(store, start, end)
    if separation["status"] == "ok":
        print(f"Degrees of separation between {start} and {end}: {separation['distance']}")
    elif separation["status"] == "node_not_found":
        print(f"City not found in graph: {start} or {end}")
    else:
        print(f"No connection between {start} and {end}")

    print("\nCentrality Metrics:")
    print(f"Degree Centrality: {_top(degree_centrality(store), top_n)}")

    closeness = closeness_centrality(store, start)
    if closeness["status"] == "ok":
        print(f"Closeness Centrality for {start}: {closeness['score']:.4f}")
    elif closeness["status"] == "degenerate":
        print(f"Closeness Centrality: {start} has no other nodes to reach.")
    else:
        print(f"Closeness Centrality: {start} is disconnected.")

    betweenness = betweenness_centrality(store, max_nodes=config.max_nodes)
    print(f"Betweenness Centrality: {_top(betweenness, top_n)}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.data:
        config.data_path = args.data

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        store = load_routes(config.data_path, config)
    except FileNotFoundError:
        print(f"Error: {config.data_path} not found", file=sys.stderr)
        return 1

    start = normalize_label(args.start if args.start is not None else _prompt("Enter the start city:"))
    end = normalize_label(args.end if args.end is not None else _prompt("Enter the destination city:"))

    top_n = args.top_n if args.top_n is not None else config.top_n
    report(store, start, end, config, top_n=top_n)
    return 0


if __name__ == "__main__":
    sys.exit(main())
