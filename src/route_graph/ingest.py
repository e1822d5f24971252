"""
CSV ingestion for route data.

Reads (origin, destination) city pairs from a tabular export, normalizes
the labels, and feeds them into a GraphStore. The graph core itself never
normalizes; labels arrive here already trimmed and lower-cased.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator

from .config import RouteGraphConfig
from .graph_store import GraphStore

logger = logging.getLogger(__name__)


def normalize_label(raw: str | None) -> str:
    """Trim and lower-case a city label. None becomes the empty string."""
    return (raw or "").strip().lower()


def iter_routes(
    rows: Iterable[list[str]],
    source_column: int = 3,
    destination_column: int = 7,
    first_line: int = 1,
) -> Iterator[tuple[str, str]]:
    """
    Yield normalized (source, destination) pairs from CSV rows.

    Rows that are too short or have an empty city in either column are
    skipped with a warning naming the file line, counted from first_line.
    """
    for line_no, row in enumerate(rows, start=first_line):
        source = normalize_label(row[source_column] if len(row) > source_column else None)
        destination = normalize_label(
            row[destination_column] if len(row) > destination_column else None
        )

        if not source or not destination:
            logger.warning("Skipping invalid row %d: %r", line_no, row)
            continue

        yield source, destination


def load_routes(
    path: Path | str,
    config: RouteGraphConfig | None = None,
    store: GraphStore | None = None,
) -> GraphStore:
    """
    Build a GraphStore from a route CSV file.

    Args:
        path: CSV file to read
        config: Column layout and header settings (defaults if None)
        store: Existing store to add edges to (a new one if None)

    Returns:
        The populated GraphStore

    Raises:
        FileNotFoundError: If path does not exist
    """
    config = config or RouteGraphConfig()
    store = store if store is not None else GraphStore()

    added = 0
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        if config.has_headers:
            next(reader, None)
        for source, destination in iter_routes(
            reader,
            config.source_column,
            config.destination_column,
            first_line=2 if config.has_headers else 1,
        ):
            store.add_edge(source, destination)
            added += 1

    logger.info(
        "Loaded %d routes from %s (%d cities)", added, path, store.node_count()
    )
    return store
