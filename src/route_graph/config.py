"""
Runtime configuration.

Defaults match the flight data export: a header row, source city in
column 3 and destination city in column 7. Any field can be overridden
from a YAML file.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .handlers.base import MAX_NODES

CONFIG_ENV_VAR = "ROUTE_GRAPH_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class RouteGraphConfig:
    """Configuration for ingestion and analysis."""

    # Ingestion
    data_path: str = "flight_data.csv"
    has_headers: bool = True
    source_column: int = 3  # Zero-based CSV column of the origin city
    destination_column: int = 7  # Zero-based CSV column of the destination city

    # Analysis
    max_nodes: int = MAX_NODES  # Betweenness safety limit
    top_n: int | None = None  # Rows shown per centrality in the CLI (None = all)

    # Output
    log_level: str = "INFO"

    def __post_init__(self):
        if self.source_column < 0 or self.destination_column < 0:
            raise ValueError("CSV column indices must be non-negative")
        if self.max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {self.max_nodes}")
        if self.top_n is not None and self.top_n < 1:
            raise ValueError(f"top_n must be positive, got {self.top_n}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}"
            )


def load_config(path: Path | str | None = None) -> RouteGraphConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file to read. If None, the file named by the
              ROUTE_GRAPH_CONFIG environment variable is used; if that is
              unset too, defaults are returned.

    Returns:
        RouteGraphConfig with file values applied over the defaults

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If the file has unknown keys or is not a mapping
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return RouteGraphConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(RouteGraphConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    return RouteGraphConfig(**data)
