"""
Tests for CSV ingestion, configuration loading and the MAE helper.
"""

import logging

import pytest

from route_graph import GraphStore
from route_graph.config import CONFIG_ENV_VAR, RouteGraphConfig, load_config
from route_graph.handlers.base import LengthMismatchError
from route_graph.handlers.traversal import hop_distance
from route_graph.ingest import iter_routes, load_routes, normalize_label
from route_graph.metrics import mean_absolute_error


class TestNormalizeLabel:
    """Tests for normalize_label()."""

    def test_trims_and_lowercases(self):
        assert normalize_label("  New Delhi ") == "new delhi"

    def test_none_is_empty(self):
        assert normalize_label(None) == ""


class TestIterRoutes:
    """Tests for iter_routes()."""

    def test_custom_columns(self):
        rows = [["Mumbai", "Delhi"], ["Pune", " GOA "]]
        assert list(iter_routes(rows, 0, 1)) == [("mumbai", "delhi"), ("pune", "goa")]

    def test_skips_short_and_empty_rows(self, caplog):
        rows = [["Mumbai", ""], ["Pune"], [" ", "Goa"], ["Agra", "Jaipur"]]
        with caplog.at_level(logging.WARNING):
            routes = list(iter_routes(rows, 0, 1))
        assert routes == [("agra", "jaipur")]
        assert caplog.text.count("Skipping invalid row") == 3

    def test_warning_names_file_line(self, caplog):
        rows = [["Agra", "Jaipur"], ["Pune", ""]]
        with caplog.at_level(logging.WARNING):
            list(iter_routes(rows, 0, 1, first_line=2))
        assert "Skipping invalid row 3" in caplog.text


class TestLoadRoutes:
    """Tests for load_routes()."""

    def test_builds_graph_from_export(self, routes_csv):
        store = load_routes(routes_csv)
        assert store.node_count() == 4
        assert store.edge_count() == 3
        assert store.neighbors("mumbai") == ["hyderabad", "delhi"]
        assert hop_distance(store, "delhi", "chennai")["distance"] == 3

    def test_adds_to_existing_store(self, routes_csv):
        store = GraphStore()
        store.add_edge("delhi", "jaipur")
        load_routes(routes_csv, store=store)
        assert store.node_count() == 5
        assert hop_distance(store, "jaipur", "chennai")["distance"] == 4

    def test_without_header_row(self, tmp_path):
        path = tmp_path / "routes.csv"
        path.write_text("Mumbai,Delhi\nDelhi,Agra\n", encoding="utf-8")
        config = RouteGraphConfig(has_headers=False, source_column=0, destination_column=1)
        store = load_routes(path, config)
        assert store.labels() == ["mumbai", "delhi", "agra"]

    def test_skipped_row_reports_csv_line(self, routes_csv, caplog):
        """The header is line 1, so the fourth data row is line 5."""
        with caplog.at_level(logging.WARNING):
            load_routes(routes_csv)
        assert "Skipping invalid row 5" in caplog.text
        assert "Skipping invalid row 6" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_routes(tmp_path / "missing.csv")


class TestConfig:
    """Tests for RouteGraphConfig and load_config()."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        config = load_config()
        assert config == RouteGraphConfig()
        assert config.source_column == 3
        assert config.destination_column == 7
        assert config.max_nodes == 10_000

    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "route_graph.yaml"
        path.write_text("data_path: routes.csv\nmax_nodes: 50\nlog_level: DEBUG\n")
        config = load_config(path)
        assert config.data_path == "routes.csv"
        assert config.max_nodes == 50
        assert config.log_level == "DEBUG"
        assert config.has_headers is True

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("top_n: 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().top_n == 3

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == RouteGraphConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("max_depth: 4\n")
        with pytest.raises(ValueError, match="max_depth"):
            load_config(path)

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            RouteGraphConfig(source_column=-1)
        with pytest.raises(ValueError):
            RouteGraphConfig(max_nodes=0)
        with pytest.raises(ValueError, match="log_level"):
            RouteGraphConfig(log_level="verbose")

    def test_log_level_is_upper_cased(self):
        assert RouteGraphConfig(log_level="debug").log_level == "DEBUG"


class TestMeanAbsoluteError:
    """Tests for mean_absolute_error()."""

    def test_sample_values(self):
        mae = mean_absolute_error([100.0, 200.0, 300.0, 400.0], [110.0, 190.0, 310.0, 390.0])
        assert mae == pytest.approx(10.0)

    def test_length_mismatch_is_reported(self):
        with pytest.raises(LengthMismatchError):
            mean_absolute_error([1.0, 2.0], [1.0])

    def test_length_mismatch_is_a_value_error(self):
        with pytest.raises(ValueError):
            mean_absolute_error([1.0], [])

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            mean_absolute_error([], [])
