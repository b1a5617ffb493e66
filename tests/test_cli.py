"""
Tests for the command line interface.
"""

import json

import pytest

from campus_compass.cli import create_parser, main, resolve_location
from campus_compass.core.exceptions import NodeNotFoundError
from campus_compass.core.graph import Graph


@pytest.fixture
def config_file(tmp_path):
    """Fixture providing a small campus configuration file."""
    path = tmp_path / "campus.json"
    path.write_text(
        json.dumps(
            {
                "nodes": [
                    {"id": 0, "name": "Main Gate"},
                    {"id": 1, "name": "Balme Library"},
                    {"id": 2, "name": "JQB"},
                ],
                "edges": [
                    {"source": 0, "target": 1, "weight": 100},
                    {"source": 1, "target": 2, "weight": 50},
                ],
            }
        )
    )
    return str(path)


def test_no_command_prints_help(capsys):
    """Test running without a command shows usage."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_locations(capsys, config_file):
    """Test the locations command lists every location."""
    assert main(["--config", config_file, "locations"]) == 0
    out = capsys.readouterr().out
    assert "- Main Gate (0)" in out
    assert "- JQB (2)" in out


def test_route(capsys, config_file):
    """Test the route command prints the optimal route."""
    assert main(["--config", config_file, "route", "main gate", "jqb"]) == 0
    out = capsys.readouterr().out
    assert "Routes from Main Gate to JQB:" in out
    assert "Optimal route (Dijkstra): Main Gate -> Balme Library -> JQB" in out
    assert "Distance: 150.00 m" in out
    assert "Time: 75.00 s" in out


def test_route_with_landmark_on_bundled_campus(capsys):
    """Test routing through a landmark on the bundled campus."""
    assert main(["route", "Main Gate", "Akuafo", "--landmark", "Balme"]) == 0
    assert "A* via Landmarks" in capsys.readouterr().out


def test_route_unknown_location(capsys, config_file):
    """Test unknown locations are reported as errors."""
    assert main(["--config", config_file, "route", "Stadium", "JQB"]) == 2
    assert "Location 'Stadium' not found" in capsys.readouterr().err


def test_missing_config(capsys, tmp_path):
    """Test a missing configuration file is reported."""
    assert main(["--config", str(tmp_path / "none.json"), "locations"]) == 2
    assert "File not found" in capsys.readouterr().err


def test_unreadable_config(capsys, tmp_path):
    """Test a configuration path that cannot be read is reported."""
    assert main(["--config", str(tmp_path), "locations"]) == 2
    assert "Cannot read" in capsys.readouterr().err


def test_negative_alternatives_rejected(capsys, config_file):
    """Test a negative alternative count is a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", config_file, "route", "main gate", "jqb", "--alternatives", "-1"])
    assert excinfo.value.code == 2
    assert "--alternatives must be non-negative" in capsys.readouterr().err


def test_table(capsys, config_file):
    """Test the table command prints every reachable pair."""
    assert main(["--config", config_file, "table"]) == 0
    out = capsys.readouterr().out
    assert "Main Gate -> JQB: 150.00 m" in out
    assert "via Main Gate -> Balme Library -> JQB" in out
    assert out.count(" m\n") == 6


def test_resolve_location_prefers_exact_name():
    """Test exact names win over fragments."""
    graph = Graph()
    graph.add_location(0, "Great Hall Annex")
    graph.add_location(1, "Great Hall")
    assert resolve_location(graph, "great hall").key == 1
    assert resolve_location(graph, "annex").key == 0
    with pytest.raises(NodeNotFoundError):
        resolve_location(graph, "stadium")


def test_parser_collects_landmarks():
    """Test repeated landmark options accumulate."""
    args = create_parser().parse_args(["route", "A", "B", "--landmark", "x", "--landmark", "y"])
    assert args.landmark == ["x", "y"]
    assert args.top == 5
