"""Tests for the nxgraph command-line interface."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from nxgraph._cli import main
from nxgraph._cli.main import app

runner = CliRunner()

DIAMOND = """
nodes = [6]
edges = [[1, 2], [2, 3], [3, 5], [1, 4], [4, 5]]
"""

CYCLE = """
edges = [[1, 2], [2, 3], [3, 1]]
"""


@pytest.fixture(autouse=True)
def wide_consoles(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping long messages (temp paths) across lines."""
    monkeypatch.setattr(main.err_console, "width", 500)
    monkeypatch.setattr(main.out_console, "width", 500)


@pytest.fixture(autouse=True)
def restore_root_log_level() -> Iterator[None]:
    """The CLI callback sets the root logger level; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def diamond_file(tmp_path: Path) -> Path:
    path = tmp_path / "diamond.toml"
    path.write_text(DIAMOND)
    return path


@pytest.fixture
def cycle_file(tmp_path: Path) -> Path:
    path = tmp_path / "cycle.toml"
    path.write_text(CYCLE)
    return path


class TestInfo:
    def test_info(self, diamond_file: Path):
        result = runner.invoke(app, ["info", "--graph", str(diamond_file)])

        assert result.exit_code == 0
        assert "Total: 6 nodes, 5 edges" in result.output

    def test_missing_graph_file(self, tmp_path: Path):
        result = runner.invoke(app, ["info", "--graph", str(tmp_path / "nope.toml")])

        assert result.exit_code == 1
        assert "file not found" in result.output


class TestToposort:
    def test_toposort(self, diamond_file: Path):
        result = runner.invoke(app, ["toposort", "-g", str(diamond_file)])

        assert result.exit_code == 0
        assert "1 -> 6 -> 2 -> 4 -> 3 -> 5" in result.output

    def test_toposort_json(self, diamond_file: Path):
        result = runner.invoke(app, ["toposort", "-g", str(diamond_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [1, 6, 2, 4, 3, 5]

    def test_generations_json(self, diamond_file: Path):
        result = runner.invoke(app, ["toposort", "-g", str(diamond_file), "--generations", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [[1, 6], [2, 4], [3], [5]]

    def test_generations_table(self, diamond_file: Path):
        result = runner.invoke(app, ["toposort", "-g", str(diamond_file), "--generations"])

        assert result.exit_code == 0
        assert "Generation" in result.output

    def test_cycle_exits_non_zero(self, cycle_file: Path):
        result = runner.invoke(app, ["toposort", "-g", str(cycle_file)])

        assert result.exit_code == 1
        assert "cycle" in result.output


class TestPath:
    def test_path(self, diamond_file: Path):
        result = runner.invoke(app, ["path", "1", "5", "-g", str(diamond_file)])

        assert result.exit_code == 0
        assert "1 -> 4 -> 5" in result.output
        assert "2 edges" in result.output

    def test_path_json(self, diamond_file: Path):
        result = runner.invoke(app, ["path", "1", "5", "-g", str(diamond_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [1, 4, 5]

    def test_string_nodes(self, tmp_path: Path):
        graph = tmp_path / "pipeline.toml"
        graph.write_text('edges = [["build", "test"], ["test", "deploy"]]\n')

        result = runner.invoke(app, ["path", "build", "deploy", "-g", str(graph), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == ["build", "test", "deploy"]

    def test_reflexive_path_in_cycle(self, cycle_file: Path):
        result = runner.invoke(app, ["path", "1", "1", "-g", str(cycle_file), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [1]

    def test_no_path_exits_non_zero(self, cycle_file: Path):
        result = runner.invoke(app, ["path", "1", "4", "-g", str(cycle_file)])

        assert result.exit_code == 1
        assert "No path from 1 to 4" in result.output


class TestGraphFromConfig:
    def test_uses_configured_graph(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "diamond.toml").write_text(DIAMOND)
        (tmp_path / "pyproject.toml").write_text('[tool.nxgraph]\ngraph = "diamond.toml"\n')
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["toposort", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [1, 6, 2, 4, 3, 5]

    def test_no_graph_configured(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 1
        assert "No graph file given" in result.output

    def test_invalid_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "pyproject.toml").write_text("[tool.nxgraph]\ngraph = 1\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 1
        assert "expected string path" in result.output


class TestVerbose:
    def test_verbose_enables_debug_logging(self, diamond_file: Path, caplog: pytest.LogCaptureFixture):
        result = runner.invoke(app, ["--verbose", "toposort", "-g", str(diamond_file)])

        assert result.exit_code == 0
        assert "Loaded DiGraph(nodes=6, edges=5)" in caplog.text

    def test_debug_logging_off_by_default(self, diamond_file: Path, caplog: pytest.LogCaptureFixture):
        result = runner.invoke(app, ["toposort", "-g", str(diamond_file)])

        assert result.exit_code == 0
        assert "Loaded DiGraph" not in caplog.text


class TestNodeNames:
    def test_underscore_literal_is_not_an_int(self, tmp_path: Path):
        """Only plain decimal names match integer nodes, so "1_0" is not node 10."""
        graph = tmp_path / "mixed.toml"
        graph.write_text('edges = [[10, "x"]]\n')

        result = runner.invoke(app, ["path", "1_0", "x", "-g", str(graph)])

        assert result.exit_code == 1
        assert "No path from 1_0 to x" in result.output

    def test_signed_literal_is_not_an_int(self, tmp_path: Path):
        graph = tmp_path / "mixed.toml"
        graph.write_text('edges = [[1, "x"]]\n')

        result = runner.invoke(app, ["path", "+1", "x", "-g", str(graph)])

        assert result.exit_code == 1

    def test_negative_int_node(self, tmp_path: Path):
        graph = tmp_path / "negative.toml"
        graph.write_text("edges = [[-1, 0]]\n")

        result = runner.invoke(app, ["path", "-g", str(graph), "--json", "--", "-1", "0"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [-1, 0]
