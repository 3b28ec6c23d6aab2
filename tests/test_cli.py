"""CLI tests."""

from __future__ import annotations

import yaml
from click.testing import CliRunner

from potential_grid.cli import app


def _write_scenario(tmp_path, conductors) -> str:
    path = tmp_path / "scenario.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "grid": {"size": 16},
                "conductors": conductors,
                "voltages": {0: -80, 1: 80},
            }
        )
    )
    return str(path)


def test_cli_writes_outputs(tmp_path) -> None:
    scenario = _write_scenario(
        tmp_path,
        [
            {"type": "line", "p1": [2, 2], "p2": [2, 13]},
            {"type": "circle", "origin": [10, 8], "radius": 3},
        ],
    )
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(app, [scenario, "--output-dir", str(out_dir), "--no-viz"])

    assert result.exit_code == 0, result.output
    assert "Potential Grid Report" in result.output
    assert "Done!" in result.output
    assert (out_dir / "potential_grid_summary.txt").exists()
    map_lines = (out_dir / "potential_grid_map.txt").read_text().splitlines()
    assert len(map_lines) == 16
    assert not (out_dir / "potential_grid_visualization.html").exists()


def test_cli_overrides_precision_and_ascii(tmp_path) -> None:
    scenario = _write_scenario(tmp_path, [{"type": "line", "p1": [0, 0], "p2": [15, 15]}])
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(
        app,
        [scenario, "--output-dir", str(out_dir), "--precision", "float", "--no-ascii", "--no-viz"],
    )

    assert result.exit_code == 0, result.output
    assert "Solver Precision: float" in result.output
    assert not (out_dir / "potential_grid_map.txt").exists()


def test_cli_unsupported_shape_skips_outputs(tmp_path) -> None:
    scenario = _write_scenario(
        tmp_path,
        [
            {"type": "line", "p1": [2, 2], "p2": [2, 13]},
            {"type": "square", "p1": [5, 5], "p2": [5, 9], "p3": [9, 9], "p4": [9, 5]},
        ],
    )
    out_dir = tmp_path / "out"

    result = CliRunner().invoke(app, [scenario, "--output-dir", str(out_dir)])

    assert result.exit_code != 0
    assert "Placement failed" in result.output
    assert "Potential Grid Report" not in result.output
    assert not out_dir.exists()
