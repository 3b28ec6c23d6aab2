"""Plotly 2D visualization of the solved potential grid."""

from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go

from potential_grid.config import Config
from potential_grid.geometry import AirCell, Grid, MetalCell

POTENTIAL_COLORSCALE = "RdBu_r"
METAL_COLORSCALE = "Bluered"
METAL_OUTLINE_COLOR = "rgba(30, 30, 30, 0.85)"


def _potential_matrix(grid: Grid) -> list[list[float | None]]:
    """Rows indexed by y, columns by x. Metal cells are left as gaps."""
    z: list[list[float | None]] = []
    for y in range(grid.size):
        row: list[float | None] = []
        for x in range(grid.size):
            cell = grid.cells[x][y]
            row.append(cell.potential if isinstance(cell, AirCell) else None)
        z.append(row)
    return z


def _add_metal_trace(fig: go.Figure, grid: Grid) -> None:
    xs: list[int] = []
    ys: list[int] = []
    voltages: list[int] = []
    hover: list[str] = []
    for x, y, cell in grid.metal_cells():
        xs.append(x)
        ys.append(y)
        voltages.append(cell.voltage)
        pin = "unassigned" if cell.pin is None else cell.pin
        hover.append(f"({x}, {y}) pin {pin}: {cell.voltage} V")

    if not xs:
        return

    fig.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            mode="markers",
            marker=dict(
                symbol="square",
                size=6,
                color=voltages,
                colorscale=METAL_COLORSCALE,
                line=dict(color=METAL_OUTLINE_COLOR, width=0.5),
                showscale=False,
            ),
            name="Conductors",
            hoverinfo="text",
            hovertext=hover,
            hovertemplate="%{hovertext}<extra></extra>",
        )
    )


def render_grid(
    grid: Grid,
    config: Config,
    output_path: Path | None = None,
    open_browser: bool = False,
) -> go.Figure:
    """Build a heatmap of Air potentials with conductors overlaid."""
    fig = go.Figure()
    fig.add_trace(
        go.Heatmap(
            z=_potential_matrix(grid),
            x=list(range(grid.size)),
            y=list(range(grid.size)),
            colorscale=POTENTIAL_COLORSCALE,
            zmid=0,
            colorbar=dict(title="Potential"),
            hovertemplate="(%{x}, %{y}): %{z}<extra></extra>",
            name="Potential",
        )
    )
    _add_metal_trace(fig, grid)

    fig.update_layout(
        title=(
            f"Potential Grid - {grid.conductor_count} conductors, "
            f"{config.solver.precision} precision"
        ),
        width=900,
        height=850,
    )
    fig.update_xaxes(title_text="X (cells)", range=[-0.5, grid.size - 0.5])
    fig.update_yaxes(
        title_text="Y (cells)", range=[-0.5, grid.size - 0.5], scaleanchor="x", scaleratio=1
    )

    if output_path:
        fig.write_html(str(output_path))
        if open_browser:
            import webbrowser

            webbrowser.open(f"file://{Path(output_path).resolve()}")

    return fig
