"""Brute-force potential solver over the whole grid."""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import Sequence

from potential_grid.geometry import AirCell, Coordinate, Grid
from potential_grid.physics import PRECISIONS, SolverPrecision, Source, superposed_potential


def snapshot_sources(grid: Grid) -> tuple[Source, ...]:
    """Freeze every Metal cell as ``(x, y, voltage)``."""
    return tuple((x, y, cell.voltage) for x, y, cell in grid.metal_cells())


def _solve_chunk(
    coords: Sequence[Coordinate],
    sources: tuple[Source, ...],
    precision: SolverPrecision,
) -> list[int | float]:
    return [superposed_potential(x, y, sources, precision) for x, y in coords]


def _chunks(coords: list[Coordinate], count: int) -> list[list[Coordinate]]:
    step = max(1, -(-len(coords) // count))
    return [coords[i : i + step] for i in range(0, len(coords), step)]


def _resolve_scan_order(grid: Grid, scan_order: Sequence[Coordinate] | None) -> list[Coordinate]:
    air = grid.air_coordinates()
    if scan_order is None:
        return air
    order = [(int(x), int(y)) for x, y in scan_order]
    if len(order) != len(air) or set(order) != set(air):
        raise ValueError("scan_order must visit every Air cell exactly once")
    return order


def solve_potentials(
    grid: Grid,
    precision: SolverPrecision = "truncate",
    scan_order: Sequence[Coordinate] | None = None,
    workers: int = 1,
) -> None:
    """Compute the superposed potential of every Air cell in place.

    Sources are snapshotted before the pass and results are buffered, so the
    grid is only written once every Air cell has been computed. Neither
    ``scan_order`` nor ``workers`` affects the result.
    """
    if precision not in PRECISIONS:
        raise ValueError(f"Unsupported precision '{precision}'. Supported: {', '.join(PRECISIONS)}")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    order = _resolve_scan_order(grid, scan_order)
    sources = snapshot_sources(grid)

    buffer: dict[Coordinate, int | float] = {}
    if workers == 1 or len(order) < 2:
        for coord, value in zip(order, _solve_chunk(order, sources, precision)):
            buffer[coord] = value
    else:
        chunks = _chunks(order, workers)
        with ProcessPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(_solve_chunk, chunk, sources, precision) for chunk in chunks]
            for chunk, future in zip(chunks, futures):
                buffer.update(zip(chunk, future.result()))

    for (x, y), value in buffer.items():
        cell = grid.cells[x][y]
        if isinstance(cell, AirCell):
            cell.potential = value
