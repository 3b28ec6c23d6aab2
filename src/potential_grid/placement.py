"""Conductor placement: stamping rasterized shapes onto a fresh grid."""

from __future__ import annotations

from typing import Iterable

from potential_grid.geometry import DEFAULT_GRID_SIZE, ConductorShape, Coordinate, Grid, MetalCell
from potential_grid.pins import PinAllocator
from potential_grid.raster import (
    CoordinateOutOfBoundsError,
    InvalidShapeError,
    UnsupportedShapeError,
    rasterize,
)


def _rasterize_all(shapes: list[ConductorShape], grid: Grid) -> list[list[Coordinate]]:
    """Rasterize and bounds-check every shape before anything is stamped."""
    rasterized: list[list[Coordinate]] = []
    for index, shape in enumerate(shapes):
        try:
            points = rasterize(shape)
        except UnsupportedShapeError as exc:
            raise UnsupportedShapeError(shape, index) from exc
        except ValueError as exc:
            raise InvalidShapeError(shape, index, str(exc)) from exc

        for x, y in points:
            if not grid.in_bounds(x, y):
                raise CoordinateOutOfBoundsError((x, y), grid.size, index)
        rasterized.append(points)
    return rasterized


def _stamp(grid: Grid, points: list[Coordinate], pin: int) -> None:
    for x, y in points:
        # Later shapes overwrite earlier ones.
        grid.cells[x][y] = MetalCell(voltage=0, pin=pin)
    grid.conductors.extend(points)
    grid.conductor_count += 1


def place_conductors(
    shapes: Iterable[ConductorShape],
    size: int = DEFAULT_GRID_SIZE,
    allocator: PinAllocator | None = None,
) -> Grid:
    """Build a grid with every shape stamped as a pin-tagged conductor.

    Shapes are placed in input order, one pin per shape. Raises a
    ``PlacementError`` subclass if any shape cannot be rasterized or leaves
    the grid; in that case no grid is returned and ``allocator`` is left
    untouched.
    """
    shapes = list(shapes)
    if allocator is None:
        allocator = PinAllocator()

    grid = Grid.filled_with_air(size)
    rasterized = _rasterize_all(shapes, grid)

    for points in rasterized:
        _stamp(grid, points, allocator.allocate())

    return grid
