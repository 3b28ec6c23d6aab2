"""Geometry data model for the conductor grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

DEFAULT_GRID_SIZE = 100

Coordinate = tuple[int, int]


@dataclass(frozen=True)
class Line:
    """A straight conductor between two grid points."""

    p1: Coordinate
    p2: Coordinate


@dataclass(frozen=True)
class Circle:
    """A circular conductor outline."""

    origin: Coordinate
    radius: int


@dataclass(frozen=True)
class HalfCircle:
    """A half-circle conductor. Declared but not rasterizable."""

    origin: Coordinate
    radius: int
    angle: float  # degrees


@dataclass(frozen=True)
class Square:
    """A four-corner conductor. Declared but not rasterizable."""

    p1: Coordinate
    p2: Coordinate
    p3: Coordinate
    p4: Coordinate


ConductorShape = Union[Line, Circle, HalfCircle, Square]


@dataclass
class AirCell:
    """A non-conductor cell holding a computed potential."""

    potential: int | float = 0


@dataclass
class MetalCell:
    """A conductor-occupied cell."""

    voltage: int = 0
    pin: int | None = None


Cell = Union[AirCell, MetalCell]


@dataclass
class Grid:
    """Square cell grid, the central data structure.

    Cells are indexed ``cells[x][y]``.
    """

    size: int
    cells: list[list[Cell]]
    conductor_count: int = 0
    conductors: list[Coordinate] = field(default_factory=list)

    @classmethod
    def filled_with_air(cls, size: int = DEFAULT_GRID_SIZE) -> Grid:
        if size < 1:
            raise ValueError(f"Grid size must be >= 1, got {size}")
        cells: list[list[Cell]] = [[AirCell() for _ in range(size)] for _ in range(size)]
        return cls(size=size, cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[x][y]

    def iter_cells(self):
        """Yield ``(x, y, cell)`` in x-major order."""
        for x, column in enumerate(self.cells):
            for y, cell in enumerate(column):
                yield x, y, cell

    def metal_cells(self) -> list[tuple[int, int, MetalCell]]:
        return [(x, y, c) for x, y, c in self.iter_cells() if isinstance(c, MetalCell)]

    def air_coordinates(self) -> list[Coordinate]:
        return [(x, y) for x, y, c in self.iter_cells() if isinstance(c, AirCell)]

    def pins(self) -> list[int]:
        """Return the distinct pins still visible on the grid, sorted."""
        return sorted({c.pin for _, _, c in self.metal_cells() if c.pin is not None})
