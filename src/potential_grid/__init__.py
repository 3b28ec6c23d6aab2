"""Conductor rasterization and inverse-distance potential solving on a 2D grid."""

from __future__ import annotations

from potential_grid.geometry import (
    DEFAULT_GRID_SIZE,
    AirCell,
    Circle,
    Grid,
    HalfCircle,
    Line,
    MetalCell,
    Square,
)
from potential_grid.pins import PinAllocator
from potential_grid.placement import place_conductors
from potential_grid.raster import (
    CoordinateOutOfBoundsError,
    InvalidShapeError,
    PlacementError,
    UnsupportedShapeError,
    rasterize,
)
from potential_grid.solver import solve_potentials
from potential_grid.voltages import apply_voltages

__all__ = [
    "DEFAULT_GRID_SIZE",
    "AirCell",
    "Circle",
    "CoordinateOutOfBoundsError",
    "Grid",
    "InvalidShapeError",
    "HalfCircle",
    "Line",
    "MetalCell",
    "PinAllocator",
    "PlacementError",
    "Square",
    "UnsupportedShapeError",
    "apply_voltages",
    "place_conductors",
    "rasterize",
    "solve_potentials",
]
