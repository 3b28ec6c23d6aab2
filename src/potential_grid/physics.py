"""Inverse-distance superposition arithmetic."""

from __future__ import annotations

import math
from typing import Iterable, Literal

SolverPrecision = Literal["truncate", "float"]
PRECISIONS: tuple[str, ...] = ("truncate", "float")

# (x, y, voltage) of one conductor cell.
Source = tuple[int, int, int]


def cell_distance(x0: int, y0: int, x1: int, y1: int) -> float:
    """Euclidean distance between two cell centres."""
    return math.hypot(x0 - x1, y0 - y1)


def truncated_term(voltage: int, distance: float) -> int:
    """Contribution V / d truncated toward zero."""
    return math.trunc(voltage / distance)


def float_term(voltage: int, distance: float) -> float:
    """Contribution V / d."""
    return voltage / distance


def superposed_potential(
    x: int,
    y: int,
    sources: Iterable[Source],
    precision: SolverPrecision = "truncate",
) -> int | float:
    """Sum V / d over ``sources`` as seen from cell ``(x, y)``.

    phi(x, y) = Σ V(i, j) / |(x, y) - (i, j)|

    A source coincident with ``(x, y)`` contributes nothing. With
    ``precision="truncate"`` each term is truncated to an int before it is
    added, so the result differs from truncating the float sum once.
    """
    if precision == "truncate":
        total: int | float = 0
        term = truncated_term
    elif precision == "float":
        total = 0.0
        term = float_term
    else:
        raise ValueError(f"Unsupported precision '{precision}'. Supported: {', '.join(PRECISIONS)}")

    for i, j, voltage in sources:
        if i == x and j == y:
            continue
        total += term(voltage, cell_distance(x, y, i, j))
    return total
