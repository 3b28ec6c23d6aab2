"""Rasterization of conductor shapes onto integer grid coordinates."""

from __future__ import annotations

from potential_grid.geometry import Circle, ConductorShape, Coordinate, Line


class PlacementError(ValueError):
    """Base error for conductor placement. Placement is all-or-nothing."""


class UnsupportedShapeError(PlacementError):
    """A shape variant without a rasterization was submitted."""

    def __init__(self, shape: ConductorShape, index: int | None = None):
        self.shape = shape
        self.index = index
        where = f" at conductors[{index}]" if index is not None else ""
        super().__init__(f"Unsupported conductor shape {type(shape).__name__}{where}")


class InvalidShapeError(PlacementError):
    """A supported shape has parameters it cannot be rasterized with."""

    def __init__(self, shape: ConductorShape, index: int | None = None, reason: str = ""):
        self.shape = shape
        self.index = index
        where = f" at conductors[{index}]" if index is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid conductor shape {type(shape).__name__}{where}{detail}")


class CoordinateOutOfBoundsError(PlacementError):
    """A rasterized coordinate falls outside the grid."""

    def __init__(self, coordinate: Coordinate, size: int, index: int | None = None):
        self.coordinate = coordinate
        self.size = size
        self.index = index
        where = f" from conductors[{index}]" if index is not None else ""
        super().__init__(
            f"Coordinate {coordinate}{where} is outside the {size}x{size} grid"
        )


def rasterize_line(p1: Coordinate, p2: Coordinate) -> list[Coordinate]:
    """Bresenham walk from ``p1`` to ``p2``, both endpoints included."""
    x, y = p1
    x2, y2 = p2
    dx = abs(x2 - x)
    dy = abs(y2 - y)
    sx = 1 if x < x2 else -1
    sy = 1 if y < y2 else -1
    err = dx - dy

    points: list[Coordinate] = []
    while True:
        points.append((x, y))
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return points


def _octants(ox: int, oy: int, dx: int, dy: int) -> list[Coordinate]:
    return [
        (ox + dx, oy + dy),
        (ox + dy, oy + dx),
        (ox - dy, oy + dx),
        (ox - dx, oy + dy),
        (ox - dx, oy - dy),
        (ox - dy, oy - dx),
        (ox + dy, oy - dx),
        (ox + dx, oy - dy),
    ]


def rasterize_circle(origin: Coordinate, radius: int) -> list[Coordinate]:
    """Midpoint circle outline.

    Every generated offset is emitted in all eight octants, so points on the
    axes and diagonals repeat. Radius 0 is the origin alone.
    """
    if radius < 0:
        raise ValueError(f"Circle radius must be >= 0, got {radius}")
    if radius == 0:
        return [origin]

    ox, oy = origin
    dx, dy = radius, 0
    err = 1 - radius
    points: list[Coordinate] = []
    while dx >= dy:
        points.extend(_octants(ox, oy, dx, dy))
        dy += 1
        if err < 0:
            err += 2 * dy + 1
        else:
            dx -= 1
            err += 2 * (dy - dx) + 1
    return points


def rasterize(shape: ConductorShape) -> list[Coordinate]:
    """Return the ordered grid coordinates approximating ``shape``.

    The result is not clipped to any grid; bounds are the caller's concern.
    """
    if isinstance(shape, Line):
        return rasterize_line(shape.p1, shape.p2)
    if isinstance(shape, Circle):
        return rasterize_circle(shape.origin, shape.radius)
    # HalfCircle and Square have no rasterization yet.
    raise UnsupportedShapeError(shape)
