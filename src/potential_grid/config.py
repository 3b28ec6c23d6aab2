"""Pydantic models for YAML scenario parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

import yaml
from pydantic import BaseModel, Field, PrivateAttr, model_validator

from potential_grid.geometry import (
    DEFAULT_GRID_SIZE,
    Circle,
    ConductorShape,
    HalfCircle,
    Line,
    Square,
)
from potential_grid.physics import SolverPrecision


class LineConfig(BaseModel):
    type: Literal["line"]
    p1: tuple[int, int]
    p2: tuple[int, int]

    def to_shape(self) -> Line:
        return Line(p1=self.p1, p2=self.p2)


class CircleConfig(BaseModel):
    type: Literal["circle"]
    origin: tuple[int, int]
    radius: int

    def to_shape(self) -> Circle:
        return Circle(origin=self.origin, radius=self.radius)


class HalfCircleConfig(BaseModel):
    type: Literal["half_circle"]
    origin: tuple[int, int]
    radius: int
    angle: float = 0.0  # degrees

    def to_shape(self) -> HalfCircle:
        return HalfCircle(origin=self.origin, radius=self.radius, angle=self.angle)


class SquareConfig(BaseModel):
    type: Literal["square"]
    p1: tuple[int, int]
    p2: tuple[int, int]
    p3: tuple[int, int]
    p4: tuple[int, int]

    def to_shape(self) -> Square:
        return Square(p1=self.p1, p2=self.p2, p3=self.p3, p4=self.p4)


ConductorConfig = Annotated[
    Union[LineConfig, CircleConfig, HalfCircleConfig, SquareConfig],
    Field(discriminator="type"),
]


class GridConfig(BaseModel):
    size: int = DEFAULT_GRID_SIZE


class SolverConfig(BaseModel):
    precision: SolverPrecision = "truncate"
    workers: int = 1


class ReportConfig(BaseModel):
    ascii_map: bool = True


class Config(BaseModel):
    grid: GridConfig = Field(default_factory=GridConfig)
    conductors: list[ConductorConfig]
    voltages: dict[int, int] = Field(default_factory=dict)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    _config_path: Path | None = PrivateAttr(default=None)

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    def to_shapes(self) -> list[ConductorShape]:
        """Return the conductors as geometry shapes, in placement order."""
        return [c.to_shape() for c in self.conductors]

    @model_validator(mode="after")
    def validate_semantics(self) -> Config:
        if self.grid.size < 1:
            raise ValueError("grid.size must be >= 1")

        if self.solver.workers < 1:
            raise ValueError("solver.workers must be >= 1")

        for idx, conductor in enumerate(self.conductors):
            if isinstance(conductor, (CircleConfig, HalfCircleConfig)) and conductor.radius < 0:
                raise ValueError(f"conductors[{idx}].radius must be >= 0")

        # Pins are issued in conductor order starting at 0.
        unknown_pins = sorted(p for p in self.voltages if p < 0 or p >= len(self.conductors))
        if unknown_pins:
            raise ValueError(
                "voltages reference pin(s) with no matching conductor: "
                f"{', '.join(str(p) for p in unknown_pins)}"
            )

        return self


def load_config(path: str | Path) -> Config:
    """Load and validate a YAML scenario file."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Scenario file {path} must contain a YAML mapping")

    config = Config.model_validate(raw)
    config._config_path = path
    return config
