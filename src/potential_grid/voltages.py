"""Voltage assignment onto placed conductors."""

from __future__ import annotations

from typing import Mapping

from potential_grid.geometry import Grid, MetalCell

VoltageMap = Mapping[int, int]


def _checked_voltages(voltages: VoltageMap) -> dict[int, int]:
    checked: dict[int, int] = {}
    for pin, value in voltages.items():
        if isinstance(value, bool) or int(value) != value:
            raise ValueError(f"Voltage for pin {pin} must be an integer, got {value!r}")
        checked[pin] = int(value)
    return checked


def apply_voltages(grid: Grid, voltages: VoltageMap) -> None:
    """Set each Metal cell's voltage from its pin's entry in ``voltages``.

    Pins without an entry keep their current voltage. Metal cells without a
    pin are reset to 0. Air cells are untouched. A non-integer voltage raises
    ``ValueError`` before any cell is changed.
    """
    voltages = _checked_voltages(voltages)
    for column in grid.cells:
        for cell in column:
            if not isinstance(cell, MetalCell):
                continue
            if cell.pin is None:
                cell.voltage = 0
            elif cell.pin in voltages:
                cell.voltage = voltages[cell.pin]
