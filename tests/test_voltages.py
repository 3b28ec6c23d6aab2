"""Voltage assignment tests."""

from __future__ import annotations

import copy

import pytest

from potential_grid.geometry import AirCell, Circle, Line, MetalCell
from potential_grid.placement import place_conductors
from potential_grid.voltages import apply_voltages


def _placed_grid():
    return place_conductors(
        [Line((0, 0), (9, 0)), Line((0, 9), (9, 9)), Circle((5, 5), 2)],
        size=10,
    )


def test_voltages_follow_pins() -> None:
    grid = _placed_grid()
    apply_voltages(grid, {0: -80, 1: 80, 2: 5})

    assert grid.cells[3][0].voltage == -80
    assert grid.cells[3][9].voltage == 80
    assert grid.cells[7][5].voltage == 5


def test_missing_pin_keeps_voltage() -> None:
    grid = _placed_grid()
    apply_voltages(grid, {0: 12, 1: 34, 2: 56})
    apply_voltages(grid, {0: -1})

    assert grid.cells[0][0].voltage == -1
    assert grid.cells[0][9].voltage == 34
    assert grid.cells[7][5].voltage == 56


def test_pinless_metal_resets_to_zero() -> None:
    grid = _placed_grid()
    grid.cells[4][4] = MetalCell(voltage=99, pin=None)
    apply_voltages(grid, {0: 1})

    assert grid.cells[4][4].voltage == 0
    assert grid.cells[4][4].pin is None


def test_air_cells_untouched() -> None:
    grid = _placed_grid()
    grid.cells[2][4] = AirCell(potential=17)
    apply_voltages(grid, {0: 1, 1: 2, 2: 3})

    assert grid.cells[2][4] == AirCell(potential=17)


def test_pins_never_change() -> None:
    grid = _placed_grid()
    before = [(x, y, c.pin) for x, y, c in grid.metal_cells()]
    apply_voltages(grid, {0: 7, 1: 8, 2: 9})

    assert [(x, y, c.pin) for x, y, c in grid.metal_cells()] == before


def test_apply_is_idempotent() -> None:
    voltages = {0: -80, 2: 80}
    once = _placed_grid()
    apply_voltages(once, voltages)
    twice = copy.deepcopy(once)
    apply_voltages(twice, voltages)

    assert twice == once


def test_non_integer_voltage_rejected_before_any_change() -> None:
    grid = _placed_grid()
    apply_voltages(grid, {0: 3, 1: 4})
    before = copy.deepcopy(grid)

    with pytest.raises(ValueError, match="pin 1"):
        apply_voltages(grid, {0: 9, 1: 2.9})

    assert grid == before


def test_integral_float_voltage_accepted() -> None:
    grid = _placed_grid()
    apply_voltages(grid, {0: 5.0})

    assert grid.cells[0][0].voltage == 5
    assert isinstance(grid.cells[0][0].voltage, int)
