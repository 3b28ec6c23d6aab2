"""Functions for generating ASCII reports and maps of a solved grid."""

from __future__ import annotations

from collections import Counter

from potential_grid.config import Config
from potential_grid.geometry import AirCell, Grid, MetalCell

# Darkest to brightest, indexed by |potential| relative to the grid maximum.
POTENTIAL_RAMP = " .:-=+*#%@"


def _metal_char(cell: MetalCell) -> str:
    if cell.voltage > 0:
        return "+"
    if cell.voltage < 0:
        return "-"
    return "0"


def render_ascii_map(grid: Grid) -> str:
    """Render one character per cell, highest y on the first line."""
    air_peak = max(
        (abs(c.potential) for _, _, c in grid.iter_cells() if isinstance(c, AirCell)),
        default=0,
    )
    last = len(POTENTIAL_RAMP) - 1

    lines: list[str] = []
    for y in reversed(range(grid.size)):
        row: list[str] = []
        for x in range(grid.size):
            cell = grid.cells[x][y]
            if isinstance(cell, MetalCell):
                row.append(_metal_char(cell))
            elif air_peak == 0:
                row.append(POTENTIAL_RAMP[0])
            else:
                level = int(round(abs(cell.potential) / air_peak * last))
                row.append(POTENTIAL_RAMP[level])
        lines.append("".join(row))
    return "\n".join(lines)


def generate_report(grid: Grid, config: Config) -> str:
    """Generates a detailed, multi-line ASCII report of the grid."""

    report_lines = [
        "--- Potential Grid Report ---",
        "",
        "** Grid **",
        f"  - Size: {grid.size} x {grid.size} cells",
        f"  - Solver Precision: {config.solver.precision}",
    ]
    if config.config_path is not None:
        report_lines.append(f"  - Scenario: {config.config_path}")
    report_lines.append("")

    metal = grid.metal_cells()
    air_potentials = [c.potential for _, _, c in grid.iter_cells() if isinstance(c, AirCell)]

    report_lines.append("** Component Counts **")
    report_lines.append(f"  - Conductors Placed: {grid.conductor_count}")
    report_lines.append(f"  - Conductor Coordinates (with repeats): {len(grid.conductors)}")
    report_lines.append(f"  - Metal Cells: {len(metal)}")
    report_lines.append(f"  - Air Cells: {len(air_potentials)}")
    report_lines.append("")

    report_lines.append("** Pins **")
    cells_per_pin = Counter(c.pin for _, _, c in metal)
    voltage_per_pin = {c.pin: c.voltage for _, _, c in metal}
    if not cells_per_pin:
        report_lines.append("  - (none)")
    for pin in sorted(cells_per_pin, key=lambda p: (p is None, p)):
        label = "unassigned" if pin is None else str(pin)
        report_lines.append(
            f"  - Pin {label}: {cells_per_pin[pin]} cells at {voltage_per_pin[pin]} V"
        )
    # Fully overwritten conductors keep their pin but own no cells.
    hidden = sorted(set(range(grid.conductor_count)) - {p for p in cells_per_pin if p is not None})
    if hidden:
        report_lines.append(f"  - Fully overlapped pins: {', '.join(str(p) for p in hidden)}")
    report_lines.append("")

    report_lines.append("** Potential (Air cells) **")
    if air_potentials:
        mean = sum(air_potentials) / len(air_potentials)
        report_lines.append(f"  - Min: {min(air_potentials)}")
        report_lines.append(f"  - Max: {max(air_potentials)}")
        report_lines.append(f"  - Mean: {mean:.3f}")
    else:
        report_lines.append("  - (no Air cells)")

    report_lines.append("\n--- End of Report ---")

    return "\n".join(report_lines)
