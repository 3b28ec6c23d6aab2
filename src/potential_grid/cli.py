"""Rich-Click CLI for potential_grid."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from potential_grid.physics import PRECISIONS

click.rich_click.USE_RICH_MARKUP = True


@click.command()
@click.argument("scenario_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path),
    default=Path("output"),
    show_default=True,
    help="Output directory for generated files.",
)
@click.option(
    "--precision",
    type=click.Choice(PRECISIONS),
    default=None,
    show_default="scenario value",
    help="Per-term integer truncation or floating-point accumulation.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    show_default="scenario value",
    help="Worker processes for the potential solve.",
)
@click.option("--report/--no-report", default=True, show_default=True, help="Generate and print an ASCII summary report.")
@click.option("--ascii/--no-ascii", "ascii_map", default=None, show_default="scenario value", help="Write an ASCII map of the grid.")
@click.option("--viz/--no-viz", default=True, show_default=True, help="Generate 2D HTML heatmap.")
@click.option("--open-browser", is_flag=True, default=False, show_default="False", help="Auto-open HTML after generation.")
def solve(
    scenario_file: Path,
    output_dir: Path,
    precision: str | None,
    workers: int | None,
    report: bool,
    ascii_map: bool | None,
    viz: bool,
    open_browser: bool,
) -> None:
    """Place conductors and solve the potential field from SCENARIO_FILE."""
    from potential_grid.config import load_config
    from potential_grid.placement import place_conductors
    from potential_grid.raster import PlacementError
    from potential_grid.solver import solve_potentials
    from potential_grid.voltages import apply_voltages

    click.echo(f"Loading scenario: {scenario_file}")
    config = load_config(scenario_file)
    if precision is not None:
        config.solver.precision = precision
    if workers is not None:
        config.solver.workers = workers
    if ascii_map is not None:
        config.report.ascii_map = ascii_map

    click.echo("Placing conductors...")
    try:
        grid = place_conductors(config.to_shapes(), size=config.grid.size)
    except PlacementError as exc:
        raise click.ClickException(f"Placement failed, nothing rendered: {exc}") from exc

    apply_voltages(grid, config.voltages)

    click.echo(f"Solving potentials ({config.solver.precision}, {config.solver.workers} worker(s))...")
    solve_potentials(grid, precision=config.solver.precision, workers=config.solver.workers)
    output_dir.mkdir(parents=True, exist_ok=True)

    if report:
        from potential_grid.reporter import generate_report

        summary_text = generate_report(grid, config)
        click.echo(summary_text)
        summary_path = output_dir / "potential_grid_summary.txt"
        summary_path.write_text(summary_text + "\n")
        click.echo(f"Writing summary report: {summary_path}")

    if config.report.ascii_map:
        from potential_grid.reporter import render_ascii_map

        map_path = output_dir / "potential_grid_map.txt"
        click.echo(f"Writing ASCII map: {map_path}")
        map_path.write_text(render_ascii_map(grid) + "\n")

    if viz:
        from potential_grid.visualize import render_grid

        viz_path = output_dir / "potential_grid_visualization.html"
        click.echo(f"Rendering visualization: {viz_path}")
        render_grid(grid, config, output_path=viz_path, open_browser=open_browser)

    click.echo("Done!")


# Keep the public CLI symbol name stable for __main__/entry points.
app = solve
