"""Command-line interface for the train motion integration benchmark."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from trainsim.core.config import SummationAlgo, get_settings, load_simulation_config
from trainsim.core.errors import TrainSimError
from trainsim.summation.lookup import InterpolateLookup

app = typer.Typer(
    name="trainsim",
    help=(
        "Run \"train\" simulations of an acceleration profile, calculating the "
        "final velocity and position of the train"
    ),
    add_completion=False,
)
console = Console()

ThreadsOption = Annotated[
    Optional[int],
    typer.Option("--threads", "-t", min=1, help="Number of threads to use for calculations"),
]
AlgoOption = Annotated[
    Optional[SummationAlgo],
    typer.Option("--algo", "-a", help="Summation algorithm to use for the simulation"),
]
IterationsOption = Annotated[
    Optional[int],
    typer.Option("--iterations", "-i", min=1, help="Number of times to run, for benchmarking"),
]
StepOption = Annotated[
    Optional[int],
    typer.Option("--step", "-s", min=1, help="Subdivisions within each one-second interval"),
]
OutputOption = Annotated[Optional[Path], typer.Option(help="Output JSON file")]
PlotOption = Annotated[Optional[Path], typer.Option(help="Save a profile plot to this file")]


def _simulate(
    acceleration: InterpolateLookup,
    threads: int | None,
    algo: SummationAlgo | None,
    iterations: int | None,
    step: int | None,
    output: Path | None,
    plot: Path | None,
) -> None:
    """Benchmark the configured pipeline and report the results."""
    from trainsim.simulation.runner import BenchmarkRunner

    try:
        config = load_simulation_config(
            threads=threads, algo=algo, iterations=iterations, step=step,
        )
        runner = BenchmarkRunner(config=config, settings=get_settings(), log_fn=console.print)
        result = runner.run(acceleration)
    except TrainSimError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Simulation Results")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Samples", str(result.samples))
    table.add_row("Algorithm", result.algo.value)
    table.add_row("Step", str(result.step))
    table.add_row("Threads", str(result.threads))
    table.add_row("Iterations", str(result.iterations))
    table.add_row("Final velocity", f"{result.final_velocity:+.15f} m/s")
    table.add_row("Final position", f"{result.final_position:+.15f} m")
    table.add_row("Min time", f"{result.min_seconds:.9f} s")
    table.add_row("Max time", f"{result.max_seconds:.9f} s")
    table.add_row("Avg time", f"{result.avg_seconds:.9f} s")
    table.add_row("Total time", f"{result.total_seconds:.9f} s")
    console.print(table)

    if output:
        result.save(output)
        console.print(f"[green]Results saved to {output}[/green]")

    if plot:
        import matplotlib.pyplot as plt
        from trainsim.viz.plots import plot_motion_profile

        fig = plot_motion_profile(
            acceleration,
            runner.last_result.velocity,
            final_position=result.final_position,
            save_path=plot,
        )
        plt.close(fig)
        console.print(f"[green]Profile saved to {plot}[/green]")


@app.command()
def csv(
    path: Annotated[Path, typer.Argument(help="CSV file to load acceleration data from")],
    column: Annotated[
        Optional[str],
        typer.Option(help="Load acceleration from this named column (file has a header row)"),
    ] = None,
    threads: ThreadsOption = None,
    algo: AlgoOption = None,
    iterations: IterationsOption = None,
    step: StepOption = None,
    output: OutputOption = None,
    plot: PlotOption = None,
):
    """Run a simulation from an acceleration profile stored in a CSV file."""
    from trainsim.data.csv_source import load_csv_profile

    try:
        acceleration = load_csv_profile(path, column=column)
    except TrainSimError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    _simulate(acceleration, threads, algo, iterations, step, output, plot)


@app.command()
def synthetic(
    seconds: Annotated[int, typer.Option(min=1, help="Profile length in seconds")] = 600,
    peak: Annotated[float, typer.Option(help="Peak acceleration m/s²")] = 1.2,
    noise: Annotated[float, typer.Option(min=0.0, help="Gaussian noise std dev")] = 0.0,
    seed: Annotated[int, typer.Option(help="Noise seed")] = 42,
    threads: ThreadsOption = None,
    algo: AlgoOption = None,
    iterations: IterationsOption = None,
    step: StepOption = None,
    output: OutputOption = None,
    plot: PlotOption = None,
):
    """Run a simulation from a generated departure/cruise/arrival profile."""
    from trainsim.data.synthetic import generate_synthetic_profile

    acceleration = generate_synthetic_profile(
        seconds=seconds, peak_acceleration=peak, noise=noise, seed=seed,
    )

    _simulate(acceleration, threads, algo, iterations, step, output, plot)


@app.command()
def version():
    """Show version information."""
    from trainsim import __version__
    console.print(f"trainsim v{__version__}")


if __name__ == "__main__":
    app()
