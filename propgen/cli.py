"""
CLI interface for inspecting generated values using Click and Rich.
"""

import logging
import sys
from itertools import islice
from random import Random

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import Config
from .generators import Arbitrary, GeneratorError, get_default_registry
from .schema import PlanLoadError, load_plan

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool):
    """Route log records through Rich."""
    if verbose:
        level = logging.DEBUG
    else:
        try:
            level = Config.get_log_level()
        except ValueError as e:
            fail(str(e))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def display_values(title: str, arb: Arbitrary, rnd: Random, limit=None):
    """Display edge cases followed by samples in a table."""
    n_edge = len(arb.edgecases())

    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Value", justify="right", style="white")

    for i, generated in enumerate(islice(arb.generate(rnd), limit)):
        if i < n_edge:
            table.add_row(str(i), "edge", repr(generated.value), style="yellow")
        else:
            table.add_row(str(i), "sample", repr(generated.value))

    console.print(table)


def fail(message: str):
    console.print(f"✗ {message}", style="red", markup=False)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose):
    """
    🎲 propgen: edge cases first, then seeded samples.
    """
    setup_logging(verbose)


@main.command()
def config():
    """Show configuration loaded from the environment."""
    table = Table(title="Configuration", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in Config.display().items():
        table.add_row(key, str(value))

    console.print(table)


@main.command()
def types():
    """List the built-in kinds and the type names that resolve to them."""
    table = Table(title="Built-in Types", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Type names", style="white")

    for kind, names in get_default_registry().aliases().items():
        table.add_row(kind.canonical, ", ".join(names))

    console.print(table)


@main.command()
@click.argument("type_name")
def edgecases(type_name):
    """Show the edge cases of TYPE_NAME."""
    try:
        arb = get_default_registry().resolve(type_name, 0)
    except GeneratorError as e:
        fail(str(e))

    table = Table(title=f"Edge cases: {type_name}", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Value", justify="right", style="yellow")

    for i, value in enumerate(arb.edgecases()):
        table.add_row(str(i), repr(value))

    console.print(table)


@main.command()
@click.argument("type_name")
@click.option(
    "--iterations",
    "-n",
    type=int,
    default=None,
    help="Number of random samples (default: PROPGEN_ITERATIONS)"
)
@click.option(
    "--seed",
    "-s",
    type=int,
    default=None,
    help="Seed for the random source (default: PROPGEN_SEED)"
)
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Stop after this many values"
)
def sample(type_name, iterations, seed, limit):
    """Generate values for TYPE_NAME."""
    iterations = Config.ITERATIONS if iterations is None else iterations
    seed = Config.RANDOM_SEED if seed is None else seed

    try:
        arb = get_default_registry().resolve(type_name, iterations)
    except GeneratorError as e:
        fail(str(e))

    logger.debug("Sampling %s with seed %d", type_name, seed)
    display_values(f"{type_name} (seed {seed})", arb, Random(seed), limit)


@main.command()
@click.argument("path", type=click.Path())
@click.option(
    "--seed",
    "-s",
    type=int,
    default=None,
    help="Seed for the random source (default: plan seed, then PROPGEN_SEED)"
)
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Stop each domain after this many values"
)
def plan(path, seed, limit):
    """Generate values for every domain in a plan file."""
    try:
        generation_plan = load_plan(path)
    except PlanLoadError as e:
        fail(f"Invalid plan {e.path}\n" + "\n".join(f"  • {problem}" for problem in e.problems))

    if seed is None:
        seed = generation_plan.seed if generation_plan.seed is not None else Config.RANDOM_SEED

    registry = get_default_registry()
    try:
        arbitraries = [
            (domain, registry.build_arbitrary(domain, generation_plan.iterations))
            for domain in generation_plan.domains
        ]
    except GeneratorError as e:
        fail(str(e))

    console.print(Panel.fit(f"Plan (seed {seed}): [bold cyan]{path}[/bold cyan]", border_style="cyan"))

    # One source threaded through every domain, in plan order
    rnd = Random(seed)
    for domain, arb in arbitraries:
        display_values(f"{domain.name}: {domain.type}", arb, rnd, limit)


if __name__ == "__main__":
    main()
