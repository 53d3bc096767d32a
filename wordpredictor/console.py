"""
Terminal Front End with Rich

Renders predictions, engine statistics and an interactive prompt using
the Rich library.
"""

import logging
from typing import Dict

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .engine import EngineResult, Failure, Invalid, NoPrediction, PredictionEngine, Ranked


console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Send engine logs through Rich; DEBUG traces every backoff state."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def create_stats_table(stats: Dict) -> Table:
    """Create a Rich table displaying engine statistics."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="green")
    table.add_column("Value", style="yellow", justify="right")

    for key, value in stats.items():
        display_key = key.replace('_', ' ').title()

        if isinstance(value, dict):
            display_value = ", ".join(f"{k}={v}" for k, v in value.items())
        elif isinstance(value, bool):
            display_value = "yes" if value else "no"
        elif isinstance(value, int):
            display_value = f"{value:,}"
        elif value is None:
            display_value = "-"
        else:
            display_value = str(value)

        table.add_row(display_key, display_value)

    return table


def create_result_table(result: Ranked) -> Table:
    """Create a Rich table of ranked next words."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Word", style="bold")
    table.add_column("Score", justify="right", style="yellow")

    for rank, (word, score) in enumerate(result.predictions, 1):
        table.add_row(str(rank), word, f"{score:.3e}")

    return table


def render_result(result: EngineResult) -> None:
    if isinstance(result, Ranked):
        orders = " -> ".join(str(o.value) for o in result.orders_tried)
        console.print(Panel(
            create_result_table(result),
            title=f"[bold]Next words[/bold] (order {result.order.value}, searched {orders})",
            subtitle=f"matched on: {' '.join(result.search_context)}",
            border_style="green"
        ))
    elif isinstance(result, NoPrediction):
        console.print("[yellow]No prediction found for this phrase.[/yellow]")
    elif isinstance(result, Invalid):
        console.print(f"[red]{result.message}[/red]: use letters, apostrophes and "
                      "basic punctuation (' ; : ! ? , .), and no numbers as words.")
    elif isinstance(result, Failure):
        console.print(f"[bold red]Prediction failed:[/bold red] {result.reason}")


def predict_cli(engine: PredictionEngine, text: str) -> EngineResult:
    """Run one prediction with a status spinner and render it."""
    with console.status("[cyan]Predicting..."):
        result = engine.predict(text)
    render_result(result)
    return result


def show_stats(engine: PredictionEngine) -> None:
    stats = engine.stats()
    console.print(Panel(
        create_stats_table({k: v for k, v in stats.items() if k != 'store'}),
        title="[bold]Engine[/bold]",
        border_style="yellow"
    ))
    console.print(Panel(
        create_stats_table(stats['store']),
        title="[bold]N-gram Store[/bold]",
        border_style="yellow"
    ))


def interactive_demo(engine: PredictionEngine) -> None:
    """Run an interactive prediction prompt."""
    console.print()
    console.print(Panel.fit(
        "[bold magenta]Next Word Predictor[/bold magenta]\n"
        "Enter a word or phrase to see up to five next words.\n"
        "Enter the same phrase again to see other options.\n"
        "Type 'quit' to exit.",
        border_style="magenta"
    ))
    console.print()

    while True:
        try:
            user_input = console.input("[bold cyan]Word or phrase:[/bold cyan] ")
        except (KeyboardInterrupt, EOFError):
            break

        if user_input.strip().lower() in ('quit', 'exit', 'q'):
            break

        predict_cli(engine, user_input)
        console.print()

    console.print("\n[yellow]Goodbye![/yellow]")
