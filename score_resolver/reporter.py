from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from score_resolver.core.resolver import deciding_round
from score_resolver.domain.errors import ResolverError
from score_resolver.domain.models import Resolution, Round


def _score(value: Optional[int]) -> str:
    return "N/A" if value is None else str(value)


def build_rounds_table(rounds: list[Round]) -> Table:
    """
    Render parsed rounds as a rich table.

    Rounds with a missing score show N/A; the round that decided the verdict
    is highlighted.
    """
    table = Table(title="Rounds", box=box.ROUNDED)
    table.add_column("Round", justify="right", style="cyan", no_wrap=True)
    table.add_column("Party 1", justify="right", style="magenta")
    table.add_column("Party 2", justify="right", style="magenta")
    table.add_column("Margin", justify="right", style="green")
    table.add_column("Leader", justify="center", style="bold")

    deciding = deciding_round(rounds)
    for index, round_ in enumerate(rounds):
        table.add_row(
            str(index + 1),
            _score(round_.party_one_score),
            _score(round_.party_two_score),
            _score(round_.margin),
            round_.leader if round_.margin else "-",
            style="bold green" if index == deciding else None,
        )
    return table


def print_error(error: ResolverError, console: Optional[Console] = None) -> None:
    console = console or Console(stderr=True)
    console.print(f"[bold red]Error:[/bold red] {error.message}")


def print_resolution(
    resolution: Resolution,
    show_rounds: bool = False,
    console: Optional[Console] = None,
) -> None:
    """
    Print a resolution: the optional rounds table, then the verdict or error.
    """
    console = console or Console()

    if show_rounds:
        if resolution.rounds:
            console.print(build_rounds_table(resolution.rounds))
        else:
            console.print("[yellow]No rounds to display.[/yellow]")

    if resolution.error is not None:
        print_error(resolution.error, console=console)
        return

    verdict = resolution.verdict
    if verdict.winning_party:
        console.print(
            f"Winner: [bold green]party {verdict.winning_party}[/bold green] "
            f"with a margin of [bold]{verdict.max_margin}[/bold]"
        )
    else:
        console.print("[yellow]No round had a lead; no winner.[/yellow]")


__all__ = ["build_rounds_table", "print_error", "print_resolution"]
