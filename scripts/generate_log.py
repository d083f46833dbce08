"""
Game log generator for the Round Score Resolver.

Writes deterministic pseudo-random game logs in the resolver's input format:
a declared round count on the first line, then one "<p1> <p2>" line per round.
Useful for manual testing and for probing the declared-round limit.
"""

from __future__ import annotations

import random
import sys
import tempfile
from pathlib import Path
from typing import List

import typer

app = typer.Typer(help="Generate synthetic two-party game logs.")


def _generate_log_text(rounds: int, max_score: int, seed: int, annotation: str = "") -> str:
    rng = random.Random(seed)
    header = f"{rounds} {annotation}".rstrip()
    lines: List[str] = [header]
    for _ in range(rounds):
        lines.append(f"{rng.randint(0, max_score)} {rng.randint(0, max_score)}")
    return "\n".join(lines)


def _write_log(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


@app.command()
def main(
    rounds: int = typer.Option(
        10,
        "--rounds",
        "-r",
        help="Number of rounds to generate.",
    ),
    max_score: int = typer.Option(
        100,
        "--max-score",
        help="Highest score a party can reach in one round.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    annotation: str = typer.Option(
        "",
        "--annotation",
        help="Extra tokens appended to the header line (ignored by the resolver).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (if omitted, a temp file will be used).",
    ),
) -> None:
    """
    Generate a synthetic game log.
    """
    if output:
        log_path = output
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="game_log_"))
        log_path = tmpdir / "game.txt"

    typer.echo(f"Generating {rounds:,} rounds -> {log_path} (max_score={max_score}, seed={seed})")
    _write_log(log_path, _generate_log_text(rounds, max_score, seed, annotation))


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
