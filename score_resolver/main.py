from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from score_resolver.adapters.sinks import FileResultSink, StdoutResultSink
from score_resolver.config import get_settings
from score_resolver.domain.models import InputMode, SubmissionRequest
from score_resolver.pipeline import submit
from score_resolver.reporter import print_resolution
from score_resolver.utils.logging import configure_logging

app = typer.Typer(help="Round Score Resolver CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json={settings.log_json} | "
        f"max_rounds={settings.max_declared_rounds} encoding={settings.text_encoding} | "
        f"output={settings.output_dir / settings.output_filename}"
    )


@app.command()
def resolve(
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="Game log to upload (file mode).",
    ),
    text: str = typer.Option(
        "",
        "--text",
        "-t",
        help="Game log typed in directly (manual mode).",
    ),
    manual: bool = typer.Option(
        False,
        "--manual",
        "-m",
        help="Use the --text value instead of --file.",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the result file (default from settings).",
    ),
    output_name: Optional[str] = typer.Option(
        None,
        "--output-name",
        help="Result file name (default from settings).",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the result instead of writing a file.",
    ),
    show_rounds: bool = typer.Option(
        False,
        "--show-rounds",
        help="Render the parsed rounds as a table.",
    ),
    json_logs: Optional[bool] = typer.Option(
        None,
        "--json-logs/--no-json-logs",
        help="Emit logs as JSON (default from settings).",
    ),
) -> None:
    """
    Resolve the winner of a game log and write the result.
    """
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_logs=settings.log_json if json_logs is None else json_logs,
    )

    overrides = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if output_name is not None:
        overrides["output_filename"] = output_name
    if overrides:
        settings = settings.model_copy(update=overrides)

    request = SubmissionRequest(
        mode=InputMode.MANUAL if manual else InputMode.FILE,
        file_path=file,
        text=text,
    )
    sink = StdoutResultSink() if stdout else FileResultSink(settings.output_dir)

    resolution = submit(request, sink, settings=settings)
    print_resolution(resolution, show_rounds=show_rounds)

    if not resolution.ok:
        raise typer.Exit(code=1)
    if isinstance(sink, FileResultSink) and sink.last_path is not None:
        typer.echo(f"Saved to: {sink.last_path}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
