#!filepath: tabledb/cli.py
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from tabledb.config.app_config import AppConfig
from tabledb.utils.errors import TableDBError
from tabledb.utils.logger import init_logging, logs
from tabledb.workflows.query_workflow import build_query_pipeline

app = typer.Typer(
    help="Load a typed table file and print the asset-class trade counts.",
    add_completion=False,
)
err_console = Console(stderr=True)


@app.command()
def run(
    input_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Table file (<TABLE>,<name> / types / column names / rows).",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", exists=True, dir_okay=False,
        help="YAML config (defaults to the packaged base.yml).",
    ),
    repeat: Optional[int] = typer.Option(
        None, "--repeat", min=1, help="Run the query N times, keep the best time.",
    ),
    timing: bool = typer.Option(False, "--timing", help="Print the best query runtime."),
    strict_eligibility: bool = typer.Option(
        False, "--strict-eligibility",
        help="Do not carry an eligibility verdict over to the next entity.",
    ),
):
    """
    Ingest INPUT_FILE, evaluate the asset-class count query, print the result.
    """
    try:
        cfg = AppConfig.load(str(config) if config is not None else None)
    except ValidationError as e:
        err_console.print(f"[red]Error:[/red] invalid config: {escape(str(e))}")
        raise typer.Exit(code=1)

    init_logging(cfg.log)

    update = {}
    if repeat is not None:
        update["repeat"] = repeat
    if strict_eligibility:
        update["carry_over_eligibility"] = False
    if update:
        cfg.query = cfg.query.model_copy(update=update)

    pipeline = build_query_pipeline(cfg)
    try:
        ctx = pipeline.run(input_file)
    except TableDBError as e:
        logs.debug(f"[cli] {input_file}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    typer.echo("Result:")
    typer.echo(ctx.result.to_text())

    if timing:
        typer.echo(f"Query Runtime: {ctx.query_seconds} seconds")


def main():
    app()


if __name__ == "__main__":
    main()

# python -m tabledb.cli tables.csv
