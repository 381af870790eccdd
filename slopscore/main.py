"""Entry point to the application as a Typer CLI."""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from typer import Typer

from slopscore.configuration import config
from slopscore.data_models import SUPPORTED_LANGUAGE
from slopscore.errors import SlopScoreError
from slopscore.report import render_score_output
from slopscore.service import SlopScoreService

app = Typer(no_args_is_help=True)

STDIN_MARKER = "-"


@app.callback()
def configure_logging() -> None:
    """Rate how strongly texts show patterns typical of AI-generated prose."""
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)


def build_service() -> SlopScoreService:
    """
    Create the service scoring texts given to the CLI.

    Returns:
        SlopScoreService: The service configured from the configuration.
    """
    return SlopScoreService()


def read_input(source: str) -> str:
    """
    Read a text from a file or the standard input.

    Args:
        source (str): Path to a file, or `-` for the standard input.

    Returns:
        str: The read text.
    """
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


@app.command("score")
def score(
    source: Annotated[
        str, typer.Argument(help="Path to a text, Markdown or HTML file, or `-`.")
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON.")
    ] = False,
    language: Annotated[
        str, typer.Option(help="Language of the text.")
    ] = SUPPORTED_LANGUAGE,
) -> None:
    """Score a text file or the standard input."""
    try:
        raw_text = read_input(source)
    except OSError as exception:
        typer.echo(f"Error: Unable to read `{source}`: {exception}", err=True)
        raise typer.Exit(code=1) from exception

    if not raw_text.strip():
        typer.echo("Error: Input is empty", err=True)
        raise typer.Exit(code=1)

    try:
        scored = build_service().compute_score_from_text(raw_text, language=language)
    except SlopScoreError as exception:
        typer.echo(f"Error: {exception}", err=True)
        raise typer.Exit(code=1) from exception

    if as_json:
        typer.echo(scored.model_dump_json(indent=2))
    else:
        typer.echo(render_score_output(scored.result))


@app.command("api")
def run_api() -> None:
    """Start up the backend sharing the Web API."""
    import uvicorn

    from slopscore.api.application import create_app

    logger.info(f"Starting the API on {config.api_host}:{config.api_port}.")
    uvicorn.run(create_app(), host=config.api_host, port=config.api_port)


if __name__ == "__main__":
    app()
