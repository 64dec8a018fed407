"""CLI application entry point for sajka.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from sajka import __version__
from sajka.cli.output import (
    print_error,
    print_generation_summary,
    print_header,
    print_step,
)
from sajka.config import GenerationConfig, LoggingConfig, SajkaSettings
from sajka.core import WordGenerator
from sajka.exceptions import SajkaError
from sajka.io import load_word, write_word
from sajka.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="sajka",
    help="Generate and transform words of the Sajk'a constructed language.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"Sajka v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate and transform words of the Sajk'a constructed language."""


@app.command()
def word(
    syllables: Annotated[
        int,
        typer.Argument(
            help="Number of syllables in the word",
            min=1,
        ),
    ] = 2,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed for reproducible output",
        ),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option(
            "--max-attempts",
            help="Give up after this many failed placements (default: never)",
            min=1,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the word to this file instead of stdout",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print generation statistics to stderr",
        ),
    ] = False,
) -> None:
    """Generate a word with the given number of syllables.

    The word is printed as a tab-separated grid of lateral/vertical phonemes.

    Example:
        sajka word 3 --seed 42
    """
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    settings = SajkaSettings(
        generation=GenerationConfig(
            syllables=syllables,
            max_adjoin_attempts=max_attempts,
            seed=seed,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )

    if verbose:
        print_header(__version__)
        print_step(f"Generating {syllables}-syllable word")

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        generator = WordGenerator(settings.generation, logger=logger)
        result = generator.generate()
    except SajkaError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is not None:
        write_word(result, output)
    else:
        typer.echo(result.to_text(), nl=False)

    if verbose:
        print_generation_summary(generator.stats, cells=len(result))


@app.command()
def rotate(
    source: Annotated[
        str,
        typer.Argument(
            metavar="WORD",
            help="Word text, a file holding it, or - to read from stdin",
            show_default=False,
        ),
    ],
) -> None:
    """Rotate a word, applying the rotation mutation, and print the result."""
    try:
        parsed = load_word(source)
    except SajkaError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(parsed.rotate().to_text(), nl=False)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
