"""CLI for the ``eq_ynab`` package.

A single Typer command reads an EQ Bank CSV export, converts it with
:func:`eq_ynab.api.convert_csv_text` and writes the YNAB CSV. Environment
variables (``EQ_YNAB_LOG_LEVEL``) are loaded from a local ``.env`` using
``python-dotenv`` before logging is configured. Conversion logic lives in
``eq_ynab.converter`` and ``eq_ynab.formatter``; this module only owns file
I/O, user-facing messages and the exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from typer.models import OptionInfo

from . import __version__
from .api import convert_csv_text
from .errors import EqYnabError, InputReadError, OutputWriteError
from .logging_setup import configure_logging, get_logger

logger = get_logger("eq_ynab.cli")

console = Console()
err_console = Console(stderr=True)


# ---- File I/O ---------------------------------------------------------------


def read_input(path: Path) -> str:
    """Return the UTF-8 text of ``path``, wrapping failures in ``InputReadError``."""

    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputReadError(str(path), "file not found") from e
    except UnicodeDecodeError as e:
        raise InputReadError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise InputReadError(str(path), e.strerror or str(e)) from e


def write_output(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8, wrapping failures in ``OutputWriteError``."""

    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(str(path), e.strerror or str(e)) from e


# ---- Command handler --------------------------------------------------------


def cmd_convert(filename: Path, output: Path) -> int:
    """Convert ``filename`` into ``output`` and report the outcome.

    The output file is only opened once the whole input has converted, so a
    failing row never leaves a partial file behind. Errors are written to
    stderr and the function returns ``1``; on success it prints ``Success``
    and returns ``0``.
    """

    try:
        text = read_input(filename)
        result = convert_csv_text(text)
        write_output(output, result)
    except EqYnabError as e:
        logger.debug("conversion of %s failed", filename, exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        return 1

    logger.info("wrote %s", output)
    console.print("Success", highlight=False)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    add_completion=False,
    help="Convert EQ csv to YNAB csv.",
)

# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
FILENAME_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--filename",
    "-f",
    help="Path to the EQ Bank CSV export to convert.",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
OUTPUT_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--output",
    "-o",
    help="Path of the YNAB CSV file to write (overwritten if present).",
    dir_okay=False,
    file_okay=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"eq-ynab {__version__}")
        raise typer.Exit()


@app.command()
def convert(
    filename: Annotated[Path, FILENAME_OPTION],
    output: Annotated[Path, OUTPUT_OPTION],
    log_level: Annotated[
        str | None,
        typer.Option(help="Logging level (overrides EQ_YNAB_LOG_LEVEL), e.g. DEBUG."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Convert an EQ Bank CSV export into a YNAB import CSV."""

    # Load environment from .env in CWD (override=False to keep existing env)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        configure_logging(log_level)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True, highlight=False)
        raise typer.Exit(1) from e

    raise typer.Exit(cmd_convert(filename, output))


if __name__ == "__main__":  # pragma: no cover
    app()
