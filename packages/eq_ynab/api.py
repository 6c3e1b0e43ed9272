"""Public conversion entry point for the ``eq_ynab`` package.

:func:`convert_csv_text` is the whole pipeline on in-memory text: it does no
filesystem access, so the CLI (or any other host) owns reading the bank export
and writing the result.
"""

from __future__ import annotations

from .converter import convert_lines
from .formatter import format_transactions
from .logging_setup import get_logger

logger = get_logger("eq_ynab.api")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only, dropping one trailing ``\\r`` per line.

    Unlike :meth:`str.splitlines`, form feeds, ``\\x1c``-``\\x1e``, NEL and the
    Unicode line/paragraph separators stay inside their line. A final newline
    does not produce a trailing empty line.
    """

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def convert_csv_text(text: str) -> str:
    """Convert an EQ Bank CSV export into YNAB CSV text.

    The first line is treated as the export header and skipped without
    inspection. All remaining lines must be data lines; the first line that
    fails any stage raises its :class:`~eq_ynab.errors.ConversionError` and no
    output is produced.
    """

    lines = split_lines(text)
    data_lines = lines[1:]
    logger.debug("read %d data line(s) after header", len(data_lines))

    transactions = list(convert_lines(data_lines, first_lineno=2))
    outflows = sum(1 for tx in transactions if tx.is_outflow)
    logger.info(
        "converted %d transaction(s): %d outflow, %d inflow",
        len(transactions),
        outflows,
        len(transactions) - outflows,
    )
    return format_transactions(transactions)


__all__ = ["convert_csv_text", "split_lines"]
