"""YNAB CSV output formatter.

Every row has six columns: ``Date,Payee,Catergory,Memo,Outflow,Inflow``.
Category and memo are always empty; exactly one of outflow/inflow carries the
absolute amount depending on its sign. The header spelling "Catergory" is
what the YNAB importer was set up against and must not be corrected.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Context, Decimal

from .models import Transaction

HEADER = "Date,Payee,Catergory,Memo,Outflow,Inflow"

# Padding after ``date,payee``: {} is the magnitude.
_INFLOW_TEMPLATE = ",,,,{}"
_OUTFLOW_TEMPLATE = ",,,{},"


def format_magnitude(amount: Decimal) -> str:
    """Render ``abs(amount)`` without exponent or trailing fractional zeros.

    ``Decimal("-271.80")`` -> ``"271.8"``, ``Decimal("610")`` -> ``"610"``.
    Every significant digit is kept, however many there are.
    """

    magnitude = amount.copy_abs()
    # Context precision sized to the value so normalize() never rounds; the
    # "f" format then expands exponents such as 6.1E+2 back to 610.
    exact = Context(prec=max(len(magnitude.as_tuple().digits), 1))
    return f"{magnitude.normalize(exact):f}"


def format_row(tx: Transaction) -> str:
    template = _OUTFLOW_TEMPLATE if tx.is_outflow else _INFLOW_TEMPLATE
    return f"{tx.date},{tx.payee}" + template.format(format_magnitude(tx.amount))


def format_transactions(transactions: Iterable[Transaction]) -> str:
    """Return the full output text: header plus one line per transaction.

    Rows keep their input order and every line, including the last, ends
    with ``\\n``.
    """

    lines = [HEADER]
    lines.extend(format_row(tx) for tx in transactions)
    return "\n".join(lines) + "\n"


__all__ = ["HEADER", "format_magnitude", "format_row", "format_transactions"]
