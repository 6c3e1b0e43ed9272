"""Row converter: bank CSV line -> :class:`~eq_ynab.models.Transaction`.

Stages, applied in order to every data line:

1. :func:`split_line` - exactly four comma-delimited fields
   (date, description, amount, balance). No quoting is supported.
2. :func:`parse_amount` - signed ``Decimal`` from ``$1.59`` / ``-$610``.
3. :func:`normalize_payee` - drop a directional phrase such as
   ``"Payment to "`` in front of the counterparty.
4. :func:`convert_date` - ``29 FEB 2024`` -> ``29/02/2024``.

Each stage raises a :class:`~eq_ynab.errors.ConversionError` subclass;
:func:`convert_line` attaches the raw line to whichever error escapes.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from decimal import Decimal, InvalidOperation

from .errors import (
    AmountParseError,
    ConversionError,
    EmptyAmountError,
    InvalidFieldCountError,
    MalformedDateError,
    PayeeExtractionError,
    UnknownMonthError,
)
from .logging_setup import get_logger
from .models import Transaction

logger = get_logger("eq_ynab.converter")

FIELD_COUNT = 4

# Scanned in order; the first keyword present wins.
PAYEE_KEYWORDS: tuple[str, ...] = (" to ", " by ", " from ")

# Position in the table is the month number (1-based).
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)

# Unsigned decimal literal: digits with optional fraction. The sign comes
# from the leading "-" only.
_DECIMAL_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)")

# ASCII whitespace only; NBSP and other Unicode spaces stay inside a part.
_ASCII_WS_RE = re.compile(r"[ \t\n\f\r]+")

# Characters that can never be a currency symbol; seeing one where the
# symbol belongs means the field has no prefix at all.
_NOT_A_SYMBOL = frozenset("0123456789+-. \t\n\f\r\v")


# ---------------------------------------------------------------------------
# Line splitter
# ---------------------------------------------------------------------------


def split_line(line: str) -> tuple[str, str, str, str]:
    """Split ``line`` into ``(date, description, amount, balance)``."""

    fields = line.split(",")
    if len(fields) != FIELD_COUNT:
        raise InvalidFieldCountError(line, len(fields))
    date, description, amount, balance = fields
    return date, description, amount, balance


# ---------------------------------------------------------------------------
# Amount parser
# ---------------------------------------------------------------------------


def _amount_payload(raw: str) -> tuple[bool, str]:
    """Return ``(negative, payload)`` for a currency-prefixed amount.

    Only the EQ export shape is understood: an optional ``-`` followed by a
    single-character currency symbol. ``-$610`` -> ``(True, "610")``,
    ``$1.59`` -> ``(False, "1.59")``. Any symbol is accepted, but a digit,
    sign, dot or whitespace in its place is rejected so ``12.50`` fails
    instead of reading as ``2.50``.
    """

    if not raw:
        raise EmptyAmountError("amount field is empty")
    negative = raw[0] == "-"
    offset = 2 if negative else 1
    symbol = raw[offset - 1 : offset]
    if not symbol or symbol in _NOT_A_SYMBOL:
        raise AmountParseError(f"missing currency symbol: {raw!r}")
    return negative, raw[offset:]


def parse_amount(raw: str) -> Decimal:
    """Parse a raw amount field into a signed ``Decimal``."""

    negative, payload = _amount_payload(raw)
    if not _DECIMAL_RE.fullmatch(payload):
        raise AmountParseError(f"invalid amount: {raw!r}")
    try:
        value = Decimal(payload)
    except InvalidOperation as exc:  # pragma: no cover - regex guards this
        raise AmountParseError(f"invalid amount: {raw!r}") from exc
    # copy_negate is exact; unary minus would round to the context precision.
    return value.copy_negate() if negative else value


# ---------------------------------------------------------------------------
# Payee normalizer
# ---------------------------------------------------------------------------


def normalize_payee(raw: str) -> str:
    """Strip everything up to a directional keyword from ``raw``.

    ``"Account Credited from 300605613"`` -> ``"300605613"``. When the first
    matching keyword occurs more than once, the text after its last
    occurrence is kept. Descriptions with no keyword are returned untouched
    (not even stripped).

    This is a heuristic: with two different keywords present only the one
    listed first in :data:`PAYEE_KEYWORDS` is considered, which is not
    necessarily the one closest to the counterparty name.
    """

    for keyword in PAYEE_KEYWORDS:
        if keyword in raw:
            segments = raw.split(keyword)
            if not segments:
                raise PayeeExtractionError(f"no text around {keyword!r} in {raw!r}")
            return segments[-1].strip()
    return raw


# ---------------------------------------------------------------------------
# Date converter
# ---------------------------------------------------------------------------


def convert_month(token: str) -> str:
    """Map a month token to its zero-padded number (``"FEB"`` -> ``"02"``).

    Matching is a case-sensitive substring test against
    :data:`MONTH_ABBREVIATIONS` in calendar order, so ``"FEBRUARY"`` works
    and ``"feb"`` does not.
    """

    for idx, abbreviation in enumerate(MONTH_ABBREVIATIONS, start=1):
        if abbreviation in token:
            return f"{idx:02d}"
    raise UnknownMonthError(f"unknown month abbreviation: {token!r}")


def convert_date(token: str) -> str:
    """Convert ``"DAY MON YEAR"`` into ``"DAY/MM/YEAR"``.

    Day and year are copied verbatim; only the month is rewritten.
    """

    parts = [p for p in _ASCII_WS_RE.split(token) if p]
    if len(parts) != 3:
        raise MalformedDateError(f"expected 'DAY MONTH YEAR', got {token!r}")
    day, month, year = parts
    return f"{day}/{convert_month(month)}/{year}"


# ---------------------------------------------------------------------------
# Row conversion
# ---------------------------------------------------------------------------


def convert_line(line: str) -> Transaction:
    """Run every stage on one data line and build a :class:`Transaction`."""

    try:
        date_raw, description, amount_raw, _balance = split_line(line)
        amount = parse_amount(amount_raw)
        payee = normalize_payee(description)
        date = convert_date(date_raw)
    except ConversionError as err:
        err.with_line(line)
        raise
    return Transaction(date=date, payee=payee, amount=amount)


def convert_lines(lines: Iterable[str], *, first_lineno: int = 1) -> Iterator[Transaction]:
    """Convert ``lines`` in order, stopping at the first failure.

    ``first_lineno`` is the file line number of the first item, used only in
    debug logging (pass ``2`` when the header has already been skipped).
    """

    for lineno, line in enumerate(lines, start=first_lineno):
        tx = convert_line(line)
        logger.debug("line %d: %s %r %s", lineno, tx.date, tx.payee, tx.amount)
        yield tx


__all__ = [
    "FIELD_COUNT",
    "PAYEE_KEYWORDS",
    "MONTH_ABBREVIATIONS",
    "split_line",
    "parse_amount",
    "normalize_payee",
    "convert_month",
    "convert_date",
    "convert_line",
    "convert_lines",
]
