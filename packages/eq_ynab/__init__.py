"""Public interface for the ``eq_ynab`` package.

Converts EQ Bank CSV exports into CSV files the YNAB importer accepts. This
module only re-exports the stable import surface; there is no runtime logic
here.
"""

__version__ = "0.1.0"

from .api import convert_csv_text  # noqa: E402
from .converter import (  # noqa: E402
    convert_date,
    convert_line,
    convert_lines,
    convert_month,
    normalize_payee,
    parse_amount,
    split_line,
)
from .errors import (  # noqa: E402
    AmountParseError,
    ConversionError,
    EmptyAmountError,
    EqYnabError,
    InputReadError,
    InvalidFieldCountError,
    MalformedDateError,
    OutputWriteError,
    PayeeExtractionError,
    UnknownMonthError,
)
from .formatter import HEADER, format_transactions  # noqa: E402
from .models import Transaction  # noqa: E402

__all__ = [
    "__version__",
    # API
    "convert_csv_text",
    # Pipeline stages
    "split_line",
    "parse_amount",
    "normalize_payee",
    "convert_month",
    "convert_date",
    "convert_line",
    "convert_lines",
    "format_transactions",
    "HEADER",
    # Models
    "Transaction",
    # Errors
    "EqYnabError",
    "ConversionError",
    "InvalidFieldCountError",
    "EmptyAmountError",
    "AmountParseError",
    "PayeeExtractionError",
    "MalformedDateError",
    "UnknownMonthError",
    "InputReadError",
    "OutputWriteError",
]
