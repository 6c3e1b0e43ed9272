"""Exception taxonomy for the ``eq_ynab`` conversion pipeline.

Every pipeline stage raises its own subclass of :class:`ConversionError` so
callers can tell which stage failed. All of them are fatal: the converter
never retries or skips a line.

``str(err)`` always names the failing stage and, once the row converter has
annotated the error, the offending raw line.
"""

from __future__ import annotations


class EqYnabError(Exception):
    """Base class for every error raised by ``eq_ynab``."""


class ConversionError(EqYnabError, ValueError):
    """A data line could not be converted.

    ``stage`` is a short human-readable label for the pipeline step that
    failed. ``line`` is the raw input line when known; stages that only see a
    single field leave it ``None`` and :func:`eq_ynab.converter.convert_line`
    fills it in.
    """

    stage = "converting line"

    def __init__(self, detail: str | None = None, *, line: str | None = None) -> None:
        self.detail = detail
        self.line = line
        super().__init__(self._render())

    def _render(self) -> str:
        msg = self.stage
        if self.detail:
            msg = f"{msg}: {self.detail}"
        if self.line is not None:
            msg = f"{msg} (line: {self.line!r})"
        return msg

    def with_line(self, line: str) -> ConversionError:
        """Attach ``line`` when not already set and return ``self``."""

        if self.line is None:
            self.line = line
            self.args = (self._render(),)
        return self

    def __str__(self) -> str:
        return self._render()


class InvalidFieldCountError(ConversionError):
    stage = "invalid number of elements"

    def __init__(self, line: str, count: int) -> None:
        self.count = count
        super().__init__(f"expected 4 comma-separated fields, got {count}", line=line)


class EmptyAmountError(ConversionError):
    stage = "parsing prefix amount"


class AmountParseError(ConversionError):
    stage = "parsing amount"


class PayeeExtractionError(ConversionError):
    stage = "removing prefix payee"


class MalformedDateError(ConversionError):
    stage = "converting date"


class UnknownMonthError(ConversionError):
    stage = "converting date"


class InputReadError(EqYnabError):
    """The input file could not be read. The ``OSError`` is chained."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"reading {path}: {reason}")


class OutputWriteError(EqYnabError):
    """The output file could not be written. The ``OSError`` is chained."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"writing {path}: {reason}")


__all__ = [
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
