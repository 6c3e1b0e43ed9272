"""Transaction record produced by the row converter.

Field order (exact):
    - date: string (``DAY/MM/YYYY``; month zero-padded, day as exported)
    - payee: string (directional prefix stripped)
    - amount: ``Decimal`` (signed; negative is an outflow)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single converted bank row, ready for the output formatter.

    Instances are built in one step by :func:`eq_ynab.converter.convert_line`
    once every stage has succeeded, so a ``Transaction`` is never partially
    populated.
    """

    date: str
    payee: str
    amount: Decimal

    @property
    def is_outflow(self) -> bool:
        return self.amount < 0


__all__ = ["Transaction"]
