from __future__ import annotations

from decimal import Decimal
from enum import Enum

from dws2qif.conv import parse_locale_number
from dws2qif.errors import UnknownTransactionError


class OutputKind(Enum):
    """QIF investment actions produced by the converter."""

    BUY = "Kauf"
    SELL = "Verkauf"
    REINVEST_SHARES = "Retshrs"

    @property
    def label(self) -> str:
        return self.value


# Resolved from the sign of the amount, see classify().
REALLOCATION = "Umschichtung"

TRANSACTION_KINDS: dict[str, OutputKind] = {
    "Beitrag": OutputKind.BUY,
    "Depotentgelt": OutputKind.SELL,
    "Verwaltungskosten d. Vertrages": OutputKind.SELL,
    "Verkauf wegen Depotentgelt": OutputKind.SELL,
    "Rueckforderung Zulage": OutputKind.SELL,
    "Gutschrift Zulage": OutputKind.BUY,
    "Gutschrift Kinderzulage": OutputKind.BUY,
    "Kauf VL zum Ausgabepreis": OutputKind.BUY,
    "Wiederanlage der Ausschuettung": OutputKind.REINVEST_SHARES,
    "Wiederanlage von Ertragsteuer": OutputKind.REINVEST_SHARES,
}

FEE_TRANSACTION_TYPES = frozenset(
    {
        "Depotentgelt",
        "Verwaltungskosten d. Vertrages",
        "Verkauf wegen Depotentgelt",
    }
)

KNOWN_TRANSACTION_TYPES = frozenset(TRANSACTION_KINDS) | {REALLOCATION}


def classify(
    transaction_type: str, amount: str | Decimal, *, line_no: int | None = None
) -> OutputKind:
    """Map a DWS transaction label to a QIF action.

    `amount` must be the signed value as found in the export: a reallocation
    with a positive amount is a buy, anything else (zero included) a sell.
    """
    if transaction_type == REALLOCATION:
        return OutputKind.BUY if parse_locale_number(amount) > 0 else OutputKind.SELL

    kind = TRANSACTION_KINDS.get(transaction_type)
    if kind is None:
        raise UnknownTransactionError(transaction_type, line_no)
    return kind


def is_fee(transaction_type: str) -> bool:
    return transaction_type in FEE_TRANSACTION_TYPES
