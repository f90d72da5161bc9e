from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .kinds import OutputKind
from .money import format_money

REALIZED_GAINS_CATEGORY = "Kursgewinne:Realisierte Gewinne"
OTHER_INCOME_CATEGORY = "Kapitalerträge:sonstige Einnahme"
FEE_CATEGORY = "Depotkosten:Depotgebühren"

FEE_SPLIT_FIELDS = 12
FEE_SPLIT_POSITION = 7  # zero-based; the 8th field carries the fee
FUND_NAME_SEPARATOR = "/"

BASE_CATEGORIES: dict[OutputKind, str] = {
    OutputKind.BUY: "",
    OutputKind.SELL: REALIZED_GAINS_CATEGORY,
    OutputKind.REINVEST_SHARES: OTHER_INCOME_CATEGORY,
}


@dataclass(frozen=True)
class Categorization:
    category: str  # QIF 'L': category or transfer, optionally "|[<class>]"
    security_class: str  # QIF 'Y'


def split_fund_name(fund_name: str) -> tuple[str, str | None]:
    """Split "<category> / <subname>" into its trimmed parts.

    Trailing empty pieces are ignored, so "Fund /" has no subname.
    """
    parts = fund_name.split(FUND_NAME_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()
    if not parts:
        return "", None
    if len(parts) == 1:
        return parts[0].strip(), None
    return parts[0].strip(), parts[1].strip()


def categorize(kind: OutputKind, fund_name: str) -> Categorization:
    category = BASE_CATEGORIES[kind]
    head, sub = split_fund_name(fund_name)
    if sub is None:
        return Categorization(category=category, security_class=head)
    return Categorization(category=f"{category}|[{head}]", security_class=sub)


def fee_split(amount: Decimal) -> str:
    """Twelve pipe-delimited fields, all zero except the fee in the 8th."""
    fields = ["0.00"] * FEE_SPLIT_FIELDS
    fields[FEE_SPLIT_POSITION] = format_money(amount)
    return "|".join(fields)
