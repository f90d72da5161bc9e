from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator

from dws2qif.conv import format_qif_date, parse_dws_date
from dws2qif.model import DwsRecord, DwsStatement

from .categories import FEE_CATEGORY, categorize, fee_split
from .date_filter import DateRange
from .kinds import OutputKind, classify, is_fee
from .money import format_money, normalize

logger = logging.getLogger(__name__)


@dataclass
class QifRecord:
    """One `!Type:Invst` transaction; `amount` and `fee_amount` are exclusive."""

    date: dt.date
    kind: OutputKind
    currency: str
    price: Decimal
    quantity: Decimal
    category: str
    security_class: str
    amount: Decimal | None = None
    fee_amount: Decimal | None = None

    def __post_init__(self) -> None:
        if (self.amount is None) == (self.fee_amount is None):
            raise ValueError("QifRecord needs exactly one of amount or fee_amount")

    @property
    def is_fee(self) -> bool:
        return self.fee_amount is not None

    def fields(self) -> Iterator[tuple[str, str]]:
        """Yield (tag, value) pairs in QIF emission order."""
        date = format_qif_date(self.date)
        yield "D", date
        yield "V", date
        yield "N", self.kind.label
        if self.fee_amount is not None:
            yield "E", FEE_CATEGORY
            yield "O", fee_split(self.fee_amount)
        else:
            yield "U", format_money(self.amount)
        yield "F", self.currency
        yield "I", format_money(self.price)
        yield "Q", format_money(self.quantity)
        yield "L", self.category
        yield "Y", self.security_class


@dataclass
class ConversionResult:
    records: list[QifRecord] = field(default_factory=list)
    read_count: int = 0
    skipped_count: int = 0

    @property
    def converted_count(self) -> int:
        return len(self.records)


def build_record(record: DwsRecord, date: dt.date | None = None) -> QifRecord:
    """Map one DWS record to its QIF counterpart."""
    if date is None:
        date = parse_dws_date(record.price_date)

    # Classification reads the signed amount; normalization drops the sign.
    kind = classify(record.transaction_type, record.amount, line_no=record.line_no)
    amount = normalize(record.amount)

    cat = categorize(kind, record.fund_name)
    fee = is_fee(record.transaction_type)
    return QifRecord(
        date=date,
        kind=kind,
        currency=record.currency,
        price=normalize(record.share_price),
        quantity=normalize(record.share_count),
        category=cat.category,
        security_class=cat.security_class,
        amount=None if fee else amount,
        fee_amount=amount if fee else None,
    )


def convert_records(
    records: Iterable[DwsRecord], date_range: DateRange | None = None
) -> ConversionResult:
    """Filter and map data records; any failure aborts the whole batch."""
    date_range = date_range or DateRange()
    result = ConversionResult()

    for rec in records:
        result.read_count += 1
        date = parse_dws_date(rec.price_date)
        if not date_range.contains(date):
            result.skipped_count += 1
            logger.debug(
                "line %d: %s outside %s; skipped", rec.line_no, date, date_range
            )
            continue
        result.records.append(build_record(rec, date))

    logger.info(
        "Converted %d of %d record(s), %d outside date range",
        result.converted_count,
        result.read_count,
        result.skipped_count,
    )
    return result


def convert_statement(
    statement: DwsStatement, date_range: DateRange | None = None
) -> ConversionResult:
    return convert_records(statement.records, date_range)
