"""Helpers for building DwsRecord objects without going through the parser."""

from __future__ import annotations

from dws2qif.model import DwsRecord


def dws_record(
    transaction_type: str = "Beitrag",
    amount: str = "55,00",
    *,
    price_date: str = "01.03.2020",
    fund_name: str = "Global Fund / A",
    share_count: str = "10,000",
    share_price: str = "5,50",
    currency: str = "EUR",
    line_no: int = 2,
) -> DwsRecord:
    return DwsRecord(
        price_date=price_date,
        transaction_type=transaction_type,
        fund_name=fund_name,
        investment_fund="X",
        additional_info="",
        share_count=share_count,
        share_price=share_price,
        amount=amount,
        currency=currency,
        line_no=line_no,
    )
