import datetime as dt
from decimal import Decimal

import pytest

from dws2qif.conversion.categories import FEE_CATEGORY, REALIZED_GAINS_CATEGORY
from dws2qif.conversion.date_filter import DateRange
from dws2qif.conversion.kinds import OutputKind
from dws2qif.conversion.record_builder import QifRecord, build_record, convert_records
from dws2qif.errors import DateParseError, UnknownTransactionError
from fixtures import dws_record


def test_build_record_contribution():
    rec = build_record(dws_record())

    assert rec.kind is OutputKind.BUY
    assert rec.date == dt.date(2020, 3, 1)
    assert rec.amount == Decimal("55.00")
    assert rec.fee_amount is None
    assert rec.security_class == "A"
    assert rec.category == "|[Global Fund]"

    assert list(rec.fields()) == [
        ("D", "03.01.2020"),
        ("V", "03.01.2020"),
        ("N", "Kauf"),
        ("U", "55.00"),
        ("F", "EUR"),
        ("I", "5.50"),
        ("Q", "10.00"),
        ("L", "|[Global Fund]"),
        ("Y", "A"),
    ]


def test_build_record_custody_fee_uses_split():
    rec = build_record(
        dws_record("Depotentgelt", "-12,34", share_count="-0,250", fund_name="Top Dividende")
    )
    fields = dict(rec.fields())

    assert rec.kind is OutputKind.SELL
    assert "U" not in fields
    assert fields["E"] == FEE_CATEGORY
    assert fields["O"].endswith("|12.34|0.00|0.00|0.00|0.00")
    assert fields["Q"] == "0.25"
    assert fields["L"] == REALIZED_GAINS_CATEGORY
    assert fields["Y"] == "Top Dividende"
    assert [tag for tag, _ in rec.fields()] == [
        "D", "V", "N", "E", "O", "F", "I", "Q", "L", "Y"
    ]


@pytest.mark.parametrize(
    "label, fee",
    [
        ("Depotentgelt", True),
        ("Verwaltungskosten d. Vertrages", True),
        ("Verkauf wegen Depotentgelt", True),
        ("Rueckforderung Zulage", False),
        ("Umschichtung", False),
        ("Wiederanlage der Ausschuettung", False),
    ],
)
def test_amount_and_fee_split_are_exclusive(label, fee):
    tags = [tag for tag, _ in build_record(dws_record(label, "-3,00")).fields()]
    assert ("U" in tags) is not fee
    assert ("E" in tags and "O" in tags) is fee


def test_reallocation_sign_is_read_before_normalization():
    out = build_record(dws_record("Umschichtung", "-20,00"))
    assert out.kind is OutputKind.SELL
    assert out.amount == Decimal("20.00")

    inc = build_record(dws_record("Umschichtung", "20,00"))
    assert inc.kind is OutputKind.BUY


def test_qif_record_requires_exactly_one_amount():
    with pytest.raises(ValueError):
        QifRecord(
            date=dt.date(2020, 1, 1),
            kind=OutputKind.BUY,
            currency="EUR",
            price=Decimal("1"),
            quantity=Decimal("1"),
            category="",
            security_class="A",
        )


def test_convert_records_filters_and_counts():
    records = [
        dws_record(price_date="31.12.2019"),
        dws_record(price_date="01.01.2020"),
        dws_record(price_date="31.12.2020"),
        dws_record(price_date="01.01.2021"),
    ]
    result = convert_records(
        records, DateRange(dt.date(2020, 1, 1), dt.date(2020, 12, 31))
    )

    assert result.read_count == 4
    assert result.skipped_count == 2
    assert result.converted_count == 2
    assert [r.date for r in result.records] == [
        dt.date(2020, 1, 1),
        dt.date(2020, 12, 31),
    ]


def test_convert_records_unknown_label_aborts():
    records = [dws_record(), dws_record("Foobar")]
    with pytest.raises(UnknownTransactionError):
        convert_records(records)


def test_convert_records_unknown_label_outside_range_is_dropped():
    records = [dws_record("Foobar", price_date="01.01.2010"), dws_record()]
    result = convert_records(records, DateRange(date_from=dt.date(2020, 1, 1)))
    assert result.converted_count == 1


def test_convert_records_bad_date_aborts():
    with pytest.raises(DateParseError):
        convert_records([dws_record(price_date="2020-03-01")])
