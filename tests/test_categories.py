from decimal import Decimal

from dws2qif.conversion.categories import (
    FEE_CATEGORY,
    OTHER_INCOME_CATEGORY,
    REALIZED_GAINS_CATEGORY,
    categorize,
    fee_split,
    split_fund_name,
)
from dws2qif.conversion.kinds import OutputKind


def test_split_fund_name():
    assert split_fund_name("Cat / Sub") == ("Cat", "Sub")
    assert split_fund_name("  NoSlash ") == ("NoSlash", None)
    assert split_fund_name("A / B / C") == ("A", "B")
    # trailing empty pieces do not count as a subname
    assert split_fund_name("Cat /") == ("Cat", None)
    assert split_fund_name("") == ("", None)


def test_categorize_with_slash_adds_bracket_class():
    cat = categorize(OutputKind.BUY, "Global Fund / A")
    assert cat.security_class == "A"
    assert cat.category == "|[Global Fund]"

    cat = categorize(OutputKind.SELL, "Cat / Sub")
    assert cat.security_class == "Sub"
    assert cat.category == REALIZED_GAINS_CATEGORY + "|[Cat]"


def test_categorize_without_slash_uses_base_category():
    assert categorize(OutputKind.BUY, "NoSlash").category == ""
    assert categorize(OutputKind.SELL, "NoSlash").category == REALIZED_GAINS_CATEGORY
    cat = categorize(OutputKind.REINVEST_SHARES, " NoSlash ")
    assert cat.category == OTHER_INCOME_CATEGORY
    assert cat.security_class == "NoSlash"
    assert "[" not in cat.category


def test_category_labels():
    assert REALIZED_GAINS_CATEGORY == "Kursgewinne:Realisierte Gewinne"
    assert OTHER_INCOME_CATEGORY == "Kapitalerträge:sonstige Einnahme"
    assert FEE_CATEGORY == "Depotkosten:Depotgebühren"


def test_fee_split_puts_amount_in_eighth_field():
    fields = fee_split(Decimal("12.34")).split("|")
    assert len(fields) == 12
    assert fields[7] == "12.34"
    assert all(f == "0.00" for i, f in enumerate(fields) if i != 7)
    assert fee_split(Decimal("12.34")).endswith("|12.34|0.00|0.00|0.00|0.00")
