from __future__ import annotations

import datetime as dt
import logging
import re
from decimal import Decimal

from dws2qif.errors import DateParseError

# Leading numeric prefix after the decimal comma has become a dot.
NUM_PREFIX_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

DWS_DATE_FORMAT = "%d.%m.%Y"
QIF_DATE_FORMAT = "%m.%d.%Y"
CLI_DATE_FORMATS = (DWS_DATE_FORMAT, "%Y-%m-%d")

logger = logging.getLogger(__name__)


def parse_locale_number(s: str | Decimal | None) -> Decimal:
    """Read a DWS decimal string (comma as fractional separator) as Decimal.

    Only the comma is replaced; dots are never treated as thousands
    separators. The longest leading numeric prefix is used, so empty or
    non-numeric text reads as zero and "1.234,56" reads as 1.234.

    >>> parse_locale_number("-12,34")
    Decimal('-12.34')
    """
    if s is None:
        return Decimal("0")
    if isinstance(s, Decimal):
        return s

    text = s.replace(",", ".").strip()
    m = NUM_PREFIX_RE.match(text)
    if m is None:
        if text:
            logger.warning("Non-numeric value %r; treating as 0.", s)
        return Decimal("0")

    if m.end() != len(text):
        # e.g. thousands separators: "1.234.56" -> 1.234
        logger.warning(
            "Ignoring trailing text %r in numeric value %r; read as %s.",
            text[m.end():],
            s,
            m.group(0),
        )
    return Decimal(m.group(0))


def parse_dws_date(d: str) -> dt.date:
    """Parse a 'dd.mm.yyyy' price date."""
    try:
        return dt.datetime.strptime(d.strip(), DWS_DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(f"Invalid date {d!r}, expected dd.mm.yyyy") from e


def parse_cli_date(d: str) -> dt.date:
    """Parse a command line date bound; accepts 'dd.mm.yyyy' or 'yyyy-mm-dd'."""
    for fmt in CLI_DATE_FORMATS:
        try:
            return dt.datetime.strptime(d.strip(), fmt).date()
        except ValueError:
            continue
    raise DateParseError(f"Invalid date {d!r}, expected dd.mm.yyyy or yyyy-mm-dd")


def format_qif_date(d: dt.date) -> str:
    """QIF wants month.day.year."""
    return d.strftime(QIF_DATE_FORMAT)
