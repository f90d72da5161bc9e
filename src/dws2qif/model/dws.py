from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from dws2qif.errors import StructuralError

IN_DELIMITER = ";"
IN_ENCODING = "iso-8859-1"
IN_FIELDS = (
    "price_date",
    "transaction_type",
    "fund_name",
    "investment_fund",
    "additional_info",
    "share_count",
    "share_price",
    "amount",
    "currency",
)
IN_NO_OF_ATTRIBUTES = len(IN_FIELDS)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DwsRecord:
    """One transaction line of a DWS export, values kept as raw strings."""

    price_date: str
    transaction_type: str
    fund_name: str
    investment_fund: str
    additional_info: str
    share_count: str
    share_price: str
    amount: str
    currency: str
    line_no: int = 0


@dataclass
class DwsStatement:
    """Parsed export: the discarded header line plus the data records."""

    header: DwsRecord | None = None
    records: list[DwsRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


class DwsStatementParser:
    """
    Maps raw export lines -> DwsStatement.

    Line shape:
        priceDate;transactionType;fundName;investmentFund;additionalInfo;
        shareCount;sharePrice;amount;currency

    Blank lines are skipped. The first non-blank line is the header and is
    discarded regardless of its content, but it still has to carry nine
    attributes. Any line with a different attribute count aborts parsing.
    """

    def parse_file(
        self, path: str | Path, *, encoding: str = IN_ENCODING
    ) -> DwsStatement:
        with open(path, "r", encoding=encoding) as fp:
            lines = fp.readlines()
        logger.debug("Read %d line(s) from %s", len(lines), path)
        return self.parse_lines(lines)

    def parse_lines(self, lines: Iterable[str]) -> DwsStatement:
        statement = DwsStatement()
        line_no = 0

        for line in lines:
            line_no += 1
            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            values = split_line(line)
            if len(values) != IN_NO_OF_ATTRIBUTES:
                logger.debug("Offending line %d: %r", line_no, values)
                raise StructuralError(line_no, IN_NO_OF_ATTRIBUTES, len(values))

            record = DwsRecord(*values, line_no=line_no)
            if statement.header is None:
                statement.header = record
                continue
            statement.records.append(record)

        logger.debug("Parsed %d data record(s)", len(statement.records))
        return statement


def split_line(line: str) -> list[str]:
    """Split on ';' and drop trailing empty attributes."""
    values = line.split(IN_DELIMITER)
    while values and values[-1] == "":
        values.pop()
    return values
