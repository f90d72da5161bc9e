from __future__ import annotations


class ConversionError(ValueError):
    """Base class for errors that abort a conversion run."""


class StructuralError(ConversionError):
    """An input line does not carry the expected number of attributes."""

    def __init__(self, line_no: int, expected: int, found: int) -> None:
        super().__init__(
            f"line {line_no}: wrong number of attributes, "
            f"expected {expected} but found {found}"
        )
        self.line_no = line_no
        self.expected = expected
        self.found = found


class UnknownTransactionError(ConversionError):
    """The transaction type is not part of the known DWS vocabulary."""

    def __init__(self, transaction_type: str, line_no: int | None = None) -> None:
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{where}unknown transaction: {transaction_type!r}")
        self.transaction_type = transaction_type
        self.line_no = line_no


class DateParseError(ConversionError):
    """A date string could not be parsed."""
