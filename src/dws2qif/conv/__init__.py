from .conv import (
    DateParseError,
    format_qif_date,
    parse_cli_date,
    parse_dws_date,
    parse_locale_number,
)

__all__ = [
    "DateParseError",
    "format_qif_date",
    "parse_cli_date",
    "parse_dws_date",
    "parse_locale_number",
]
