"""
Convert a DWS fund transaction export (semicolon separated, Latin-1) into a
QIF investment ledger that Finanzmanager/Quicken can import.

Pipeline, one module per step:
- Parsing/Model: dws2qif.model
- Date filter: dws2qif.conversion.date_filter
- Classification: dws2qif.conversion.kinds
- Categories and fee splits: dws2qif.conversion.categories
- Record building: dws2qif.conversion.record_builder
- Output writing: dws2qif.conversion.qif_sink

Usage
-----
    dws2qif -f /path/to/Umsaetze.csv
    dws2qif -f /path/to/Umsaetze.csv -df 01.01.2019 -dt 31.12.2019
    dws2qif -f /path/to/Umsaetze.csv -i --audit ./audit.xlsx

The ledger is written to '<input>.qif'.

Mapping of DWS transaction types to QIF actions:
    Beitrag, Gutschrift Zulage, Gutschrift Kinderzulage,
    Kauf VL zum Ausgabepreis                             -> Kauf
    Depotentgelt, Verwaltungskosten d. Vertrages,
    Verkauf wegen Depotentgelt, Rueckforderung Zulage    -> Verkauf
    Umschichtung                                         -> Kauf if amount > 0, else Verkauf
    Wiederanlage der Ausschuettung,
    Wiederanlage von Ertragsteuer                        -> Retshrs
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
from dataclasses import dataclass
from pathlib import Path

from dws2qif import __version__
from dws2qif.conv import parse_cli_date
from dws2qif.conversion import (
    DateRange,
    ExcelAuditSink,
    QifFileSink,
    convert_statement,
    default_output_path,
    render_qif,
)
from dws2qif.errors import ConversionError
from dws2qif.logging import configure_logging
from dws2qif.model import DwsStatementParser


@dataclass
class ConversionOptions:
    input_path: Path
    date_range: DateRange
    inspect: bool = False
    audit_path: Path | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ConversionOptions:
        return cls(
            input_path=Path(args.file),
            date_range=DateRange(args.datefrom, args.dateto),
            inspect=args.inspect,
            audit_path=Path(args.audit) if args.audit else None,
        )


def process_file(opts: ConversionOptions) -> tuple[int, int]:
    """Run one conversion; returns (records read, records written)."""
    logger = logging.getLogger(__name__)

    logger.info("Reading %s", opts.input_path)
    statement = DwsStatementParser().parse_file(opts.input_path)
    if opts.inspect:
        print(f"Header: {statement.header}")
        for rec in statement.records:
            print(rec)
        print(f"\n{len(statement)} record(s) read")

    if not opts.date_range.is_open:
        logger.info("Restricting to %s", opts.date_range)
    result = convert_statement(statement, opts.date_range)

    if opts.inspect:
        print("\nOutput records:")
        print(render_qif(result.records), end="")

    out_path = QifFileSink(default_output_path(opts.input_path)).write(result)
    logger.info("Wrote %d record(s) to %s", result.converted_count, out_path)

    if opts.audit_path is not None:
        audit_path = ExcelAuditSink(opts.audit_path).write(result)
        logger.info("Wrote audit workbook to %s", audit_path)

    return result.read_count, result.converted_count


def _cli_date(value: str) -> dt.date:
    try:
        return parse_cli_date(value)
    except ConversionError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dws2qif",
        description="Convert a DWS transaction export into a QIF investment ledger",
    )
    p.add_argument("-f", "--file", type=str, default=None, help="Input file name")
    p.add_argument(
        "-df",
        "--datefrom",
        type=_cli_date,
        default=None,
        help="Convert transactions on or after this date (dd.mm.yyyy)",
    )
    p.add_argument(
        "-dt",
        "--dateto",
        type=_cli_date,
        default=None,
        help="Convert transactions on or before this date (dd.mm.yyyy)",
    )
    p.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
    )
    p.add_argument(
        "-i",
        "--inspect",
        action="store_true",
        help="Print parsed and generated records while processing",
    )
    p.add_argument(
        "--audit",
        type=str,
        default=None,
        help="Also write an XLSX audit workbook of the converted records",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_argparser()
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.inspect else logging.WARNING)

    if args.file is None:
        parser.print_usage()
        return

    try:
        read, written = process_file(ConversionOptions.from_args(args))
    except ConversionError as e:
        logging.getLogger(__name__).error("Conversion aborted: %s", e)
        raise SystemExit(1) from e

    print("\nDONE")
    print(f"Read {read} records")
    print(f"Wrote {written} records")


if __name__ == "__main__":
    main()
