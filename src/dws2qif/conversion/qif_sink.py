from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .record_builder import ConversionResult, QifRecord

QIF_HEADER = "!Type:Invst"
QIF_END_OF_RECORD = "^"
OUT_SUFFIX = ".qif"
OUT_ENCODING = "utf-8"


class RecordSink(Protocol):
    def write(self, result: ConversionResult) -> Path:  # returns written file path
        ...


def qif_lines(records: Iterable[QifRecord]) -> Iterable[str]:
    yield QIF_HEADER
    for rec in records:
        for tag, value in rec.fields():
            yield f"{tag}{value}"
        yield QIF_END_OF_RECORD


def render_qif(records: Iterable[QifRecord]) -> str:
    return "".join(line + "\n" for line in qif_lines(records))


def default_output_path(input_path: str | Path) -> Path:
    """Output goes next to the input: '<input>.qif'."""
    return Path(f"{input_path}{OUT_SUFFIX}")


@dataclass
class QifFileSink:
    out_path: Path

    def write(self, result: ConversionResult) -> Path:
        out_path = Path(self.out_path)
        with open(out_path, "w", encoding=OUT_ENCODING, newline="\n") as fp:
            for line in qif_lines(result.records):
                fp.write(line + "\n")
        return out_path


@dataclass
class ExcelAuditSink:
    """Spreadsheet view of a conversion run, for checking before import."""

    out_path: Path

    HEADERS = (
        "Date",
        "Action",
        "Amount",
        "Fee",
        "Currency",
        "Price",
        "Quantity",
        "Category",
        "Class",
    )

    def write(self, result: ConversionResult) -> Path:
        out_path = Path(self.out_path)
        wb = Workbook()

        # Remove the default sheet
        wb.remove(wb.active)

        date_fmt = "DD.MM.YYYY"
        money_fmt = "#,##0.00"

        ws = wb.create_sheet(title="QIF Records")
        ws.append(list(self.HEADERS))
        for cell in ws[1]:
            cell.font = Font(bold=True)
        for rec in result.records:
            ws.append(
                [
                    rec.date,
                    rec.kind.label,
                    None if rec.amount is None else float(rec.amount),
                    None if rec.fee_amount is None else float(rec.fee_amount),
                    rec.currency,
                    float(rec.price),
                    float(rec.quantity),
                    rec.category,
                    rec.security_class,
                ]
            )
            r = ws.max_row
            ws.cell(row=r, column=1).number_format = date_fmt
            for c in (3, 4, 6, 7):
                ws.cell(row=r, column=c).number_format = money_fmt
        ws.freeze_panes = "A2"

        ws = wb.create_sheet(title="Summary")
        ws.append(["Metric", "Count"])
        for cell in ws[1]:
            cell.font = Font(bold=True)
        ws.append(["Records read", result.read_count])
        ws.append(["Outside date range", result.skipped_count])
        ws.append(["Records converted", result.converted_count])

        for sheet in wb.worksheets:
            _autosize(sheet)

        out_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(out_path)
        return out_path


def _autosize(sheet, max_width: int = 60, min_width: int = 10) -> None:
    for col in range(1, sheet.max_column + 1):
        max_len = 0
        for row in range(1, sheet.max_row + 1):
            v = sheet.cell(row=row, column=col).value
            if v is None:
                continue
            s = v.strftime("%d.%m.%Y") if hasattr(v, "strftime") else str(v)
            max_len = max(max_len, len(s))
        width = min(max_width, max(min_width, max_len + 2))
        sheet.column_dimensions[get_column_letter(col)].width = width
