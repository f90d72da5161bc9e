from .categories import (
    FEE_CATEGORY,
    OTHER_INCOME_CATEGORY,
    REALIZED_GAINS_CATEGORY,
    Categorization,
    categorize,
    fee_split,
    split_fund_name,
)
from .date_filter import DateRange
from .kinds import OutputKind, classify, is_fee
from .money import format_money, normalize
from .qif_sink import (
    ExcelAuditSink,
    QifFileSink,
    RecordSink,
    default_output_path,
    render_qif,
)
from .record_builder import (
    ConversionResult,
    QifRecord,
    build_record,
    convert_records,
    convert_statement,
)

__all__ = [
    "FEE_CATEGORY",
    "OTHER_INCOME_CATEGORY",
    "REALIZED_GAINS_CATEGORY",
    "Categorization",
    "categorize",
    "fee_split",
    "split_fund_name",
    "DateRange",
    "OutputKind",
    "classify",
    "is_fee",
    "format_money",
    "normalize",
    "ExcelAuditSink",
    "QifFileSink",
    "RecordSink",
    "default_output_path",
    "render_qif",
    "ConversionResult",
    "QifRecord",
    "build_record",
    "convert_records",
    "convert_statement",
]
