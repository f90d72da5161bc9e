from .dws import (
    DwsRecord,
    DwsStatement,
    DwsStatementParser,
    IN_FIELDS,
)

__all__ = [
    "DwsRecord",
    "DwsStatement",
    "DwsStatementParser",
    "IN_FIELDS",
]
