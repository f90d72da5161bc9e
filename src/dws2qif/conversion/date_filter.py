from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True)
class DateRange:
    """Inclusive date bounds; an unset bound does not restrict."""

    date_from: dt.date | None = None
    date_to: dt.date | None = None

    def contains(self, d: dt.date) -> bool:
        return (self.date_from is None or d >= self.date_from) and (
            self.date_to is None or d <= self.date_to
        )

    @property
    def is_open(self) -> bool:
        return self.date_from is None and self.date_to is None

    def __str__(self) -> str:
        lo = self.date_from.isoformat() if self.date_from else "*"
        hi = self.date_to.isoformat() if self.date_to else "*"
        return f"[{lo} .. {hi}]"
