from __future__ import annotations

from datetime import date
from typing import Mapping, Protocol, Sequence


class ReportRepository(Protocol):
    def status_counts(self) -> Mapping[str, Mapping[str, int]]:
        """Row counts per status, keyed by record kind."""

        raise NotImplementedError

    def monthly_repair_outcomes(self, *, since: date) -> Sequence[dict]:
        """Rows of ``{month: 'YYYY-MM', total, fixed, unserviceable}`` for receive dates >= since."""

        raise NotImplementedError

    def top_offices(self, *, limit: int) -> Sequence[dict]:
        raise NotImplementedError
