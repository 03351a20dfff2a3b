from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import TOP_OFFICES_LIMIT, TREND_MONTHS
from ..core.enums import BorrowStatus, RepairStatus, ReservationStatus, SessionStatus
from .repository import ReportRepository


@dataclass(frozen=True)
class KindBuckets:
    pending: tuple[str, ...]
    completed: tuple[str, ...]


BUCKETS = {
    "repair": KindBuckets(
        pending=(RepairStatus.RECEIVED.value, RepairStatus.REPAIRED.value),
        completed=(RepairStatus.RELEASED.value,),
    ),
    "borrow": KindBuckets(pending=(BorrowStatus.BORROWED.value,), completed=(BorrowStatus.RETURNED.value,)),
    "reservation": KindBuckets(
        pending=(ReservationStatus.RESERVED.value, ReservationStatus.PICKED.value),
        completed=(ReservationStatus.RETURNED.value,),
    ),
    "session": KindBuckets(pending=(SessionStatus.ACTIVE.value,), completed=(SessionStatus.ENDED.value,)),
}


def month_starts(today: date, count: int) -> list[date]:
    """First day of the ``count`` months ending with today's month, oldest first."""
    year, month = today.year, today.month
    out: list[date] = []
    for _ in range(count):
        out.append(date(year, month, 1))
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    out.reverse()
    return out


class ReportService:
    """Read-only dashboard rollups, recomputed on every call."""

    def __init__(self, reports: ReportRepository):
        self._reports = reports

    def dashboard_summary(self) -> dict:
        counts = self._reports.status_counts()
        summary: dict[str, dict] = {}
        for kind, buckets in BUCKETS.items():
            by_status = dict(counts.get(kind, {}))
            summary[kind] = {
                "total": sum(by_status.values()),
                "pending": sum(by_status.get(s, 0) for s in buckets.pending),
                "completed": sum(by_status.get(s, 0) for s in buckets.completed),
                "by_status": by_status,
            }
        return summary

    def monthly_repair_trend(self, *, now: Optional[datetime] = None) -> list[dict]:
        months = month_starts((now or now_local()).date(), TREND_MONTHS)
        found = {r["month"]: r for r in self._reports.monthly_repair_outcomes(since=months[0])}

        trend = []
        for start in months:
            key = start.strftime("%Y-%m")
            r = found.get(key, {})
            trend.append(
                {
                    "month": key,
                    "total": int(r.get("total") or 0),
                    "fixed": int(r.get("fixed") or 0),
                    "unserviceable": int(r.get("unserviceable") or 0),
                }
            )
        return trend

    def top_offices(self, *, limit: int = TOP_OFFICES_LIMIT) -> list[dict]:
        return list(self._reports.top_offices(limit=int(limit)))
