"""Earnings statistics for shoots."""

import calendar
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from shoot_tracker.domain.shoots import EditedShoot, Shoot
from shoot_tracker.domain.stats import EarningsSummary, MonthlyStats
from shoot_tracker.services.shoots import ShootStore

_logger = logging.getLogger(__name__)


@dataclass
class StatsService:
    """Service for computing monthly earnings."""

    store: ShootStore

    def get_summary(self, include_edited: bool = False) -> EarningsSummary:
        """Return totals and the monthly breakdown.

        Only pending shoots are counted unless ``include_edited`` is set.
        """
        shoots: list[Shoot | EditedShoot] = list(self.store.list_pending())
        if include_edited:
            shoots.extend(self.store.list_edited())
        return summarize(shoots)


def summarize(shoots: Sequence[Shoot | EditedShoot]) -> EarningsSummary:
    """Aggregate shoots into an earnings summary.

    Shoots whose date cannot be parsed are left out of every figure, so the
    monthly rows always add up to the totals.
    """
    dated = _dated(shoots)
    total_earnings = sum(shoot.price for _, shoot in dated)
    total_shoots = len(dated)
    return EarningsSummary(
        total_shoots=total_shoots,
        total_earnings=total_earnings,
        average_per_shoot=total_earnings / total_shoots if total_shoots else 0.0,
        months=_group(dated),
    )


def monthly_stats(shoots: Sequence[Shoot | EditedShoot]) -> list[MonthlyStats]:
    """Group shoots by the calendar month of their date, newest month first."""
    return _group(_dated(shoots))


def _dated(
    shoots: Sequence[Shoot | EditedShoot],
) -> list[tuple[tuple[int, int], Shoot | EditedShoot]]:
    dated: list[tuple[tuple[int, int], Shoot | EditedShoot]] = []
    for shoot in shoots:
        key = _year_month(shoot.date)
        if key is None:
            _logger.warning("Skipping shoot with unparseable date: id=%s", shoot.id)
            continue
        dated.append((key, shoot))
    return dated


def _group(
    dated: list[tuple[tuple[int, int], Shoot | EditedShoot]],
) -> list[MonthlyStats]:
    counts: dict[tuple[int, int], int] = {}
    earnings: dict[tuple[int, int], float] = {}
    for key, shoot in dated:
        counts[key] = counts.get(key, 0) + 1
        earnings[key] = earnings.get(key, 0.0) + shoot.price

    return [
        MonthlyStats(
            month=calendar.month_name[month],
            year=year,
            month_number=month - 1,
            shoot_count=counts[(year, month)],
            total_earnings=earnings[(year, month)],
        )
        for year, month in sorted(counts, reverse=True)
    ]


def _year_month(raw: str) -> tuple[int, int] | None:
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError:
        return None
    return parsed.year, parsed.month
