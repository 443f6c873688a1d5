"""Domain models for earnings statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonthlyStats:
    """Earnings for a single calendar month."""

    month: str
    year: int
    # zero-based, January is 0
    month_number: int
    shoot_count: int
    total_earnings: float


@dataclass(frozen=True)
class EarningsSummary:
    """Overall earnings with a per-month breakdown."""

    total_shoots: int
    total_earnings: float
    average_per_shoot: float
    months: list[MonthlyStats]
