"""Tests for stats service."""

from shoot_tracker.services.shoots import DocumentShootStore
from shoot_tracker.services.stats import StatsService, monthly_stats
from tests.conftest import make_details


def test_groups_same_month_into_one_bucket(shoot_store: DocumentShootStore) -> None:
    shoot_store.create_pending(make_details(date="2024-01-10", price=100))
    shoot_store.create_pending(make_details(date="2024-01-20", price=50))

    summary = StatsService(shoot_store).get_summary()

    assert len(summary.months) == 1
    january = summary.months[0]
    assert (january.month, january.year, january.month_number) == ("January", 2024, 0)
    assert january.shoot_count == 2
    assert january.total_earnings == 150
    assert summary.total_shoots == 2
    assert summary.total_earnings == 150
    assert summary.average_per_shoot == 75


def test_months_sorted_newest_first(shoot_store: DocumentShootStore) -> None:
    shoot_store.create_pending(make_details(date="2023-12-31", price=10))
    shoot_store.create_pending(make_details(date="2024-02-01T18:00:00.000Z", price=20))
    shoot_store.create_pending(make_details(date="2024-01-15", price=30))

    months = StatsService(shoot_store).get_summary().months

    assert [(item.year, item.month_number) for item in months] == [
        (2024, 1),
        (2024, 0),
        (2023, 11),
    ]


def test_empty_store_has_zero_average(shoot_store: DocumentShootStore) -> None:
    summary = StatsService(shoot_store).get_summary()

    assert summary.total_shoots == 0
    assert summary.total_earnings == 0
    assert summary.average_per_shoot == 0
    assert summary.months == []


def test_edited_shoots_only_counted_on_request(
    shoot_store: DocumentShootStore,
) -> None:
    shoot_store.create_pending(make_details(date="2024-01-10", price=100))
    moved = shoot_store.create_pending(make_details(date="2024-01-12", price=40))
    shoot_store.move_to_edited(moved.id)
    service = StatsService(shoot_store)

    assert service.get_summary().total_earnings == 100
    assert service.get_summary(include_edited=True).total_earnings == 140
    assert service.get_summary(include_edited=True).months[0].shoot_count == 2


def test_unparseable_dates_are_skipped(shoot_store: DocumentShootStore) -> None:
    shoot_store.create_pending(make_details(date="next tuesday", price=70))
    valid = shoot_store.create_pending(make_details(date="2024-05-05", price=30))

    months = monthly_stats(shoot_store.list_pending())

    assert len(months) == 1
    assert months[0].total_earnings == valid.price


def test_totals_match_monthly_rows_when_dates_are_bad(
    shoot_store: DocumentShootStore,
) -> None:
    shoot_store.create_pending(make_details(date="next tuesday", price=70))
    shoot_store.create_pending(make_details(date="2024-05-05", price=30))
    shoot_store.create_pending(make_details(date="2024-04-01", price=20))

    summary = StatsService(shoot_store).get_summary()

    assert summary.total_shoots == 2
    assert summary.total_earnings == 50
    assert summary.average_per_shoot == 25
    assert summary.total_shoots == sum(item.shoot_count for item in summary.months)
    assert summary.total_earnings == sum(
        item.total_earnings for item in summary.months
    )
