"""Creation timestamps map onto a month label and a clamped week of month."""
from datetime import date, datetime, timezone

import pytest

from leadreport.core.models import CalendarCoordinate
from leadreport.processing.bucketing import bucket, normalize_timestamp, parse_created_time, week_of_month


@pytest.mark.parametrize(
    "days, week",
    [
        (range(1, 8), 1),
        (range(8, 15), 2),
        (range(15, 22), 3),
        (range(22, 32), 4),
    ],
)
def test_week_partition_covers_every_day(days, week):
    assert {week_of_month(day) for day in days} == {week}


def test_bucket_iso_timestamp_with_offset():
    coordinate = bucket({"Created_Time": "2025-03-22T23:30:00+05:30"}, 2025)

    assert coordinate == CalendarCoordinate(year=2025, month=3, week=4)
    assert coordinate.month_label == "Mar 2025"


def test_offset_is_discarded_not_converted():
    # 23:30 at +05:30 stays on the 7th instead of shifting to another day.
    coordinate = bucket({"Created_Time": "2025-01-07T23:30:00+05:30"}, 2025)

    assert coordinate.week == 1


def test_normalize_timestamp_cuts_at_zulu_marker():
    assert normalize_timestamp("2025-05-15T08:00:00.000Z") == "2025-05-15 08:00:00.000"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-03-04T10:15:00-05:00", "2025-03-04 10:15:00"),
        ("2025-03-04T10:15:00-0500", "2025-03-04 10:15:00"),
        ("2025-03-04T10:15:00.250-05:00", "2025-03-04 10:15:00.250"),
        ("2025-03-04T10:15-08:00", "2025-03-04 10:15"),
    ],
)
def test_normalize_timestamp_drops_negative_offset(raw, expected):
    assert normalize_timestamp(raw) == expected


def test_bucket_counts_lead_from_org_west_of_utc():
    # 22:30 at -05:00 stays on the 21st instead of shifting to the 22nd.
    coordinate = bucket({"Created_Time": "2025-03-21T22:30:00-05:00"}, 2025)

    assert coordinate == CalendarCoordinate(year=2025, month=3, week=3)


def test_normalize_timestamp_keeps_date_only_values():
    assert normalize_timestamp("2025-03-04") == "2025-03-04"


@pytest.mark.parametrize(
    "record",
    [
        {"created_time": "2025-06-09 12:00:00"},
        {"Created_Date": "2025-06-09"},
        {"created_date": "2025/06/09"},
    ],
)
def test_bucket_uses_timestamp_aliases(record):
    assert bucket(record, 2025) == CalendarCoordinate(year=2025, month=6, week=2)


def test_bucket_prefers_created_time_over_created_date():
    record = {"Created_Time": "2025-02-01T00:00:00Z", "Created_Date": "2025-09-30"}

    assert bucket(record, 2025).month == 2


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"Created_Time": ""},
        {"Created_Time": None},
        {"Created_Time": "not a date"},
        {"Created_Time": "2025-13-01T00:00:00Z"},
        {"Created_Time": "2024-12-31T23:59:59Z"},
        {"Created_Time": True},
        {"Created_Time": ["2025-01-01"]},
    ],
)
def test_bucket_rejects_unusable_or_other_year(record):
    assert bucket(record, 2025) is None


def test_parse_created_time_accepts_native_values():
    assert parse_created_time(datetime(2025, 4, 2, 9, 0, tzinfo=timezone.utc)) == datetime(2025, 4, 2, 9, 0)
    assert parse_created_time(date(2025, 4, 2)) == datetime(2025, 4, 2)


def test_parse_created_time_reads_epoch_milliseconds():
    millis = int(datetime(2025, 8, 16, tzinfo=timezone.utc).timestamp() * 1000)

    assert bucket({"Created_Time": millis}, 2025) == CalendarCoordinate(year=2025, month=8, week=3)
