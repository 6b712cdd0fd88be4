from datetime import date

import pandas as pd

from habit_analytics.frames import records_from_entries, records_from_frame, streak_table
from habit_analytics.log_index import LogIndex

from factories import index_of, rec, run


def test_records_from_long_frame():
    df = pd.DataFrame(
        [
            {"subject_id": "wake", "date": date(2024, 1, 1), "succeeded": True, "actual_time": "06:05", "notes": None},
            {"subject_id": "wake", "date": pd.Timestamp("2024-01-02"), "succeeded": False, "actual_time": None, "notes": "sick"},
            {"subject_id": "wake", "date": "2024-01-03", "succeeded": None, "actual_time": None, "notes": None},
        ]
    )
    records = records_from_frame(df)
    assert [(item.date, item.succeeded) for item in records] == [("2024-01-01", True), ("2024-01-02", False)]
    assert records[0].actual_time == "06:05"
    assert records[1].notes == "sick"
    assert records[1].actual_time is None


def test_records_from_empty_frame():
    assert records_from_frame(pd.DataFrame()) == []
    assert records_from_entries(pd.DataFrame(), ["workout"]) == []


def test_records_from_wide_entries():
    df = pd.DataFrame(
        {
            "date": [date(2024, 1, 1), date(2024, 1, 2)],
            "workout": [1, 0],
            "shower": [None, 1],
            "sleep_hours": [7.5, 6.0],
        }
    )
    records = records_from_entries(df, ["workout", "shower", "bible_reading"])
    index = LogIndex.build(records)
    assert index.subjects() == ["shower", "workout"]
    assert index.get("workout", "2024-01-01").succeeded is True
    assert index.get("workout", "2024-01-02").succeeded is False
    assert index.get("shower", "2024-01-01") is None
    assert index.get("shower", "2024-01-02").succeeded is True


def test_streak_table_orders_by_current_streak():
    index = index_of(
        *run("read", "2024-01-01", 10),
        rec("read", "2024-01-11", False),
        *run("gym", "2024-01-08", 4),
        *run("walk", "2024-01-09", 3),
    )
    table = streak_table(index, date(2024, 1, 11))
    assert list(table["subject_id"]) == ["gym", "walk", "read"]
    assert list(table["current_streak"]) == [4, 3, 0]
    assert list(table["longest_streak"]) == [4, 3, 10]


def test_streak_table_empty():
    table = streak_table(index_of(), date(2024, 1, 1))
    assert table.empty
    assert list(table.columns) == ["subject_id", "current_streak", "longest_streak"]


def test_string_outcomes_are_not_truthy():
    df = pd.DataFrame(
        [
            {"subject_id": "gym", "date": "2024-01-01", "succeeded": "True"},
            {"subject_id": "gym", "date": "2024-01-02", "succeeded": "False"},
            {"subject_id": "gym", "date": "2024-01-03", "succeeded": "maybe"},
        ]
    )
    skipped = []
    records = records_from_frame(df, skipped)
    assert [(item.date, item.succeeded) for item in records] == [("2024-01-01", True), ("2024-01-02", False)]
    assert [(item.subject_id, item.date) for item in skipped] == [("gym", "2024-01-03")]
    assert "maybe" in skipped[0].reason


def test_wide_entries_with_unknown_values_are_skipped():
    df = pd.DataFrame({"date": [date(2024, 1, 1), date(2024, 1, 2)], "workout": [1, 2]})
    skipped = []
    records = records_from_entries(df, ["workout"], skipped)
    assert [(item.date, item.succeeded) for item in records] == [("2024-01-01", True)]
    assert [item.date for item in skipped] == ["2024-01-02"]
