from datetime import date

from habit_analytics.punctuality import (
    PunctualitySummary,
    WakeTrend,
    daily_wake_series,
    punctuality_summary,
    wake_diffs,
    wake_trend,
    weekday_wake_stats,
)

from factories import days_from, index_of, rec


def wake(day, actual=None, target=None, succeeded=True):
    return rec("wake", day, succeeded, actual_time=actual, target_time=target)


def test_diffs_use_record_target_or_default():
    index = index_of(
        wake("2024-01-01", "06:10"),
        wake("2024-01-02", "00:15", "23:30"),
        wake("2024-01-03"),
    )
    diffs = wake_diffs(index, "wake", default_target="06:00")
    assert [(item.date, item.diff) for item in diffs] == [
        (date(2024, 1, 1), 10),
        (date(2024, 1, 2), 45),
    ]


def test_malformed_times_are_skipped_and_reported():
    index = index_of(
        wake("2024-01-01", "6h10"),
        wake("2024-01-02", "06:20", "25:00"),
        wake("2024-01-03", "05:50"),
    )
    skipped = []
    diffs = wake_diffs(index, "wake", skipped=skipped)
    assert [item.diff for item in diffs] == [20, -10]
    assert [item.record.date for item in skipped] == ["2024-01-01", "2024-01-02"]


def test_summary():
    index = index_of(
        wake("2024-01-01", "05:50"),
        wake("2024-01-02", "06:00"),
        wake("2024-01-03", "06:30"),
        wake("2024-01-04", "06:20", succeeded=False),
    )
    summary = punctuality_summary(wake_diffs(index, "wake"))
    assert summary == PunctualitySummary(
        average_diff=10,
        on_time_percentage=50,
        earliest="05:50",
        latest="06:30",
        total_days=4,
    )


def test_summary_without_times():
    index = index_of(wake("2024-01-01"))
    assert punctuality_summary(wake_diffs(index, "wake")) is None


def test_daily_series_covers_every_day():
    index = index_of(
        wake("2024-01-28", "06:05"),
        wake("2024-01-29", succeeded=False),
        wake("2024-01-30", "07:00", "06:30"),
    )
    series = daily_wake_series(index, "wake", date(2024, 1, 30), days=5)
    assert [day.date for day in series] == days_from("2024-01-26", 5)
    assert series[0].actual_minutes is None and series[0].woke_up is False
    assert series[2].diff == 5 and series[2].woke_up is True
    assert series[3].diff is None and series[3].woke_up is False
    assert series[4].target_minutes == 390 and series[4].diff == 30


def test_weekday_stats():
    # Mondays: 2024-01-01 and 2024-01-08
    index = index_of(
        wake("2024-01-01", "06:10"),
        wake("2024-01-08", "06:30", succeeded=False),
        wake("2024-01-02"),
    )
    stats = weekday_wake_stats(index, "wake")
    assert (stats[0].total, stats[0].success, stats[0].success_rate, stats[0].average_diff) == (2, 1, 50, 20)
    assert (stats[1].total, stats[1].average_diff) == (1, 0)


def test_trend_improvement():
    records = [wake(day, "06:30") for day in days_from("2024-01-01", 7)]
    records += [wake(day, "06:05") for day in days_from("2024-01-08", 7)]
    assert wake_trend(index_of(*records), "wake", date(2024, 1, 14)) == WakeTrend("improvement", 25)


def test_trend_regression():
    records = [wake("2024-01-03", "06:00"), wake("2024-01-12", "06:20")]
    assert wake_trend(index_of(*records), "wake", date(2024, 1, 14)) == WakeTrend("regression", 20)


def test_trend_stable_within_threshold():
    records = [wake("2024-01-03", "06:00"), wake("2024-01-12", "06:04")]
    assert wake_trend(index_of(*records), "wake", date(2024, 1, 14)) == WakeTrend("stable", 0)


def test_trend_across_midnight_target():
    records = [wake("2024-01-03", "23:50", "23:30"), wake("2024-01-12", "00:05", "23:30")]
    assert wake_trend(index_of(*records), "wake", date(2024, 1, 14)) == WakeTrend("regression", 15)


def test_trend_needs_both_weeks():
    records = [wake("2024-01-12", "06:00")]
    assert wake_trend(index_of(*records), "wake", date(2024, 1, 14)).kind == "neutral"


def test_precomputed_diffs_give_the_same_answers():
    records = [wake(day, "06:20") for day in days_from("2024-01-01", 7)]
    records += [wake(day, "06:00") for day in days_from("2024-01-08", 7)]
    index = index_of(*records)
    today = date(2024, 1, 14)
    diffs = wake_diffs(index, "wake")
    assert daily_wake_series(index, "wake", today, days=14, diffs=diffs) == daily_wake_series(index, "wake", today, days=14)
    assert weekday_wake_stats(index, "wake", diffs=diffs) == weekday_wake_stats(index, "wake")
    assert wake_trend(index, "wake", today, diffs=diffs) == WakeTrend("improvement", 20)
