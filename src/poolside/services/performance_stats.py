"""Aggregations over an athlete's training logs.

Everything here works on already-loaded ``TrainingLog`` objects (with
embedded performance entries); nothing touches the database.
"""

from collections import defaultdict
from datetime import date, timedelta
from enum import StrEnum

from poolside.models.performance import PerformanceEntry, TrainingLog


class TimeRange(StrEnum):
    """Look-back window for charts and summaries."""

    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    SIX_MONTHS = "6m"
    ONE_YEAR = "1y"
    ALL = "all"


class Period(StrEnum):
    """Bucket size for grouping logs."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"


RANGE_DAYS: dict[TimeRange, int] = {
    TimeRange.ONE_MONTH: 30,
    TimeRange.THREE_MONTHS: 90,
    TimeRange.SIX_MONTHS: 180,
    TimeRange.ONE_YEAR: 365,
}


def range_start(time_range: TimeRange, today: date | None = None) -> date | None:
    """First excluded day of a window (logs must be after it), or None for ALL."""
    if time_range == TimeRange.ALL:
        return None
    today = today or date.today()
    return today - timedelta(days=RANGE_DAYS[time_range])


def filter_logs(
    logs: list[TrainingLog],
    time_range: TimeRange = TimeRange.ALL,
    today: date | None = None,
) -> list[TrainingLog]:
    """Keep logs dated strictly after the start of the window."""
    start = range_start(time_range, today)
    if start is None:
        return list(logs)
    return [log for log in logs if log.date > start]


def _chronological(logs: list[TrainingLog]) -> list[TrainingLog]:
    return sorted(logs, key=lambda log: log.date)


def stroke_series(logs: list[TrainingLog]) -> dict[str, list[tuple[date, float]]]:
    """Chronological (date, seconds) points per stroke.

    Only the first entry for a stroke in each log is used, matching how the
    entry form records one time per stroke per session.
    """
    series: dict[str, list[tuple[date, float]]] = defaultdict(list)
    for log in _chronological(logs):
        for stroke in log.strokes:
            entry = log.entry_for(stroke)
            if entry is not None:
                series[stroke].append((log.date, entry.time_seconds))
    return dict(series)


def personal_bests(logs: list[TrainingLog]) -> dict[str, PerformanceEntry]:
    """Fastest recorded entry per stroke.

    Entries with a zero time (nothing recorded) are ignored. Ties keep the
    earliest swim.
    """
    best: dict[str, PerformanceEntry] = {}
    for log in _chronological(logs):
        for entry in log.performance_entries:
            if entry.time_seconds <= 0:
                continue
            current = best.get(entry.stroke)
            if current is None or entry.time_seconds < current.time_seconds:
                best[entry.stroke] = entry
    return best


def progress_rates(logs: list[TrainingLog]) -> dict[str, float | None]:
    """Improvement of the latest swim over the one before, per stroke.

    Returns:
        Percentage ``(previous - latest) / previous * 100`` (positive means
        faster), or None when a stroke has fewer than two usable swims
    """
    rates: dict[str, float | None] = {}
    for stroke, points in stroke_series(logs).items():
        times = [seconds for _, seconds in points if seconds > 0]
        if len(times) < 2:
            rates[stroke] = None
            continue
        previous, latest = times[-2], times[-1]
        rates[stroke] = round((previous - latest) / previous * 100, 2)
    return rates


def period_key(day: date, period: Period) -> str:
    """Bucket label: "2025", "2025-03" or ISO week "2025-W11"."""
    if period == Period.YEAR:
        return f"{day.year}"
    if period == Period.MONTH:
        return f"{day.year}-{day.month:02d}"
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def group_logs(logs: list[TrainingLog], period: Period) -> dict[str, list[TrainingLog]]:
    """Group logs into periods, newest period and newest log first."""
    groups: dict[str, list[TrainingLog]] = {}
    for log in sorted(logs, key=lambda log: log.date, reverse=True):
        groups.setdefault(period_key(log.date, period), []).append(log)
    return groups


def total_distance(logs: list[TrainingLog]) -> float:
    return round(sum(log.distance_km for log in logs), 2)
