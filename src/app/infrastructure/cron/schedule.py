from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from croniter import croniter

from src.app.domain.exceptions import InvalidCronScheduleError


def predict_next_run(cron_schedule: str, after: datetime, timezone: str = "UTC") -> datetime:
    """
    Return the first instant strictly after ``after`` matching ``cron_schedule``.

    The expression is evaluated in ``timezone``; the result is returned in UTC.
    ``after`` must be timezone-aware.
    """
    if after.tzinfo is None:
        raise ValueError("after must be timezone-aware")
    if not croniter.is_valid(cron_schedule):
        raise InvalidCronScheduleError(cron_schedule)

    zone = UTC if timezone == "UTC" else ZoneInfo(timezone)
    base = after.astimezone(zone)
    try:
        next_run = croniter(cron_schedule, base).get_next(datetime)
    except (ValueError, KeyError) as exc:
        raise InvalidCronScheduleError(cron_schedule, str(exc)) from exc
    return next_run.astimezone(UTC)
