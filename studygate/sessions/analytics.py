"""Usage summary over learning-session rows.

Input rows are `learning_sessions` records as returned by the record store,
typically ordered newest first. Aggregation is pure; no store access happens
here.
"""

import logging
import re
from datetime import datetime


logger = logging.getLogger(__name__)

DAILY_ACTIVITY_WINDOW = 7


def format_session_type(session_type: str) -> str:
    """Return a display label: first underscore to space, each word capitalized."""
    label = session_type.replace("_", " ", 1)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), label)


_FRACTION = re.compile(r"\.(\d+)")


def _session_date(created_at):
    if isinstance(created_at, datetime):
        return created_at.date().isoformat()
    if isinstance(created_at, str) and created_at:
        # Store timestamps drop trailing zeros; fromisoformat wants 6 digits.
        value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), created_at, count=1)
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
        except ValueError:
            return None
    return None


def summarize_sessions(sessions):
    """Aggregate session rows into per-type counts and daily activity.

    Returns:
        Dict with:
            - `by_type`: `[{"name": label, "value": count}]` in first-seen order.
            - `daily_activity`: `[{"date": "YYYY-MM-DD", "sessions": count}]`,
              first-seen order, limited to the last seven groups.
            - `total`: number of rows.

    Edge cases:
        Rows with a missing or unparseable `created_at` are counted by type but
        left out of daily activity.
    """
    by_type = {}
    daily = {}

    for session in sessions:
        label = format_session_type(session.get("session_type", ""))
        by_type[label] = by_type.get(label, 0) + 1

        date = _session_date(session.get("created_at"))
        if date is None:
            logger.warning("Skipping session with unusable created_at: %r", session.get("id"))
            continue
        daily[date] = daily.get(date, 0) + 1

    activity = [
        {"date": date, "sessions": count}
        for date, count in daily.items()
    ][-DAILY_ACTIVITY_WINDOW:]

    return {
        "by_type": [{"name": name, "value": value} for name, value in by_type.items()],
        "daily_activity": activity,
        "total": len(sessions),
    }
