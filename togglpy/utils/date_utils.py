"""Date utility functions for togglPy."""
import calendar
import re
from datetime import datetime, date, timedelta
from typing import Optional, Tuple

import dateparser

from ..errors import ParseError

# UK dialect: "05/03/2024" is the 5th of March.
DATEPARSER_SETTINGS = {
    "DATE_ORDER": "DMY",
    "PREFER_DATES_FROM": "past",
    "RETURN_AS_TIMEZONE_AWARE": False,
}

# Year-first dates are always ISO, whatever the dialect
ISO_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")

WEEKDAYS = [name.lower() for name in calendar.day_name]
MONTH_NAMES = {name.lower() for name in calendar.month_name[1:]} | {name.lower() for name in calendar.month_abbr[1:]}
RELATIVE_WEEKDAY_RE = re.compile(r"^(next|last)\s+(" + "|".join(WEEKDAYS) + r")$")

def _local_naive(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now()
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now

def _relative_weekday(direction: str, weekday: str, today: date) -> date:
    offset = WEEKDAYS.index(weekday) - today.weekday()
    if direction == "next":
        return today + timedelta(days=offset % 7 or 7)
    return today - timedelta(days=-offset % 7 or 7)

def parse_human_date(text: str, now: Optional[datetime] = None) -> date:
    """Parse a relaxed, human-written date expression.

    Args:
        text: Expression such as "today", "yesterday", "3 days ago", "next friday",
            "25/12/2023" or "2023-12-25"
        now: Reference time for relative expressions (defaults to local now)

    Returns:
        Calendar date in local time

    Raises:
        ParseError: If the text is not a recognised date expression
    """
    if not text or not text.strip():
        raise ParseError("Empty date expression")

    cleaned = " ".join(text.strip().lower().split())
    now = _local_naive(now)

    for fmt in ISO_DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    match = RELATIVE_WEEKDAY_RE.match(cleaned)
    if match:
        return _relative_weekday(match.group(1), match.group(2), now.date())

    # A lone number or month name is too vague to pick a day from
    if cleaned.isdigit() or cleaned in MONTH_NAMES:
        raise ParseError(f"Could not understand date '{text}'")

    settings = dict(DATEPARSER_SETTINGS)
    settings["RELATIVE_BASE"] = now
    parsed = dateparser.parse(cleaned, languages=["en"], settings=settings)
    if parsed is None:
        raise ParseError(f"Could not understand date '{text}'")
    return parsed.date()

def resolve_date_range(start: Optional[date] = None, end: Optional[date] = None,
                       today: Optional[date] = None) -> Tuple[date, date]:
    """Fill in the default summary range.

    Args:
        start: Explicit start date (defaults to today)
        end: Explicit end date, exclusive (defaults to start + 1 day)
        today: Override for the current local date

    Returns:
        Tuple of (start_date, end_date)
    """
    start_date = start or today or date.today()
    end_date = end or start_date + timedelta(days=1)
    return start_date, end_date

def day_str(dt: date) -> str:
    """Format a date as a string with day of week.

    Args:
        dt: Date to format

    Returns:
        Formatted date string
    """
    return f"({['Mon','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"
