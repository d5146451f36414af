"""Date normalization for raw clinical source values.

Source systems emit dates in whatever format the site or EDC export chose.
Parsing is permissive on input and strict on output: every successfully
parsed value is rendered as an ISO 8601 calendar date (``YYYY-MM-DD``).

Parsing order:
1. Explicit formats in ``KNOWN_DATE_FORMATS`` (first match wins). Numeric
   slash forms resolve month-first before day-first.
2. pandas' general parser for anything else (ISO date-times, long month
   names, ...). Only text that carries both a day and a four-digit year
   reaches it; year-only, year-month and yearless values are rejected because
   they cannot be represented as a full calendar date.
"""

from __future__ import annotations

from datetime import date, datetime
import re
import warnings

import pandas as pd

from ....pandas_utils import is_missing_scalar

KNOWN_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%d%b%Y",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%d%b%y",
    "%Y%m%d",
    "%d-%b-%Y",
    "%d %b %Y",
    "%Y/%m/%d",
    "%m-%d-%Y",
    "%d.%m.%Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

_PARTIAL_DATE = re.compile(r"^\d{4}(-\d{1,2})?$")
_DIGITS_ONLY = re.compile(r"^\d+$")
_ISO_DATETIME = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}[T ]")
_TIME_OF_DAY = re.compile(r"\d{1,2}:\d{2}(:\d{2}(\.\d+)?)?")
_FOUR_DIGIT_YEAR = re.compile(r"(?<!\d)\d{4}(?!\d)")
_DAY_TOKEN = re.compile(r"(?<!\d)\d{1,2}(?!\d)")


def parse_date(raw_value: object) -> date | None:
    """Parse a raw source value into a calendar date.

    Returns ``None`` for missing values and for values no known
    representation matches.
    """
    if isinstance(raw_value, datetime):
        if is_missing_scalar(raw_value):
            return None
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    if raw_value is None or is_missing_scalar(raw_value):
        return None

    text = str(raw_value).strip()
    if not text:
        return None

    for fmt in KNOWN_DATE_FORMATS:
        parsed = _to_timestamp(text, fmt)
        if parsed is not None:
            return parsed.date()

    if not _has_full_date(text):
        return None
    parsed = _to_timestamp(text, None)
    return parsed.date() if parsed is not None else None


def normalize_date(raw_value: object) -> tuple[str, bool]:
    """Normalize a raw date to ``(iso_date, ok)``.

    Missing input is not a failure: it yields ``("", True)``. A value that
    cannot be parsed yields ``("", False)``.
    """
    if is_blank_date(raw_value):
        return "", True
    parsed = parse_date(raw_value)
    if parsed is None:
        return "", False
    return parsed.isoformat(), True


def is_blank_date(raw_value: object) -> bool:
    if raw_value is None or is_missing_scalar(raw_value):
        return True
    if isinstance(raw_value, date):
        return False
    return not str(raw_value).strip()


def _has_full_date(text: str) -> bool:
    if _PARTIAL_DATE.match(text) or _DIGITS_ONLY.match(text):
        return False
    if _ISO_DATETIME.match(text):
        return True
    # The general parser fills a missing day or year from defaults.
    date_part = _TIME_OF_DAY.sub(" ", text)
    return bool(
        _FOUR_DIGIT_YEAR.search(date_part) and _DAY_TOKEN.search(date_part)
    )


def _to_timestamp(text: str, fmt: str | None) -> pd.Timestamp | None:
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            parsed = pd.to_datetime(text, format=fmt, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(parsed, pd.Timestamp) or is_missing_scalar(parsed):
        return None
    return parsed
