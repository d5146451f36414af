from __future__ import annotations

from typing import Any, cast

import pandas as pd

from .constants import MissingValues


def ensure_series(value: object, index: pd.Index[Any] | None = None) -> pd.Series[Any]:
    if isinstance(value, pd.Series):
        return cast("pd.Series[Any]", value)
    if isinstance(value, pd.DataFrame):
        if value.shape[1] == 0:
            return pd.Series(index=value.index, dtype="object")
        return value.iloc[:, 0]
    return pd.Series(cast("Any", value), index=index)


def is_missing_scalar(value: object) -> bool:
    try:
        result = pd.isna(cast("Any", value))
    except (TypeError, ValueError):
        return False
    # Array-likes yield element-wise masks; only scalars count.
    return result if isinstance(result, bool) else False


def strip_text(value: object) -> str:
    """Return a stripped string; only NA scalars become ``""``."""
    if value is None or is_missing_scalar(value):
        return ""
    return str(value).strip()


def clean_text(value: object) -> str:
    """Return a stripped string, mapping NA scalars and NA markers to ``""``."""
    text = strip_text(value)
    if text.upper() in MissingValues.STRING_MARKERS:
        return ""
    return text


def normalize_missing_strings(
    value: object, *, replacement: str = "", markers: set[str] | None = None
) -> pd.Series[str]:
    series = ensure_series(value).astype("string")
    stripped = series.str.strip()
    marker_set = {m.upper() for m in markers or MissingValues.STRING_MARKERS}
    upper = stripped.str.upper()
    marker_mask = upper.isin(marker_set) | stripped.isna()
    return stripped.mask(marker_mask, replacement)
