"""Domain-level value transformers.

Date normalization, controlled terminology lookups and age derivation used
by the Demographics transformer.
"""

from .age import NO_AGE, AgeResult, compute_age, is_plausible_age
from .codelist import (
    NOT_ASSIGNED,
    SEX_CODELIST,
    TREATMENT_CODELIST,
    ArmAssignment,
    map_sex,
    map_treatment,
)
from .date import KNOWN_DATE_FORMATS, is_blank_date, normalize_date, parse_date

__all__ = [
    "AgeResult",
    "ArmAssignment",
    "KNOWN_DATE_FORMATS",
    "NOT_ASSIGNED",
    "NO_AGE",
    "SEX_CODELIST",
    "TREATMENT_CODELIST",
    "compute_age",
    "is_blank_date",
    "is_plausible_age",
    "map_sex",
    "map_treatment",
    "normalize_date",
    "parse_date",
]
