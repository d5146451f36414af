from __future__ import annotations

from dataclasses import dataclass

from ....constants import Constraints, ControlledValues
from .date import parse_date


@dataclass(frozen=True, slots=True)
class AgeResult:
    years: int | None
    unit: str

    @property
    def computed(self) -> bool:
        return self.years is not None


NO_AGE = AgeResult(years=None, unit="")


def compute_age(birth_date: object, reference_date: object) -> AgeResult:
    """Whole years elapsed from ``birth_date`` to ``reference_date``.

    Both arguments are parsed from their raw form. A year only counts once
    the birthday has been reached in the reference year; a 29 February
    birthday is reached on 1 March in non-leap years.
    """
    birth = parse_date(birth_date)
    reference = parse_date(reference_date)
    if birth is None or reference is None:
        return NO_AGE
    years = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        years -= 1
    return AgeResult(years=years, unit=ControlledValues.AGE_UNIT)


def is_plausible_age(years: int) -> bool:
    return Constraints.AGE_MIN <= years <= Constraints.AGE_MAX
