"""Controlled terminology lookups for DM.

Both tables are keyed by the upper-cased, trimmed source value. Lookups are
total: every input produces an output value.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from ....constants import ControlledValues
from ....pandas_utils import strip_text

SEX_CODELIST: MappingProxyType[str, str] = MappingProxyType(
    {
        "M": "M",
        "MALE": "M",
        "F": "F",
        "FEMALE": "F",
    }
)


@dataclass(frozen=True, slots=True)
class ArmAssignment:
    code: str
    label: str
    not_assigned_reason: str = ""
    recognized: bool = True

    @property
    def assigned(self) -> bool:
        return bool(self.code)


TREATMENT_CODELIST: MappingProxyType[str, ArmAssignment] = MappingProxyType(
    {
        "PLACEBO": ArmAssignment(code="PLACEBO", label="Placebo"),
        "DRUG_A": ArmAssignment(code="TRTA", label="Drug A"),
        "DRUG_B": ArmAssignment(code="TRTB", label="Drug B"),
    }
)

NOT_ASSIGNED = ArmAssignment(
    code="", label="", not_assigned_reason=ControlledValues.ARM_NOT_ASSIGNED
)


def _lookup_key(value: object) -> str:
    return strip_text(value).upper()


def map_sex(value: object) -> str:
    return SEX_CODELIST.get(_lookup_key(value), ControlledValues.SEX_UNKNOWN)


def map_treatment(value: object) -> ArmAssignment:
    """Map a raw treatment code to planned-arm values.

    An empty code means no treatment was given and is a normal "not
    assigned" outcome. A non-empty code outside the table is also not
    assigned but comes back with ``recognized=False`` so the caller can
    report it.
    """
    key = _lookup_key(value)
    if not key:
        return NOT_ASSIGNED
    assignment = TREATMENT_CODELIST.get(key)
    if assignment is not None:
        return assignment
    return ArmAssignment(
        code="",
        label="",
        not_assigned_reason=ControlledValues.ARM_NOT_ASSIGNED,
        recognized=False,
    )
