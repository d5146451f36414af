"""Record types flowing through the Demographics transformation.

Raw records mirror the loosely structured source tables; every field is kept
as source text so that date parsing and terminology mapping happen in one
place (the domain services). The standardized record is the fixed DM schema.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...constants import ControlledValues


@dataclass(frozen=True, slots=True)
class RawDemographicRecord:
    subject_id: str
    gender_code: str = ""
    birth_date: str = ""


@dataclass(frozen=True, slots=True)
class RawExposureRecord:
    subject_id: str
    event_date: str = ""
    treatment_code: str = ""


@dataclass(frozen=True, slots=True)
class ExposureSummary:
    """First and last dated exposure event for one subject.

    Dates are kept as the source text of the selected events; callers
    normalize them when building output.
    """

    subject_id: str
    earliest_date: str
    earliest_treatment_code: str
    latest_date: str
    latest_treatment_code: str


@dataclass(frozen=True, slots=True)
class StandardizedDemographicRecord:
    """One row of the DM dataset.

    Empty strings stand for "no value" in character fields; ``age`` is
    ``None`` when it could not be computed.
    """

    study_id: str
    usubjid: str
    subject_id: str
    site_id: str
    reference_start_date: str = ""
    reference_end_date: str = ""
    exposure_start_date: str = ""
    exposure_end_date: str = ""
    informed_consent_date: str = ""
    participation_end_date: str = ""
    death_date: str = ""
    death_flag: str = ""
    birth_date: str = ""
    age: int | None = None
    age_unit: str = ""
    sex: str = ControlledValues.SEX_UNKNOWN
    race: str = ControlledValues.RACE_UNKNOWN
    arm_code: str = ""
    arm: str = ""
    actual_arm_code: str = ""
    actual_arm: str = ""
    arm_not_assigned_reason: str = ""
    country: str = ""
    domain: str = ControlledValues.DOMAIN

    def to_row(self) -> dict[str, object]:
        """Return the record keyed by DM variable name, in dataset order."""
        return {
            "STUDYID": self.study_id,
            "DOMAIN": self.domain,
            "USUBJID": self.usubjid,
            "SUBJID": self.subject_id,
            "RFSTDTC": self.reference_start_date,
            "RFENDTC": self.reference_end_date,
            "RFXSTDTC": self.exposure_start_date,
            "RFXENDTC": self.exposure_end_date,
            "RFICDTC": self.informed_consent_date,
            "RFPENDTC": self.participation_end_date,
            "DTHDTC": self.death_date,
            "DTHFL": self.death_flag,
            "SITEID": self.site_id,
            "BRTHDTC": self.birth_date,
            "AGE": self.age,
            "AGEU": self.age_unit,
            "SEX": self.sex,
            "RACE": self.race,
            "ARMCD": self.arm_code,
            "ARM": self.arm,
            "ACTARMCD": self.actual_arm_code,
            "ACTARM": self.actual_arm,
            "ARMNRS": self.arm_not_assigned_reason,
            "COUNTRY": self.country,
        }
