"""Demographics (DM) transformer.

Joins each demographics record with its subject's exposure history and
derives the DM variables:

- RFSTDTC/RFENDTC from the earliest/latest exposure event, mirrored into
  RFXSTDTC/RFXENDTC (the source carries a single exposure date)
- BRTHDTC and AGE from the birth date; AGE is anchored on the raw earliest
  exposure date and parsed independently of the ISO rendering
- SEX through the sex codelist
- ARMCD/ARM from the earliest exposure's treatment code; ACTARMCD/ACTARM copy
  the planned arm because the source has no reassignment data
- constants (DOMAIN, RACE, COUNTRY) and the schema fields this source cannot
  populate (RFICDTC, RFPENDTC, DTHDTC, DTHFL) left empty

Demographics is authoritative: every record with a subject id yields exactly
one output record, in input order. A repeated subject id is reported but
not dropped. Data-quality findings are returned as
``Diagnostic`` entries; nothing here logs or raises for them.

Example:
    >>> transformer = DemographicsTransformer(study_id="STUDY001", site_id="001")
    >>> result = transformer.transform(demographics, exposures)
    >>> for diagnostic in result.diagnostics:
    ...     print(diagnostic.format())
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...constants import Constraints, ControlledValues, Defaults
from ...pandas_utils import clean_text, strip_text
from ..entities.diagnostics import Diagnostic, DiagnosticCode, Severity
from ..entities.records import StandardizedDemographicRecord
from .exposure_aggregator import aggregate_exposures
from .transformers.age import compute_age, is_plausible_age
from .transformers.codelist import map_sex, map_treatment
from .transformers.date import normalize_date

if TYPE_CHECKING:
    from ..entities.records import (
        ExposureSummary,
        RawDemographicRecord,
        RawExposureRecord,
    )

MISSING_SUBJECT_POLICIES = Constraints.MISSING_SUBJECT_POLICIES


class DMTransformError(Exception):
    pass


class MissingSubjectIdError(DMTransformError):
    pass


def _empty_records() -> list[StandardizedDemographicRecord]:
    return []


def _empty_diagnostics() -> list[Diagnostic]:
    return []


@dataclass
class DMTransformResult:
    records: list[StandardizedDemographicRecord] = field(
        default_factory=_empty_records
    )
    diagnostics: list[Diagnostic] = field(default_factory=_empty_diagnostics)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def diagnostics_for(self, subject_id: str) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.subject_id == subject_id]

    def diagnostics_by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.code is code]

    def summary(self) -> str:
        parts = [f"{len(self.records)} DM record(s)"]
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        return ", ".join(parts)


class DemographicsTransformer:
    """Build standardized DM records from raw demographics and exposure."""

    def __init__(
        self,
        study_id: str,
        site_id: str,
        country: str = Defaults.COUNTRY,
        *,
        missing_subject_policy: str = Defaults.MISSING_SUBJECT_POLICY,
    ) -> None:
        if missing_subject_policy not in MISSING_SUBJECT_POLICIES:
            raise ValueError(
                "missing_subject_policy must be 'skip' or 'fail', "
                f"got {missing_subject_policy!r}"
            )
        self.study_id = study_id
        self.site_id = site_id
        self.country = country
        self.missing_subject_policy = missing_subject_policy

    def transform(
        self,
        demographics: Sequence[RawDemographicRecord],
        exposures: Sequence[RawExposureRecord],
    ) -> DMTransformResult:
        result = DMTransformResult()
        summaries = aggregate_exposures(exposures, result.diagnostics)
        seen: set[str] = set()

        for position, demographic in enumerate(demographics):
            subject_id = clean_text(demographic.subject_id)
            if not subject_id:
                message = (
                    f"Demographics record #{position + 1} has no subject id; skipped"
                )
                if self.missing_subject_policy == "fail":
                    raise MissingSubjectIdError(message)
                result.diagnostics.append(
                    Diagnostic(
                        subject_id="",
                        message=message,
                        code=DiagnosticCode.MISSING_SUBJECT_ID,
                        severity=Severity.ERROR,
                    )
                )
                continue
            if subject_id in seen:
                result.diagnostics.append(
                    Diagnostic(
                        subject_id=subject_id,
                        message=(
                            f"Demographics record #{position + 1} repeats "
                            "an earlier subject id; record kept"
                        ),
                        code=DiagnosticCode.DUPLICATE_SUBJECT_ID,
                    )
                )
            seen.add(subject_id)
            record = self._build_record(
                subject_id,
                demographic,
                summaries.get(subject_id),
                result.diagnostics,
            )
            result.records.append(record)

        return result

    def usubjid(self, subject_id: str) -> str:
        return f"{self.study_id}-{self.site_id}-{subject_id}"

    def _build_record(
        self,
        subject_id: str,
        demographic: RawDemographicRecord,
        summary: ExposureSummary | None,
        diagnostics: list[Diagnostic],
    ) -> StandardizedDemographicRecord:
        if summary is None:
            diagnostics.append(
                Diagnostic(
                    subject_id=subject_id,
                    message="No dated exposure records; arm not assigned",
                    code=DiagnosticCode.NO_EXPOSURE,
                )
            )
            earliest_date = latest_date = earliest_treatment = ""
        else:
            earliest_date = summary.earliest_date
            latest_date = summary.latest_date
            earliest_treatment = summary.earliest_treatment_code

        # Aggregated dates already parsed once, so they cannot fail here.
        reference_start, _ = normalize_date(earliest_date)
        reference_end, _ = normalize_date(latest_date)

        birth_date, birth_ok = normalize_date(demographic.birth_date)
        if not birth_ok:
            diagnostics.append(
                Diagnostic(
                    subject_id=subject_id,
                    message=(
                        f"Unparseable birth date {strip_text(demographic.birth_date)!r}; "
                        "BRTHDTC and AGE left empty"
                    ),
                    code=DiagnosticCode.UNPARSEABLE_DATE,
                )
            )

        age = compute_age(demographic.birth_date, earliest_date)
        if age.years is not None and not is_plausible_age(age.years):
            diagnostics.append(
                Diagnostic(
                    subject_id=subject_id,
                    message=(
                        f"Implausible age {age.years} (expected "
                        f"{Constraints.AGE_MIN}-{Constraints.AGE_MAX})"
                    ),
                    code=DiagnosticCode.IMPLAUSIBLE_AGE,
                )
            )

        arm = map_treatment(earliest_treatment)
        if not arm.recognized:
            diagnostics.append(
                Diagnostic(
                    subject_id=subject_id,
                    message=f"Unrecognized treatment code {earliest_treatment!r}",
                    code=DiagnosticCode.UNKNOWN_TREATMENT,
                )
            )

        return StandardizedDemographicRecord(
            study_id=self.study_id,
            usubjid=self.usubjid(subject_id),
            subject_id=subject_id,
            site_id=self.site_id,
            reference_start_date=reference_start,
            reference_end_date=reference_end,
            exposure_start_date=reference_start,
            exposure_end_date=reference_end,
            birth_date=birth_date,
            age=age.years,
            age_unit=age.unit,
            sex=map_sex(demographic.gender_code),
            race=ControlledValues.RACE_UNKNOWN,
            arm_code=arm.code,
            arm=arm.label,
            actual_arm_code=arm.code,
            actual_arm=arm.label,
            arm_not_assigned_reason=arm.not_assigned_reason,
            country=self.country,
        )


def transform_demographics(
    demographics: Sequence[RawDemographicRecord],
    exposures: Sequence[RawExposureRecord],
    *,
    study_id: str = Defaults.STUDY_ID,
    site_id: str = Defaults.SITE_ID,
    country: str = Defaults.COUNTRY,
    missing_subject_policy: str = Defaults.MISSING_SUBJECT_POLICY,
) -> DMTransformResult:
    transformer = DemographicsTransformer(
        study_id,
        site_id,
        country,
        missing_subject_policy=missing_subject_policy,
    )
    return transformer.transform(demographics, exposures)
