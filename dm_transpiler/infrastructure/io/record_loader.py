"""Conversion of raw source tables into domain records.

Source extracts name their columns differently (EDC exports, hand-built
spreadsheets, SAS datasets). Columns are matched case-insensitively against
the alias lists below; the first alias present wins.
"""

from __future__ import annotations

from typing import ClassVar

import pandas as pd

from ...domain.entities.records import RawDemographicRecord, RawExposureRecord
from ...pandas_utils import normalize_missing_strings
from .exceptions import DataValidationError


class SourceColumns:
    SUBJECT_ID: ClassVar[tuple[str, ...]] = (
        "SUBJID",
        "SUBJECT_ID",
        "SUBJECTID",
        "USUBJID",
    )
    GENDER: ClassVar[tuple[str, ...]] = ("SEX", "GENDER", "GENDER_CODE")
    BIRTH_DATE: ClassVar[tuple[str, ...]] = (
        "BRTHDTC",
        "BRTHDAT",
        "BIRTH_DATE",
        "BIRTHDATE",
        "DOB",
    )
    EVENT_DATE: ClassVar[tuple[str, ...]] = (
        "EXSTDTC",
        "EXSTDAT",
        "EVENT_DATE",
        "EXPOSURE_DATE",
        "EXDATE",
    )
    TREATMENT: ClassVar[tuple[str, ...]] = (
        "EXTRT",
        "TREATMENT",
        "TREATMENT_CODE",
        "TRT",
    )


class SourceRecordLoader:
    pass

    def demographics_from_frame(
        self, frame: pd.DataFrame
    ) -> list[RawDemographicRecord]:
        subject_ids = self._required_column(
            frame, SourceColumns.SUBJECT_ID, "demographics"
        )
        genders = self._optional_column(frame, SourceColumns.GENDER)
        birth_dates = self._optional_column(frame, SourceColumns.BIRTH_DATE)
        return [
            RawDemographicRecord(
                subject_id=subject_id,
                gender_code=gender,
                birth_date=birth_date,
            )
            for subject_id, gender, birth_date in zip(
                subject_ids, genders, birth_dates, strict=True
            )
        ]

    def exposures_from_frame(self, frame: pd.DataFrame) -> list[RawExposureRecord]:
        subject_ids = self._required_column(
            frame, SourceColumns.SUBJECT_ID, "exposure"
        )
        event_dates = self._optional_column(frame, SourceColumns.EVENT_DATE)
        treatments = self._optional_column(frame, SourceColumns.TREATMENT)
        return [
            RawExposureRecord(
                subject_id=subject_id,
                event_date=event_date,
                treatment_code=treatment,
            )
            for subject_id, event_date, treatment in zip(
                subject_ids, event_dates, treatments, strict=True
            )
        ]

    def _required_column(
        self, frame: pd.DataFrame, aliases: tuple[str, ...], source: str
    ) -> list[str]:
        column = _find_column(frame, aliases)
        if column is None:
            raise DataValidationError(
                f"The {source} source has no subject id column "
                f"(expected one of: {', '.join(aliases)})"
            )
        return _text_values(frame, column)

    def _optional_column(
        self, frame: pd.DataFrame, aliases: tuple[str, ...]
    ) -> list[str]:
        column = _find_column(frame, aliases)
        if column is None:
            return [""] * len(frame)
        return _text_values(frame, column)


def _find_column(frame: pd.DataFrame, aliases: tuple[str, ...]) -> str | None:
    by_upper = {str(col).strip().upper(): str(col) for col in frame.columns}
    for alias in aliases:
        if alias in by_upper:
            return by_upper[alias]
    return None


def _text_values(frame: pd.DataFrame, column: str) -> list[str]:
    series = frame[column]
    if pd.api.types.is_float_dtype(series):
        # Numeric ids from Excel or SAS sources arrive as floats (101.0).
        series = series.map(_integral_float_to_int)
    return [str(v) for v in normalize_missing_strings(series).tolist()]


def _integral_float_to_int(value: object) -> object:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
