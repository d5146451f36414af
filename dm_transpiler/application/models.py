from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ..config import TranspilerConfig
    from ..domain.entities.diagnostics import Diagnostic
    from ..domain.entities.records import StandardizedDemographicRecord
    from ..domain.entities.sdtm_domain import SDTMDomain


def _default_output_formats() -> set[str]:
    return set(Defaults.OUTPUT_FORMATS)


def _empty_str_list() -> list[str]:
    return []


def _empty_records() -> list[StandardizedDemographicRecord]:
    return []


def _empty_diagnostics() -> list[Diagnostic]:
    return []


@dataclass(slots=True)
class DatasetOutputRequest:
    dataframe: pd.DataFrame
    domain: SDTMDomain
    output_dir: Path
    formats: set[str]
    base_filename: str | None = None


@dataclass(slots=True)
class DatasetOutputResult:
    csv_path: Path | None = None
    xpt_path: Path | None = None
    errors: list[str] = field(default_factory=_empty_str_list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    def written_paths(self) -> list[Path]:
        return [p for p in (self.csv_path, self.xpt_path) if p is not None]


@dataclass(slots=True)
class ProcessDMRequest:
    demographics_file: Path
    exposure_file: Path
    output_dir: Path
    study_id: str = Defaults.STUDY_ID
    site_id: str = Defaults.SITE_ID
    country: str = Defaults.COUNTRY
    output_formats: set[str] = field(default_factory=_default_output_formats)
    missing_subject_policy: str = Defaults.MISSING_SUBJECT_POLICY
    write_output: bool = True
    verbose: int = 0

    @classmethod
    def from_config(cls, config: TranspilerConfig) -> ProcessDMRequest:
        return cls(
            demographics_file=config.demographics_file,
            exposure_file=config.exposure_file,
            output_dir=config.output_dir,
            study_id=config.study_id,
            site_id=config.site_id,
            country=config.country,
            output_formats=set(config.output_formats),
            missing_subject_policy=config.missing_subject_policy,
        )


@dataclass(slots=True)
class ProcessDMResponse:
    success: bool = True
    records: list[StandardizedDemographicRecord] = field(
        default_factory=_empty_records
    )
    diagnostics: list[Diagnostic] = field(default_factory=_empty_diagnostics)
    dataframe: pd.DataFrame | None = None
    output: DatasetOutputResult | None = None
    error: str | None = None

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def has_diagnostics(self) -> bool:
        return len(self.diagnostics) > 0
