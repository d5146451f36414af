from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ...domain.entities.records import RawDemographicRecord, RawExposureRecord


@runtime_checkable
class StudyDataRepositoryPort(Protocol):
    pass

    def read_dataset(self, file_path: str | Path) -> pd.DataFrame: ...


@runtime_checkable
class SourceRecordLoaderPort(Protocol):
    pass

    def demographics_from_frame(
        self, frame: pd.DataFrame
    ) -> list[RawDemographicRecord]: ...

    def exposures_from_frame(self, frame: pd.DataFrame) -> list[RawExposureRecord]: ...
