"""Small synthetic study used by the ``sample`` command and the tests.

The rows deliberately mix source conventions: free-text and coded gender,
three birth date layouts, upper- and mixed-case treatment codes, and one
subject with neither a birth date nor any exposure.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..constants import Defaults

SAMPLE_DEMOGRAPHICS: tuple[dict[str, str], ...] = (
    {"SUBJID": "101", "GENDER": "Male", "BIRTH_DATE": "1990-05-15"},
    {"SUBJID": "102", "GENDER": "FEMALE", "BIRTH_DATE": "10JAN1985"},
    {"SUBJID": "103", "GENDER": "M", "BIRTH_DATE": "03/22/1972"},
    {"SUBJID": "104", "GENDER": "", "BIRTH_DATE": ""},
)

SAMPLE_EXPOSURE: tuple[dict[str, str], ...] = (
    {"SUBJID": "101", "EVENT_DATE": "2023-01-01", "TREATMENT": "Placebo"},
    {"SUBJID": "101", "EVENT_DATE": "2023-01-15", "TREATMENT": "Placebo"},
    {"SUBJID": "102", "EVENT_DATE": "2023-02-01", "TREATMENT": "DRUG_A"},
    {"SUBJID": "102", "EVENT_DATE": "2023-02-20", "TREATMENT": "Drug_A"},
    {"SUBJID": "103", "EVENT_DATE": "2023-03-10", "TREATMENT": "Drug_B"},
)


def build_sample_demographics() -> pd.DataFrame:
    return pd.DataFrame(list(SAMPLE_DEMOGRAPHICS), dtype="string")


def build_sample_exposure() -> pd.DataFrame:
    return pd.DataFrame(list(SAMPLE_EXPOSURE), dtype="string")


def write_sample_study(folder: Path) -> tuple[Path, Path]:
    """Write the sample sources as CSV and return their paths."""
    folder.mkdir(parents=True, exist_ok=True)
    demographics_path = folder / Path(Defaults.DEMOGRAPHICS_FILE).name
    exposure_path = folder / Path(Defaults.EXPOSURE_FILE).name
    build_sample_demographics().to_csv(demographics_path, index=False)
    build_sample_exposure().to_csv(exposure_path, index=False)
    return demographics_path, exposure_path
