from pathlib import Path

from dm_transpiler.infrastructure.io.record_loader import SourceRecordLoader
from dm_transpiler.infrastructure.sample_data import (
    build_sample_demographics,
    build_sample_exposure,
    write_sample_study,
)


class TestSampleData:
    def test_shapes(self):
        assert len(build_sample_demographics()) == 4
        assert len(build_sample_exposure()) == 5

    def test_loads_through_record_loader(self):
        loader = SourceRecordLoader()

        demographics = loader.demographics_from_frame(build_sample_demographics())
        exposures = loader.exposures_from_frame(build_sample_exposure())

        assert demographics[3].subject_id == "104"
        assert demographics[3].birth_date == ""
        assert exposures[4].treatment_code == "Drug_B"

    def test_write_sample_study(self, tmp_path: Path):
        demographics_path, exposure_path = write_sample_study(tmp_path / "study")

        assert demographics_path == tmp_path / "study" / "demographics.csv"
        assert exposure_path == tmp_path / "study" / "exposure.csv"
        assert demographics_path.read_text().splitlines()[0] == (
            "SUBJID,GENDER,BIRTH_DATE"
        )
