"""Unit tests for SummaryPresenter class."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from dm_transpiler.application.models import DatasetOutputResult
from dm_transpiler.cli.presenters import SummaryPresenter, SummaryRequest
from dm_transpiler.domain.entities.records import (
    RawDemographicRecord,
    RawExposureRecord,
)
from dm_transpiler.domain.services.dm_transformer import transform_demographics


class TestSummaryPresenter:
    """Test suite for SummaryPresenter class."""

    @pytest.fixture
    def console(self):
        return Console(file=StringIO(), width=200)

    @pytest.fixture
    def presenter(self, console):
        return SummaryPresenter(console)

    @pytest.fixture
    def result(self):
        return transform_demographics(
            [
                RawDemographicRecord("101", "Male", "1990-05-15"),
                RawDemographicRecord("102", "F", "1985-01-10"),
                RawDemographicRecord("103", "M", "03/22/1972"),
                RawDemographicRecord("104"),
            ],
            [
                RawExposureRecord("101", "2023-01-01", "Placebo"),
                RawExposureRecord("102", "2023-02-01", "Placebo"),
                RawExposureRecord("103", "2023-03-10", "Drug_B"),
            ],
        )

    def _output(self, console: Console) -> str:
        return console.file.getvalue()  # type: ignore[attr-defined]

    def test_arm_counts(self, result):
        counts = SummaryPresenter._arm_counts(result.records)

        assert counts == [
            (("NOT ASSIGNED", "NOT ASSIGNED"), 1),
            (("PLACEBO", "Placebo"), 2),
            (("TRTB", "Drug B"), 1),
        ]

    def test_present_summary_table(self, presenter, console, result):
        presenter.present(
            SummaryRequest(
                study_id="STUDY001",
                records=result.records,
                diagnostics=result.diagnostics,
                output_dir=Path("/output"),
            )
        )

        output = self._output(console)
        assert "DM Summary: STUDY001" in output
        assert "PLACEBO" in output
        assert "Drug B" in output
        assert "Total" in output
        assert "/output" in output

    def test_present_diagnostics(self, presenter, console, result):
        presenter.present(
            SummaryRequest(
                study_id="STUDY001",
                records=result.records,
                diagnostics=result.diagnostics,
                output_dir=Path("/output"),
            )
        )

        output = self._output(console)
        assert "Diagnostics" in output
        assert "NO_EXPOSURE" in output
        assert "104" in output
        assert "with 1 warning(s)" in output

    def test_no_diagnostics_table_when_clean(self, presenter, console, result):
        presenter.present(
            SummaryRequest(
                study_id="STUDY001",
                records=result.records[:3],
                diagnostics=[],
                output_dir=Path("/output"),
            )
        )

        output = self._output(console)
        assert "Diagnostics" not in output
        assert "3 record(s), no issues" in output

    def test_generated_files_are_listed(self, presenter, console, result):
        presenter.present(
            SummaryRequest(
                study_id="STUDY001",
                records=result.records,
                diagnostics=result.diagnostics,
                output_dir=Path("/output"),
                output=DatasetOutputResult(
                    csv_path=Path("/output/dm.csv"), xpt_path=Path("/output/dm.xpt")
                ),
            )
        )

        output = self._output(console)
        assert "dm.csv" in output
        assert "dm.xpt" in output

    def test_failure_is_reported(self, presenter, console):
        presenter.present(
            SummaryRequest(
                study_id="STUDY001",
                records=[],
                diagnostics=[],
                output_dir=Path("/output"),
                error="File not found: dem.csv",
            )
        )

        assert "Failed:" in self._output(console)
