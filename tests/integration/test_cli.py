"""Integration tests for the CLI.

These tests drive the click commands end to end against the sample study
written to a temporary directory.
"""

from pathlib import Path

from click.testing import CliRunner
import pandas as pd
import pytest

from dm_transpiler.cli import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def study_dir(tmp_path: Path, runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["sample", str(tmp_path / "raw")])
    assert result.exit_code == 0, result.output
    return tmp_path


def _transform_args(study_dir: Path, *extra: str) -> list[str]:
    return [
        "transform",
        "--demographics",
        str(study_dir / "raw" / "demographics.csv"),
        "--exposure",
        str(study_dir / "raw" / "exposure.csv"),
        "--output-dir",
        str(study_dir / "out"),
        *extra,
    ]


class TestSampleCommand:
    def test_writes_both_sources(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(app, ["sample", str(tmp_path / "raw")])

        assert result.exit_code == 0
        demographics = pd.read_csv(
            tmp_path / "raw" / "demographics.csv", dtype=str, keep_default_na=False
        )
        exposure = pd.read_csv(tmp_path / "raw" / "exposure.csv", dtype=str)
        assert demographics["SUBJID"].tolist() == ["101", "102", "103", "104"]
        assert len(exposure) == 5


class TestTransformCommand:
    def test_builds_dm_dataset(self, runner: CliRunner, study_dir: Path):
        result = runner.invoke(app, _transform_args(study_dir))

        assert result.exit_code == 0, result.output
        assert (study_dir / "out" / "dm.csv").exists()
        assert (study_dir / "out" / "dm.xpt").exists()

        dm = pd.read_csv(study_dir / "out" / "dm.csv", dtype=str, keep_default_na=False)
        assert len(dm) == 4
        subject = dm.set_index("SUBJID").loc["103"]
        assert subject["USUBJID"] == "STUDY001-001-103"
        assert subject["SEX"] == "M"
        assert subject["ARMCD"] == "TRTB"
        assert subject["ARM"] == "Drug B"
        assert subject["BRTHDTC"] == "1972-03-22"
        assert subject["RFSTDTC"] == "2023-03-10"
        assert subject["RFENDTC"] == "2023-03-10"
        assert subject["AGE"] == "50"

    def test_identifier_overrides(self, runner: CliRunner, study_dir: Path):
        result = runner.invoke(
            app,
            _transform_args(
                study_dir, "--study-id", "ABC123", "--site-id", "09", "--format", "csv"
            ),
        )

        assert result.exit_code == 0, result.output
        assert not (study_dir / "out" / "dm.xpt").exists()
        dm = pd.read_csv(study_dir / "out" / "dm.csv", dtype=str, keep_default_na=False)
        assert dm["USUBJID"].tolist()[0] == "ABC123-09-101"
        assert set(dm["STUDYID"]) == {"ABC123"}

    def test_diagnostics_are_shown(self, runner: CliRunner, study_dir: Path):
        result = runner.invoke(app, _transform_args(study_dir, "--format", "csv"))

        assert result.exit_code == 0
        assert "NO_EXPOSURE" in result.output

    def test_strict_mode_fails_on_diagnostics(
        self, runner: CliRunner, study_dir: Path
    ):
        result = runner.invoke(
            app, _transform_args(study_dir, "--format", "csv", "--strict")
        )

        assert result.exit_code == 1
        assert "strict mode" in result.output

    def test_missing_source_fails(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app,
            [
                "transform",
                "--demographics",
                str(tmp_path / "missing.csv"),
                "--exposure",
                str(tmp_path / "missing_ex.csv"),
                "--output-dir",
                str(tmp_path / "out"),
            ],
        )

        assert result.exit_code == 1
        assert "DM processing failed" in result.output

    def test_invalid_study_id_is_a_usage_error(
        self, runner: CliRunner, study_dir: Path
    ):
        result = runner.invoke(
            app, _transform_args(study_dir, "--study-id", "X" * 21)
        )

        assert result.exit_code == 2

    def test_config_file(self, runner: CliRunner, study_dir: Path):
        config = study_dir / "custom.toml"
        config.write_text(
            f"""
[study]
study_id = "TOMLSTUDY"
site_id = "77"

[paths]
demographics_file = "{(study_dir / 'raw' / 'demographics.csv').as_posix()}"
exposure_file = "{(study_dir / 'raw' / 'exposure.csv').as_posix()}"
output_dir = "{(study_dir / 'toml_out').as_posix()}"

[output]
formats = ["csv"]
"""
        )

        result = runner.invoke(app, ["transform", "--config", str(config)])

        assert result.exit_code == 0, result.output
        dm = pd.read_csv(
            study_dir / "toml_out" / "dm.csv", dtype=str, keep_default_na=False
        )
        assert dm["USUBJID"].tolist()[0] == "TOMLSTUDY-77-101"

    def test_environment_configuration(
        self, runner: CliRunner, study_dir: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("DM_STUDY_ID", "ENVSTUDY")
        monkeypatch.setenv("DM_OUTPUT_FORMATS", "csv")

        result = runner.invoke(app, _transform_args(study_dir))

        assert result.exit_code == 0, result.output
        dm = pd.read_csv(study_dir / "out" / "dm.csv", dtype=str, keep_default_na=False)
        assert set(dm["STUDYID"]) == {"ENVSTUDY"}
        assert not (study_dir / "out" / "dm.xpt").exists()


class TestVariablesCommand:
    def test_lists_dm_schema(self, runner: CliRunner):
        result = runner.invoke(app, ["variables"])

        assert result.exit_code == 0
        assert "USUBJID" in result.output
        assert "ARMNRS" in result.output
