"""Unit tests for configuration loading."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from dm_transpiler.config import ConfigLoader, TranspilerConfig


class TestTranspilerConfig:
    """Test suite for TranspilerConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = TranspilerConfig()

        assert config.study_id == "STUDY001"
        assert config.site_id == "001"
        assert config.country == "USA"
        assert config.demographics_file == Path("data/demographics.csv")
        assert config.exposure_file == Path("data/exposure.csv")
        assert config.output_dir == Path("output")
        assert config.output_formats == ("csv", "xpt")
        assert config.missing_subject_policy == "skip"

    def test_config_is_immutable(self):
        """Test that config is frozen and cannot be modified."""
        config = TranspilerConfig()

        with pytest.raises(FrozenInstanceError):
            config.study_id = "OTHER"  # type: ignore[misc]

    def test_empty_study_id_rejected(self):
        with pytest.raises(ValueError, match="study_id must not be empty"):
            TranspilerConfig(study_id="  ")

    def test_long_study_id_rejected(self):
        with pytest.raises(ValueError, match="at most 20 characters"):
            TranspilerConfig(study_id="S" * 21)

    def test_empty_site_id_rejected(self):
        with pytest.raises(ValueError, match="site_id must not be empty"):
            TranspilerConfig(site_id="")

    def test_unsupported_format_rejected(self):
        with pytest.raises(ValueError, match="Unsupported output format"):
            TranspilerConfig(output_formats=("csv", "xml"))

    def test_no_formats_rejected(self):
        with pytest.raises(ValueError, match="at least one format"):
            TranspilerConfig(output_formats=())

    def test_unknown_missing_subject_policy_rejected(self):
        with pytest.raises(ValueError, match="missing_subject_policy"):
            TranspilerConfig(missing_subject_policy="invent")

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        """Test loading config from environment variables."""
        monkeypatch.setenv("DM_STUDY_ID", "ENVSTUDY")
        monkeypatch.setenv("DM_SITE_ID", "042")
        monkeypatch.setenv("DM_COUNTRY", "NLD")
        monkeypatch.setenv("DM_DEMOGRAPHICS_FILE", "/env/dem.csv")
        monkeypatch.setenv("DM_EXPOSURE_FILE", "/env/ex.csv")
        monkeypatch.setenv("DM_OUTPUT_DIR", "/env/out")
        monkeypatch.setenv("DM_OUTPUT_FORMATS", "XPT")
        monkeypatch.setenv("DM_MISSING_SUBJECT_POLICY", "fail")

        config = TranspilerConfig.from_env()

        assert config.study_id == "ENVSTUDY"
        assert config.site_id == "042"
        assert config.country == "NLD"
        assert config.demographics_file == Path("/env/dem.csv")
        assert config.exposure_file == Path("/env/ex.csv")
        assert config.output_dir == Path("/env/out")
        assert config.output_formats == ("xpt",)
        assert config.missing_subject_policy == "fail"


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_load_with_no_toml_file(self):
        """Test loading config when TOML file doesn't exist."""
        config = ConfigLoader.load(config_file=Path("/nonexistent/config.toml"))

        assert config == TranspilerConfig()

    def test_load_from_toml(self, tmp_path: Path):
        """Test loading config from TOML file."""
        toml_file = tmp_path / "dm_transpiler.toml"
        toml_file.write_text(
            """
[study]
study_id = "TOML01"
site_id = "007"
country = "DEU"
missing_subject_policy = "fail"

[paths]
demographics_file = "/toml/dem.csv"
exposure_file = "/toml/ex.csv"
output_dir = "/toml/out"

[output]
formats = ["csv"]
"""
        )

        config = ConfigLoader.load(config_file=toml_file)

        assert config.study_id == "TOML01"
        assert config.site_id == "007"
        assert config.country == "DEU"
        assert config.missing_subject_policy == "fail"
        assert config.demographics_file == Path("/toml/dem.csv")
        assert config.exposure_file == Path("/toml/ex.csv")
        assert config.output_dir == Path("/toml/out")
        assert config.output_formats == ("csv",)

    def test_toml_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DM_STUDY_ID", "ENVSTUDY")
        monkeypatch.setenv("DM_SITE_ID", "042")
        toml_file = tmp_path / "dm_transpiler.toml"
        toml_file.write_text('[study]\nstudy_id = "TOML01"\n')

        config = ConfigLoader.load(config_file=toml_file)

        # TOML value
        assert config.study_id == "TOML01"
        # Environment value
        assert config.site_id == "042"

    def test_formats_as_comma_string(self, tmp_path: Path):
        toml_file = tmp_path / "dm_transpiler.toml"
        toml_file.write_text('[output]\nformats = "xpt, csv"\n')

        config = ConfigLoader.load(config_file=toml_file)

        assert config.output_formats == ("xpt", "csv")

    def test_invalid_toml_warns_and_keeps_defaults(self, tmp_path: Path):
        toml_file = tmp_path / "dm_transpiler.toml"
        toml_file.write_text("[study\nstudy_id = ")

        with pytest.warns(UserWarning, match="Failed to load config"):
            config = ConfigLoader.load(config_file=toml_file)

        assert config.study_id == "STUDY001"

    def test_invalid_values_in_toml_warn(self, tmp_path: Path):
        toml_file = tmp_path / "dm_transpiler.toml"
        toml_file.write_text('[output]\nformats = ["pdf"]\n')

        with pytest.warns(UserWarning, match="Unsupported output format"):
            config = ConfigLoader.load(config_file=toml_file)

        assert config.output_formats == ("csv", "xpt")
