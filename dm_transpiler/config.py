from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Constraints, Defaults


@dataclass(frozen=True, slots=True)
class TranspilerConfig:
    study_id: str = Defaults.STUDY_ID
    site_id: str = Defaults.SITE_ID
    country: str = Defaults.COUNTRY
    demographics_file: Path = field(
        default_factory=lambda: Path(Defaults.DEMOGRAPHICS_FILE)
    )
    exposure_file: Path = field(default_factory=lambda: Path(Defaults.EXPOSURE_FILE))
    output_dir: Path = field(default_factory=lambda: Path(Defaults.OUTPUT_DIR))
    output_formats: tuple[str, ...] = Defaults.OUTPUT_FORMATS
    missing_subject_policy: str = Defaults.MISSING_SUBJECT_POLICY

    def __post_init__(self) -> None:
        if not self.study_id.strip():
            raise ValueError("study_id must not be empty")
        if len(self.study_id) > Constraints.STUDYID_MAX_LENGTH:
            raise ValueError(
                f"study_id must be at most {Constraints.STUDYID_MAX_LENGTH} "
                f"characters, got {len(self.study_id)}"
            )
        if not self.site_id.strip():
            raise ValueError("site_id must not be empty")
        if not self.output_formats:
            raise ValueError("output_formats must name at least one format")
        unknown = set(self.output_formats) - Constraints.SUPPORTED_OUTPUT_FORMATS
        if unknown:
            raise ValueError(
                f"Unsupported output format(s): {', '.join(sorted(unknown))}"
            )
        if self.missing_subject_policy not in Constraints.MISSING_SUBJECT_POLICIES:
            raise ValueError(
                "missing_subject_policy must be 'skip' or 'fail', "
                f"got {self.missing_subject_policy!r}"
            )

    @classmethod
    def from_env(cls) -> TranspilerConfig:
        raw_formats = os.getenv("DM_OUTPUT_FORMATS")
        output_formats = (
            _split_formats(raw_formats) if raw_formats else Defaults.OUTPUT_FORMATS
        )
        return cls(
            study_id=os.getenv("DM_STUDY_ID", Defaults.STUDY_ID).strip(),
            site_id=os.getenv("DM_SITE_ID", Defaults.SITE_ID).strip(),
            country=os.getenv("DM_COUNTRY", Defaults.COUNTRY).strip(),
            demographics_file=Path(
                os.getenv("DM_DEMOGRAPHICS_FILE", Defaults.DEMOGRAPHICS_FILE)
            ),
            exposure_file=Path(os.getenv("DM_EXPOSURE_FILE", Defaults.EXPOSURE_FILE)),
            output_dir=Path(os.getenv("DM_OUTPUT_DIR", Defaults.OUTPUT_DIR)),
            output_formats=output_formats,
            missing_subject_policy=os.getenv(
                "DM_MISSING_SUBJECT_POLICY", Defaults.MISSING_SUBJECT_POLICY
            ).strip(),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TranspilerConfig:
        config = TranspilerConfig.from_env()
        if config_file is None:
            config_file = Path("dm_transpiler.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, ValueError, tomllib.TOMLDecodeError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TranspilerConfig
    ) -> TranspilerConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        study = _get_table(data, "study")
        paths = _get_table(data, "paths")
        output = _get_table(data, "output")
        study_id = base_config.study_id
        if value := study.get("study_id"):
            study_id = str(value).strip()
        site_id = base_config.site_id
        if value := study.get("site_id"):
            site_id = str(value).strip()
        country = base_config.country
        if value := study.get("country"):
            country = str(value).strip()
        missing_subject_policy = base_config.missing_subject_policy
        if value := study.get("missing_subject_policy"):
            missing_subject_policy = str(value).strip()
        demographics_file = base_config.demographics_file
        if value := paths.get("demographics_file"):
            demographics_file = Path(str(value))
        exposure_file = base_config.exposure_file
        if value := paths.get("exposure_file"):
            exposure_file = Path(str(value))
        output_dir = base_config.output_dir
        if value := paths.get("output_dir"):
            output_dir = Path(str(value))
        output_formats = base_config.output_formats
        if (value := output.get("formats")) is not None:
            output_formats = _coerce_formats(value, key="output.formats")
        return TranspilerConfig(
            study_id=study_id,
            site_id=site_id,
            country=country,
            demographics_file=demographics_file,
            exposure_file=exposure_file,
            output_dir=output_dir,
            output_formats=output_formats,
            missing_subject_policy=missing_subject_policy,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _split_formats(raw: str) -> tuple[str, ...]:
    return tuple(part.strip().lower() for part in raw.split(",") if part.strip())


def _coerce_formats(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return _split_formats(value)
    if isinstance(value, list):
        items = cast("list[object]", value)
        return tuple(str(item).strip().lower() for item in items if str(item).strip())
    raise ValueError(f"{key} must be a list or string, got {type(value).__name__}")
