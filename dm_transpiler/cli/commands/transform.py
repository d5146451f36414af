"""Transform command - build the DM dataset from raw study sources.

This module is a thin adapter between click and the application layer's
DMProcessingUseCase. It resolves configuration (TOML file, environment,
then command-line overrides), runs the use case and presents the result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ProcessDMRequest
from ...config import ConfigLoader, TranspilerConfig
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import SummaryPresenter, SummaryRequest

console = Console()

FORMAT_CHOICES: dict[str, tuple[str, ...]] = {
    "csv": ("csv",),
    "xpt": ("xpt",),
    "both": ("csv", "xpt"),
}


@dataclass(frozen=True)
class TransformCommandOptions:
    config_file: Path | None
    demographics_file: Path | None
    exposure_file: Path | None
    output_dir: Path | None
    study_id: str | None
    site_id: str | None
    output_format: str | None
    strict: bool
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> TransformCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            demographics_file=cast("Path | None", options.get("demographics_file")),
            exposure_file=cast("Path | None", options.get("exposure_file")),
            output_dir=cast("Path | None", options.get("output_dir")),
            study_id=cast("str | None", options.get("study_id")),
            site_id=cast("str | None", options.get("site_id")),
            output_format=cast("str | None", options.get("output_format")),
            strict=cast("bool", options["strict"]),
            verbose=cast("int", options["verbose"]),
        )

    def apply_to(self, config: TranspilerConfig) -> TranspilerConfig:
        overrides: dict[str, object] = {}
        if self.demographics_file is not None:
            overrides["demographics_file"] = self.demographics_file
        if self.exposure_file is not None:
            overrides["exposure_file"] = self.exposure_file
        if self.output_dir is not None:
            overrides["output_dir"] = self.output_dir
        if self.study_id is not None:
            overrides["study_id"] = self.study_id
        if self.site_id is not None:
            overrides["site_id"] = self.site_id
        if self.output_format is not None:
            overrides["output_formats"] = FORMAT_CHOICES[self.output_format]
        if not overrides:
            return config
        return replace(config, **overrides)


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a dm_transpiler.toml config file (default: ./dm_transpiler.toml)",
)
@click.option(
    "--demographics",
    "demographics_file",
    type=click.Path(path_type=Path),
    help="Raw demographics source (CSV, TSV, Excel or SAS7BDAT)",
)
@click.option(
    "--exposure",
    "exposure_file",
    type=click.Path(path_type=Path),
    help="Raw exposure source (CSV, TSV, Excel or SAS7BDAT)",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(path_type=Path),
    help="Output directory for dm.csv / dm.xpt",
)
@click.option("--study-id", help="Study identifier (STUDYID)")
@click.option("--site-id", help="Site identifier (SITEID)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(FORMAT_CHOICES)),
    help="Output format: csv, xpt (SAS transport v5), or both",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error when any data-quality diagnostic is reported",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def transform_command(**options: object) -> None:
    """Build the SDTM Demographics (DM) dataset.

    Reads the raw demographics and exposure sources, derives one DM record
    per subject and writes the dataset in the requested formats.

    Examples:

    \b
        # Use ./dm_transpiler.toml or DM_* environment variables
        dm-transpiler transform

    \b
        # Explicit sources and study identifiers, XPT only
        dm-transpiler transform --demographics raw/dem.csv \\
            --exposure raw/ex.csv --study-id ABC123 --site-id 01 --format xpt
    """
    command_options = TransformCommandOptions.from_kwargs(dict(options))

    try:
        config = command_options.apply_to(
            ConfigLoader.load(config_file=command_options.config_file)
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    request = replace(
        ProcessDMRequest.from_config(config), verbose=command_options.verbose
    )

    container = DependencyContainer(verbose=command_options.verbose, console=console)
    use_case = container.create_dm_processing_use_case()
    response = use_case.execute(request)

    presenter = SummaryPresenter(console)
    presenter.present(
        SummaryRequest(
            study_id=config.study_id,
            records=response.records,
            diagnostics=response.diagnostics,
            output_dir=config.output_dir,
            output=response.output,
            error=response.error,
        )
    )

    if not response.success:
        raise click.ClickException("DM processing failed")
    if command_options.strict and response.has_diagnostics:
        raise click.ClickException(
            f"{len(response.diagnostics)} diagnostic(s) reported in strict mode"
        )
