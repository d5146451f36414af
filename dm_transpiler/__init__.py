"""DM transpiler package.

This package builds the SDTM Demographics (DM) domain from raw clinical
trial sources.

Features:
- Date normalization from mixed source layouts to ISO 8601
- Exposure aggregation into reference start/end dates and planned arm
- SEX and treatment codelist mapping, AGE derivation
- CSV and XPT (SAS Transport v5) output
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("dm-transpiler")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from dm_transpiler.domain.entities.diagnostics import Diagnostic, DiagnosticCode
from dm_transpiler.domain.entities.records import (
    RawDemographicRecord,
    RawExposureRecord,
    StandardizedDemographicRecord,
)
from dm_transpiler.domain.entities.sdtm_domain import (
    DM_DOMAIN,
    SDTMDomain,
    SDTMVariable,
)
from dm_transpiler.domain.services.dm_frame_builder import build_dm_frame
from dm_transpiler.domain.services.dm_transformer import (
    DemographicsTransformer,
    DMTransformResult,
    transform_demographics,
)

__all__ = [
    "__version__",
    # Transformation
    "DemographicsTransformer",
    "DMTransformResult",
    "transform_demographics",
    "build_dm_frame",
    # Records
    "RawDemographicRecord",
    "RawExposureRecord",
    "StandardizedDemographicRecord",
    "Diagnostic",
    "DiagnosticCode",
    # Metadata
    "DM_DOMAIN",
    "SDTMDomain",
    "SDTMVariable",
]
