"""Domain entities.

Raw source records, the standardized DM record, diagnostics and the DM
variable definitions.
"""

from .diagnostics import Diagnostic, DiagnosticCode, Severity
from .records import (
    ExposureSummary,
    RawDemographicRecord,
    RawExposureRecord,
    StandardizedDemographicRecord,
)
from .sdtm_domain import DM_DOMAIN, DM_VARIABLES, SDTMDomain, SDTMVariable

__all__ = [
    # Records
    "RawDemographicRecord",
    "RawExposureRecord",
    "ExposureSummary",
    "StandardizedDemographicRecord",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCode",
    "Severity",
    # DM schema
    "DM_DOMAIN",
    "DM_VARIABLES",
    "SDTMDomain",
    "SDTMVariable",
]
