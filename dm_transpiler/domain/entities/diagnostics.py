from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DiagnosticCode(StrEnum):
    UNPARSEABLE_DATE = "UNPARSEABLE_DATE"
    UNKNOWN_TREATMENT = "UNKNOWN_TREATMENT"
    IMPLAUSIBLE_AGE = "IMPLAUSIBLE_AGE"
    NO_EXPOSURE = "NO_EXPOSURE"
    MISSING_SUBJECT_ID = "MISSING_SUBJECT_ID"
    DUPLICATE_SUBJECT_ID = "DUPLICATE_SUBJECT_ID"


class Severity(StrEnum):
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    subject_id: str
    message: str
    code: DiagnosticCode
    severity: Severity = Severity.WARNING

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def format(self) -> str:
        subject = self.subject_id or "<no subject>"
        return f"[{self.code}] {subject}: {self.message}"
