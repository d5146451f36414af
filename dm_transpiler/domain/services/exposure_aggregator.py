"""Per-subject first/last exposure extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...pandas_utils import clean_text, strip_text
from ..entities.diagnostics import Diagnostic, DiagnosticCode, Severity
from ..entities.records import ExposureSummary
from .transformers.date import parse_date

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from ..entities.records import RawExposureRecord


def aggregate_exposures(
    events: Iterable[RawExposureRecord],
    diagnostics: list[Diagnostic] | None = None,
) -> dict[str, ExposureSummary]:
    """Build one ``ExposureSummary`` per subject.

    Events are ordered by parsed date, ties keeping input order. Events
    whose date is missing or unparseable take no part in the ordering and
    are reported through ``diagnostics`` when a list is supplied, as are
    events without a subject id. A subject left with no dated events gets
    no summary.
    """
    dated: dict[str, list[tuple[date, int, RawExposureRecord]]] = {}

    for position, event in enumerate(events):
        subject_id = clean_text(event.subject_id)
        if not subject_id:
            _report(
                diagnostics,
                Diagnostic(
                    subject_id="",
                    message=f"Exposure record #{position + 1} has no subject id; skipped",
                    code=DiagnosticCode.MISSING_SUBJECT_ID,
                    severity=Severity.ERROR,
                ),
            )
            continue
        event_date = parse_date(event.event_date)
        if event_date is None:
            raw = strip_text(event.event_date)
            reason = f"unparseable date {raw!r}" if raw else "missing date"
            _report(
                diagnostics,
                Diagnostic(
                    subject_id=subject_id,
                    message=(
                        f"Exposure record #{position + 1} excluded from "
                        f"first/last selection: {reason}"
                    ),
                    code=DiagnosticCode.UNPARSEABLE_DATE,
                ),
            )
            continue
        dated.setdefault(subject_id, []).append((event_date, position, event))

    summaries: dict[str, ExposureSummary] = {}
    for subject_id, entries in dated.items():
        ordered = sorted(entries, key=lambda entry: (entry[0], entry[1]))
        first = ordered[0][2]
        last = ordered[-1][2]
        summaries[subject_id] = ExposureSummary(
            subject_id=subject_id,
            earliest_date=strip_text(first.event_date),
            earliest_treatment_code=strip_text(first.treatment_code),
            latest_date=strip_text(last.event_date),
            latest_treatment_code=strip_text(last.treatment_code),
        )
    return summaries


def _report(diagnostics: list[Diagnostic] | None, diagnostic: Diagnostic) -> None:
    if diagnostics is not None:
        diagnostics.append(diagnostic)
