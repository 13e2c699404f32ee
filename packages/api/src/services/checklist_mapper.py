# This project was developed with assistance from AI tools.
"""Turn a generated checklist into initial tracking state.

Only short document names are stored, never display labels, and never
borrower details.
"""

from collections import Counter
from datetime import date

from db.enums import ChecklistStage, DocStatus, TrackingField

from ..schemas.checklist import GeneratedChecklist
from ..schemas.tracking import DocEntry, TrackingFields
from .tracking import FieldWrites
from .tracking_fields import format_missing_entries, format_received_names


def map_checklist_to_tracking(checklist: GeneratedChecklist, today: date) -> TrackingFields:
    """Initial tracking fields: every client-facing item missing, nothing received."""
    items = checklist.client_items()
    counted = ChecklistStage.counted_stages()
    totals = Counter(i.stage for i in items if i.stage in counted)
    return TrackingFields(
        missing_docs=[DocEntry(name=item.document, stage=item.stage) for item in items],
        received_docs=[],
        pre_docs_total=totals[ChecklistStage.PRE],
        pre_docs_received=0,
        full_docs_total=totals[ChecklistStage.FULL],
        full_docs_received=0,
        doc_status=DocStatus.IN_PROGRESS,
        doc_request_sent=today,
    )


def to_field_writes(fields: TrackingFields) -> FieldWrites:
    """Encode tracking fields for a TrackingWriter."""
    return [
        (TrackingField.DOC_STATUS, fields.doc_status),
        (TrackingField.PRE_DOCS_TOTAL, fields.pre_docs_total),
        (TrackingField.PRE_DOCS_RECEIVED, fields.pre_docs_received),
        (TrackingField.FULL_DOCS_TOTAL, fields.full_docs_total),
        (TrackingField.FULL_DOCS_RECEIVED, fields.full_docs_received),
        (TrackingField.MISSING_DOCS, format_missing_entries(fields.missing_docs)),
        (TrackingField.RECEIVED_DOCS, format_received_names(fields.received_docs)),
        (TrackingField.DOC_REQUEST_SENT, fields.doc_request_sent),
    ]


def build_checklist_summary(checklist: GeneratedChecklist) -> str:
    """Compact multi-line overview for a review task."""
    stats = checklist.stats
    lines = [
        f"Total: {stats.total_items - stats.internal_flags} client docs, {stats.internal_flags} internal flags",
        f"PRE: {stats.pre_items} | FULL: {stats.full_items}",
    ]
    for bc in checklist.borrower_checklists:
        lines.append(f"{bc.borrower_name}: {len(bc.items)} items")
    if checklist.shared_items:
        lines.append(f"Shared: {len(checklist.shared_items)} items")
    if checklist.warnings:
        lines.append(f"Warnings: {len(checklist.warnings)} warning(s)")
    return "\n".join(lines)
