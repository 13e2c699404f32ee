# This project was developed with assistance from AI tools.
"""Requirement tracking: apply a received document to outstanding checklists.

A classified document arrives for a sender. The contact's open deals are read,
the matching missing entry is moved to received on each targeted deal, stage
counters and status are recomputed, and the new state is written back.
Milestone notifications fire only on the receipt that moves a target into the
milestone status. They and the audit note come after the write and never
undo it; their failures are reported in ``errors``.

Contacts without an open deal are tracked on the contact record itself.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any, Protocol

from db.enums import (
    ChecklistStage,
    DocStatus,
    DocumentType,
    TrackingField,
    TrackingSkipReason,
    TrackingTarget,
)

from ..schemas.tracking import (
    ContactRecord,
    DealRecord,
    DocEntry,
    DocumentReceiptEvent,
    TrackingFields,
    TrackingUpdateResult,
)
from .checklist.engine import local_today
from .doc_matcher import find_matching_entry, is_property_specific
from .doc_status import compute_doc_status
from .tracking_fields import format_missing_entries, format_received_names, parse_tracking_fields

logger = logging.getLogger(__name__)

FieldWrites = list[tuple[TrackingField, Any]]


class TrackingDirectory(Protocol):
    async def find_contact_id(self, email: str) -> str | None: ...

    async def get_contact(self, contact_id: str) -> ContactRecord | None: ...

    async def list_deals(self, contact_id: str) -> list[DealRecord]: ...


class TrackingWriter(Protocol):
    async def write_deal_fields(self, deal_id: str, fields: FieldWrites) -> None: ...

    async def write_contact_fields(self, contact_id: str, fields: FieldWrites) -> None: ...


class MilestoneNotifier(Protocol):
    async def pre_ready(self, contact_id: str, contact_name: str) -> None: ...

    async def all_received(self, deal_id: str) -> None: ...


class AuditNoteWriter(Protocol):
    async def create_note(self, contact_id: str, doc_name: str, source: str, file_id: str) -> str | None: ...


@dataclass(frozen=True)
class ReceiptUpdate:
    """Field changes produced by one matched receipt on one target."""

    matched: DocEntry
    previous_status: DocStatus
    status: DocStatus
    writes: FieldWrites

    def reached(self, milestone: DocStatus) -> bool:
        """True when this receipt moved the target into ``milestone``."""
        return self.status == milestone and self.previous_status != milestone


def apply_receipt(
    fields: TrackingFields,
    document_type: DocumentType,
    today: date,
) -> tuple[ReceiptUpdate | None, TrackingSkipReason | None]:
    """Compute the new tracking state for one target, without side effects.

    Every missing entry carrying the matched name is removed, and each removed
    PRE or FULL entry counts once toward its stage. A checklist with several
    borrowers lists shared names once per borrower.
    """
    matched = find_matching_entry(document_type, fields.missing_docs)
    if matched is None:
        return None, TrackingSkipReason.NO_MATCH_IN_CHECKLIST
    if matched.name in fields.received_docs:
        return None, TrackingSkipReason.ALREADY_RECEIVED

    missing = [e for e in fields.missing_docs if e.name != matched.name]
    received = [*fields.received_docs, matched.name]

    counted = ChecklistStage.counted_stages()
    bumps = Counter(e.stage for e in fields.missing_docs if e.name == matched.name and e.stage in counted)
    pre_received = fields.pre_docs_received + bumps[ChecklistStage.PRE]
    full_received = fields.full_docs_received + bumps[ChecklistStage.FULL]

    previous = compute_doc_status(
        fields.pre_docs_total, fields.pre_docs_received, fields.full_docs_total, fields.full_docs_received
    )
    status = compute_doc_status(fields.pre_docs_total, pre_received, fields.full_docs_total, full_received)
    writes: FieldWrites = [
        (TrackingField.MISSING_DOCS, format_missing_entries(missing)),
        (TrackingField.RECEIVED_DOCS, format_received_names(received)),
        (TrackingField.PRE_DOCS_RECEIVED, pre_received),
        (TrackingField.FULL_DOCS_RECEIVED, full_received),
        (TrackingField.DOC_STATUS, status),
        (TrackingField.LAST_DOC_RECEIVED, today),
    ]
    return ReceiptUpdate(matched=matched, previous_status=previous, status=status, writes=writes), None


def select_deals(deals: Sequence[DealRecord], event: DocumentReceiptEvent) -> list[DealRecord] | None:
    """Pick the open deals a receipt applies to; None when the choice is ambiguous."""
    if not is_property_specific(event.document_type) or len(deals) == 1:
        return list(deals)
    if event.application_ref:
        for deal in deals:
            if deal.application_ref == event.application_ref:
                return [deal]
    return None


def _skip_reason(reasons: list[TrackingSkipReason]) -> TrackingSkipReason:
    if reasons and all(r == TrackingSkipReason.ALREADY_RECEIVED for r in reasons):
        return TrackingSkipReason.ALREADY_RECEIVED
    return TrackingSkipReason.NO_MATCH_IN_CHECKLIST


async def update_tracking(
    event: DocumentReceiptEvent,
    *,
    directory: TrackingDirectory,
    writer: TrackingWriter,
    notifier: MilestoneNotifier,
    audit: AuditNoteWriter | None = None,
    today: date | None = None,
) -> TrackingUpdateResult:
    """Apply one received document to the sender's tracking state.

    Args:
        event: The classified document.
        directory: Reads contacts and deals.
        writer: Persists tracking fields.
        notifier: Receives PRE-ready and all-received milestones.
        audit: Optional audit note sink.
        today: Date recorded as the last receipt. Defaults to today.

    Returns:
        What changed, or why nothing did. Only reads and tracking writes
        raise; milestone and audit failures are listed in ``errors``.
    """
    today = today or local_today()

    contact_id = event.contact_id or await directory.find_contact_id(event.sender_email)
    if not contact_id:
        logger.info("No contact for %s receipt %s", event.document_type.value, event.drive_file_id)
        return TrackingUpdateResult(updated=False, reason=TrackingSkipReason.NO_CONTACT)

    contact = await directory.get_contact(contact_id)
    if contact is None:
        logger.info("Contact %s not found for receipt %s", contact_id, event.drive_file_id)
        return TrackingUpdateResult(updated=False, reason=TrackingSkipReason.NO_CONTACT, contact_id=contact_id)

    open_deals = [d for d in await directory.list_deals(contact_id) if d.is_open]

    if not open_deals:
        update, reason = apply_receipt(parse_tracking_fields(contact.fields), event.document_type, today)
        if update is None:
            logger.info("Contact %s: %s not applied (%s)", contact_id, event.document_type.value, reason.value)
            return TrackingUpdateResult(
                updated=False,
                reason=reason,
                contact_id=contact_id,
                tracking_target=TrackingTarget.CONTACT,
            )
        await writer.write_contact_fields(contact_id, update.writes)
        logger.info("Contact %s: received %s, status %s", contact_id, update.matched.name, update.status.value)
        updates: list[tuple[DealRecord | None, ReceiptUpdate]] = [(None, update)]
        target = TrackingTarget.CONTACT
    else:
        targets = select_deals(open_deals, event)
        if targets is None:
            logger.warning(
                "Contact %s: %s is ambiguous across %d open deals",
                contact_id,
                event.document_type.value,
                len(open_deals),
            )
            return TrackingUpdateResult(
                updated=False,
                reason=TrackingSkipReason.AMBIGUOUS_DEAL,
                contact_id=contact_id,
                tracking_target=TrackingTarget.DEAL,
            )

        updates = []
        skipped: list[TrackingSkipReason] = []
        for deal in targets:
            update, reason = apply_receipt(parse_tracking_fields(deal.fields), event.document_type, today)
            if update is None:
                skipped.append(reason)
                continue
            await writer.write_deal_fields(deal.id, update.writes)
            logger.info("Deal %s: received %s, status %s", deal.id, update.matched.name, update.status.value)
            updates.append((deal, update))

        if not updates:
            return TrackingUpdateResult(
                updated=False,
                reason=_skip_reason(skipped),
                contact_id=contact_id,
                tracking_target=TrackingTarget.DEAL,
            )
        target = TrackingTarget.DEAL

    errors: list[str] = []
    pre_notified = False
    for deal, update in updates:
        if update.reached(DocStatus.PRE_COMPLETE) and not pre_notified:
            pre_notified = True
            try:
                await notifier.pre_ready(contact_id, contact.full_name)
            except Exception as exc:
                logger.warning("PRE readiness notification failed for contact %s", contact_id)
                errors.append(f"PRE readiness task failed: {exc}")
        # Contact-level tracking has no pipeline stage to advance
        if update.reached(DocStatus.ALL_COMPLETE) and deal is not None:
            try:
                await notifier.all_received(deal.id)
            except Exception as exc:
                logger.warning("Pipeline advance failed for deal %s", deal.id)
                errors.append(f"Pipeline advance failed: {exc}")

    first_deal, first = updates[0]
    note_id = None
    if audit is not None:
        try:
            note_id = await audit.create_note(contact_id, first.matched.name, event.source.value, event.drive_file_id)
        except Exception as exc:
            logger.warning("Audit note failed for contact %s", contact_id)
            errors.append(f"Audit note failed: {exc}")

    return TrackingUpdateResult(
        updated=True,
        contact_id=contact_id,
        deal_id=first_deal.id if first_deal is not None else None,
        deals_updated=[deal.id for deal, _ in updates if deal is not None],
        tracking_target=target,
        matched_doc=first.matched.name,
        new_status=first.status,
        note_id=note_id,
        errors=errors,
    )
