# This project was developed with assistance from AI tools.
"""Remove checklist items already satisfied by documents on file."""

import logging
from datetime import date

from db.enums import DocumentType

from ..schemas.checklist import (
    AlreadyOnFileDoc,
    BorrowerChecklist,
    ChecklistFilterResult,
    ChecklistItem,
    ExistingDoc,
    GeneratedChecklist,
)
from .checklist.engine import compute_stats
from .doc_expiry import is_doc_still_valid
from .doc_matcher import DOC_TYPE_LABELS

logger = logging.getLogger(__name__)

# Matched against both the short document name and the display label
ITEM_MATCH_ALIASES: dict[DocumentType, list[str]] = {
    DocumentType.PHOTO_ID: ["id", "photo id", "government-issued"],
    DocumentType.SECOND_ID: ["second id", "second form of id"],
    DocumentType.PAY_STUB: ["pay stub", "paystub"],
    DocumentType.LOE: ["letter of employment", "employment letter", "loe"],
    DocumentType.NOA: ["notice of assessment", "noa"],
    DocumentType.VOID_CHEQUE: ["void cheque", "direct deposit"],
    DocumentType.BANK_STATEMENT: ["bank statement", "90-day bank"],
    DocumentType.PR_CARD: ["pr card", "permanent resident"],
}


def doc_type_matches_item(document_type: DocumentType, item: ChecklistItem) -> bool:
    label = DOC_TYPE_LABELS.get(document_type)
    if not label:
        return False
    label = label.lower()
    texts = (item.document.lower(), item.display_name.lower())

    if any(t.startswith(label) for t in texts):
        return True
    if len(label) >= 3 and any(label in t for t in texts):
        return True
    return any(alias in t for alias in ITEM_MATCH_ALIASES.get(document_type, []) for t in texts)


def _take_match(items: list[ChecklistItem], document_type: DocumentType) -> ChecklistItem | None:
    for idx, item in enumerate(items):
        if item.for_email and doc_type_matches_item(document_type, item):
            return items.pop(idx)
    return None


def filter_checklist_by_existing_docs(
    checklist: GeneratedChecklist,
    existing_docs: list[ExistingDoc],
    evaluation_date: date,
) -> ChecklistFilterResult:
    """Drop items already covered by valid documents on file.

    Each valid document removes at most one item: first from the checklist of
    the borrower whose first name matches, otherwise from the shared items.
    Property items are left alone.

    Returns:
        The filtered checklist (a new instance with stats recomputed), the
        documents reused, and the documents skipped as expired.
    """
    already_on_file: list[AlreadyOnFileDoc] = []
    expired: list[ExistingDoc] = []
    valid: list[ExistingDoc] = []
    for doc in existing_docs:
        if doc.document_type in DocumentType.property_specific():
            continue
        if not is_doc_still_valid(doc, evaluation_date):
            expired.append(doc)
            continue
        valid.append(doc)

    borrower_items = [list(bc.items) for bc in checklist.borrower_checklists]
    shared_items = list(checklist.shared_items)

    for doc in valid:
        matched = None
        owner = doc.borrower_name.lower()
        for bc, items in zip(checklist.borrower_checklists, borrower_items):
            first_name = bc.borrower_name.split(" ")[0].lower()
            if first_name != owner:
                continue
            matched = _take_match(items, doc.document_type)
            if matched is not None:
                break
        if matched is None:
            matched = _take_match(shared_items, doc.document_type)
        if matched is not None:
            already_on_file.append(
                AlreadyOnFileDoc(checklist_item=matched, file_id=doc.file_id, borrower_name=doc.borrower_name)
            )

    borrower_checklists = tuple(
        BorrowerChecklist(
            borrower_id=bc.borrower_id,
            borrower_name=bc.borrower_name,
            is_main_borrower=bc.is_main_borrower,
            items=tuple(items),
        )
        for bc, items in zip(checklist.borrower_checklists, borrower_items)
    )
    stats = compute_stats(
        borrower_checklists,
        checklist.property_checklists,
        shared_items,
        len(checklist.internal_flags),
        len(checklist.warnings),
    )
    filtered = checklist.model_copy(
        update={
            "borrower_checklists": borrower_checklists,
            "shared_items": tuple(shared_items),
            "stats": stats,
        }
    )
    logger.info(
        "Application %s: %d items already on file, %d expired docs",
        checklist.application_id,
        len(already_on_file),
        len(expired),
    )
    return ChecklistFilterResult(
        filtered_checklist=filtered,
        already_on_file=tuple(already_on_file),
        expired_docs=tuple(expired),
    )
