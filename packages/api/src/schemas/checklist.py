# This project was developed with assistance from AI tools.
"""Generated checklist schemas.

All output models are frozen: a checklist is created once per application
snapshot and regenerated rather than edited.
"""

from datetime import datetime

from db.enums import ChecklistStage, DocumentType, InternalFlagType
from pydantic import BaseModel, ConfigDict


class ChecklistModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChecklistItem(ChecklistModel):
    """One requirement produced by one rule for one target."""

    rule_id: str
    document: str
    display_name: str
    stage: ChecklistStage
    for_email: bool
    section: str
    notes: str | None = None


class InternalFlag(ChecklistModel):
    """A requirement kept off the client-facing lists."""

    rule_id: str
    description: str
    type: InternalFlagType
    borrower_name: str | None = None
    check_note: str | None = None


class BorrowerChecklist(ChecklistModel):
    borrower_id: str
    borrower_name: str
    is_main_borrower: bool
    items: tuple[ChecklistItem, ...] = ()


class PropertyChecklist(ChecklistModel):
    property_id: str
    property_description: str
    items: tuple[ChecklistItem, ...] = ()


class ChecklistStats(ChecklistModel):
    total_items: int
    pre_items: int
    full_items: int
    per_borrower_items: int
    shared_items: int
    internal_flags: int
    warnings: int


class GeneratedChecklist(ChecklistModel):
    """Checklist for one application snapshot."""

    application_id: str
    generated_at: datetime
    borrower_checklists: tuple[BorrowerChecklist, ...] = ()
    property_checklists: tuple[PropertyChecklist, ...] = ()
    shared_items: tuple[ChecklistItem, ...] = ()
    internal_flags: tuple[InternalFlag, ...] = ()
    warnings: tuple[str, ...] = ()
    stats: ChecklistStats

    def client_items(self) -> list[ChecklistItem]:
        """Every client-facing item: borrowers, then properties, then shared."""
        items: list[ChecklistItem] = []
        for bc in self.borrower_checklists:
            items.extend(bc.items)
        for pc in self.property_checklists:
            items.extend(pc.items)
        items.extend(self.shared_items)
        return items


class ExistingDoc(ChecklistModel):
    """A document already on file from an earlier application."""

    file_id: str
    filename: str
    document_type: DocumentType
    borrower_name: str
    modified_at: datetime
    year: int | None = None


class AlreadyOnFileDoc(ChecklistModel):
    checklist_item: ChecklistItem
    file_id: str
    borrower_name: str


class ChecklistFilterResult(ChecklistModel):
    filtered_checklist: GeneratedChecklist
    already_on_file: tuple[AlreadyOnFileDoc, ...] = ()
    expired_docs: tuple[ExistingDoc, ...] = ()
