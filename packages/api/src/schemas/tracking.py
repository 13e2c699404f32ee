# This project was developed with assistance from AI tools.
"""Requirement tracking schemas."""

from datetime import date, datetime
from typing import Any

from db.enums import (
    ChecklistStage,
    DealStatus,
    DocStatus,
    DocumentType,
    ReceiptSource,
    TrackingField,
    TrackingSkipReason,
    TrackingTarget,
)
from pydantic import BaseModel, ConfigDict, Field


class DocEntry(BaseModel):
    """An outstanding or fulfilled requirement, keyed by its short name."""

    model_config = ConfigDict(frozen=True)

    name: str
    stage: ChecklistStage = ChecklistStage.PRE


class TrackingFields(BaseModel):
    """Decoded tracking state for one contact or deal."""

    missing_docs: list[DocEntry] = Field(default_factory=list)
    received_docs: list[str] = Field(default_factory=list)
    pre_docs_total: int = 0
    pre_docs_received: int = 0
    full_docs_total: int = 0
    full_docs_received: int = 0
    doc_status: DocStatus | None = None
    doc_request_sent: date | None = None


class ContactRecord(BaseModel):
    """Contact as returned by the directory, with raw tracking values."""

    id: str
    email: str | None = None
    first_name: str = ""
    last_name: str = ""
    fields: dict[TrackingField, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class DealRecord(BaseModel):
    """Deal as returned by the directory, with raw tracking values."""

    id: str
    contact_id: str
    status: DealStatus | str = DealStatus.OPEN
    application_ref: str | None = None
    fields: dict[TrackingField, Any] = Field(default_factory=dict)

    @property
    def is_open(self) -> bool:
        return self.status == DealStatus.OPEN


class DocumentReceiptEvent(BaseModel):
    """A classified document arriving from email or the application portal."""

    sender_email: str
    document_type: DocumentType
    drive_file_id: str
    source: ReceiptSource
    received_at: datetime
    contact_id: str | None = None
    application_ref: str | None = None


class TrackingUpdateResult(BaseModel):
    """Outcome of applying one receipt event."""

    updated: bool
    reason: TrackingSkipReason | None = None
    contact_id: str | None = None
    deal_id: str | None = None
    deals_updated: list[str] = Field(default_factory=list)
    tracking_target: TrackingTarget | None = None
    matched_doc: str | None = None
    new_status: DocStatus | None = None
    note_id: str | None = None
    errors: list[str] = Field(default_factory=list)
