# This project was developed with assistance from AI tools.
"""Database-backed tracking directory, writer and audit note sink.

Writes flush but never commit; the caller owns the transaction so a receipt's
field updates and its audit note land together.
"""

import logging
from typing import Any

from db import Contact, Deal, ReceiptNote
from db.enums import TrackingField
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..schemas.tracking import ContactRecord, DealRecord
from .tracking import FieldWrites

logger = logging.getLogger(__name__)


def _row_id(value: str) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _tracking_values(row: Contact | Deal) -> dict[TrackingField, Any]:
    return {field: getattr(row, field.value) for field in TrackingField}


def _apply_writes(row: Contact | Deal, fields: FieldWrites) -> None:
    for field, value in fields:
        setattr(row, field.value, value)


def build_note_body(doc_name: str, source: str, file_id: str) -> str:
    return "\n".join(
        [
            f"{settings.TRACKING_NOTE_PREFIX}: {doc_name}",
            f"Source: {source}",
            f"File: {file_id}",
            f"Logged by {settings.APP_NAME}",
        ]
    )


class TrackingStore:
    """Tracking collaborators backed by the contacts and deals tables."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_contact_id(self, email: str) -> str | None:
        stmt = select(Contact.id).where(func.lower(Contact.email) == email.strip().lower())
        result = await self.session.execute(stmt)
        contact_id = result.scalar_one_or_none()
        return str(contact_id) if contact_id is not None else None

    async def _get(self, model: type[Contact] | type[Deal], row_id: str) -> Contact | Deal | None:
        key = _row_id(row_id)
        if key is None:
            return None
        return await self.session.get(model, key)

    async def get_contact(self, contact_id: str) -> ContactRecord | None:
        contact = await self._get(Contact, contact_id)
        if contact is None:
            return None
        return ContactRecord(
            id=str(contact.id),
            email=contact.email,
            first_name=contact.first_name,
            last_name=contact.last_name,
            fields=_tracking_values(contact),
        )

    async def list_deals(self, contact_id: str) -> list[DealRecord]:
        key = _row_id(contact_id)
        if key is None:
            return []
        stmt = select(Deal).where(Deal.contact_id == key).order_by(Deal.id)
        result = await self.session.execute(stmt)
        return [
            DealRecord(
                id=str(deal.id),
                contact_id=str(deal.contact_id),
                status=deal.status,
                application_ref=deal.application_ref,
                fields=_tracking_values(deal),
            )
            for deal in result.scalars().all()
        ]

    async def write_deal_fields(self, deal_id: str, fields: FieldWrites) -> None:
        deal = await self._get(Deal, deal_id)
        if deal is None:
            raise LookupError(f"Deal {deal_id} not found")
        _apply_writes(deal, fields)
        await self.session.flush()
        logger.debug("Wrote %d tracking fields to deal %s", len(fields), deal_id)

    async def write_contact_fields(self, contact_id: str, fields: FieldWrites) -> None:
        contact = await self._get(Contact, contact_id)
        if contact is None:
            raise LookupError(f"Contact {contact_id} not found")
        _apply_writes(contact, fields)
        await self.session.flush()
        logger.debug("Wrote %d tracking fields to contact %s", len(fields), contact_id)

    async def create_note(self, contact_id: str, doc_name: str, source: str, file_id: str) -> str | None:
        key = _row_id(contact_id)
        if key is None:
            raise LookupError(f"Contact {contact_id} not found")
        note = ReceiptNote(
            contact_id=key,
            doc_name=doc_name,
            source=source,
            file_id=file_id,
            body=build_note_body(doc_name, source, file_id),
        )
        self.session.add(note)
        await self.session.flush()
        return str(note.id)
