# This project was developed with assistance from AI tools.
"""
Document tracking models

Contacts and their deals each carry the same set of tracking columns: the
outstanding/received requirement lists in their text encoding plus the four
completion counters. Receipt notes form the audit trail.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base
from .enums import DealStatus, DocStatus


class TrackingColumnsMixin:
    """Requirement tracking state shared by contacts and deals."""

    missing_docs = Column(Text, nullable=True)
    received_docs = Column(Text, nullable=True)
    pre_docs_total = Column(Integer, nullable=False, default=0)
    pre_docs_received = Column(Integer, nullable=False, default=0)
    full_docs_total = Column(Integer, nullable=False, default=0)
    full_docs_received = Column(Integer, nullable=False, default=0)
    doc_status = Column(
        Enum(DocStatus, name="doc_status", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    doc_request_sent = Column(Date, nullable=True)
    last_doc_received = Column(Date, nullable=True)


class Contact(TrackingColumnsMixin, Base):
    """A client of the brokerage, looked up by email address."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    deals = relationship("Deal", back_populates="contact", cascade="all, delete-orphan", order_by="Deal.id")
    receipt_notes = relationship("ReceiptNote", back_populates="contact", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Contact(id={self.id})>"


class Deal(TrackingColumnsMixin, Base):
    """One financing opportunity for a contact, tied to a loan application."""

    __tablename__ = "deals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    contact_id = Column(Integer, ForeignKey("contacts.id", ondelete="CASCADE"), nullable=False, index=True)
    application_ref = Column(String(64), nullable=True, index=True)
    status = Column(
        Enum(DealStatus, name="deal_status", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=DealStatus.OPEN,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    contact = relationship("Contact", back_populates="deals")

    def __repr__(self):
        return f"<Deal(id={self.id}, contact_id={self.contact_id}, status='{self.status}')>"


class ReceiptNote(Base):
    """Audit note written when a received document satisfies a requirement."""

    __tablename__ = "receipt_notes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    contact_id = Column(Integer, ForeignKey("contacts.id", ondelete="CASCADE"), nullable=False, index=True)
    doc_name = Column(String(255), nullable=False)
    source = Column(String(20), nullable=False)
    file_id = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    contact = relationship("Contact", back_populates="receipt_notes")

    def __repr__(self):
        return f"<ReceiptNote(id={self.id}, contact_id={self.contact_id})>"
