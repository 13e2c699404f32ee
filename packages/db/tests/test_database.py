# This project was developed with assistance from AI tools.
"""Schema tests for the tracking tables (no database required)."""

from db import Base, Contact, Deal, ReceiptNote
from db.enums import ChecklistStage, DocumentType, TrackingField


def test_tables_registered():
    assert {"contacts", "deals", "receipt_notes"} <= set(Base.metadata.tables)


def test_contacts_and_deals_share_tracking_columns():
    """Every tracking field is a column on both contacts and deals."""
    for model in (Contact, Deal):
        columns = set(model.__table__.columns.keys())
        assert {f.value for f in TrackingField} <= columns


def test_contact_email_unique():
    assert Contact.__table__.columns["email"].unique


def test_deal_and_note_reference_contact():
    for model in (Deal, ReceiptNote):
        fk = next(iter(model.__table__.columns["contact_id"].foreign_keys))
        assert fk.target_fullname == "contacts.id"


def test_counted_stages():
    assert ChecklistStage.counted_stages() == {ChecklistStage.PRE, ChecklistStage.FULL}


def test_property_specific_types():
    specific = DocumentType.property_specific()
    assert DocumentType.MORTGAGE_STATEMENT in specific
    assert DocumentType.PAY_STUB not in specific
