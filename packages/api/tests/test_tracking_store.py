# This project was developed with assistance from AI tools.
"""Tests for the database-backed tracking store."""

from datetime import date
from unittest.mock import MagicMock

import pytest
from db import Contact, Deal, ReceiptNote
from db.enums import DealStatus, DocStatus, TrackingField
from tests.factories import make_mock_session

from src.services.tracking_store import TrackingStore, build_note_body


def _contact(**overrides):
    data = {
        "id": 7,
        "email": "alex@example.com",
        "first_name": "Alex",
        "last_name": "Tremblay",
        "missing_docs": "Letter of Employment [PRE]",
        "received_docs": None,
        "pre_docs_total": 1,
        "pre_docs_received": 0,
        "full_docs_total": 0,
        "full_docs_received": 0,
    }
    data.update(overrides)
    return Contact(**data)


def _deal(id=11, status=DealStatus.OPEN, **overrides):
    return Deal(id=id, contact_id=7, status=status, application_ref=f"app-{id}", pre_docs_total=2, **overrides)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


async def test_find_contact_id_returns_string():
    session = make_mock_session(single=7)

    assert await TrackingStore(session).find_contact_id("  Alex@Example.com ") == "7"
    session.execute.assert_awaited_once()


async def test_find_contact_id_none():
    session = make_mock_session(single=None)

    assert await TrackingStore(session).find_contact_id("nobody@example.com") is None


async def test_get_contact_maps_tracking_columns():
    session = make_mock_session(get=_contact())

    contact = await TrackingStore(session).get_contact("7")

    assert contact.id == "7"
    assert contact.full_name == "Alex Tremblay"
    assert contact.fields[TrackingField.MISSING_DOCS] == "Letter of Employment [PRE]"
    assert contact.fields[TrackingField.PRE_DOCS_TOTAL] == 1
    assert set(contact.fields) == set(TrackingField)
    session.get.assert_awaited_once_with(Contact, 7)


async def test_get_contact_non_numeric_id():
    session = make_mock_session()

    assert await TrackingStore(session).get_contact("abc") is None
    session.get.assert_not_called()


async def test_list_deals():
    session = make_mock_session(items=[_deal(11), _deal(12, status=DealStatus.WON)])

    deals = await TrackingStore(session).list_deals("7")

    assert [d.id for d in deals] == ["11", "12"]
    assert [d.is_open for d in deals] == [True, False]
    assert deals[0].application_ref == "app-11"
    assert deals[0].fields[TrackingField.PRE_DOCS_TOTAL] == 2


async def test_list_deals_non_numeric_contact():
    session = make_mock_session()

    assert await TrackingStore(session).list_deals("abc") == []
    session.execute.assert_not_called()


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------


async def test_write_deal_fields_sets_columns_and_flushes():
    deal = _deal()
    session = make_mock_session(get=deal)

    await TrackingStore(session).write_deal_fields(
        "11",
        [
            (TrackingField.MISSING_DOCS, ""),
            (TrackingField.PRE_DOCS_RECEIVED, 2),
            (TrackingField.DOC_STATUS, DocStatus.ALL_COMPLETE),
            (TrackingField.LAST_DOC_RECEIVED, date(2026, 6, 15)),
        ],
    )

    assert deal.missing_docs == ""
    assert deal.pre_docs_received == 2
    assert deal.doc_status == DocStatus.ALL_COMPLETE
    assert deal.last_doc_received == date(2026, 6, 15)
    session.flush.assert_awaited_once()
    session.commit.assert_not_called()


async def test_write_contact_fields():
    contact = _contact()
    session = make_mock_session(get=contact)

    await TrackingStore(session).write_contact_fields("7", [(TrackingField.RECEIVED_DOCS, "Letter of Employment")])

    assert contact.received_docs == "Letter of Employment"


async def test_write_missing_row_raises():
    session = make_mock_session(get=None)
    store = TrackingStore(session)

    with pytest.raises(LookupError):
        await store.write_deal_fields("99", [])
    with pytest.raises(LookupError):
        await store.write_contact_fields("99", [])
    session.flush.assert_not_called()


# ---------------------------------------------------------------------------
# Audit notes
# ---------------------------------------------------------------------------


def test_build_note_body():
    body = build_note_body("Letter of Employment", "gmail", "file-123")

    assert body.splitlines() == [
        "Document received: Letter of Employment",
        "Source: gmail",
        "File: file-123",
        "Logged by doc-tracker",
    ]


async def test_create_note():
    session = make_mock_session()
    session.add = MagicMock(side_effect=lambda note: setattr(note, "id", 42))

    note_id = await TrackingStore(session).create_note("7", "Letter of Employment", "gmail", "file-123")

    assert note_id == "42"
    note = session.add.call_args.args[0]
    assert isinstance(note, ReceiptNote)
    assert note.contact_id == 7
    assert note.doc_name == "Letter of Employment"
    assert note.body.startswith("Document received: Letter of Employment")
    session.flush.assert_awaited_once()


async def test_create_note_bad_contact():
    with pytest.raises(LookupError):
        await TrackingStore(make_mock_session()).create_note("abc", "LOE", "gmail", "f")
