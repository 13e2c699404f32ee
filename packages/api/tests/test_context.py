# This project was developed with assistance from AI tools.
"""Tests for rule context building and tax year derivation."""

from datetime import date

import pytest
from tests.factories import EVAL_DATE, make_borrower, make_income, make_payload

from src.services.checklist.context import (
    NO_BORROWER_WARNING,
    SYNTHESIZED_BORROWER_WARNING,
    build_contexts,
    find_subject_property,
)
from src.services.checklist.tax_years import get_tax_years

# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------


def test_incomes_scoped_to_borrower():
    payload = make_payload(
        borrowers=[make_borrower(id="b-1"), make_borrower(id="b-2", is_main=False)],
        incomes=[make_income(id="inc-1", borrower_id="b-1"), make_income(id="inc-2", borrower_id="b-2")],
    )

    contexts, warnings = build_contexts(payload, EVAL_DATE)

    assert warnings == []
    assert [i.id for i in contexts[0].borrower_incomes] == ["inc-1"]
    assert [i.id for i in contexts[1].borrower_incomes] == ["inc-2"]
    assert len(contexts[0].all_incomes) == 2


def test_joint_asset_in_every_owner_context():
    """Assets and liabilities follow their owner list."""
    payload = make_payload(
        borrowers=[make_borrower(id="b-1"), make_borrower(id="b-2", is_main=False)],
        assets=[
            {"id": "a-joint", "type": "cash_savings", "owners": ["b-1", "b-2"]},
            {"id": "a-solo", "type": "rrsp", "owners": ["b-2"]},
        ],
        liabilities=[{"id": "l-1", "type": "unsecured_line_credit", "owners": ["b-1"]}],
    )

    contexts, _ = build_contexts(payload, EVAL_DATE)

    assert [a.id for a in contexts[0].borrower_assets] == ["a-joint"]
    assert [a.id for a in contexts[1].borrower_assets] == ["a-joint", "a-solo"]
    assert [li.id for li in contexts[0].borrower_liabilities] == ["l-1"]
    assert contexts[1].borrower_liabilities == []


def test_main_borrower_first_others_keep_order():
    payload = make_payload(
        borrowers=[
            make_borrower(id="b-2", is_main=False),
            make_borrower(id="b-3", is_main=False),
            make_borrower(id="b-1", is_main=True),
        ],
    )

    contexts, _ = build_contexts(payload, EVAL_DATE)

    assert [c.borrower.id for c in contexts] == ["b-1", "b-2", "b-3"]


def test_synthesized_borrower_from_applicant():
    payload = make_payload(borrowers=[], applicant={"id": "u-1", "firstName": "Jordan", "lastName": "Lee"})

    contexts, warnings = build_contexts(payload, EVAL_DATE)

    assert warnings == [SYNTHESIZED_BORROWER_WARNING]
    borrower = contexts[0].borrower
    assert borrower.id == "u-1"
    assert borrower.is_main_borrower is True
    assert borrower.first_time is False
    assert contexts[0].borrower_incomes == []


def test_no_borrowers_no_applicant():
    contexts, warnings = build_contexts(make_payload(borrowers=[]), EVAL_DATE)

    assert contexts == []
    assert warnings == [NO_BORROWER_WARNING]


def test_subject_property_resolution():
    payload = make_payload(properties=[{"id": "p-1"}, {"id": "p-2"}], propertyId="p-2")
    assert find_subject_property(payload).id == "p-2"

    assert find_subject_property(make_payload(properties=[{"id": "p-1"}])) is None
    assert find_subject_property(make_payload(properties=[{"id": "p-1"}], propertyId="p-9")) is None


def test_payload_ignores_unknown_fields():
    """Extra keys from the data source are dropped, not rejected."""
    payload = make_payload(
        borrowers=[make_borrower(sin="123-456-789", creditScore=780)],
        incomes=[make_income(employerName="Acme")],
    )

    assert payload.borrowers[0].id == "b-1"
    assert not hasattr(payload.borrowers[0], "sin")


# ---------------------------------------------------------------------------
# Tax years
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "evaluation_date,current,t4_available",
    [
        (date(2026, 1, 10), 2025, False),
        (date(2026, 4, 30), 2025, False),
        (date(2026, 5, 1), 2026, True),
        (date(2026, 12, 31), 2026, True),
    ],
)
def test_tax_year_cutoff(evaluation_date, current, t4_available):
    years = get_tax_years(evaluation_date)

    assert years.current == current
    assert years.previous == current - 1
    assert years.two_years_ago == current - 2
    assert years.t4_available is t4_available
