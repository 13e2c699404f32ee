# This project was developed with assistance from AI tools.
"""Tests for the rule catalog and its predicates."""

from collections import Counter

from db.enums import ChecklistStage
from tests.factories import EVAL_DATE, make_borrower, make_income, make_payload

from src.schemas.checklist import ChecklistItem
from src.services.checklist.context import build_contexts
from src.services.checklist.dedupe import deduplicate_items, merge_notes
from src.services.checklist.rules import ALL_RULES, MANUAL_FLAG_SECTIONS, rules_in_section
from src.services.checklist.rules.base import never
from src.services.checklist.rules.down_payment import has_fhsa, has_gift, has_savings, has_tfsa
from src.services.checklist.rules.income_self_employed import (
    is_incorporated,
    is_incorporated_with_salary,
    is_sole_proprietor,
)
from src.services.checklist.rules.property import is_condo_existing_deal, is_existing_property_deal, is_investment


def _ctx(**kwargs):
    contexts, _ = build_contexts(make_payload(**kwargs), EVAL_DATE)
    return contexts[0]


def _item(rule_id="r1", notes=None, document="Doc"):
    return ChecklistItem(
        rule_id=rule_id,
        document=document,
        display_name=document,
        stage=ChecklistStage.PRE,
        for_email=True,
        section="test",
        notes=notes,
    )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def test_rule_ids_unique():
    counts = Counter(rule.id for rule in ALL_RULES)
    assert [rule_id for rule_id, n in counts.items() if n > 1] == []


def test_lender_condition_rules_not_for_email():
    for rule in ALL_RULES:
        if rule.stage == ChecklistStage.LENDER_CONDITION or rule.internal_only:
            assert rule.for_email is False, rule.id


def test_manual_sections_are_dormant():
    """Every rule in a manually flagged section never fires on application data."""
    for section in MANUAL_FLAG_SECTIONS:
        rules = rules_in_section(section)
        assert rules, section
        assert all(rule.condition is never for rule in rules), section


def test_catalog_order_starts_with_base_pack():
    assert [r.id for r in ALL_RULES[:3]] == ["s0_photo_id", "s0_second_id", "s0_void_cheque"]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def test_self_employed_classification():
    sole = _ctx(incomes=[make_income(source="self_employed", pay_type=None, business_type="sole_proprietor")])
    assert is_sole_proprietor(sole)
    assert not is_incorporated(sole)

    inc = _ctx(incomes=[make_income(source="self-employed", pay_type=None, self_pay_type=["Salary", "dividends"])])
    assert is_incorporated(inc)
    assert is_incorporated_with_salary(inc)
    assert not is_sole_proprietor(inc)


def test_unknown_income_values_do_not_match():
    ctx = _ctx(incomes=[make_income(source="crypto_mining", pay_type="vibes")])
    fired = [rule.id for rule in ALL_RULES if rule.condition(ctx)]
    assert not any(rule_id.startswith(("s1_", "s2_", "s3_", "s5_", "s7_")) for rule_id in fired)


def test_down_payment_rules_skip_refinance():
    assets = [{"id": "a-1", "type": "cash_savings", "description": "Savings + gift", "owners": ["b-1"]}]

    assert has_savings(_ctx(assets=assets, goal="purchase"))
    assert has_gift(_ctx(assets=assets, goal="purchase"))
    assert not has_savings(_ctx(assets=assets, goal="refinance"))
    assert not has_gift(_ctx(assets=assets, goal="refinance"))


def test_registered_accounts_from_type_or_description():
    tfsa_by_desc = [{"id": "a-1", "type": "cash_savings", "description": "TFSA at bank", "owners": []}]
    fhsa = [{"id": "a-2", "type": "other", "description": "FHSA", "owners": []}]

    assert has_tfsa(_ctx(assets=tfsa_by_desc))
    assert has_fhsa(_ctx(assets=fhsa))
    assert not has_fhsa(_ctx(assets=tfsa_by_desc))


def test_existing_property_deal():
    assert is_existing_property_deal(_ctx(goal="refinance"))
    assert is_existing_property_deal(_ctx(goal="renew"))
    assert not is_existing_property_deal(_ctx(goal="purchase", properties=[{"id": "p-1"}], propertyId="p-1"))
    assert is_existing_property_deal(_ctx(goal="switch", properties=[{"id": "p-1"}], propertyId="p-1"))
    assert not is_existing_property_deal(_ctx(goal="switch"))


def test_condo_needs_existing_deal():
    condo = [{"id": "p-1", "type": "condo"}]
    assert is_condo_existing_deal(_ctx(goal="refinance", properties=condo, propertyId="p-1"))
    assert not is_condo_existing_deal(_ctx(goal="purchase", properties=condo, propertyId="p-1"))


def test_investment_use():
    assert is_investment(_ctx(use="rental"))
    assert not is_investment(_ctx(use="owner_occupied"))
    assert not is_investment(_ctx())


def test_first_time_buyer_flag_per_borrower():
    contexts, _ = build_contexts(
        make_payload(borrowers=[make_borrower(id="b-1", first_time=True), make_borrower(id="b-2", is_main=False)]),
        EVAL_DATE,
    )
    ftb = next(rule for rule in ALL_RULES if rule.id == "s17_ftb_flag")

    assert [ftb.condition(ctx) for ctx in contexts] == [True, False]


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------


def test_dedupe_first_seen_wins():
    items = [_item("r1", document="First"), _item("r2"), _item("r1", document="Second")]

    result = deduplicate_items(items)

    assert [(i.rule_id, i.document) for i in result] == [("r1", "First"), ("r2", "Doc")]


def test_dedupe_merges_distinct_notes():
    items = [_item("r1", notes="A"), _item("r1", notes="B"), _item("r1", notes="A"), _item("r1")]

    result = deduplicate_items(items)

    assert len(result) == 1
    assert result[0].notes == "A / B"


def test_merge_notes_empty():
    assert merge_notes(None, "") is None
    assert merge_notes("x", None, "x") == "x"
