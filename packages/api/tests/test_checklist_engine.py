# This project was developed with assistance from AI tools.
"""Tests for checklist generation."""

from datetime import date

from db.enums import ChecklistScope, ChecklistStage, InternalFlagType
from tests.factories import EVAL_DATE, make_borrower, make_income, make_payload

from src.schemas.application import AddressRecord, PropertyRecord
from src.services.checklist.context import SYNTHESIZED_BORROWER_WARNING, build_contexts
from src.services.checklist.engine import describe_property, evaluate_rule, generate_checklist
from src.services.checklist.rules import ALL_RULES
from src.services.checklist.rules.base import Rule, always

SALARY_ITEMS = {"s1_paystub", "s1_loe", "s1_t4_previous", "s1_t4_current"}
BASE_BORROWER_ITEMS = {"s0_photo_id", "s0_second_id"}


def _rule_ids(items):
    return [item.rule_id for item in items]


def _boom(_ctx):
    raise KeyError("sin")


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_single_salaried_borrower():
    """Salaried borrower gets base pack plus salary items and nothing self-employed."""
    payload = make_payload(incomes=[make_income()])

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert len(checklist.borrower_checklists) == 1
    borrower = checklist.borrower_checklists[0]
    assert set(_rule_ids(borrower.items)) == BASE_BORROWER_ITEMS | SALARY_ITEMS
    assert _rule_ids(checklist.shared_items) == ["s0_void_cheque"]
    assert not any(item.section.startswith(("3_", "4_", "5_")) for item in checklist.client_items())
    assert checklist.internal_flags == ()
    assert checklist.warnings == ()


def test_bonus_items_only_for_bonus_borrower():
    """Bonus rules fire for the borrower with bonus income only."""
    payload = make_payload(
        borrowers=[make_borrower(id="b-1"), make_borrower(id="b-2", first_name="Sam", is_main=False)],
        incomes=[
            make_income(id="inc-1", borrower_id="b-1", bonuses=True),
            make_income(id="inc-2", borrower_id="b-2"),
        ],
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    first, second = checklist.borrower_checklists
    assert {"s10_bonus_history", "s10_bonus_structure"} <= set(_rule_ids(first.items))
    assert not {"s10_bonus_history", "s10_bonus_structure"} & set(_rule_ids(second.items))
    for bc in checklist.borrower_checklists:
        assert BASE_BORROWER_ITEMS <= set(_rule_ids(bc.items))


def test_two_matching_incomes_fire_once():
    """Two salaried incomes for one borrower still produce one item per rule."""
    payload = make_payload(
        incomes=[make_income(id="inc-1"), make_income(id="inc-2", pay_type="hourly_guaranteed")],
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    ids = _rule_ids(checklist.borrower_checklists[0].items)
    assert len(ids) == len(set(ids))
    assert ids.count("s1_paystub") == 1


def test_empty_borrowers_synthesized_from_applicant():
    """No borrowers but an applicant yields one base-pack checklist and a warning."""
    payload = make_payload(
        borrowers=[],
        applicant={"id": "u-1", "firstName": "Jordan", "lastName": "Lee", "email": "j@example.com"},
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert len(checklist.borrower_checklists) == 1
    bc = checklist.borrower_checklists[0]
    assert bc.borrower_name == "Jordan Lee"
    assert bc.is_main_borrower is True
    assert set(_rule_ids(bc.items)) == BASE_BORROWER_ITEMS
    assert SYNTHESIZED_BORROWER_WARNING in checklist.warnings


def test_no_borrowers_and_no_applicant():
    """Nothing to evaluate: empty lists, a warning, shared phase skipped."""
    payload = make_payload(borrowers=[], applicant=None)

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert checklist.borrower_checklists == ()
    assert checklist.shared_items == ()
    assert checklist.stats.warnings == 1


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def test_deterministic_for_fixed_date():
    """Same input and date give the same output apart from generated_at."""
    payload = make_payload(incomes=[make_income(bonuses=True)], goal="purchase")

    first = generate_checklist(payload, evaluation_date=EVAL_DATE)
    second = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert first.model_dump(exclude={"generated_at"}) == second.model_dump(exclude={"generated_at"})


def test_pre_and_full_items_in_same_output():
    payload = make_payload(incomes=[make_income()])

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    stages = {item.stage for item in checklist.client_items()}
    assert {ChecklistStage.PRE, ChecklistStage.FULL} <= stages


def test_internal_and_lender_items_never_client_facing():
    """Internal-only and lender-condition items land in internal flags exactly once."""
    payload = make_payload(
        incomes=[
            make_income(source="self_employed", pay_type=None, business_type="Incorporated"),
        ],
        assets=[{"id": "a-1", "type": "cash_savings", "description": "Gift from parents", "owners": ["b-1"]}],
        properties=[{"id": "p-1", "numberOfUnits": 3}],
        propertyId="p-1",
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert all(item.for_email for item in checklist.client_items())
    flag_ids = _rule_ids(checklist.internal_flags)
    assert len(flag_ids) == len(set(flag_ids))
    assert {"s5_business_bank", "s14_gift_letter", "s15_multiunit_appraisal"} <= set(flag_ids)
    gift = next(f for f in checklist.internal_flags if f.rule_id == "s14_gift_letter")
    assert gift.type == InternalFlagType.INTERNAL_CHECK
    assert gift.borrower_name is None


def test_internal_flag_carries_borrower_name():
    payload = make_payload(borrowers=[make_borrower(first_time=True)])

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    flag = next(f for f in checklist.internal_flags if f.rule_id == "s17_ftb_flag")
    assert flag.borrower_name == "Alex Tremblay"
    assert flag.description == "First-time buyer status - internal tracking"


def test_tax_year_labels_follow_evaluation_date():
    """T4 labels name the prior years before May and shift after."""
    payload = make_payload(incomes=[make_income()])

    spring = generate_checklist(payload, evaluation_date=date(2026, 3, 1))
    summer = generate_checklist(payload, evaluation_date=date(2026, 6, 1))

    def label(checklist):
        items = checklist.borrower_checklists[0].items
        return next(i.display_name for i in items if i.rule_id == "s1_t4_current")

    assert label(spring) == "2025 T4"
    assert label(summer) == "2026 T4"


def test_stats_sum_over_output():
    payload = make_payload(
        borrowers=[make_borrower(id="b-1", first_time=True), make_borrower(id="b-2", is_main=False)],
        incomes=[make_income(borrower_id="b-1")],
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)
    stats = checklist.stats
    client = checklist.client_items()

    assert stats.total_items == len(client) + len(checklist.internal_flags)
    assert stats.pre_items == sum(1 for i in client if i.stage == ChecklistStage.PRE)
    assert stats.full_items == sum(1 for i in client if i.stage == ChecklistStage.FULL)
    assert stats.per_borrower_items == sum(len(bc.items) for bc in checklist.borrower_checklists)
    assert stats.shared_items == len(checklist.shared_items)
    assert stats.internal_flags == 1


def test_main_borrower_listed_first():
    payload = make_payload(
        borrowers=[make_borrower(id="b-2", first_name="Sam", is_main=False), make_borrower(id="b-1")],
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert [bc.borrower_id for bc in checklist.borrower_checklists] == ["b-1", "b-2"]


def test_unmatched_subject_property_warns():
    payload = make_payload(propertyId="missing", goal="refinance")

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert checklist.warnings == (
        'Subject property not found: application.propertyId "missing" does not match any property in response',
    )
    # Refinance still asks for the mortgage statement without a linked property
    assert "s15_refi_mortgage" in _rule_ids(checklist.shared_items)


# ---------------------------------------------------------------------------
# Rule evaluation
# ---------------------------------------------------------------------------


def test_predicate_error_becomes_warning():
    """A raising condition is a non-match plus a warning naming the rule, not the data."""
    broken = Rule(
        id="x_broken",
        section="test",
        document="Broken",
        display_name="Broken",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=_boom,
    )
    payload = make_payload()

    checklist = generate_checklist(payload, rules=[broken, *ALL_RULES], evaluation_date=EVAL_DATE)

    assert "Rule x_broken condition error: KeyError" in checklist.warnings
    assert "x_broken" not in _rule_ids(checklist.borrower_checklists[0].items)
    assert not any("sin" in w for w in checklist.warnings)


def test_exclude_when_error_becomes_warning():
    rule = Rule(
        id="x_exclude",
        section="test",
        document="Doc",
        display_name="Doc",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.SHARED,
        condition=always,
        exclude_when=_boom,
    )

    checklist = generate_checklist(make_payload(), rules=[rule], evaluation_date=EVAL_DATE)

    assert checklist.shared_items == ()
    assert checklist.warnings == ("Rule x_exclude excludeWhen error: KeyError",)


def test_exclude_when_suppresses_fired_rule():
    rule = Rule(
        id="x_excluded",
        section="test",
        document="Doc",
        display_name="Doc",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.SHARED,
        condition=always,
        exclude_when=always,
    )
    contexts, _ = build_contexts(make_payload(), EVAL_DATE)
    assert evaluate_rule(rule, contexts[0]) == (None, None)


# ---------------------------------------------------------------------------
# Property checklists
# ---------------------------------------------------------------------------


def test_rental_property_checklists_described_from_address():
    payload = make_payload(
        properties=[
            {"id": "p-1", "addressId": "addr-1"},
            {"id": "p-2", "addressId": "addr-2", "rentalIncome": 1800},
            {"id": "p-3", "rentalIncome": 1200},
        ],
        addresses=[
            {"id": "addr-1", "streetNumber": "12", "streetName": "Maple", "streetType": "Ave", "city": "Ottawa"},
            {"id": "addr-2", "city": "Kingston"},
        ],
        propertyId="p-1",
    )

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    descriptions = [pc.property_description for pc in checklist.property_checklists]
    assert descriptions == ["12 Maple Ave, Ottawa", "Kingston", "Additional Property 2"]
    for pc in checklist.property_checklists:
        assert {"s10_rental_lease", "s10_rental_tax", "s10_rental_mortgage"} == set(_rule_ids(pc.items))


def test_property_without_items_is_omitted():
    payload = make_payload(properties=[{"id": "p-1"}], propertyId="p-1")

    checklist = generate_checklist(payload, evaluation_date=EVAL_DATE)

    assert checklist.property_checklists == ()


def test_describe_property_fallbacks():
    prop = PropertyRecord(id="p-9")
    assert describe_property(prop, [], True, 0, 0) == "Subject Property"
    assert describe_property(prop, [], False, 0, 1) == "Additional Property"
    assert describe_property(prop, [], False, 1, 2) == "Additional Property 2"

    linked = PropertyRecord(id="p-9", address_id="a-1")
    street_only = AddressRecord(id="a-1", street_number="5", street_name="King")
    assert describe_property(linked, [street_only], False, 0, 1) == "5 King"
    empty = AddressRecord(id="a-1")
    assert describe_property(linked, [empty], True, 0, 0) == "Subject Property"
