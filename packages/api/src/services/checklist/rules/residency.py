# This project was developed with assistance from AI tools.
"""Sections 16-17: residency status and first-time buyers.

Newcomer, work permit and non-resident status are not in the application
data; those rules are dormant until activated manually.
"""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule, never


def is_first_time_buyer(ctx: RuleContext) -> bool:
    return ctx.borrower.first_time is True


NEWCOMER_SECTION = "16_residency_newcomer"
WORK_PERMIT_SECTION = "16_residency_work_permit"
NON_RESIDENT_SECTION = "16_residency_non_resident"


def _dormant(rule_id: str, section: str, document: str, display_name: str, stage: ChecklistStage, **kwargs) -> Rule:
    return Rule(
        id=rule_id,
        section=section,
        document=document,
        display_name=display_name,
        stage=stage,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
        **kwargs,
    )


RESIDENCY_RULES: list[Rule] = [
    # -- Newcomer (PR under 5 years) --
    _dormant("s16_newcomer_pr", NEWCOMER_SECTION, "PR card", "Permanent Resident (PR) card", ChecklistStage.PRE),
    _dormant("s16_newcomer_passport", NEWCOMER_SECTION, "Passport", "Passport", ChecklistStage.PRE),
    _dormant(
        "s16_newcomer_employment", NEWCOMER_SECTION,
        "Canadian employment (3+ months)",
        "Proof of Canadian employment (minimum 3 months)",
        ChecklistStage.PRE,
    ),
    _dormant(
        "s16_newcomer_credit", NEWCOMER_SECTION,
        "International credit report OR 12 months Canadian payment history",
        "International credit report, OR 12 months of Canadian payment history",
        ChecklistStage.FULL,
        notes="Only needed if they hold foreign securities",
    ),
    _dormant(
        "s16_newcomer_dp", NEWCOMER_SECTION,
        "Down payment verification (may require foreign statements)",
        "Down payment verification (may require foreign bank statements)",
        ChecklistStage.FULL,
    ),
    # -- Work permit --
    _dormant(
        "s16_wp_permit", WORK_PERMIT_SECTION,
        "Work permit (12+ months remaining)",
        "Work permit (must have 12+ months remaining)",
        ChecklistStage.PRE,
    ),
    _dormant(
        "s16_wp_sin", WORK_PERMIT_SECTION,
        "SIN starting with 9",
        "Social Insurance Number (SIN) starting with 9",
        ChecklistStage.PRE,
    ),
    _dormant("s16_wp_passport", WORK_PERMIT_SECTION, "Passport", "Passport", ChecklistStage.PRE),
    _dormant(
        "s16_wp_employment", WORK_PERMIT_SECTION,
        "Canadian employment letter",
        "Canadian employment letter",
        ChecklistStage.PRE,
    ),
    # -- Non-resident (foreign buyer) --
    _dormant(
        "s16_nr_passport", NON_RESIDENT_SECTION, "Passport", "Passport", ChecklistStage.PRE,
        notes="Foreign buyer ban in effect until 2027 (with exceptions)",
    ),
    _dormant("s16_nr_income", NON_RESIDENT_SECTION, "Proof of foreign income", "Proof of foreign income", ChecklistStage.PRE),
    _dormant(
        "s16_nr_credit", NON_RESIDENT_SECTION,
        "International credit report",
        "International credit report",
        ChecklistStage.FULL,
    ),
    _dormant(
        "s16_nr_dp", NON_RESIDENT_SECTION,
        "Down payment proof (foreign bank statements)",
        "Down payment proof (foreign bank statements)",
        ChecklistStage.FULL,
    ),
    _dormant(
        "s16_nr_lawyer", NON_RESIDENT_SECTION,
        "Canadian lawyer for ILA",
        "Canadian lawyer for Independent Legal Advice (ILA)",
        ChecklistStage.FULL,
    ),
    # -- First-time buyer --
    Rule(
        id="s17_ftb_flag",
        section="17_first_time_buyer",
        document="First-time buyer status - internal tracking",
        display_name="First-time buyer; no additional docs needed",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_first_time_buyer,
        internal_only=True,
        internal_check_note=(
            "First-time buyer status determined from application data. No additional documents "
            "needed. Status is tracked for FHSA/HBP eligibility."
        ),
    ),
]
