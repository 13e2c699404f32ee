# This project was developed with assistance from AI tools.
"""Sections 7-9: retirement income, parental leave, probation.

Parental leave and probation cannot be read off the application (short tenure
is not proof of probation), so those rules stay dormant until a broker adds
them by hand.
"""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule, never


def is_retired(ctx: RuleContext) -> bool:
    return any(inc.source == "retired" for inc in ctx.borrower_incomes)


_RETIRED = "7_income_retired"
MATERNITY_SECTION = "8_income_maternity"
PROBATION_SECTION = "9_income_probation"

INCOME_OTHER_RULES: list[Rule] = [
    Rule(
        id="s7_pension_letter",
        section=_RETIRED,
        document="Pension letter stating current year entitlement",
        display_name="Pension letter stating current year entitlement",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_retired,
    ),
    Rule(
        id="s7_cpp_oas_t4a",
        section=_RETIRED,
        document="2 years CPP/OAS T4As",
        display_name="2 years of CPP/OAS T4A slips",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_retired,
        notes="If applicable",
    ),
    Rule(
        id="s7_bank_pension",
        section=_RETIRED,
        document="3 months bank statements showing pension deposits",
        display_name="3 months of bank statements showing pension deposits",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_retired,
    ),
    Rule(
        id="s7_t5s",
        section=_RETIRED,
        document="2 years T5s",
        display_name="2 years of T5 slips (dividends / investment income)",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_retired,
        notes="If receiving dividends or investment income",
    ),
    Rule(
        id="s8_loe_return",
        section=MATERNITY_SECTION,
        document="LOE confirming return date",
        display_name="Letter of Employment confirming return-to-work date and salary on return",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s8_pre_leave_paystub",
        section=MATERNITY_SECTION,
        document="Pre-leave paystub",
        display_name="Pre-leave pay stub (showing pre-leave salary)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s8_ei_statement",
        section=MATERNITY_SECTION,
        document="EI statement",
        display_name="Employment Insurance (EI) benefit statement",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
        notes="If applicable",
    ),
    Rule(
        id="s9_loe_probation",
        section=PROBATION_SECTION,
        document="LOE with probation details",
        display_name="Letter of Employment including probation end date",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s9_employment_history",
        section=PROBATION_SECTION,
        document="3 years previous employment history",
        display_name="3 years of previous employment history",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
        notes="If not included in application",
    ),
]
