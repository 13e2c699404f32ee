# This project was developed with assistance from AI tools.
"""Sections 3-6: self-employment income.

Incorporation is inferred from the business type or from the borrower paying
themselves a salary. When neither signal is present the borrower is treated as
a sole proprietor, which errs toward asking for more.
"""

from db.enums import ChecklistScope, ChecklistStage

from ....schemas.application import IncomeRecord
from ..context import RuleContext
from .base import Rule, never, tax_year_label

_INCORPORATED_MARKERS = ("corporation", "incorporated", "inc")


def is_self_employed_source(source: str | None) -> bool:
    return source in ("self_employed", "self-employed")


def _pays_self_salary(inc: IncomeRecord) -> bool:
    return any(isinstance(pt, str) and pt.lower() == "salary" for pt in inc.self_pay_type or [])


def _looks_incorporated(inc: IncomeRecord) -> bool:
    business_type = (inc.business_type or "").lower()
    if any(marker in business_type for marker in _INCORPORATED_MARKERS):
        return True
    return _pays_self_salary(inc)


def is_self_employed(ctx: RuleContext) -> bool:
    return any(is_self_employed_source(inc.source) for inc in ctx.borrower_incomes)


def is_incorporated(ctx: RuleContext) -> bool:
    return any(
        is_self_employed_source(inc.source) and _looks_incorporated(inc)
        for inc in ctx.borrower_incomes
    )


def is_sole_proprietor(ctx: RuleContext) -> bool:
    return is_self_employed(ctx) and not is_incorporated(ctx)


def is_incorporated_with_salary(ctx: RuleContext) -> bool:
    if not is_incorporated(ctx):
        return False
    return any(
        is_self_employed_source(inc.source) and _pays_self_salary(inc)
        for inc in ctx.borrower_incomes
    )


_GENERAL = "3_income_self_employed_general"
_SOLE_PROP = "4_income_self_employed_sole_prop"
_INCORPORATED = "5_income_self_employed_incorporated"
STATED_INCOME_SECTION = "6_income_self_employed_stated"

INCOME_SELF_EMPLOYED_RULES: list[Rule] = [
    # -- Section 3: every self-employed borrower --
    Rule(
        id="s3_t1_current",
        section=_GENERAL,
        document="T1 General - Current year (full return)",
        display_name=tax_year_label("{current} T1 General (full return including all schedules)"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_self_employed,
    ),
    Rule(
        id="s3_t1_previous",
        section=_GENERAL,
        document="T1 General - Previous year (full return)",
        display_name=tax_year_label("{previous} T1 General (full return including all schedules)"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_self_employed,
    ),
    Rule(
        id="s3_noa_current",
        section=_GENERAL,
        document="NOA - Current year",
        display_name=tax_year_label("{current} Notice of Assessment (NOA)"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_self_employed,
        notes="If NOA shows amount owing, also provide CRA Statement of Account showing taxes paid to zero",
    ),
    Rule(
        id="s3_noa_previous",
        section=_GENERAL,
        document="NOA - Previous year",
        display_name=tax_year_label("{previous} Notice of Assessment (NOA)"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_self_employed,
    ),
    Rule(
        id="s3_t4_salary",
        section=_GENERAL,
        document="T4 (if paying self a salary from corporation)",
        display_name=tax_year_label("{current} T4 (salary from corporation)"),
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_incorporated_with_salary,
    ),
    # -- Section 4: sole proprietor --
    Rule(
        id="s4_t2125_check",
        section=_SOLE_PROP,
        document="T2125 (Statement of Business Activities) - internal check",
        display_name="T2125 verification",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_sole_proprietor,
        internal_only=True,
        internal_check_note=(
            "Verify T1 includes T2125 (Statement of Business Activities). "
            "Do NOT request T2125 separately; it is part of the T1 package."
        ),
    ),
    # -- Section 5: incorporated --
    Rule(
        id="s5_articles",
        section=_INCORPORATED,
        document="Articles of Incorporation",
        display_name="Articles of Incorporation",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_incorporated,
    ),
    Rule(
        id="s5_t2_schedule50",
        section=_INCORPORATED,
        document="T2 Corporate Tax Return with Schedule 50 OR Central Securities Register",
        display_name="T2 Corporate Tax Return with Schedule 50, OR Central Securities Register",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_incorporated,
        internal_check_note=(
            "Verify T2 includes Schedule 50 (shareholder listing). "
            "If not included, request Central Securities Register separately."
        ),
    ),
    Rule(
        id="s5_financials",
        section=_INCORPORATED,
        document="2 years accountant-prepared financial statements",
        display_name="2 years of accountant-prepared financial statements (balance sheet + income statement)",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_incorporated,
    ),
    Rule(
        id="s5_business_bank",
        section=_INCORPORATED,
        document="Business bank statements (6-12 months)",
        display_name="Business bank statements (6-12 months)",
        stage=ChecklistStage.LENDER_CONDITION,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_incorporated,
        notes="Rarely requested upfront; only collect if conditioned by lender.",
    ),
    # -- Section 6: stated income (B lender), activated manually --
    Rule(
        id="s6_business_bank",
        section=STATED_INCOME_SECTION,
        document="Business bank statements (6-12 months)",
        display_name="Business bank statements (6-12 months)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s6_personal_bank",
        section=STATED_INCOME_SECTION,
        document="Personal bank statements (3 months)",
        display_name="Personal bank statements (3 months)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s6_business_reg",
        section=STATED_INCOME_SECTION,
        document="Business registration",
        display_name="Business registration",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s6_income_declaration",
        section=STATED_INCOME_SECTION,
        document="Signed income declaration",
        display_name="Signed income declaration (must be reasonable for industry)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
]
