# This project was developed with assistance from AI tools.
"""Sections 1-2: employment income (salaried/hourly, contract)."""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule, tax_year_label


def has_salary_or_hourly(ctx: RuleContext) -> bool:
    # Hourly arrives in several variants (hourly_guaranteed, hourly_non_guaranteed, ...)
    return any(
        inc.source == "employed"
        and (inc.pay_type == "salaried" or (inc.pay_type or "").startswith("hourly"))
        for inc in ctx.borrower_incomes
    )


def has_contract(ctx: RuleContext) -> bool:
    return any(
        inc.source == "employed" and inc.job_type == "contract"
        for inc in ctx.borrower_incomes
    )


_SALARY_SECTION = "1_income_employed_salary"
_CONTRACT_SECTION = "2_income_employed_contract"

INCOME_EMPLOYED_RULES: list[Rule] = [
    # -- Section 1: salary / hourly --
    Rule(
        id="s1_paystub",
        section=_SALARY_SECTION,
        document="Recent paystub (within 30 days)",
        display_name="Recent pay stub (must show YTD earnings)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_salary_or_hourly,
    ),
    Rule(
        id="s1_loe",
        section=_SALARY_SECTION,
        document="Letter of Employment",
        display_name=(
            "Letter of Employment (dated within the last 30 days), must include: "
            "position, start date, salary, full-time/part-time, guaranteed hours"
        ),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_salary_or_hourly,
    ),
    Rule(
        id="s1_t4_previous",
        section=_SALARY_SECTION,
        document="T4 - Previous year",
        display_name=tax_year_label("{previous} T4"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_salary_or_hourly,
    ),
    Rule(
        id="s1_t4_current",
        section=_SALARY_SECTION,
        document="T4 - Current year",
        display_name=tax_year_label("{current} T4"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_salary_or_hourly,
        notes="If not yet available, provide last pay stub of the previous year showing year-end earnings",
    ),
    # -- Section 2: contract / seasonal --
    Rule(
        id="s2_contract",
        section=_CONTRACT_SECTION,
        document="Employment contract",
        display_name="Employment contract (term, rate, renewal likelihood)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_contract,
    ),
    Rule(
        id="s2_t4s_2year",
        section=_CONTRACT_SECTION,
        document="2 years of T4s",
        display_name=tax_year_label("{previous} and {current} T4s"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_contract,
    ),
    Rule(
        id="s2_noas",
        section=_CONTRACT_SECTION,
        document="NOAs (current + previous)",
        display_name=tax_year_label("{previous} and {current} Notices of Assessment (NOAs)"),
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_contract,
    ),
]
