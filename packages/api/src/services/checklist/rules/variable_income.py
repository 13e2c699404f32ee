# This project was developed with assistance from AI tools.
"""Section 10: commission, bonus, rental, and other variable income."""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule, never, tax_year_label


def has_commission(ctx: RuleContext) -> bool:
    return any(inc.pay_type == "commission" for inc in ctx.borrower_incomes)


def has_bonus(ctx: RuleContext) -> bool:
    return any(inc.bonuses is True for inc in ctx.borrower_incomes)


def has_rental_income(ctx: RuleContext) -> bool:
    return any(prop.rental_income > 0 for prop in ctx.properties)


def all_rentals_selling(ctx: RuleContext) -> bool:
    return all(prop.is_selling for prop in ctx.properties if prop.rental_income > 0)


_COMMISSION = "10_variable_income_commission"
_BONUS = "10_variable_income_bonus"
_RENTAL = "10_variable_income_rental"
CCB_SECTION = "10_variable_income_ccb"
SUPPORT_SECTION = "10_variable_income_support"
OTHER_INCOME_SECTION = "10_variable_income_other"

VARIABLE_INCOME_RULES: list[Rule] = [
    # -- Commission --
    Rule(
        id="s10_commission_t4s",
        section=_COMMISSION,
        document="T4 history (2 years showing commission)",
        display_name=tax_year_label("{previous} and {current} T4s (showing commission income)"),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_commission,
    ),
    Rule(
        id="s10_commission_statements",
        section=_COMMISSION,
        document="Commission statements (YTD + prior year)",
        display_name="Commission statements (year-to-date + prior year)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_commission,
    ),
    Rule(
        id="s10_commission_employer_letter",
        section=_COMMISSION,
        document="Employer letter confirming commission structure",
        display_name="Employer letter confirming commission structure",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_commission,
        notes="Especially important if commission exceeds 20% of total income",
    ),
    # -- Bonus --
    Rule(
        id="s10_bonus_history",
        section=_BONUS,
        document="Bonus history (2 years)",
        display_name=tax_year_label(
            "Proof of {previous} and {current} bonus income (year-end pay stubs or T4s showing the bonus)"
        ),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_bonus,
    ),
    Rule(
        id="s10_bonus_structure",
        section=_BONUS,
        document="Employer letter confirming bonus structure",
        display_name="Employer letter confirming bonus structure and whether it is guaranteed",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_bonus,
        notes="Can be combined with the Letter of Employment",
    ),
    # -- Rental --
    Rule(
        id="s10_rental_lease",
        section=_RENTAL,
        document="Current lease agreement(s)",
        display_name="Current lease agreement(s)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_PROPERTY,
        condition=has_rental_income,
    ),
    Rule(
        id="s10_rental_tax",
        section=_RENTAL,
        document="Property tax bills (rental)",
        display_name="Property tax bills (rental properties)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_PROPERTY,
        condition=has_rental_income,
        exclude_when=all_rentals_selling,
    ),
    Rule(
        id="s10_rental_t1",
        section=_RENTAL,
        document="T1 General showing rental income",
        display_name="T1 General showing rental income (Schedule T776)",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_rental_income,
    ),
    Rule(
        id="s10_rental_mortgage",
        section=_RENTAL,
        document="Rental property mortgage statement",
        display_name="Rental property mortgage statement",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_PROPERTY,
        condition=has_rental_income,
        notes="If applicable",
    ),
    Rule(
        id="s10_t776_check",
        section=_RENTAL,
        document="T776 (rental income schedule) - internal check",
        display_name="T776 verification",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_rental_income,
        internal_only=True,
        internal_check_note=(
            "Verify T1 includes T776 (Statement of Real Estate Rentals). "
            "Do NOT request T776 separately; it is part of the T1 package."
        ),
    ),
    # -- Dormant: not detectable from application data --
    Rule(
        id="s10_ccb_proof",
        section=CCB_SECTION,
        document="Canada Child Benefit (CCB) statement",
        display_name="Canada Child Benefit (CCB) statement from CRA",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s10_support_agreement",
        section=SUPPORT_SECTION,
        document="Separation/Divorce agreement or court order",
        display_name="Separation/Divorce agreement or court order (outlining child/spousal support entitlement)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s10_support_proof",
        section=SUPPORT_SECTION,
        document="3 months bank statements showing support receipt",
        display_name="3 months of bank statements showing support payments received",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s10_disability",
        section=OTHER_INCOME_SECTION,
        document="Disability award letter + payment statement",
        display_name="Disability award letter and payment statement",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s10_social_assistance",
        section=OTHER_INCOME_SECTION,
        document="Social assistance benefit statement",
        display_name="Current social assistance benefit statement",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s10_trust",
        section=OTHER_INCOME_SECTION,
        document="Trust income docs + payment history",
        display_name="Trust documents and payment history",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s10_investment",
        section=OTHER_INCOME_SECTION,
        document="Investment statements + T5 slips",
        display_name="Investment statements and T5 slips",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
]
