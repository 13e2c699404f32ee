# This project was developed with assistance from AI tools.
"""Section 14: source of down payment.

All rules are shared (asked once per application) and none apply to a
refinance, which has no down payment. Gift, inheritance and borrowed funds are
only visible through free-text asset descriptions.
"""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule


def _needs_down_payment(ctx: RuleContext) -> bool:
    return ctx.application.goal != "refinance"


def _description_contains(ctx: RuleContext, needle: str) -> bool:
    return any(needle in (a.description or "").lower() for a in ctx.assets)


def has_savings(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and any(a.type == "cash_savings" for a in ctx.assets)


def has_rrsp(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and any(a.type == "rrsp" for a in ctx.assets)


def has_tfsa(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and any(
        a.type == "tfsa" or (a.type == "cash_savings" and "tfsa" in (a.description or "").lower())
        for a in ctx.assets
    )


def has_fhsa(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and _description_contains(ctx, "fhsa")


def has_gift(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and _description_contains(ctx, "gift")


def has_gift_and_found_property(ctx: RuleContext) -> bool:
    return has_gift(ctx) and ctx.application.process == "found_property"


def has_property_sale(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and any(p.is_selling for p in ctx.properties)


def has_inheritance(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and _description_contains(ctx, "inheritance")


def has_borrowed_down_payment(ctx: RuleContext) -> bool:
    return _needs_down_payment(ctx) and _description_contains(ctx, "borrow")


def _shared(rule_id: str, section: str, document: str, display_name: str, stage: ChecklistStage, condition, **kwargs) -> Rule:
    return Rule(
        id=rule_id,
        section=f"14_down_payment_{section}",
        document=document,
        display_name=display_name,
        stage=stage,
        scope=ChecklistScope.SHARED,
        condition=condition,
        **kwargs,
    )


_PRE = ChecklistStage.PRE
_FULL = ChecklistStage.FULL

DOWN_PAYMENT_RULES: list[Rule] = [
    # -- Savings --
    _shared(
        "s14_savings_bank", "savings",
        "90-day bank statement history",
        "90-day bank statement history for the account(s) currently holding your down payment funds "
        "(must show account ownership: name and account number)",
        _PRE, has_savings,
    ),
    _shared(
        "s14_large_deposit", "savings",
        "Large deposit explanations",
        "Explanation for any deposits over $5k that aren't from your payroll",
        _FULL, has_savings,
        notes="If transfer from other account, we will need 90-day statement showing the transfer",
    ),
    # -- Registered accounts --
    _shared("s14_rrsp_statement", "rrsp", "RRSP statement (90 days)", "RRSP statement (90-day history)", _PRE, has_rrsp),
    _shared("s14_tfsa_statement", "tfsa", "TFSA statement (90 days)", "TFSA statement (90-day history)", _PRE, has_tfsa),
    _shared(
        "s14_fhsa_statement", "fhsa",
        "FHSA statement",
        "First Home Savings Account (FHSA) statement",
        _PRE, has_fhsa,
    ),
    # -- Gift --
    _shared(
        "s14_gift_donor_info", "gift",
        "Donor contact information",
        "Gift donor contact information (full name, relationship to borrower, address, phone, email)",
        _PRE, has_gift,
    ),
    _shared("s14_gift_amount", "gift", "Amount of gift", "Confirmed gift amount", _PRE, has_gift),
    _shared(
        "s14_gift_savings_note", "gift",
        "Bank statements for savings used alongside gift",
        "90-day bank statement history if you'll also be using some of your savings in addition to the gifted funds",
        _PRE, has_gift,
    ),
    _shared(
        "s14_gift_proof_of_funds", "gift",
        "Donor proof of funds OR transfer confirmation + current balance",
        "Gift donor proof of funds, OR transfer confirmation plus current account balance",
        _PRE, has_gift_and_found_property,
    ),
    _shared(
        "s14_gift_letter", "gift",
        "Gift letter (signed)",
        "Gift letter (signed)",
        ChecklistStage.LATER, has_gift,
        internal_only=True,
        internal_check_note=(
            "Collect gift letter once lender is picked. "
            "Do NOT request upfront; the format varies by lender."
        ),
    ),
    # -- Sale of an existing property --
    _shared(
        "s14_sale_offer", "sale",
        "Accepted offer / sale agreement",
        "Accepted offer or sale agreement (for property being sold)",
        _PRE, has_property_sale,
    ),
    _shared(
        "s14_sale_mortgage", "sale",
        "Most recent mortgage statement to confirm equity",
        "Most recent mortgage statement for property being sold (to confirm equity amount)",
        _PRE, has_property_sale,
    ),
    _shared(
        "s14_sale_lawyer", "sale",
        "Lawyer's statement of adjustments",
        "Lawyer's statement of adjustments (after closing)",
        _FULL, has_property_sale,
    ),
    # -- Inheritance --
    _shared("s14_inheritance_will", "inheritance", "Will / estate docs", "Will or estate documents", _PRE, has_inheritance),
    _shared("s14_inheritance_executor", "inheritance", "Executor letter", "Executor letter", _PRE, has_inheritance),
    _shared(
        "s14_inheritance_bank", "inheritance",
        "Bank statement showing receipt",
        "Bank statement showing inheritance receipt",
        _FULL, has_inheritance,
    ),
    # -- Borrowed --
    _shared(
        "s14_borrowed_statement", "borrowed",
        "LOC or personal loan statement",
        "Line of credit or personal loan statement (for borrowed down payment)",
        _PRE, has_borrowed_down_payment,
    ),
]
