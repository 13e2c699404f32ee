# This project was developed with assistance from AI tools.
"""Section 15: subject property documents (purchase, refinance/renewal, condo, multi-unit, investment)."""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule


def is_purchase(ctx: RuleContext) -> bool:
    return ctx.application.goal == "purchase"


def is_existing_property_deal(ctx: RuleContext) -> bool:
    """Refinance, renewal, or any non-purchase goal on a linked subject property."""
    goal = ctx.application.goal
    if goal == "purchase":
        return False
    if goal in ("refinance", "renew"):
        return True
    return ctx.subject_property is not None and goal is not None


def is_renewal(ctx: RuleContext) -> bool:
    return ctx.application.goal == "renew"


def is_condo(ctx: RuleContext) -> bool:
    prop = ctx.subject_property
    if prop is None:
        return False
    return prop.type == "condo" or (prop.monthly_fees or 0) > 0


def is_condo_existing_deal(ctx: RuleContext) -> bool:
    return is_condo(ctx) and is_existing_property_deal(ctx)


def is_multi_unit(ctx: RuleContext) -> bool:
    prop = ctx.subject_property
    return prop is not None and (prop.number_of_units or 0) > 1


def is_investment(ctx: RuleContext) -> bool:
    use = ctx.application.use
    return use is not None and use != "owner_occupied"


def _shared(rule_id: str, section: str, document: str, display_name: str, stage: ChecklistStage, condition, **kwargs) -> Rule:
    return Rule(
        id=rule_id,
        section=f"15_property_{section}",
        document=document,
        display_name=display_name,
        stage=stage,
        scope=ChecklistScope.SHARED,
        condition=condition,
        **kwargs,
    )


PROPERTY_RULES: list[Rule] = [
    _shared(
        "s15_purchase_offer", "purchase",
        "Accepted Offer / APS (signed)",
        "Accepted Offer / Agreement of Purchase and Sale (signed)",
        ChecklistStage.PRE, is_purchase,
    ),
    _shared("s15_purchase_mls", "purchase", "MLS listing", "MLS listing", ChecklistStage.FULL, is_purchase),
    _shared(
        "s15_refi_mortgage", "refinance",
        "Current mortgage statement",
        "Current mortgage statement",
        ChecklistStage.PRE, is_existing_property_deal,
    ),
    _shared(
        "s15_refi_tax", "refinance",
        "Property tax bill (most recent)",
        "Property tax bill (most recent)",
        ChecklistStage.PRE, is_existing_property_deal,
    ),
    _shared("s15_switch_insurance", "refinance", "Home insurance", "Home insurance policy", ChecklistStage.PRE, is_renewal),
    _shared(
        "s15_condo_fee", "condo",
        "Condo fee confirmation OR 3 months bank statements showing strata withdrawals",
        "Condo fee confirmation, OR 3 months of bank statements showing strata fee withdrawals",
        ChecklistStage.PRE, is_condo_existing_deal,
    ),
    _shared(
        "s15_multiunit_leases", "multiunit",
        "Lease agreements for all units",
        "Lease agreements for all units",
        ChecklistStage.PRE, is_multi_unit,
    ),
    _shared(
        "s15_multiunit_appraisal", "multiunit",
        "Appraisal (lender ordered)",
        "Appraisal (lender ordered)",
        ChecklistStage.LENDER_CONDITION, is_multi_unit,
        notes="Usually only mentioned once we have an approval",
    ),
    _shared(
        "s15_investment_appraisal", "investment",
        "Appraisal (lender ordered)",
        "Appraisal (lender ordered)",
        ChecklistStage.LENDER_CONDITION, is_investment,
    ),
]
