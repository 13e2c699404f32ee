# This project was developed with assistance from AI tools.
"""Sections 12-13: separation/divorce and bankruptcy."""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule, never


def is_divorced_or_separated(ctx: RuleContext) -> bool:
    return ctx.borrower.marital in ("divorced", "separated")


BANKRUPTCY_SECTION = "13_situations_bankruptcy"

SITUATION_RULES: list[Rule] = [
    Rule(
        id="s12_separation_agreement",
        section="12_situations_divorce",
        document="Separation/Divorce agreement",
        display_name="Separation/Divorce agreement outlining any child/spousal support obligations",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=is_divorced_or_separated,
    ),
    Rule(
        id="s13_discharge",
        section=BANKRUPTCY_SECTION,
        document="Certificate of discharge (bankruptcy)",
        display_name="Certificate of discharge (bankruptcy)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s13_full_performance",
        section=BANKRUPTCY_SECTION,
        document="Certificate of full performance (consumer proposal)",
        display_name="Certificate of full performance (consumer proposal)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
    Rule(
        id="s13_explanation",
        section=BANKRUPTCY_SECTION,
        document="Explanation letter",
        display_name="Explanation letter (bankruptcy or consumer proposal)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=never,
    ),
]
