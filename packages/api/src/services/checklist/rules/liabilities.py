# This project was developed with assistance from AI tools.
"""Section 11: liabilities."""

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from .base import Rule


def has_line_of_credit(ctx: RuleContext) -> bool:
    return any(li.type == "unsecured_line_credit" for li in ctx.borrower_liabilities)


LIABILITY_RULES: list[Rule] = [
    Rule(
        id="s11_loc_statements",
        section="11_liabilities",
        document="Line of credit statements",
        display_name="Line of credit statements",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=has_line_of_credit,
    ),
]
