# This project was developed with assistance from AI tools.
"""Rule definition shared by every catalog module."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from db.enums import ChecklistScope, ChecklistStage

from ..context import RuleContext
from ..tax_years import get_tax_years

Predicate = Callable[[RuleContext], bool]
Label = str | Callable[[date], str]


@dataclass(frozen=True)
class Rule:
    """A document requirement and the predicate that decides when it applies.

    Attributes:
        id: Stable identifier; tracking joins on it, so never rename one.
        section: Catalog grouping, e.g. "1_income_employed_salary".
        document: Short name persisted in tracking fields.
        display_name: Client-facing label, or a function of the evaluation
            date for labels that name tax years.
        stage: When the document is due.
        scope: Which target(s) the rule is evaluated for.
        condition: Fires the rule when true.
        exclude_when: Suppresses a fired rule when true.
        notes: Extra guidance shown with the item.
        internal_only: Keep the item off client-facing lists.
        internal_check_note: What the brokerage should verify instead.
    """

    id: str
    section: str
    document: str
    display_name: Label
    stage: ChecklistStage
    scope: ChecklistScope
    condition: Predicate
    exclude_when: Predicate | None = None
    notes: str | None = None
    internal_only: bool = False
    internal_check_note: str | None = None

    @property
    def for_email(self) -> bool:
        return not self.internal_only and self.stage != ChecklistStage.LENDER_CONDITION

    def label(self, evaluation_date: date) -> str:
        if callable(self.display_name):
            return self.display_name(evaluation_date)
        return self.display_name


def tax_year_label(template: str) -> Callable[[date], str]:
    """Label factory filling {current}, {previous} and {two_years_ago}."""

    def _label(evaluation_date: date) -> str:
        years = get_tax_years(evaluation_date)
        return template.format(
            current=years.current,
            previous=years.previous,
            two_years_ago=years.two_years_ago,
        )

    return _label


def never(_ctx: RuleContext) -> bool:
    """Condition for situations that cannot be detected from application data."""
    return False


def always(_ctx: RuleContext) -> bool:
    return True
