# This project was developed with assistance from AI tools.
"""Rule catalog -- every document requirement, in evaluation order."""

from .base import Rule
from .base_pack import BASE_PACK_RULES
from .down_payment import DOWN_PAYMENT_RULES
from .income_employed import INCOME_EMPLOYED_RULES
from .income_other import INCOME_OTHER_RULES, MATERNITY_SECTION, PROBATION_SECTION
from .income_self_employed import INCOME_SELF_EMPLOYED_RULES, STATED_INCOME_SECTION
from .liabilities import LIABILITY_RULES
from .property import PROPERTY_RULES
from .residency import NEWCOMER_SECTION, NON_RESIDENT_SECTION, RESIDENCY_RULES, WORK_PERMIT_SECTION
from .situations import BANKRUPTCY_SECTION, SITUATION_RULES
from .variable_income import (
    CCB_SECTION,
    OTHER_INCOME_SECTION,
    SUPPORT_SECTION,
    VARIABLE_INCOME_RULES,
)

ALL_RULES: tuple[Rule, ...] = (
    *BASE_PACK_RULES,
    *INCOME_EMPLOYED_RULES,
    *INCOME_SELF_EMPLOYED_RULES,
    *INCOME_OTHER_RULES,
    *VARIABLE_INCOME_RULES,
    *LIABILITY_RULES,
    *SITUATION_RULES,
    *DOWN_PAYMENT_RULES,
    *PROPERTY_RULES,
    *RESIDENCY_RULES,
)

# Sections whose rules never fire on application data. The brokerage turns
# them on by hand once the situation is known.
MANUAL_FLAG_SECTIONS: dict[str, str] = {
    STATED_INCOME_SECTION: "Stated income (self-employed, lower documentation)",
    MATERNITY_SECTION: "Maternity or parental leave",
    PROBATION_SECTION: "Employment on probation",
    CCB_SECTION: "Canada Child Benefit income",
    SUPPORT_SECTION: "Child or spousal support income",
    OTHER_INCOME_SECTION: "Other income (disability, investment, trust, etc.)",
    BANKRUPTCY_SECTION: "Bankruptcy or consumer proposal",
    NEWCOMER_SECTION: "Newcomer to Canada (PR under 5 years)",
    WORK_PERMIT_SECTION: "Work permit holder",
    NON_RESIDENT_SECTION: "Non-resident buyer",
}


def rules_in_section(section: str) -> list[Rule]:
    return [rule for rule in ALL_RULES if rule.section == section]


__all__ = [
    "ALL_RULES",
    "MANUAL_FLAG_SECTIONS",
    "Rule",
    "rules_in_section",
]
