# This project was developed with assistance from AI tools.
"""Per-borrower evaluation contexts.

Turns an application payload into one RuleContext per borrower, main borrower
first. Incomes are scoped by their single owning borrower; assets and
liabilities by their owner list, so a jointly held asset shows up in every
owner's context.
"""

import logging
from dataclasses import dataclass
from datetime import date

from ...schemas.application import (
    ApplicationDetails,
    ApplicationPayload,
    AssetRecord,
    BorrowerRecord,
    IncomeRecord,
    LiabilityRecord,
    PropertyRecord,
)

logger = logging.getLogger(__name__)

SYNTHESIZED_BORROWER_WARNING = (
    "No borrowers in application; synthesized from applicant data. "
    "Some income-specific rules may not fire."
)
NO_BORROWER_WARNING = (
    "No borrowers and no applicant in application; "
    "cannot generate borrower-specific checklist items."
)


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule predicate may look at for one borrower."""

    application: ApplicationDetails
    borrower: BorrowerRecord
    borrower_incomes: list[IncomeRecord]
    borrower_assets: list[AssetRecord]
    borrower_liabilities: list[LiabilityRecord]
    all_borrowers: list[BorrowerRecord]
    all_incomes: list[IncomeRecord]
    assets: list[AssetRecord]
    liabilities: list[LiabilityRecord]
    properties: list[PropertyRecord]
    subject_property: PropertyRecord | None
    evaluation_date: date


def find_subject_property(payload: ApplicationPayload) -> PropertyRecord | None:
    """Resolve the property linked by application.property_id, if any."""
    property_id = payload.application.property_id
    if not property_id:
        return None
    for prop in payload.properties:
        if prop.id == property_id:
            return prop
    return None


def _synthesize_borrower(payload: ApplicationPayload) -> BorrowerRecord:
    applicant = payload.applicant
    return BorrowerRecord(
        id=applicant.id,
        first_name=applicant.first_name,
        last_name=applicant.last_name,
        email=applicant.email,
        marital="single",
        first_time=False,
        is_main_borrower=True,
    )


def build_contexts(
    payload: ApplicationPayload,
    evaluation_date: date,
) -> tuple[list[RuleContext], list[str]]:
    """Build one evaluation context per borrower.

    Args:
        payload: The application snapshot.
        evaluation_date: Date every year-dependent label is derived from.

    Returns:
        (contexts, warnings). The main borrower's context comes first; the
        rest keep their payload order. An empty context list is a valid
        result and comes with a warning.
    """
    warnings: list[str] = []
    borrowers = list(payload.borrowers)

    if not borrowers:
        if payload.applicant is None:
            logger.warning("Application %s has no borrowers and no applicant", payload.application.id)
            return [], [NO_BORROWER_WARNING]
        logger.warning("Application %s has no borrowers; using applicant", payload.application.id)
        borrowers = [_synthesize_borrower(payload)]
        warnings.append(SYNTHESIZED_BORROWER_WARNING)

    # sorted() is stable, so non-main borrowers keep their relative order
    ordered = sorted(borrowers, key=lambda b: not b.is_main_borrower)
    subject_property = find_subject_property(payload)

    contexts = [
        RuleContext(
            application=payload.application,
            borrower=borrower,
            borrower_incomes=[i for i in payload.incomes if i.borrower_id == borrower.id],
            borrower_assets=[a for a in payload.assets if borrower.id in a.owners],
            borrower_liabilities=[li for li in payload.liabilities if borrower.id in li.owners],
            all_borrowers=borrowers,
            all_incomes=list(payload.incomes),
            assets=list(payload.assets),
            liabilities=list(payload.liabilities),
            properties=list(payload.properties),
            subject_property=subject_property,
            evaluation_date=evaluation_date,
        )
        for borrower in ordered
    ]
    return contexts, warnings
