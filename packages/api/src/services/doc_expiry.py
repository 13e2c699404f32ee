# This project was developed with assistance from AI tools.
"""Reuse windows for documents already on file.

Pure function deciding whether a document from an earlier application is
still acceptable. Property-specific documents and types without a window are
never reused.
"""

import logging
from datetime import date, timedelta
from typing import NamedTuple

from db.enums import DocumentType

from ..schemas.checklist import ExistingDoc

logger = logging.getLogger(__name__)


class ExpiryRule(NamedTuple):
    kind: str  # "never", "days", "years" or "tax_year"
    amount: int = 0


_NEVER = ExpiryRule("never")
_TAX_YEAR = ExpiryRule("tax_year")

EXPIRY_RULES: dict[DocumentType, ExpiryRule] = {
    # Identity
    DocumentType.PHOTO_ID: ExpiryRule("years", 5),
    DocumentType.SECOND_ID: ExpiryRule("years", 5),
    DocumentType.PR_CARD: ExpiryRule("years", 5),
    DocumentType.PASSPORT: ExpiryRule("years", 5),
    # Permanent records
    DocumentType.VOID_CHEQUE: _NEVER,
    DocumentType.SEPARATION_AGREEMENT: _NEVER,
    DocumentType.DIVORCE_DECREE: _NEVER,
    DocumentType.DISCHARGE_CERTIFICATE: _NEVER,
    DocumentType.ARTICLES_OF_INCORPORATION: _NEVER,
    DocumentType.EMPLOYMENT_CONTRACT: _NEVER,
    # Tax slips and returns
    DocumentType.T4: _TAX_YEAR,
    DocumentType.T4A: _TAX_YEAR,
    DocumentType.NOA: _TAX_YEAR,
    DocumentType.T1: _TAX_YEAR,
    DocumentType.T2: _TAX_YEAR,
    DocumentType.T5: _TAX_YEAR,
    DocumentType.T4RIF: _TAX_YEAR,
    # Recent income
    DocumentType.PAY_STUB: ExpiryRule("days", 30),
    DocumentType.LOE: ExpiryRule("days", 30),
    # Account history
    DocumentType.BANK_STATEMENT: ExpiryRule("days", 90),
    DocumentType.RRSP_STATEMENT: ExpiryRule("days", 90),
    DocumentType.TFSA_STATEMENT: ExpiryRule("days", 90),
    DocumentType.FHSA_STATEMENT: ExpiryRule("days", 90),
    # Annual
    DocumentType.FINANCIAL_STATEMENT: ExpiryRule("years", 1),
    DocumentType.COMMISSION_STATEMENT: ExpiryRule("years", 1),
    DocumentType.PENSION_LETTER: ExpiryRule("years", 1),
    DocumentType.WORK_PERMIT: ExpiryRule("years", 1),
    DocumentType.CRA_STATEMENT_OF_ACCOUNT: ExpiryRule("years", 1),
}


def _years_before(reference: date, years: int) -> date:
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return reference.replace(year=reference.year - years, day=28)


def is_doc_still_valid(doc: ExistingDoc, reference_date: date) -> bool:
    """Check whether an on-file document can satisfy a new checklist.

    Args:
        doc: The existing document.
        reference_date: Date the new checklist is evaluated on.

    Returns:
        True if the document is inside its reuse window.
    """
    if doc.document_type in DocumentType.property_specific():
        return False

    rule = EXPIRY_RULES.get(doc.document_type)
    if rule is None:
        return False

    modified = doc.modified_at.date()
    if rule.kind == "never":
        return True
    if rule.kind == "days":
        return reference_date - modified <= timedelta(days=rule.amount)
    if rule.kind == "years":
        return modified >= _years_before(reference_date, rule.amount)
    if rule.kind == "tax_year":
        if doc.year is None:
            return False
        return doc.year >= (reference_date.year - 1) - 1

    logger.warning("Unknown expiry rule %s for %s", rule.kind, doc.document_type.value)
    return False
