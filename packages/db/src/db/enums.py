# This project was developed with assistance from AI tools.
"""
Domain enums for mortgage document collection.

Shared domain types used by both SQLAlchemy models (db package)
and Pydantic schemas (api package).
"""

import enum


class ChecklistStage(str, enum.Enum):
    """When a requirement is due. Ordering classification, not a workflow state."""

    PRE = "PRE"
    FULL = "FULL"
    LATER = "LATER"
    CONDITIONAL = "CONDITIONAL"
    LENDER_CONDITION = "LENDER_CONDITION"

    @classmethod
    def counted_stages(cls) -> frozenset["ChecklistStage"]:
        """Stages that participate in the completion counters."""
        return frozenset({cls.PRE, cls.FULL})


class ChecklistScope(str, enum.Enum):
    PER_BORROWER = "per_borrower"
    PER_PROPERTY = "per_property"
    SHARED = "shared"


class InternalFlagType(str, enum.Enum):
    INTERNAL_CHECK = "internal_check"
    DEFERRED_DOC = "deferred_doc"


class DocStatus(str, enum.Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    PRE_COMPLETE = "PRE Complete"
    ALL_COMPLETE = "All Complete"


class DocumentType(str, enum.Enum):
    """Document types the upstream classifier can return."""

    # Base pack
    PHOTO_ID = "photo_id"
    SECOND_ID = "second_id"
    VOID_CHEQUE = "void_cheque"
    # Income - employed
    PAY_STUB = "pay_stub"
    LOE = "loe"
    T4 = "t4"
    NOA = "noa"
    # Income - self-employed
    T1 = "t1"
    T2 = "t2"
    ARTICLES_OF_INCORPORATION = "articles_of_incorporation"
    FINANCIAL_STATEMENT = "financial_statement"
    # Income - other
    PENSION_LETTER = "pension_letter"
    T4A = "t4a"
    EMPLOYMENT_CONTRACT = "employment_contract"
    # Variable income
    COMMISSION_STATEMENT = "commission_statement"
    LEASE_AGREEMENT = "lease_agreement"
    # Down payment
    BANK_STATEMENT = "bank_statement"
    RRSP_STATEMENT = "rrsp_statement"
    TFSA_STATEMENT = "tfsa_statement"
    FHSA_STATEMENT = "fhsa_statement"
    GIFT_LETTER = "gift_letter"
    # Property
    PURCHASE_AGREEMENT = "purchase_agreement"
    MLS_LISTING = "mls_listing"
    MORTGAGE_STATEMENT = "mortgage_statement"
    PROPERTY_TAX_BILL = "property_tax_bill"
    HOME_INSURANCE = "home_insurance"
    # Tax
    T5 = "t5"
    CRA_STATEMENT_OF_ACCOUNT = "cra_statement_of_account"
    T4RIF = "t4rif"
    # Situations
    SEPARATION_AGREEMENT = "separation_agreement"
    DIVORCE_DECREE = "divorce_decree"
    DISCHARGE_CERTIFICATE = "discharge_certificate"
    # Residency
    PR_CARD = "pr_card"
    PASSPORT = "passport"
    WORK_PERMIT = "work_permit"
    OTHER = "other"

    @classmethod
    def property_specific(cls) -> frozenset["DocumentType"]:
        """Types tied to one property/deal and never reused across deals."""
        return frozenset(
            {
                cls.PURCHASE_AGREEMENT,
                cls.MLS_LISTING,
                cls.PROPERTY_TAX_BILL,
                cls.HOME_INSURANCE,
                cls.GIFT_LETTER,
                cls.LEASE_AGREEMENT,
                cls.MORTGAGE_STATEMENT,
            }
        )


class DealStatus(str, enum.Enum):
    OPEN = "open"
    WON = "won"
    LOST = "lost"
    ABANDONED = "abandoned"


class ReceiptSource(str, enum.Enum):
    GMAIL = "gmail"
    FINMO = "finmo"


class TrackingTarget(str, enum.Enum):
    DEAL = "deal"
    CONTACT = "contact"


class TrackingSkipReason(str, enum.Enum):
    NO_CONTACT = "no_contact"
    NO_MATCH_IN_CHECKLIST = "no_match_in_checklist"
    ALREADY_RECEIVED = "already_received"
    AMBIGUOUS_DEAL = "ambiguous_deal"


class TrackingField(str, enum.Enum):
    """Persisted tracking columns, shared by contacts and deals."""

    MISSING_DOCS = "missing_docs"
    RECEIVED_DOCS = "received_docs"
    PRE_DOCS_TOTAL = "pre_docs_total"
    PRE_DOCS_RECEIVED = "pre_docs_received"
    FULL_DOCS_TOTAL = "full_docs_total"
    FULL_DOCS_RECEIVED = "full_docs_received"
    DOC_STATUS = "doc_status"
    DOC_REQUEST_SENT = "doc_request_sent"
    LAST_DOC_RECEIVED = "last_doc_received"
