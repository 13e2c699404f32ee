# This project was developed with assistance from AI tools.
"""Match a classified document type to an outstanding checklist entry.

Three tiers, each scanning entries in list order:
1. the type's label is a prefix of the entry name (case-insensitive)
2. the label appears anywhere in the entry name (labels of 3+ characters)
3. a known alias appears in the entry name
"""

from db.enums import DocumentType

from ..schemas.tracking import DocEntry

DOC_TYPE_LABELS: dict[DocumentType, str] = {
    DocumentType.PHOTO_ID: "ID",
    DocumentType.SECOND_ID: "Second ID",
    DocumentType.PAY_STUB: "Pay Stub",
    DocumentType.LOE: "LOE",
    DocumentType.T4: "T4",
    DocumentType.T4A: "T4A",
    DocumentType.NOA: "NOA",
    DocumentType.T1: "T1",
    DocumentType.T5: "T5",
    DocumentType.T4RIF: "T4RIF",
    DocumentType.T2: "T2",
    DocumentType.BANK_STATEMENT: "Bank Statement",
    DocumentType.RRSP_STATEMENT: "RRSP Statement",
    DocumentType.TFSA_STATEMENT: "TFSA Statement",
    DocumentType.FHSA_STATEMENT: "FHSA Statement",
    DocumentType.GIFT_LETTER: "Gift Letter",
    DocumentType.VOID_CHEQUE: "Void Cheque",
    DocumentType.PURCHASE_AGREEMENT: "Purchase Agreement",
    DocumentType.MLS_LISTING: "MLS",
    DocumentType.MORTGAGE_STATEMENT: "Mortgage Statement",
    DocumentType.PROPERTY_TAX_BILL: "Property Tax",
    DocumentType.HOME_INSURANCE: "Home Insurance",
    DocumentType.PENSION_LETTER: "Pension Letter",
    DocumentType.EMPLOYMENT_CONTRACT: "Employment Contract",
    DocumentType.COMMISSION_STATEMENT: "Commission Statement",
    DocumentType.LEASE_AGREEMENT: "Lease Agreement",
    DocumentType.ARTICLES_OF_INCORPORATION: "Articles of Incorporation",
    DocumentType.FINANCIAL_STATEMENT: "Financial Statement",
    DocumentType.SEPARATION_AGREEMENT: "Separation Agreement",
    DocumentType.DIVORCE_DECREE: "Divorce Decree",
    DocumentType.DISCHARGE_CERTIFICATE: "Discharge Certificate",
    DocumentType.PR_CARD: "PR Card",
    DocumentType.PASSPORT: "Passport",
    DocumentType.WORK_PERMIT: "Work Permit",
    DocumentType.CRA_STATEMENT_OF_ACCOUNT: "CRA Statement",
    DocumentType.OTHER: "Document",
}

KNOWN_ALIASES: dict[DocumentType, list[str]] = {
    DocumentType.PAY_STUB: ["paystub", "pay stub"],
    DocumentType.LOE: ["letter of employment", "employment letter"],
    DocumentType.NOA: ["notice of assessment", "NOA"],
    DocumentType.T1: ["T1 General"],
    DocumentType.PHOTO_ID: ["photo ID", "government-issued"],
    DocumentType.SECOND_ID: ["second form of ID", "second ID"],
    DocumentType.VOID_CHEQUE: ["void cheque", "direct deposit"],
    DocumentType.BANK_STATEMENT: ["bank statement", "90-day bank"],
    DocumentType.PURCHASE_AGREEMENT: ["purchase agreement", "agreement of purchase"],
    DocumentType.PR_CARD: ["PR card", "permanent resident"],
    DocumentType.FINANCIAL_STATEMENT: ["financial statement"],
    DocumentType.ARTICLES_OF_INCORPORATION: ["articles of incorporation"],
    DocumentType.PENSION_LETTER: ["pension letter", "pension benefit"],
    DocumentType.EMPLOYMENT_CONTRACT: ["employment contract"],
    DocumentType.COMMISSION_STATEMENT: ["commission statement"],
    DocumentType.LEASE_AGREEMENT: ["lease agreement"],
    DocumentType.PROPERTY_TAX_BILL: ["property tax"],
    DocumentType.MORTGAGE_STATEMENT: ["mortgage statement"],
    DocumentType.HOME_INSURANCE: ["home insurance"],
    DocumentType.SEPARATION_AGREEMENT: ["separation agreement", "separation/divorce"],
    DocumentType.DISCHARGE_CERTIFICATE: ["discharge certificate", "bankruptcy discharge"],
    DocumentType.PASSPORT: ["passport"],
    DocumentType.WORK_PERMIT: ["work permit"],
}


def is_property_specific(document_type: DocumentType) -> bool:
    """Property-specific documents satisfy one deal only; the rest are reusable."""
    return document_type in DocumentType.property_specific()


def find_matching_entry(document_type: DocumentType, entries: list[DocEntry]) -> DocEntry | None:
    label = DOC_TYPE_LABELS.get(document_type)
    if not label:
        return None
    label = label.lower()

    for entry in entries:
        if entry.name.lower().startswith(label):
            return entry

    if len(label) >= 3:
        for entry in entries:
            if label in entry.name.lower():
                return entry

    for alias in KNOWN_ALIASES.get(document_type, []):
        alias = alias.lower()
        for entry in entries:
            if alias in entry.name.lower():
                return entry

    return None
