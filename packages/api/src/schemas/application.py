# This project was developed with assistance from AI tools.
"""Loan application payload schemas.

The application data source sends camelCase JSON with many fields this system
never reads. Every record ignores unknown keys and accepts either camelCase or
snake_case names. Classification fields (income source, pay type, asset type,
...) stay open strings; rule predicates match the values they know and treat
anything else as no match.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PayloadModel(BaseModel):
    """Base for inbound application records."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ApplicationDetails(PayloadModel):
    id: str
    goal: str | None = None
    use: str | None = None
    process: str | None = None
    property_id: str | None = None
    down_payment: float = 0


class Applicant(PayloadModel):
    """User who started the application; only used to stand in for a missing borrower."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str | None = None
    phone_number: str | None = None


class BorrowerRecord(PayloadModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    email: str | None = None
    marital: str | None = None
    first_time: bool = False
    is_main_borrower: bool = False
    income_ids: list[str] = Field(default_factory=list, alias="incomes")
    asset_ids: list[str] = Field(default_factory=list, alias="assets")
    liability_ids: list[str] = Field(default_factory=list, alias="liabilities")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class IncomeRecord(PayloadModel):
    id: str
    borrower_id: str
    source: str | None = None
    pay_type: str | None = None
    job_type: str | None = None
    bonuses: bool = False
    self_pay_type: list[Any] | None = None
    business_type: str | None = None
    income: float = 0


class AssetRecord(PayloadModel):
    id: str
    type: str | None = None
    description: str | None = None
    value: float = 0
    owners: list[str] = Field(default_factory=list)


class LiabilityRecord(PayloadModel):
    id: str
    type: str | None = None
    description: str | None = None
    balance: float = 0
    owners: list[str] = Field(default_factory=list)


class PropertyRecord(PayloadModel):
    id: str
    address_id: str | None = None
    is_selling: bool = False
    rental_income: float = 0
    type: str | None = None
    monthly_fees: float | None = None
    number_of_units: int | None = None
    owners: list[str] = Field(default_factory=list)


class AddressRecord(PayloadModel):
    id: str
    street_number: str | None = None
    street_name: str | None = None
    street_type: str | None = None
    city: str | None = None


class ApplicationPayload(PayloadModel):
    """Full application snapshot as delivered by the application data source."""

    application: ApplicationDetails
    applicant: Applicant | None = None
    borrowers: list[BorrowerRecord] = Field(default_factory=list)
    incomes: list[IncomeRecord] = Field(default_factory=list)
    properties: list[PropertyRecord] = Field(default_factory=list)
    assets: list[AssetRecord] = Field(default_factory=list)
    liabilities: list[LiabilityRecord] = Field(default_factory=list)
    addresses: list[AddressRecord] = Field(default_factory=list)
