# This project was developed with assistance from AI tools.
"""Section 0: documents requested on every application.

Credit consent is sent automatically by the application portal and is never
requested here.
"""

from db.enums import ChecklistScope, ChecklistStage

from .base import Rule, always

BASE_PACK_RULES: list[Rule] = [
    Rule(
        id="s0_photo_id",
        section="0_base_pack",
        document="Government-issued photo ID",
        display_name="Government-issued photo ID (driver's license or passport)",
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=always,
    ),
    Rule(
        id="s0_second_id",
        section="0_base_pack",
        document="Second form of ID",
        display_name=(
            "Second form of ID (passport, credit card, PR card, SIN card, "
            "birth certificate, or firearms license)"
        ),
        stage=ChecklistStage.PRE,
        scope=ChecklistScope.PER_BORROWER,
        condition=always,
    ),
    Rule(
        id="s0_void_cheque",
        section="0_base_pack",
        document="Void cheque or direct deposit form",
        display_name="Void cheque or direct deposit form",
        stage=ChecklistStage.FULL,
        scope=ChecklistScope.SHARED,
        condition=always,
    ),
]
