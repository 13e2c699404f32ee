# This project was developed with assistance from AI tools.
"""add doc tracking tables

Revision ID: 3a1c9e7d2b40
Revises:
Create Date: 2026-10-19 09:12:41.503118

"""

import sqlalchemy as sa
from alembic import op

revision = "3a1c9e7d2b40"
down_revision = None
branch_labels = None
depends_on = None


def _tracking_columns() -> list[sa.Column]:
    return [
        sa.Column("missing_docs", sa.Text(), nullable=True),
        sa.Column("received_docs", sa.Text(), nullable=True),
        sa.Column("pre_docs_total", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("pre_docs_received", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("full_docs_total", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("full_docs_received", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("doc_status", sa.String(20), nullable=True),
        sa.Column("doc_request_sent", sa.Date(), nullable=True),
        sa.Column("last_doc_received", sa.Date(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "contacts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        *_tracking_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_contacts_email", "contacts", ["email"])

    op.create_table(
        "deals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("contact_id", sa.Integer(), nullable=False),
        sa.Column("application_ref", sa.String(64), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        *_tracking_columns(),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["contact_id"], ["contacts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_deals_contact_id", "deals", ["contact_id"])
    op.create_index("ix_deals_application_ref", "deals", ["application_ref"])

    op.create_table(
        "receipt_notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("contact_id", sa.Integer(), nullable=False),
        sa.Column("doc_name", sa.String(255), nullable=False),
        sa.Column("source", sa.String(20), nullable=False),
        sa.Column("file_id", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["contact_id"], ["contacts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_receipt_notes_contact_id", "receipt_notes", ["contact_id"])


def downgrade() -> None:
    op.drop_index("ix_receipt_notes_contact_id", table_name="receipt_notes")
    op.drop_table("receipt_notes")
    op.drop_index("ix_deals_application_ref", table_name="deals")
    op.drop_index("ix_deals_contact_id", table_name="deals")
    op.drop_table("deals")
    op.drop_index("ix_contacts_email", table_name="contacts")
    op.drop_table("contacts")
