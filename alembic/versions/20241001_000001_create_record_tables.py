"""Create record tables

Revision ID: 20241001_000001
Revises:
Create Date: 2024-10-01

Properties, tenants, lease agreements, financial transactions,
maintenance requests and documents. Cross-table references are plain
indexed columns without foreign key constraints.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20241001_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("owner", sa.String(255), nullable=False),
        sa.Column("valuation", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("created_at", sa.String(32), nullable=False),
        sa.Column("square_footage", sa.Float(), nullable=False),
        sa.Column("bedrooms", sa.Integer(), nullable=False),
        sa.Column("bathrooms", sa.Float(), nullable=False),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("property_type", sa.String(20), nullable=False),
        sa.Column("last_inspection_date", sa.String(32), nullable=False),
        sa.Column("insurance_info", sa.Text(), nullable=False),
        sa.Column("tax_details", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_properties_property_type", "properties", ["property_type"])

    op.create_table(
        "tenants",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("emergency_contact", sa.String(255), nullable=False),
        sa.Column("background_check_status", sa.String(50), nullable=False),
        sa.Column("credit_score", sa.Integer(), nullable=False),
        sa.Column("rental_history", sa.JSON(), nullable=False),
        sa.Column("payment_preferences", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "lease_agreements",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("tenant", sa.String(36), nullable=False),
        sa.Column("rent", sa.Numeric(12, 2), nullable=False),
        sa.Column("security_deposit", sa.Numeric(12, 2), nullable=False),
        sa.Column("start_date", sa.String(32), nullable=False),
        sa.Column("end_date", sa.String(32), nullable=False),
        sa.Column("created_at", sa.String(32), nullable=False),
        sa.Column("digital_signature", sa.Text(), nullable=False),
        sa.Column("utility_responsibilities", sa.JSON(), nullable=False),
        sa.Column("renewal_status", sa.String(50), nullable=False),
        sa.Column("rent_payment_history", sa.JSON(), nullable=False),
        sa.Column("lease_violations", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_lease_agreements_property_id", "lease_agreements", ["property_id"])
    op.create_index("ix_lease_agreements_tenant", "lease_agreements", ["tenant"])

    op.create_table(
        "financial_transactions",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("date", sa.String(32), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("transaction_type", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("payment_method", sa.String(50), nullable=False),
        sa.Column("recorded_by", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_financial_transactions_property_id", "financial_transactions", ["property_id"])

    op.create_table(
        "maintenance_requests",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("priority", sa.String(50), nullable=False),
        sa.Column("created_at", sa.String(32), nullable=False),
        sa.Column("assigned_to", sa.String(255), nullable=False),
        sa.Column("estimated_cost", sa.Numeric(12, 2), nullable=False),
        sa.Column("actual_cost", sa.Numeric(12, 2), nullable=False),
        sa.Column("completion_date", sa.String(32), nullable=False),
        sa.Column("tenant_feedback", sa.Text(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("work_orders", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_maintenance_requests_property_id", "maintenance_requests", ["property_id"])

    op.create_table(
        "documents",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("document_type", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_documents_property_id", "documents", ["property_id"])


def downgrade() -> None:
    op.drop_index("ix_documents_property_id", table_name="documents")
    op.drop_table("documents")
    op.drop_index("ix_maintenance_requests_property_id", table_name="maintenance_requests")
    op.drop_table("maintenance_requests")
    op.drop_index("ix_financial_transactions_property_id", table_name="financial_transactions")
    op.drop_table("financial_transactions")
    op.drop_index("ix_lease_agreements_tenant", table_name="lease_agreements")
    op.drop_index("ix_lease_agreements_property_id", table_name="lease_agreements")
    op.drop_table("lease_agreements")
    op.drop_table("tenants")
    op.drop_index("ix_properties_property_type", table_name="properties")
    op.drop_table("properties")
