"""initial schema: drivers, gates, logs, users, divisions

Revision ID: 0001
Revises:
Create Date: 2026-10-17 09:00:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "drivers",
        sa.Column("id", sa.String(20), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("license_plate", sa.String(20), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("entry_type", sa.String(20), nullable=False),
        sa.Column("purpose", sa.String(20), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("do_number", sa.String(255), nullable=False),
        sa.Column("pic", sa.String(255), nullable=True),
        sa.Column("item_type", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("document_file", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("gate", sa.String(100), nullable=True),
        sa.Column("queue_number", sa.String(10), nullable=True),
        sa.Column("check_in_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("arrived_at_gate_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("verified_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("called_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("loading_start_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("exit_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("verified_by", sa.String(255), nullable=True),
        sa.Column("called_by", sa.String(255), nullable=True),
        sa.Column("exit_verified_by", sa.String(255), nullable=True),
        sa.Column("security_notes", sa.Text(), nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_drivers_license_plate", "drivers", ["license_plate"])
    op.create_index("ix_drivers_status", "drivers", ["status"])
    op.create_index("ix_drivers_gate", "drivers", ["gate"])
    op.create_index("ix_drivers_check_in_time", "drivers", ["check_in_time"])

    op.create_table(
        "gates",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_gates_name", "gates", ["name"])

    op.create_table(
        "logs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_logs_action", "logs", ["action"])
    op.create_index("ix_logs_created_at", "logs", ["created_at"])

    op.create_table(
        "users",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "divisions",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("theme", sa.String(50), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("divisions")
    op.drop_table("users")
    op.drop_table("logs")
    op.drop_table("gates")
    op.drop_table("drivers")
