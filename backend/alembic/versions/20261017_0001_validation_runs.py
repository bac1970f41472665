"""create validation runs table

Revision ID: 20261017_0001
Revises:
Create Date: 2026-10-17 00:00:01
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261017_0001"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "validation_runs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("source", sa.String(length=32), nullable=False),
        sa.Column("sender_id", sa.String(length=255), nullable=True),
        sa.Column("sender_name", sa.String(length=255), nullable=True),
        sa.Column("is_valid", sa.Boolean(), nullable=False),
        sa.Column("error_count", sa.Integer(), nullable=False),
        sa.Column("errors_json", sa.JSON(), nullable=False),
        sa.Column("evaluated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_validation_runs_source", "validation_runs", ["source"], unique=False)
    op.create_index("ix_validation_runs_sender_id", "validation_runs", ["sender_id"], unique=False)
    op.create_index("ix_validation_runs_is_valid", "validation_runs", ["is_valid"], unique=False)
    op.create_index("ix_validation_runs_evaluated_at", "validation_runs", ["evaluated_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_validation_runs_evaluated_at", table_name="validation_runs")
    op.drop_index("ix_validation_runs_is_valid", table_name="validation_runs")
    op.drop_index("ix_validation_runs_sender_id", table_name="validation_runs")
    op.drop_index("ix_validation_runs_source", table_name="validation_runs")
    op.drop_table("validation_runs")
