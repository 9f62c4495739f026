"""Packages and package event subscriptions."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20260101_0002"
down_revision = "20260101_0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "hub_packages",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("normalized_name", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_hub_packages_normalized_name",
        "hub_packages",
        ["normalized_name"],
        unique=True,
    )

    op.create_table(
        "hub_subscriptions",
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("package_id", sa.String(length=36), nullable=False),
        sa.Column("event_kind", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.ForeignKeyConstraint(["package_id"], ["hub_packages.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "package_id", "event_kind"),
    )
    op.create_index(
        "ix_hub_subscriptions_package_id",
        "hub_subscriptions",
        ["package_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_hub_subscriptions_package_id", table_name="hub_subscriptions")
    op.drop_table("hub_subscriptions")
    op.drop_index("ix_hub_packages_normalized_name", table_name="hub_packages")
    op.drop_table("hub_packages")
