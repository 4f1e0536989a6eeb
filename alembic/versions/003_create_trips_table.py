"""Create trips table

Revision ID: 003
Revises: 002
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "003"
down_revision: str | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    money = sa.Numeric(precision=10, scale=2)
    op.create_table(
        "trips",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("route_id", sa.Integer(), sa.ForeignKey("routes.id", ondelete="SET NULL"), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("origin", sa.String(length=256), nullable=False),
        sa.Column("destination", sa.String(length=256), nullable=False),
        sa.Column("kilometers", sa.Integer(), nullable=False),
        sa.Column("fuel_cost", money, nullable=False),
        sa.Column("parking_cost", money, nullable=False, server_default="0.00"),
        sa.Column("toll_cost", money, nullable=False, server_default="0.00"),
        sa.Column("other_cost", money, nullable=False, server_default="0.00"),
        sa.Column("total_cost", money, nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_trips_user_id"), "trips", ["user_id"])
    op.create_index(op.f("ix_trips_route_id"), "trips", ["route_id"])
    op.create_index(op.f("ix_trips_date"), "trips", ["date"])


def downgrade() -> None:
    op.drop_index(op.f("ix_trips_date"), table_name="trips")
    op.drop_index(op.f("ix_trips_route_id"), table_name="trips")
    op.drop_index(op.f("ix_trips_user_id"), table_name="trips")
    op.drop_table("trips")
