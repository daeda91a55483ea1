"""initial catalogue

Revision ID: a1c4e2f7b9d3
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""
from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e2f7b9d3"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

CATALOGUE_TABLES = (
    "characters",
    "careers",
    "skills",
    "worlds",
    "weapons",
    "armor",
    "vehicles",
    "spaceships",
)


def _common_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _tenant_column(table: str) -> list[sa.SchemaItem]:
    return [
        sa.Column("tenant_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["tenant_id"],
            ["tenants.id"],
            name=f"fk_{table}_tenant_id_tenants",
            ondelete="CASCADE",
        ),
    ]


def _create_catalogue_table(table: str, *columns: sa.Column) -> None:
    op.create_table(
        table,
        *_common_columns(),
        *columns,
        *_tenant_column(table),
        sa.PrimaryKeyConstraint("id", name=f"pk_{table}"),
    )
    op.create_index(f"ix_{table}_name", table, ["name"])
    op.create_index(f"ix_{table}_tenant_id", table, ["tenant_id"])


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "tenants",
        *_common_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_tenants"),
        sa.UniqueConstraint("name", name="uq_tenants_name"),
    )

    _create_catalogue_table(
        "characters",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("gender", sa.String(length=50), nullable=True),
        sa.Column("credits", sa.Integer(), nullable=False),
        sa.Column("background", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
    )
    _create_catalogue_table(
        "careers",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("qualification_dm", sa.Integer(), nullable=False),
    )
    _create_catalogue_table(
        "skills",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("primary_characteristic", sa.String(length=20), nullable=True),
    )
    _create_catalogue_table(
        "worlds",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("uwp", sa.String(length=20), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("travel_zone", sa.String(length=10), nullable=False),
        sa.Column("hex_coordinates", sa.String(length=4), nullable=True),
        sa.Column("starport_class", sa.String(length=1), nullable=True),
        sa.Column("size", sa.Integer(), nullable=True),
        sa.Column("atmosphere", sa.Integer(), nullable=True),
        sa.Column("hydrographics", sa.Integer(), nullable=True),
        sa.Column("population", sa.Integer(), nullable=True),
        sa.Column("government", sa.Integer(), nullable=True),
        sa.Column("law_level", sa.Integer(), nullable=True),
        sa.Column("tech_level", sa.Integer(), nullable=True),
    )
    _create_catalogue_table(
        "weapons",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("tech_level", sa.Integer(), nullable=False),
        sa.Column("damage_formula", sa.String(length=20), nullable=False),
        sa.Column("range", sa.Integer(), nullable=False),
        sa.Column("automatic", sa.Boolean(), nullable=False),
        sa.Column("magazine", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=10, scale=2), nullable=True),
    )
    _create_catalogue_table(
        "armor",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("tech_level", sa.Integer(), nullable=False),
        sa.Column("protection", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("powered", sa.Boolean(), nullable=False),
    )
    _create_catalogue_table(
        "vehicles",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("tech_level", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Integer(), nullable=False),
        sa.Column("max_speed", sa.Integer(), nullable=False),
        sa.Column("passenger_capacity", sa.Integer(), nullable=False),
    )
    _create_catalogue_table(
        "spaceships",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("tech_level", sa.Integer(), nullable=False),
        sa.Column("cost_mcr", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("displacement_tons", sa.Integer(), nullable=False),
        sa.Column("jump_drive_rating", sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    """Downgrade database schema."""
    for table in reversed(CATALOGUE_TABLES):
        op.drop_index(f"ix_{table}_tenant_id", table_name=table)
        op.drop_index(f"ix_{table}_name", table_name=table)
        op.drop_table(table)
    op.drop_table("tenants")
