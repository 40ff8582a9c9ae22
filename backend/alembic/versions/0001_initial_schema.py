"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Creates the entity tables (african_regions, countries, ethnic_groups,
ethnic_group_presence) and the contributions moderation queue.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # --- african_regions ---
    op.create_table(
        "african_regions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("code", sa.String(100), nullable=False, unique=True),
        sa.Column("name_fr", sa.String(200), nullable=False),
        sa.Column("name_en", sa.String(200), nullable=True),
        sa.Column("name_es", sa.String(200), nullable=True),
        sa.Column("name_pt", sa.String(200), nullable=True),
        sa.Column("total_population", sa.BigInteger, nullable=True),
        *_timestamps(),
    )

    # --- countries ---
    op.create_table(
        "countries",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("slug", sa.String(150), nullable=False, unique=True),
        sa.Column("name_fr", sa.String(200), nullable=False),
        sa.Column("name_en", sa.String(200), nullable=True),
        sa.Column("name_es", sa.String(200), nullable=True),
        sa.Column("name_pt", sa.String(200), nullable=True),
        sa.Column("iso_code_2", sa.String(2), nullable=True),
        sa.Column("iso_code_3", sa.String(3), nullable=True),
        sa.Column("region_id", sa.String(36), sa.ForeignKey("african_regions.id"), nullable=True),
        sa.Column("population_2025", sa.BigInteger, nullable=True),
        sa.Column("percentage_in_region", sa.Float, nullable=True),
        sa.Column("percentage_in_africa", sa.Float, nullable=True),
        *_timestamps(),
    )

    # --- ethnic_groups ---
    op.create_table(
        "ethnic_groups",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("slug", sa.String(150), nullable=False, unique=True),
        sa.Column("name_fr", sa.String(200), nullable=False),
        sa.Column("name_en", sa.String(200), nullable=True),
        sa.Column("name_es", sa.String(200), nullable=True),
        sa.Column("name_pt", sa.String(200), nullable=True),
        sa.Column("parent_id", sa.String(36), sa.ForeignKey("ethnic_groups.id"), nullable=True),
        sa.Column("total_population", sa.BigInteger, nullable=True),
        sa.Column("percentage_in_africa", sa.Float, nullable=True),
        *_timestamps(),
    )

    # --- ethnic_group_presence ---
    op.create_table(
        "ethnic_group_presence",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("ethnic_group_id", sa.String(36), sa.ForeignKey("ethnic_groups.id"), nullable=False),
        sa.Column("country_id", sa.String(36), sa.ForeignKey("countries.id"), nullable=False),
        sa.Column("population", sa.BigInteger, nullable=True),
        sa.Column("percentage_in_country", sa.Float, nullable=True),
        sa.Column("percentage_in_region", sa.Float, nullable=True),
        sa.Column("percentage_in_africa", sa.Float, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("ethnic_group_id", "country_id", name="uq_presence_group_country"),
    )

    # --- contributions ---
    op.create_table(
        "contributions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("proposed_payload", sa.JSON, nullable=False),
        sa.Column("contributor_email", sa.String(255), nullable=True),
        sa.Column("contributor_name", sa.String(200), nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("moderator_notes", sa.Text, nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_contributions_status", "contributions", ["status"])


def downgrade() -> None:
    op.drop_index("ix_contributions_status", table_name="contributions")
    op.drop_table("contributions")
    op.drop_table("ethnic_group_presence")
    op.drop_table("ethnic_groups")
    op.drop_table("countries")
    op.drop_table("african_regions")
