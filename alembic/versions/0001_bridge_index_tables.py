"""bridge index tables

Revision ID: 0001_bridge_index
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "0001_bridge_index"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "provider_fetches",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("provider_name", sa.String(50), nullable=False),
        sa.Column("fetched_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("success", sa.Boolean(), nullable=False),
        sa.Column("chains_count", sa.Integer(), nullable=True),
        sa.Column("tokens_count", sa.Integer(), nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_provider_fetches")),
    )
    op.create_index(op.f("ix_provider_fetches_provider_name"), "provider_fetches", ["provider_name"])

    op.create_table(
        "chains",
        sa.Column("chain_id", sa.BigInteger(), autoincrement=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("native_currency_name", sa.Text(), nullable=False),
        sa.Column("native_currency_symbol", sa.Text(), nullable=False),
        sa.Column("native_currency_decimals", sa.Integer(), nullable=False),
        sa.Column("short_name", sa.Text(), nullable=True),
        sa.Column("chain_type", sa.String(20), nullable=True),
        sa.Column("vm_type", sa.String(20), nullable=True),
        sa.Column("icon", sa.Text(), nullable=True),
        sa.Column("info_url", sa.Text(), nullable=True),
        sa.Column("explorers", postgresql.JSONB(), nullable=True),
        sa.Column("rpc", postgresql.JSONB(), nullable=True),
        sa.Column("faucets", postgresql.JSONB(), nullable=True),
        sa.Column("ens", postgresql.JSONB(), nullable=True),
        sa.Column("features", postgresql.JSONB(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("chain_id", name=op.f("pk_chains")),
    )

    op.create_table(
        "chain_provider_support",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column(
            "chain_id",
            sa.BigInteger(),
            sa.ForeignKey("chains.chain_id", name=op.f("fk_chain_provider_support_chain_id_chains")),
            nullable=False,
        ),
        sa.Column("provider_name", sa.String(50), nullable=False),
        sa.Column(
            "fetch_id",
            sa.Integer(),
            sa.ForeignKey("provider_fetches.id", name=op.f("fk_chain_provider_support_fetch_id_provider_fetches")),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_chain_provider_support")),
        sa.UniqueConstraint("chain_id", "provider_name", name="uq_chain_provider_support_chain_provider"),
    )

    op.create_table(
        "tokens",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("provider_name", sa.String(50), nullable=False),
        sa.Column(
            "chain_id",
            sa.BigInteger(),
            sa.ForeignKey("chains.chain_id", name=op.f("fk_tokens_chain_id_chains")),
            nullable=False,
        ),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("symbol", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("decimals", sa.Integer(), nullable=True),
        sa.Column("logo_uri", sa.Text(), nullable=True),
        sa.Column("tags", postgresql.JSONB(), nullable=False),
        sa.Column(
            "fetch_id",
            sa.Integer(),
            sa.ForeignKey("provider_fetches.id", name=op.f("fk_tokens_fetch_id_provider_fetches")),
            nullable=False,
        ),
        sa.Column("raw_data", postgresql.JSONB(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_tokens")),
        sa.UniqueConstraint("provider_name", "chain_id", "address", name="uq_tokens_provider_chain_address"),
    )
    op.create_index("ix_tokens_symbol", "tokens", ["symbol"])


def downgrade() -> None:
    op.drop_index("ix_tokens_symbol", table_name="tokens")
    op.drop_table("tokens")
    op.drop_table("chain_provider_support")
    op.drop_table("chains")
    op.drop_index(op.f("ix_provider_fetches_provider_name"), table_name="provider_fetches")
    op.drop_table("provider_fetches")
