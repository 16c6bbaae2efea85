"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- account: credentials (email + bcrypt hash)
- seller: public profile, same id as its account; username indexed but not unique
- product: seller's products, image stored inline as a data URL
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        'account',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_account_email'), 'account', ['email'], unique=True)

    op.create_table(
        'seller',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('username', sa.String(length=20), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['id'], ['account.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_seller_username'), 'seller', ['username'], unique=False)
    op.create_index(op.f('ix_seller_created_at'), 'seller', ['created_at'], unique=False)

    op.create_table(
        'product',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('seller_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.String(length=32), nullable=False),
        sa.Column('service_notes', sa.Text(), nullable=True),
        sa.Column('image_data', sa.Text(), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['seller_id'], ['seller.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_product_seller_id'), 'product', ['seller_id'], unique=False)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_product_seller_id'), table_name='product')
    op.drop_table('product')
    op.drop_index(op.f('ix_seller_created_at'), table_name='seller')
    op.drop_index(op.f('ix_seller_username'), table_name='seller')
    op.drop_table('seller')
    op.drop_index(op.f('ix_account_email'), table_name='account')
    op.drop_table('account')
