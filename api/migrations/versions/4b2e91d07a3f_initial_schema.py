"""initial_schema

Revision ID: 4b2e91d07a3f
Revises: 
Create Date: 2026-10-18 10:24:11.302114

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4b2e91d07a3f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('email', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='users_email_key')
    )
    
    # Create posts table
    op.create_table('posts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('author_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    
    # Posts of one author, in id order
    op.create_index(
        'posts_author_id_idx',
        'posts',
        ['author_id', 'id'],
        unique=False
    )


def downgrade() -> None:
    op.drop_index('posts_author_id_idx', table_name='posts')
    
    # Drop tables in reverse order due to foreign key constraints
    op.drop_table('posts')
    op.drop_table('users')
