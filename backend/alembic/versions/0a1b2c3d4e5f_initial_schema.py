"""users, labs, protocols, mice and log entries

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa
from typing import Sequence, Union

revision: str = '0a1b2c3d4e5f'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('username', sa.String(), nullable=False, unique=True),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('lab_id', sa.UUID(), nullable=True),
        sa.Column('role', sa.String(), nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_users_lab_id', 'users', ['lab_id'])

    op.create_table(
        'labs',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'research_protocols',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('lab_id', sa.UUID(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_research_protocols_lab_id', 'research_protocols', ['lab_id'])

    op.create_table(
        'mice',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('sex', sa.String(), nullable=False),
        sa.Column('genotype', sa.JSON(), nullable=False),
        sa.Column('strain', sa.String(), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('availability', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('lab_id', sa.UUID(), nullable=True),
        sa.Column('protocol_id', sa.UUID(), nullable=True),
        sa.Column('mother_id', sa.UUID(), nullable=True),
        sa.Column('father_id', sa.UUID(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_mice_user_id', 'mice', ['user_id'])
    op.create_index('ix_mice_lab_id', 'mice', ['lab_id'])
    op.create_index('ix_mice_protocol_id', 'mice', ['protocol_id'])
    op.create_index('ix_mice_created_at', 'mice', ['created_at'])

    op.create_table(
        'mouse_littermates',
        sa.Column('mouse_id', sa.UUID(), sa.ForeignKey('mice.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('position', sa.Integer(), primary_key=True),
        sa.Column('littermate_id', sa.UUID(), nullable=False),
    )
    op.create_index('ix_mouse_littermates_littermate_id', 'mouse_littermates', ['littermate_id'])

    op.create_table(
        'log_entries',
        sa.Column('id', sa.UUID(), primary_key=True),
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('lab_id', sa.UUID(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_log_entries_user_id', 'log_entries', ['user_id'])
    op.create_index('ix_log_entries_lab_id', 'log_entries', ['lab_id'])
    op.create_index('ix_log_entries_created_at', 'log_entries', ['created_at'])

    op.create_table(
        'log_entry_mice',
        sa.Column('entry_id', sa.UUID(), sa.ForeignKey('log_entries.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('position', sa.Integer(), primary_key=True),
        sa.Column('mouse_id', sa.UUID(), nullable=False),
    )
    op.create_index('ix_log_entry_mice_mouse_id', 'log_entry_mice', ['mouse_id'])


def downgrade() -> None:
    op.drop_table('log_entry_mice')
    op.drop_table('log_entries')
    op.drop_table('mouse_littermates')
    op.drop_table('mice')
    op.drop_table('research_protocols')
    op.drop_table('labs')
    op.drop_table('users')
