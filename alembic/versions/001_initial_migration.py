"""Initial migration: create all tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create user table
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    # Create admin table
    op.create_table(
        'admin',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('user_id')
    )

    # Create flashcard_set table
    op.create_table(
        'flashcard_set',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['created_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    # Create flashcard table
    op.create_table(
        'flashcard',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('set_id', sa.Integer(), nullable=False),
        sa.Column('question', sa.String(), nullable=False),
        sa.Column('answer', sa.String(), nullable=False),
        sa.Column('hint', sa.String(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['set_id'], ['flashcard_set.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('set_id', 'order', name='uq_flashcard_set_order')
    )
    op.create_index(op.f('ix_flashcard_set_id'), 'flashcard', ['set_id'], unique=False)

    # Create user_set_assignment table
    op.create_table(
        'user_set_assignment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('set_id', sa.Integer(), nullable=False),
        sa.Column('assigned_by', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.ForeignKeyConstraint(['set_id'], ['flashcard_set.id'], ),
        sa.ForeignKeyConstraint(['assigned_by'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'set_id', name='uq_user_set_assignment')
    )
    op.create_index(op.f('ix_user_set_assignment_user_id'), 'user_set_assignment', ['user_id'], unique=False)
    op.create_index(op.f('ix_user_set_assignment_set_id'), 'user_set_assignment', ['set_id'], unique=False)

    # Create attempt table
    op.create_table(
        'attempt',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('set_id', sa.Integer(), nullable=False),
        sa.Column('card_id', sa.Integer(), nullable=False),
        sa.Column('correct', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.ForeignKeyConstraint(['set_id'], ['flashcard_set.id'], ),
        sa.ForeignKeyConstraint(['card_id'], ['flashcard.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_attempt_user_set', 'attempt', ['user_id', 'set_id'], unique=False)
    op.create_index('ix_attempt_user_set_card', 'attempt', ['user_id', 'set_id', 'card_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_attempt_user_set_card', table_name='attempt')
    op.drop_index('ix_attempt_user_set', table_name='attempt')
    op.drop_table('attempt')
    op.drop_index(op.f('ix_user_set_assignment_set_id'), table_name='user_set_assignment')
    op.drop_index(op.f('ix_user_set_assignment_user_id'), table_name='user_set_assignment')
    op.drop_table('user_set_assignment')
    op.drop_index(op.f('ix_flashcard_set_id'), table_name='flashcard')
    op.drop_table('flashcard')
    op.drop_table('flashcard_set')
    op.drop_table('admin')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
