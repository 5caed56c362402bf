"""initial migration

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('state', sa.String(100), nullable=False),
        sa.Column('district', sa.String(100), nullable=False),
        sa.Column('representative_type', sa.String(20), nullable=False),
        sa.Column('college', sa.String(255), nullable=False, server_default=''),
        sa.Column('school', sa.String(255), nullable=False, server_default=''),
        sa.Column('year_of_study', sa.String(20), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
    )
    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('deadline', sa.DateTime(), nullable=True),
        sa.Column('points', sa.Float(), nullable=False),
        sa.Column('submission_type', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_table(
        'submissions',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('user_email', sa.String(255), nullable=False),
        sa.Column('task_id', sa.Integer, sa.ForeignKey('tasks.id'), nullable=False),
        sa.Column('link', sa.Text(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(), nullable=False),
        sa.Column('points_awarded', sa.Float(), nullable=True),
        sa.UniqueConstraint('user_email', 'task_id', name='uq_submission_user_task'),
    )
    op.create_index('ix_submissions_user_email', 'submissions', ['user_email'])
    op.create_table(
        'leaderboard',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('user_email', sa.String(255), nullable=False, unique=True),
        sa.Column('total_points', sa.Float(), nullable=False, server_default='0'),
    )


def downgrade():
    op.drop_table('leaderboard')
    op.drop_index('ix_submissions_user_email', table_name='submissions')
    op.drop_table('submissions')
    op.drop_table('tasks')
    op.drop_table('users')
