"""Initial schema: users, exercises, workout plans, exercise plans

Revision ID: 001
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the four tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('password_hash', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('exercises', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('muscle_group', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.CheckConstraint("muscle_group IN ('chest', 'back', 'legs', 'core', 'arms', 'shoulders', 'glutes')",
                           name='ck_exercises_muscle_group'),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('workout_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('scheduled_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("status IN ('pending', 'completed', 'missed')", name='ck_workout_plans_status'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_plans_user_id'), 'workout_plans', ['user_id'], unique=False)
    op.create_index(op.f('ix_workout_plans_scheduled_date'), 'workout_plans', ['scheduled_date'], unique=False)

    op.create_table('exercise_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('workout_plan_id', sa.Integer(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=False),
        sa.Column('repetitions', sa.Integer(), nullable=False),
        sa.Column('weights', sa.Float(), nullable=False),
        sa.Column('weight_unit', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.CheckConstraint("weight_unit IN ('kg', 'lbs', 'other')", name='ck_exercise_plans_weight_unit'),
        sa.ForeignKeyConstraint(['exercise_id'], ['exercises.id'], ),
        sa.ForeignKeyConstraint(['workout_plan_id'], ['workout_plans.id'], ),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exercise_plans_workout_plan_id'), 'exercise_plans', ['workout_plan_id'], unique=False)


def downgrade() -> None:
    """Drop the four tables."""
    op.drop_index(op.f('ix_exercise_plans_workout_plan_id'), table_name='exercise_plans')
    op.drop_table('exercise_plans')
    op.drop_index(op.f('ix_workout_plans_scheduled_date'), table_name='workout_plans')
    op.drop_index(op.f('ix_workout_plans_user_id'), table_name='workout_plans')
    op.drop_table('workout_plans')
    op.drop_table('exercises')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
