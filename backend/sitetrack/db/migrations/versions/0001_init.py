"""init

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP")),
    ]

def upgrade():
    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("budget", sa.Float(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="PLANNING"),
        *_timestamps(),
    )

    op.create_table(
        "work_items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        # no ON DELETE CASCADE: work items outlive their project
        sa.Column("project_id", sa.String(length=36), sa.ForeignKey("projects.id"), nullable=False),
        sa.Column("name", sa.String(length=512), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("unit", sa.String(length=32), nullable=False),
        sa.Column("design_quantity", sa.Float(), nullable=False),
        sa.Column("completed_quantity", sa.Float(), nullable=False, server_default="0"),
        sa.Column("unit_price", sa.Float(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="NOT_STARTED"),
        *_timestamps(),
    )
    op.create_index("ix_work_items_project_id", "work_items", ["project_id"])

    op.create_table(
        "materials",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("category", sa.String(length=128), nullable=True),
        sa.Column("unit", sa.String(length=32), nullable=True),
        sa.Column("unit_price", sa.Float(), nullable=True),
        sa.Column("stock_quantity", sa.Float(), nullable=False, server_default="0"),
        sa.Column("minimum_stock", sa.Float(), nullable=False, server_default="0"),
        sa.Column("supplier", sa.String(length=256), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "equipment",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("type", sa.String(length=128), nullable=True),
        sa.Column("model", sa.String(length=128), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="AVAILABLE"),
        sa.Column("daily_rate", sa.Float(), nullable=True),
        sa.Column("last_maintenance", sa.Date(), nullable=True),
        sa.Column("next_maintenance", sa.Date(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "workers",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("employee_code", sa.String(length=64), nullable=True, unique=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("position", sa.String(length=128), nullable=True),
        sa.Column("skill_level", sa.Integer(), nullable=True),
        sa.Column("hourly_rate", sa.Float(), nullable=True),
        sa.Column("daily_rate", sa.Float(), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("address", sa.String(length=512), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="ACTIVE"),
        *_timestamps(),
    )


def downgrade():
    op.drop_table("workers")
    op.drop_table("equipment")
    op.drop_table("materials")
    op.drop_index("ix_work_items_project_id", table_name="work_items")
    op.drop_table("work_items")
    op.drop_table("projects")
