"""create ers users and reimbursements tables

Revision ID: 3c9a1e7d52f4
Revises:
Create Date: 2026-10-19 10:02:11.408213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9a1e7d52f4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "ers_users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False, server_default="employee"),
        sa.Column("password_hash", sa.String(), nullable=False),
    )

    op.create_index(op.f("ix_ers_users_id"), "ers_users", ["id"], unique=False)
    op.create_index(op.f("ix_ers_users_username"), "ers_users", ["username"], unique=True)
    op.create_index(op.f("ix_ers_users_email"), "ers_users", ["email"], unique=True)

    op.create_table(
        "ers_reimbursements",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("submitted", sa.DateTime(), nullable=False),
        sa.Column("resolved", sa.DateTime(), nullable=True),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("ers_users.id"), nullable=False),
        sa.Column("resolver_id", sa.Integer(), sa.ForeignKey("ers_users.id"), nullable=True),
        sa.Column("status_id", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.CheckConstraint("amount > 0", name="ck_reimb_amount_positive"),
        sa.CheckConstraint("status_id IN (1, 2, 3)", name="ck_reimb_status_known"),
        sa.CheckConstraint("type_id IN (1, 2, 3, 4)", name="ck_reimb_type_known"),
    )

    op.create_index(op.f("ix_ers_reimbursements_id"), "ers_reimbursements", ["id"], unique=False)
    op.create_index("ix_reimb_author_id", "ers_reimbursements", ["author_id"], unique=False)
    op.create_index("ix_reimb_status_id", "ers_reimbursements", ["status_id"], unique=False)
    op.create_index("ix_reimb_type_id", "ers_reimbursements", ["type_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_reimb_type_id", table_name="ers_reimbursements")
    op.drop_index("ix_reimb_status_id", table_name="ers_reimbursements")
    op.drop_index("ix_reimb_author_id", table_name="ers_reimbursements")
    op.drop_index(op.f("ix_ers_reimbursements_id"), table_name="ers_reimbursements")
    op.drop_table("ers_reimbursements")

    op.drop_index(op.f("ix_ers_users_email"), table_name="ers_users")
    op.drop_index(op.f("ix_ers_users_username"), table_name="ers_users")
    op.drop_index(op.f("ix_ers_users_id"), table_name="ers_users")
    op.drop_table("ers_users")
