"""Create Usuarios table.

Revision ID: 001_create_usuarios
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_usuarios"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Usuarios",
        sa.Column("Id", sa.Uuid, primary_key=True),
        sa.Column("Nome", sa.Text, nullable=False),
        sa.Column("Email", sa.Text, nullable=False),
        sa.Column("Senha", sa.Text, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("Usuarios")
