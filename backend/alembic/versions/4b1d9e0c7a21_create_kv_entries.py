"""create kv_entries

Revision ID: 4b1d9e0c7a21
Revises:
Create Date: 2025-11-20 19:02:11.418305

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4b1d9e0c7a21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # one row per key; session lists live under sessions:<sessionId>
    op.create_table(
        'kv_entries',
        sa.Column('key', sa.String(length=255), primary_key=True),
        sa.Column('value', sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('kv_entries')
