"""Enable trigram search on places

Revision ID: 0002
Revises: 0001
Create Date: 2025-10-28 07:48:15.000000

PostgreSQL only: installs pg_trgm and unaccent, adds trigram GIN indexes on
the searchable columns and the stored full_address_cached column (same
concatenation as the live address expression). On other dialects this is a
no-op and search runs with plain ordering.
"""

from collections.abc import Sequence

from alembic import op

from app.infrastructure.persistence.models.place import FULL_ADDRESS_SQL

# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: str | Sequence[str] | None = "0001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

TRIGRAM_COLUMNS = ("name", "city", "description", "address_line")


def _is_postgres() -> bool:
    return op.get_bind().dialect.name == "postgresql"


def upgrade() -> None:
    if not _is_postgres():
        return
    op.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm")
    op.execute("CREATE EXTENSION IF NOT EXISTS unaccent")
    for column in TRIGRAM_COLUMNS:
        op.execute(
            f"CREATE INDEX IF NOT EXISTS ix_places_{column}_trgm "
            f"ON places USING GIN ({column} gin_trgm_ops)"
        )
    op.execute(
        "ALTER TABLE places ADD COLUMN IF NOT EXISTS full_address_cached text "
        f"GENERATED ALWAYS AS ({FULL_ADDRESS_SQL}) STORED"
    )
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_places_full_address_cached_trgm "
        "ON places USING GIN (full_address_cached gin_trgm_ops)"
    )


def downgrade() -> None:
    if not _is_postgres():
        return
    op.execute("DROP INDEX IF EXISTS ix_places_full_address_cached_trgm")
    op.execute("ALTER TABLE places DROP COLUMN IF EXISTS full_address_cached")
    for column in TRIGRAM_COLUMNS:
        op.execute(f"DROP INDEX IF EXISTS ix_places_{column}_trgm")
