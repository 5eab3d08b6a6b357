# =============================================================================
# core/migrations.py - Schema Migration Runner
# =============================================================================
# Applies versioned SQL files from a migrations directory at startup.
#
# File layout (golang-migrate compatible):
#   migrations/000001_create_persons_table.up.sql
#   migrations/000001_create_persons_table.down.sql
#
# State lives in a single-row `schema_migrations(version, dirty)` table.
# Re-running with nothing pending is a no-op.
#
# Usage:
#   version = await run_migrations(engine, settings.SQLITE_MIGRATIONS_DIR)
# =============================================================================

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

logger = logging.getLogger(__name__)

MIGRATION_FILE_PATTERN = re.compile(r"^(?P<version>\d+)_(?P<name>[\w-]+)\.up\.sql$")


class MigrationError(Exception):
    """Raised when migrations can't be loaded or applied."""


@dataclass(frozen=True)
class Migration:
    """One up-migration file."""

    version: int
    name: str
    path: Path

    def statements(self) -> list[str]:
        """
        Split the file into individual statements.

        The sqlite driver runs one statement per execute, so files are
        split on ';'. Semicolons inside string literals are not supported.
        """
        try:
            sql = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise MigrationError(f"Failed to read migration {self.path}: {e}") from e
        return [stmt.strip() for stmt in sql.split(";") if stmt.strip()]


def discover_migrations(migrations_dir: str | Path) -> list[Migration]:
    """
    List up-migrations in the directory ordered by version.

    Raises:
        MigrationError: If the directory is missing or two files share a version
    """
    directory = Path(migrations_dir)
    if not directory.is_dir():
        raise MigrationError(f"Migrations directory not found: {directory}")

    migrations: dict[int, Migration] = {}
    for path in directory.iterdir():
        match = MIGRATION_FILE_PATTERN.match(path.name)
        if not match:
            continue
        version = int(match.group("version"))
        if version in migrations:
            raise MigrationError(
                f"Duplicate migration version {version}: "
                f"{migrations[version].path.name} and {path.name}"
            )
        migrations[version] = Migration(version=version, name=match.group("name"), path=path)

    return [migrations[version] for version in sorted(migrations)]


async def _ensure_version_table(conn: AsyncConnection) -> None:
    await conn.execute(text(
        "CREATE TABLE IF NOT EXISTS schema_migrations ("
        "version INTEGER NOT NULL PRIMARY KEY, "
        "dirty BOOLEAN NOT NULL)"
    ))


async def _read_version(conn: AsyncConnection) -> tuple[int | None, bool]:
    result = await conn.execute(text("SELECT version, dirty FROM schema_migrations LIMIT 1"))
    row = result.first()
    if row is None:
        return None, False
    return int(row.version), bool(row.dirty)


async def _write_version(conn: AsyncConnection, version: int, dirty: bool) -> None:
    await conn.execute(text("DELETE FROM schema_migrations"))
    await conn.execute(
        text("INSERT INTO schema_migrations (version, dirty) VALUES (:version, :dirty)"),
        {"version": version, "dirty": dirty},
    )


async def current_version(engine: AsyncEngine) -> int | None:
    """Return the last applied migration version, or None if none ran."""
    async with engine.begin() as conn:
        await _ensure_version_table(conn)
        version, _ = await _read_version(conn)
        return version


async def run_migrations(engine: AsyncEngine, migrations_dir: str | Path) -> int | None:
    """
    Apply every pending up-migration in version order.

    Each migration runs in its own transaction. The version is recorded as
    dirty before the statements run and cleaned after, so a failure that
    escapes the transaction leaves a marker and later runs refuse to continue.

    Args:
        engine: Engine for the target database
        migrations_dir: Directory with NNNN_name.up.sql files

    Returns:
        The schema version after migrating (None if the directory is empty)

    Raises:
        MigrationError: If the directory is invalid, the schema is dirty,
            or a statement fails
    """
    migrations = discover_migrations(migrations_dir)

    try:
        async with engine.begin() as conn:
            await _ensure_version_table(conn)
            version, dirty = await _read_version(conn)
    except SQLAlchemyError as e:
        raise MigrationError(f"Failed to read schema version: {e}") from e

    if dirty:
        raise MigrationError(
            f"Schema is dirty at version {version}; fix the database and reset schema_migrations"
        )

    pending = [m for m in migrations if version is None or m.version > version]
    if not pending:
        logger.info(f"No pending migrations (schema version {version})")
        return version

    for migration in pending:
        statements = migration.statements()
        logger.info(f"Applying migration {migration.version}_{migration.name}")
        try:
            async with engine.begin() as conn:
                await _write_version(conn, migration.version, dirty=True)
                for statement in statements:
                    await conn.exec_driver_sql(statement)
                await _write_version(conn, migration.version, dirty=False)
        except SQLAlchemyError as e:
            raise MigrationError(
                f"Migration {migration.version}_{migration.name} failed: {e}"
            ) from e
        version = migration.version

    logger.info(f"Database migrated to version {version}")
    return version
