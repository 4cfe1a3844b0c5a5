"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
account repository port using psycopg3 (async) with raw SQL.

Atomic sign-up:
---------------
add() uses INSERT ... ON CONFLICT (email) DO NOTHING RETURNING. The UNIQUE
constraint on accounts.email guarantees that concurrent sign-ups for the
same address create exactly one row; every other attempt sees no returned
row and reports the conflict as None instead of raising.
"""

import logging
from pathlib import Path

from psycopg_pool import AsyncConnectionPool

from src.domain.models import Account

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def add(self, name: str, email: str, password_hash: str) -> Account | None:
        """
        Atomically insert a new account.

        Args:
            name: Display name
            email: Normalized email address (lowercase, stripped)
            password_hash: bcrypt-hashed password from domain layer

        Returns:
            The created Account, or None if the email is already registered
        """
        sql = """
            INSERT INTO accounts (name, email, password_hash)
            VALUES (%s, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING id, name, email, password_hash
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (name, email, password_hash))
            row = await cursor.fetchone()
            await conn.commit()

        if row is None:
            return None
        return _to_account(row)

    async def load_by_email(self, email: str) -> Account | None:
        """
        Load an account by email.

        Args:
            email: Normalized email address

        Returns:
            The matching Account, or None if not found
        """
        sql = """
            SELECT id, name, email, password_hash
            FROM accounts
            WHERE email = %s
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (email,))
            row = await cursor.fetchone()

        if row is None:
            return None
        return _to_account(row)


def _to_account(row: tuple) -> Account:
    return Account(id=str(row[0]), name=row[1], email=row[2], password=row[3])


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)
                # pool.connection() commits on clean exit

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
