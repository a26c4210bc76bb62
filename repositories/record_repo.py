"""
repositories/record_repo.py
----------------------------
Read-only reporting queries over directors, businesses and the
director_businesses link table.

Every query method swallows database failures: multi-row queries
return an empty list and single-row queries return None. The cause
is logged through the repository's logger.
"""

import logging
from typing import Optional

import psycopg2
from psycopg2 import extras

from config import DatabaseConfig
from db.connection import open_connection, close_connection
from utils.logger import get_logger

logger = get_logger(__name__)

LAST_RECORDS_LIMIT = 100


class RecordRepository:
    """Repository for reporting queries on directors and businesses."""

    def __init__(
        self,
        cfg: Optional[DatabaseConfig] = None,
        connection=None,
        log: Optional[logging.Logger] = None,
    ):
        """
        Args:
            cfg: Connection parameters. Defaults to DatabaseConfig.from_env().
            connection: An already-open psycopg2 connection. When given, cfg is
                ignored and the caller stays responsible for closing it.
            log: Logger that receives swallowed query failures.

        Raises:
            psycopg2.OperationalError: If a new connection cannot be opened.
        """
        self._log = log or logger
        if connection is not None:
            self._conn = connection
            self._owns_connection = False
        else:
            self._conn = open_connection(cfg or DatabaseConfig.from_env())
            self._owns_connection = True

    @property
    def connection(self):
        """The underlying psycopg2 connection."""
        return self._conn

    def close(self) -> None:
        """Release the connection if this repository opened it."""
        if self._owns_connection:
            close_connection(self._conn)

    def __enter__(self) -> "RecordRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── JOINED ────────────────────────────────────────────

    def get_records(self) -> list[dict]:
        """Every director/business pair linked through director_businesses."""
        sql = """
            SELECT d.id, d.first_name, d.last_name, b.name, b.registered_address, b.registration_number
            FROM directors d
            JOIN director_businesses db ON d.id = db.director_id
            JOIN businesses b ON db.business_id = b.id;
        """
        return self._fetch_all("get_records", sql)

    def get_business_name_with_director_full_name(self) -> list[dict]:
        """
        One row per business/director link.

        Returns:
            List of dicts: [{'business_name': str, 'director_name': str}, ...]
            where director_name is "<first_name> <last_name>", or None if
            either part is NULL.
        """
        sql = """
            SELECT b.name AS business_name, d.first_name || ' ' || d.last_name AS director_name
            FROM businesses b
            JOIN director_businesses db ON b.id = db.business_id
            JOIN directors d ON db.director_id = d.id;
        """
        return self._fetch_all("get_business_name_with_director_full_name", sql)

    # ── DIRECTORS ─────────────────────────────────────────

    def get_director_records(self) -> list[dict]:
        """All directors."""
        sql = """
            SELECT d.id, d.first_name, d.last_name, d.occupation, d.date_of_birth
            FROM directors d;
        """
        return self._fetch_all("get_director_records", sql)

    def get_single_director_record(self, director_id: int) -> Optional[dict]:
        """
        Fetch a single director by primary key.

        Returns:
            Director dict or None if not found or the query failed.
        """
        operation = "get_single_director_record"
        director_id = self._int_param(operation, "director_id", director_id)
        if director_id is None:
            return None
        sql = """
            SELECT d.id, d.first_name, d.last_name, d.occupation, d.date_of_birth
            FROM directors d
            WHERE d.id = %s;
        """
        return self._fetch_one(operation, sql, (director_id,))

    def get_last_100_records(self) -> list[dict]:
        """The most recent directors, highest id first."""
        sql = """
            SELECT d.id, d.first_name, d.last_name, d.occupation, d.date_of_birth
            FROM directors d
            ORDER BY d.id DESC
            LIMIT %s;
        """
        return self._fetch_all("get_last_100_records", sql, (LAST_RECORDS_LIMIT,))

    # ── BUSINESSES ────────────────────────────────────────

    def get_business_records(self) -> list[dict]:
        """All businesses."""
        sql = """
            SELECT b.id, b.name, b.registered_address, b.registration_date, b.registration_number
            FROM businesses b;
        """
        return self._fetch_all("get_business_records", sql)

    def get_single_business_record(self, business_id: int) -> Optional[dict]:
        """
        Fetch a single business by primary key.

        Returns:
            Business dict or None if not found or the query failed.
        """
        operation = "get_single_business_record"
        business_id = self._int_param(operation, "business_id", business_id)
        if business_id is None:
            return None
        sql = """
            SELECT b.id, b.name, b.registered_address, b.registration_date, b.registration_number
            FROM businesses b
            WHERE b.id = %s;
        """
        return self._fetch_one(operation, sql, (business_id,))

    def get_businesses_registered_in_year(self, year: int) -> list[dict]:
        """
        Businesses whose registration_date falls in the given calendar year.

        Args:
            year: Four-digit calendar year.
        """
        operation = "get_businesses_registered_in_year"
        year = self._int_param(operation, "year", year)
        if year is None:
            return []
        sql = """
            SELECT b.id, b.name, b.registered_address, b.registration_date, b.registration_number
            FROM businesses b
            WHERE EXTRACT(YEAR FROM b.registration_date) = %s;
        """
        return self._fetch_all(operation, sql, (year,))

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_all(self, operation: str, sql: str, params: Optional[tuple] = None) -> list[dict]:
        """Run a SELECT and return every row, or [] on failure."""
        try:
            with self._conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return [dict(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            self._recover(operation, e)
            return []

    def _fetch_one(self, operation: str, sql: str, params: Optional[tuple] = None) -> Optional[dict]:
        """Run a SELECT and return the first row, or None if absent or on failure."""
        try:
            with self._conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return dict(row) if row else None
        except psycopg2.Error as e:
            self._recover(operation, e)
            return None

    def _recover(self, operation: str, error: psycopg2.Error) -> None:
        """
        Log a failed query and roll back so the next query starts clean.
        Only needed for a caller-supplied connection in transactional mode.
        """
        self._log.error(f"{operation} failed: {error}")
        if self._conn.closed or self._conn.autocommit:
            return
        try:
            self._conn.rollback()
        except psycopg2.Error as e:
            self._log.error(f"{operation} rollback failed: {e}")

    def _int_param(self, operation: str, name: str, value) -> Optional[int]:
        """Coerce a query parameter to int, logging and returning None if it can't be."""
        try:
            return int(value)
        except (TypeError, ValueError):
            self._log.error(f"{operation} failed: {name} must be an integer, got {value!r}")
            return None
