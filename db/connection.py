"""
db/connection.py
----------------
Opens and closes the PostgreSQL connection owned by a repository.
The session is read-only and autocommitting: a failed SELECT never
leaves an aborted transaction behind for the next query.
"""

import psycopg2

from config import DatabaseConfig
from utils.logger import get_logger

logger = get_logger(__name__)


def open_connection(cfg: DatabaseConfig):
    """
    Open a new read-only connection.

    Args:
        cfg: Connection parameters.

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(**cfg.connect_kwargs())
        conn.set_session(readonly=True, autocommit=True)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to {cfg.dsn}: {e}")
        raise
    logger.info(f"Connected to {cfg.dsn}")
    return conn


def close_connection(conn) -> None:
    """Close a connection if it is still open."""
    if conn is not None and not conn.closed:
        conn.close()
        logger.info("Database connection closed.")
