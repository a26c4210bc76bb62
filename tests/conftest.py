import logging
from unittest.mock import MagicMock

import pytest

from repositories.record_repo import RecordRepository


@pytest.fixture
def cursor():
    """A fake RealDictCursor usable as a context manager."""
    cur = MagicMock()
    cur.__enter__.return_value = cur
    cur.__exit__.return_value = False
    cur.fetchall.return_value = []
    cur.fetchone.return_value = None
    return cur


@pytest.fixture
def connection(cursor):
    conn = MagicMock()
    conn.closed = 0
    conn.autocommit = True
    conn.cursor.return_value = cursor
    return conn


@pytest.fixture
def log():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def repo(connection, log):
    return RecordRepository(connection=connection, log=log)
