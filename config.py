"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "directors")
DB_USER: str = os.getenv("DB_USER", "")
DB_PASS: str = os.getenv("DB_PASS", "")

_raw_timeout = os.getenv("DB_CONNECT_TIMEOUT", "")
DB_CONNECT_TIMEOUT: Optional[int] = int(_raw_timeout) if _raw_timeout.strip() else None

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection parameters for the records database.

    Attributes:
        host: Database server hostname.
        database: Database name.
        username: Login role.
        password: Login password.
        port: Server port (default: 5432).
        connect_timeout: Seconds to wait for the connection, or None for the driver default.
    """
    host: str
    database: str
    username: str
    password: str
    port: int = 5432
    connect_timeout: Optional[int] = None

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Build a config from the DB_* environment constants."""
        return cls(
            host=DB_HOST,
            database=DB_NAME,
            username=DB_USER,
            password=DB_PASS,
            port=DB_PORT,
            connect_timeout=DB_CONNECT_TIMEOUT,
        )

    @property
    def dsn(self) -> str:
        """libpq-style URL. The password is left out so this is safe to log."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"

    def connect_kwargs(self) -> dict:
        """Keyword arguments for psycopg2.connect()."""
        kwargs = {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.username,
            "password": self.password,
        }
        if self.connect_timeout is not None:
            kwargs["connect_timeout"] = self.connect_timeout
        return kwargs
