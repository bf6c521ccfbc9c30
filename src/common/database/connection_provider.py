# src/common/database/connection_provider.py
"""MySQL connection provider shared by all repositories."""

import logging
from contextlib import contextmanager
from typing import Iterator

import mysql.connector
from mysql.connector import Error
from mysql.connector.constants import ClientFlag

from src.common.config.settings import DatabaseConfig
from src.common.exceptions.custom_exceptions import PersistenceError

logger = logging.getLogger(__name__)


class MySQLConnectionProvider:
    """Opens one connection per repository call and closes it afterwards.

    Built once at process start from a DatabaseConfig and injected into every repository.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self.config = config

    def acquire(self):
        """Opens a new MySQL connection."""
        try:
            connection = mysql.connector.connect(
                host=self.config.host,
                port=self.config.port,
                database=self.config.database,
                user=self.config.user,
                password=self.config.password,
                autocommit=False,
                charset="utf8mb4",
                use_unicode=True,
                # rowcount reports matched rows, so an UPDATE that changes nothing still counts
                client_flags=[ClientFlag.FOUND_ROWS],
            )
        except Error as e:
            logger.error(f"Failed to connect to MySQL at {self.config.host}:{self.config.port}: {e}")
            raise PersistenceError(f"Failed to connect to MySQL: {e}", original_exception=e)
        logger.debug("Database connection established")
        return connection

    def release(self, connection) -> None:
        """Closes a connection returned by acquire()."""
        if connection is None:
            return
        try:
            if connection.is_connected():
                connection.close()
                logger.debug("Database connection closed")
        except Error as e:
            logger.error(f"Error closing database connection: {e}")

    @contextmanager
    def connection(self) -> Iterator:
        """Yields a fresh connection and releases it on every exit path."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)

    def test_connection(self) -> bool:
        """Returns True when a connection can be opened, False otherwise."""
        try:
            with self.connection() as conn:
                return bool(conn.is_connected())
        except PersistenceError as e:
            logger.error(f"Database connection test failed: {e}")
            return False
