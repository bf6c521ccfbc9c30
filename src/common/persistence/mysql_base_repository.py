# src/common/persistence/mysql_base_repository.py
"""Shared MySQL implementation of the generic repository contract."""

import logging
from abc import abstractmethod
from typing import Any, Optional, Sequence

from mysql.connector import Error

from src.common.database.connection_provider import MySQLConnectionProvider
from src.common.exceptions.custom_exceptions import PersistenceError

logger = logging.getLogger(__name__)


def like_pattern(term: str) -> str:
    """Wraps a search term for a LIKE substring match, escaping wildcard characters."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class MySQLBaseRepository:
    """Query plumbing for soft-delete tables.

    Every SELECT goes through _build_select/_build_count, which always add the
    is_active predicate, so no read path can return a deactivated row.
    """

    table_name: str = ""
    table_alias: str = ""
    id_column: str = ""
    entity_label: str = "entity"
    select_clause: str = ""
    default_order_by: str = ""

    def __init__(self, connection_provider: MySQLConnectionProvider) -> None:
        self._connection_provider = connection_provider

    @abstractmethod
    def _map_row(self, row: dict[str, Any]) -> Any:
        """Maps one dictionary row to the read type of the repository."""
        pass

    @abstractmethod
    def create_tables(self) -> None:
        """Creates the backing table if it does not exist."""
        pass

    # --- query builders -------------------------------------------------

    def _active_predicate(self) -> str:
        return f"{self.table_alias}.is_active = TRUE"

    def _build_select(self, where: str | None = None, order_by: str | None = None, with_limit: bool = False) -> str:
        conditions = [self._active_predicate()]
        if where:
            conditions.append(where)
        query = f"{self.select_clause} WHERE {' AND '.join(conditions)}"
        if order_by is None:
            order_by = self.default_order_by
        if order_by:
            query += f" ORDER BY {order_by}"
        if with_limit:
            query += " LIMIT %s"
        return query

    def _build_count(self, where: str | None = None) -> str:
        conditions = [self._active_predicate()]
        if where:
            conditions.append(where)
        return f"SELECT COUNT(*) AS total FROM {self.table_name} {self.table_alias} WHERE {' AND '.join(conditions)}"

    # --- statement execution ---------------------------------------------

    def _fetch_all(self, query: str, params: Sequence[Any], error_message: str) -> list[dict[str, Any]]:
        with self._connection_provider.connection() as conn:
            cursor = conn.cursor(dictionary=True)
            try:
                cursor.execute(query, tuple(params))
                return cursor.fetchall()
            except Error as e:
                logger.error(f"{error_message}: {e}")
                raise PersistenceError(error_message, original_exception=e)
            finally:
                cursor.close()

    def _fetch_one(self, query: str, params: Sequence[Any], error_message: str) -> Optional[dict[str, Any]]:
        with self._connection_provider.connection() as conn:
            cursor = conn.cursor(dictionary=True)
            try:
                cursor.execute(query, tuple(params))
                return cursor.fetchone()
            except Error as e:
                logger.error(f"{error_message}: {e}")
                raise PersistenceError(error_message, original_exception=e)
            finally:
                cursor.close()

    def _execute_write(self, query: str, params: Sequence[Any], error_message: str) -> tuple[int, Optional[int]]:
        """Runs one INSERT/UPDATE and commits; returns (rowcount, lastrowid)."""
        with self._connection_provider.connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(query, tuple(params))
                conn.commit()
                return cursor.rowcount, cursor.lastrowid
            except Error as e:
                conn.rollback()
                logger.error(f"{error_message}: {e}")
                raise PersistenceError(error_message, original_exception=e)
            finally:
                cursor.close()

    def _execute_ddl(self, statement: str, error_message: str) -> None:
        with self._connection_provider.connection() as conn:
            cursor = conn.cursor()
            try:
                cursor.execute(statement)
                conn.commit()
            except Error as e:
                conn.rollback()
                logger.error(f"{error_message}: {e}")
                raise PersistenceError(error_message, original_exception=e)
            finally:
                cursor.close()

    def _insert(self, query: str, params: Sequence[Any], description: str) -> int:
        """Inserts a row and returns the generated id."""
        rowcount, new_id = self._execute_write(query, params, f"Error saving {self.entity_label}: {description}")
        if rowcount == 0:
            raise PersistenceError(f"Creating {self.entity_label} failed, no rows affected.")
        if not new_id:
            raise PersistenceError(f"Creating {self.entity_label} failed, no ID obtained.")
        return new_id

    def _update_row(self, query: str, params: Sequence[Any], entity_id: int) -> None:
        rowcount, _ = self._execute_write(query, params, f"Error updating {self.entity_label}: {entity_id}")
        if rowcount == 0:
            raise PersistenceError(f"Updating {self.entity_label} failed, no rows affected: {entity_id}")

    # --- generic contract --------------------------------------------------

    def find_by_id(self, entity_id: int) -> Optional[Any]:
        logger.debug(f"Finding {self.entity_label} by ID: {entity_id}")
        query = self._build_select(f"{self.table_alias}.{self.id_column} = %s", order_by="")
        row = self._fetch_one(query, (entity_id,), f"Error finding {self.entity_label} by ID: {entity_id}")
        if row is None:
            logger.debug(f"No {self.entity_label} found with ID: {entity_id}")
            return None
        return self._map_row(row)

    def find_all(self) -> list[Any]:
        rows = self._fetch_all(self._build_select(), (), f"Error finding all {self.entity_label}s")
        logger.debug(f"Found {len(rows)} {self.entity_label}s")
        return [self._map_row(row) for row in rows]

    def delete(self, entity_id: int) -> bool:
        logger.debug(f"Soft deleting {self.entity_label}: {entity_id}")
        query = (
            f"UPDATE {self.table_name} SET is_active = FALSE, updated_date = CURRENT_TIMESTAMP "
            f"WHERE {self.id_column} = %s AND is_active = TRUE"
        )
        rowcount, _ = self._execute_write(query, (entity_id,), f"Error deleting {self.entity_label}: {entity_id}")
        deleted = rowcount > 0
        if deleted:
            logger.info(f"{self.entity_label.capitalize()} soft deleted successfully: {entity_id}")
        else:
            logger.warning(f"{self.entity_label.capitalize()} not found for deletion: {entity_id}")
        return deleted

    def exists(self, entity_id: int) -> bool:
        query = self._build_count(f"{self.table_alias}.{self.id_column} = %s")
        row = self._fetch_one(query, (entity_id,), f"Error checking if {self.entity_label} exists: {entity_id}")
        return bool(row and row["total"] > 0)

    def count(self) -> int:
        row = self._fetch_one(self._build_count(), (), f"Error counting {self.entity_label}s")
        return int(row["total"]) if row else 0
