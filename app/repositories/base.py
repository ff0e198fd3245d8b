"""Base repository class."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import duckdb
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.errors import StorageError, UniqueConstraintViolation, WriteConflictError

T = TypeVar("T")

# Attempts before a write-write conflict is given up on.
WRITE_CONFLICT_ATTEMPTS = 4

# DuckDB reports unique and primary key violations with these phrases;
# CHECK and NOT NULL failures share the exception type but not the wording.
_DUPLICATE_KEY_MARKERS = ("duplicate key", "unique constraint", "primary key constraint")

retry_on_write_conflict = retry(
    stop=stop_after_attempt(WRITE_CONFLICT_ATTEMPTS),
    wait=wait_exponential(multiplier=0.01, max=0.2),
    retry=retry_if_exception_type(WriteConflictError),
    reraise=True,
)


def is_duplicate_key(exc: duckdb.ConstraintException) -> bool:
    message = str(exc).lower()
    return any(marker in message for marker in _DUPLICATE_KEY_MARKERS)


class BaseRepository:
    """Base repository with common functionality.

    Every call runs on its own cursor of the injected connection. Driver errors
    are logged here with their detail and re-raised as opaque StorageError.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._db = conn
        logger.debug("{} initialized", self.__class__.__name__)

    @contextmanager
    def _cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        cursor = self._db.cursor()
        try:
            yield cursor
        except duckdb.ConstraintException as e:
            if is_duplicate_key(e):
                logger.debug("{}: duplicate key: {}", self.__class__.__name__, e)
                raise UniqueConstraintViolation() from e
            logger.error("{}: constraint violated: {}", self.__class__.__name__, e)
            raise StorageError() from e
        except duckdb.TransactionException as e:
            logger.warning("{}: transaction conflict: {}", self.__class__.__name__, e)
            raise WriteConflictError() from e
        except duckdb.Error as e:
            logger.error("{}: storage failure: {}", self.__class__.__name__, e)
            raise StorageError() from e
        finally:
            cursor.close()

    def _run(self, cur: duckdb.DuckDBPyConnection, query: str, params: list | None) -> duckdb.DuckDBPyConnection:
        if params:
            return cur.execute(query, params)
        return cur.execute(query)

    def execute(self, query: str, params: list | None = None) -> None:
        """Execute a write statement."""
        with self._cursor() as cur:
            self._run(cur, query, params)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        with self._cursor() as cur:
            return self._run(cur, query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        with self._cursor() as cur:
            return self._run(cur, query, params).fetchone()

    def transaction(self, fn: Callable[[duckdb.DuckDBPyConnection], T]) -> T:
        """Run fn(cursor) inside BEGIN/COMMIT, rolling back on any error."""
        with self._cursor() as cur:
            cur.execute("BEGIN TRANSACTION")
            try:
                result = fn(cur)
            except Exception:
                cur.execute("ROLLBACK")
                raise
            cur.execute("COMMIT")
            return result
