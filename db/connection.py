"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so request handlers running on
worker threads can share one gateway instance.
"""

import threading
from typing import Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_CONNECT_TIMEOUT, DB_POOL_MAX, DB_POOL_MIN
from db.errors import StoreError, Unavailable, classify_error
from db.init_db import create_tables
from utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseGateway:
    """
    Owns the connection pool and the schema of the students database.

    Lifecycle: construct -> open() -> ensure_schema() -> ready -> close().
    `initialize()` runs the first two steps and never raises, so the
    application can start even while the database is down.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
        connect_timeout: int = DB_CONNECT_TIMEOUT,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self.connect_timeout = connect_timeout
        self._pool: Optional[pool.ThreadedConnectionPool] = None
        self._ready = False
        self._lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        """True once the pool is open and the schema has been verified."""
        return self._ready

    # ── LIFECYCLE ─────────────────────────────────────────

    def open(self) -> None:
        """
        Initialize the database connection pool.

        Raises:
            Unavailable: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(
                self.min_conn, self.max_conn, self.dsn,
                connect_timeout=self.connect_timeout,
            )
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise classify_error(e) from e

    def ensure_schema(self) -> None:
        """
        Create the students table if it is missing and mark the gateway ready.

        Raises:
            StoreError: If the schema statement fails.
        """
        create_tables(self)
        self._ready = True

    def initialize(self) -> bool:
        """
        Open the pool and verify the schema, logging instead of raising.

        Returns:
            True if the gateway is ready to serve queries.
        """
        with self._lock:
            if self._ready:
                return True
            try:
                self.open()
                self.ensure_schema()
            except StoreError as e:
                logger.error(f"Database initialization failed: {e}")
                return False
        return True

    def close(self) -> None:
        """Close all connections in the pool."""
        with self._lock:
            self._ready = False
            if self._pool is not None:
                self._pool.closeall()
                self._pool = None
                logger.info("Database connection pool closed.")

    # ── QUERIES ───────────────────────────────────────────

    def execute(self, sql: str, params: Sequence = ()) -> list[dict]:
        """
        Run a single parameterized statement and commit it.

        Args:
            sql: Statement text using ``%s`` placeholders.
            params: Positional values bound to the placeholders.

        Returns:
            The result rows as dicts, or an empty list for statements
            that return nothing.

        Raises:
            StoreError: A classified subtype for any failure while running
                the statement.
        """
        pool_ = self._pool
        if pool_ is None:
            raise Unavailable("Database pool not initialized")

        try:
            conn = pool_.getconn()
        except psycopg2.Error as e:
            logger.error(f"Failed to acquire database connection: {e}")
            raise classify_error(e) from e

        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(params))
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            conn.commit()
            return rows
        except Exception as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Query failed: {e}")
            raise classify_error(e) from e
        finally:
            if pool_.closed:
                conn.close()
            else:
                pool_.putconn(conn, close=bool(conn.closed))
