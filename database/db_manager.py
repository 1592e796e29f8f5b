"""
File: db_manager.py
Purpose: Manages the MySQL connection pool and runs parameterized statements inside transactions.
"""
import logging
import threading
from contextlib import contextmanager

import mysql.connector
from mysql.connector import pooling

from library_app.exceptions import StoreFailure

logger = logging.getLogger(__name__)


class Transaction:
    """
    Unit of work bound to a single pooled connection.
    Every statement issued through it is committed or rolled back together.
    """
    store_errors = (mysql.connector.Error,)

    def __init__(self, cursor):
        self.cursor = cursor

    def _execute(self, query, params):
        try:
            self.cursor.execute(query, params or ())
        except self.store_errors as e:
            logger.error("Query Error: %s", e)
            raise StoreFailure() from e

    def fetch_all(self, query, params=None):
        """Executes a SELECT query and returns all rows as a list of dictionaries."""
        self._execute(query, params)
        return self.cursor.fetchall()

    def fetch_one(self, query, params=None):
        """Executes a SELECT query and returns a single row (or None)."""
        self._execute(query, params)
        return self.cursor.fetchone()

    def execute_query(self, query, params=None):
        """Executes an UPDATE or DELETE query and returns the affected row count."""
        self._execute(query, params)
        return self.cursor.rowcount

    def insert(self, query, params=None):
        """Executes an INSERT query and returns the generated id."""
        self._execute(query, params)
        return self.cursor.lastrowid


class DBManager:
    """
    Handles database connections via a connection pool.

    The pool is created on first use. Callers queue on a semaphore sized like
    the pool, so an exhausted pool blocks instead of raising.
    """
    transaction_class = Transaction

    def __init__(self, settings):
        self.settings = settings
        self._connection_pool = None
        self._pool_lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(settings.db_pool_size)

    def _initialize_pool(self):
        """Initializes the connection pool with database configuration."""
        with self._pool_lock:
            if self._connection_pool is not None:
                return
            db_config = {
                "host": self.settings.db_host,
                "port": self.settings.db_port,
                "user": self.settings.db_user,
                "password": self.settings.db_password,
                "database": self.settings.db_name,
                "charset": "utf8mb4",
                "collation": "utf8mb4_unicode_ci"
            }
            try:
                self._connection_pool = pooling.MySQLConnectionPool(
                    pool_name="library_pool",
                    pool_size=self.settings.db_pool_size,
                    pool_reset_session=True,
                    **db_config
                )
            except mysql.connector.Error as e:
                logger.error("Failed to create connection pool: %s", e)
                raise StoreFailure() from e
            logger.info("Connection pool created (size=%s)", self.settings.db_pool_size)

    def get_connection(self):
        """Retrieves a connection from the pool."""
        if self._connection_pool is None:
            self._initialize_pool()
        try:
            return self._connection_pool.get_connection()
        except mysql.connector.Error as e:
            logger.error("Error getting connection: %s", e)
            raise StoreFailure() from e

    def _cursor(self, connection):
        return connection.cursor(dictionary=True, buffered=True)

    @contextmanager
    def transaction(self):
        """
        Yields a Transaction on one connection.
        Commits when the block exits normally, rolls back on any exception.
        """
        store_errors = self.transaction_class.store_errors
        with self._slots:
            connection = self.get_connection()
            try:
                try:
                    cursor = self._cursor(connection)
                except store_errors as e:
                    logger.error("Error opening cursor: %s", e)
                    raise StoreFailure() from e
                try:
                    yield self.transaction_class(cursor)
                    try:
                        connection.commit()
                    except store_errors as e:
                        logger.error("Commit failed: %s", e)
                        raise StoreFailure() from e
                except Exception:
                    connection.rollback()
                    raise
                finally:
                    cursor.close()
            finally:
                connection.close()

    def fetch_all(self, query, params=None):
        with self.transaction() as tx:
            return tx.fetch_all(query, params)

    def fetch_one(self, query, params=None):
        with self.transaction() as tx:
            return tx.fetch_one(query, params)

    def execute_query(self, query, params=None):
        with self.transaction() as tx:
            return tx.execute_query(query, params)

    def insert(self, query, params=None):
        with self.transaction() as tx:
            return tx.insert(query, params)

    def ping(self):
        """Checks that a connection can be acquired and used."""
        return self.fetch_one("SELECT 1 AS ok") is not None

    def execute_sql_script(self, file_path):
        """Parses and executes a multi-statement SQL script file."""
        logger.info("Reading SQL script: %s", file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            sql_script = f.read()

        statements = [s for s in sql_script.split(';') if s.strip()]
        with self.transaction() as tx:
            for statement in statements:
                tx.execute_query(statement)
        logger.info("Executed %d SQL statements from %s", len(statements), file_path)
        return len(statements)
