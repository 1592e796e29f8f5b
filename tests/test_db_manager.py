from unittest import mock

import mysql.connector
import pytest

from database.db_manager import DBManager
from library_app.config import Settings
from library_app.exceptions import NotFound, StoreFailure


@pytest.fixture
def pool():
    with mock.patch("database.db_manager.pooling.MySQLConnectionPool") as pool_class:
        yield pool_class


@pytest.fixture
def connection(pool):
    conn = mock.MagicMock()
    pool.return_value.get_connection.return_value = conn
    return conn


@pytest.fixture
def manager():
    return DBManager(Settings(db_pool_size=2, db_name="library_test"))


def test_pool_is_created_lazily_from_settings(manager, pool, connection):
    pool.assert_not_called()

    manager.execute_query("UPDATE NSH_ROOM SET CAPACITY = %s WHERE ROOM_ID = %s", (5, 3))

    kwargs = pool.call_args.kwargs
    assert kwargs["pool_size"] == 2
    assert kwargs["database"] == "library_test"
    connection.cursor.assert_called_once_with(dictionary=True, buffered=True)


def test_transaction_commits(manager, connection):
    cursor = connection.cursor.return_value
    cursor.lastrowid = 41

    with manager.transaction() as tx:
        assert tx.insert("INSERT INTO NSH_ROOM (ROOM_ID, CAPACITY) VALUES (%s, %s)", (9, 4)) == 41

    cursor.execute.assert_called_once_with("INSERT INTO NSH_ROOM (ROOM_ID, CAPACITY) VALUES (%s, %s)", (9, 4))
    connection.commit.assert_called_once()
    connection.rollback.assert_not_called()
    connection.close.assert_called_once()


def test_transaction_rolls_back_on_error(manager, connection):
    with pytest.raises(NotFound):
        with manager.transaction() as tx:
            tx.execute_query("DELETE FROM NSH_RESERVATION WHERE RESERVATION_ID = %s", (1,))
            raise NotFound()

    connection.rollback.assert_called_once()
    connection.commit.assert_not_called()
    connection.close.assert_called_once()


def test_driver_errors_become_store_failures(manager, connection):
    connection.cursor.return_value.execute.side_effect = mysql.connector.Error("syntax error")

    with pytest.raises(StoreFailure) as excinfo:
        manager.fetch_all("SELECT * FROM NSH_ROOM")

    assert excinfo.value.message == "Database error"
    connection.rollback.assert_called_once()


def test_pool_creation_failure(manager, pool):
    pool.side_effect = mysql.connector.Error("access denied")

    with pytest.raises(StoreFailure):
        manager.fetch_one("SELECT 1 AS ok")


def test_execute_sql_script(tmp_path, store):
    script = tmp_path / "extra.sql"
    script.write_text(
        "CREATE TABLE NSH_EVENT (EVENT_ID INTEGER PRIMARY KEY, EVENT_NAME TEXT);\n"
        "INSERT INTO NSH_EVENT (EVENT_ID, EVENT_NAME) VALUES (1, 'Poetry night');\n",
        encoding="utf-8",
    )

    assert store.execute_sql_script(str(script)) == 2
    assert store.fetch_one("SELECT EVENT_NAME FROM NSH_EVENT WHERE EVENT_ID = %s", (1,))["EVENT_NAME"] == "Poetry night"


def test_connection_is_returned_when_cursor_fails(manager, connection):
    connection.cursor.side_effect = mysql.connector.Error("lost connection")

    with pytest.raises(StoreFailure):
        manager.fetch_all("SELECT * FROM NSH_ROOM")

    connection.close.assert_called_once()


def test_commit_errors_become_store_failures(manager, connection):
    connection.commit.side_effect = mysql.connector.Error("deadlock")

    with pytest.raises(StoreFailure):
        manager.execute_query("DELETE FROM NSH_RESERVATION WHERE RESERVATION_ID = %s", (1,))

    connection.rollback.assert_called_once()
    connection.cursor.return_value.close.assert_called_once()
    connection.close.assert_called_once()
