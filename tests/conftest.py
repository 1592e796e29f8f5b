import sqlite3
import time
from datetime import date

import jwt
import pytest

from database.db_manager import DBManager, Transaction
from library_app.application import create_app
from library_app.config import Settings
from library_app.services.identity_service import Identity, TokenVerifier

TEST_SECRET = "test-signing-key-for-library-rooms-0123456789"
TODAY = date(2024, 4, 20)

SQLITE_SCHEMA = """
CREATE TABLE NSH_CUSTOMER (
    CUSTOMER_ID INTEGER PRIMARY KEY AUTOINCREMENT,
    FIRST_NAME TEXT,
    LAST_NAME TEXT,
    PHONE_NUMBER TEXT,
    EMAIL_ADDRESS TEXT NOT NULL UNIQUE,
    ROLE TEXT DEFAULT 'customer'
);
CREATE TABLE NSH_ROOM (
    ROOM_ID INTEGER PRIMARY KEY,
    CAPACITY INTEGER NOT NULL,
    ROOM_STATUS TEXT NOT NULL DEFAULT 'Available'
);
CREATE TABLE NSH_RESERVATION (
    RESERVATION_ID INTEGER PRIMARY KEY AUTOINCREMENT,
    TOPIC_DESCRIPTION TEXT,
    RESERVATION_DATE TEXT NOT NULL,
    START_TIME TEXT NOT NULL,
    END_TIME TEXT NOT NULL,
    GROUP_SIZE INTEGER NOT NULL,
    ROOM_ID INTEGER NOT NULL,
    CUSTOMER_ID INTEGER NOT NULL,
    EVENT_ID INTEGER
);
"""


def _dict_factory(cursor, row):
    return {col[0]: value for col, value in zip(cursor.description, row)}


class SQLiteTransaction(Transaction):
    store_errors = (sqlite3.Error,)

    def _execute(self, query, params):
        super()._execute(query.replace("%s", "?"), params)


class SQLiteDBManager(DBManager):
    """Row store backed by a SQLite file, same interface as the MySQL manager."""
    transaction_class = SQLiteTransaction

    def __init__(self, path):
        super().__init__(Settings(db_pool_size=5))
        self.path = path

    def get_connection(self):
        connection = sqlite3.connect(self.path)
        connection.row_factory = _dict_factory
        return connection

    def _cursor(self, connection):
        return connection.cursor()


@pytest.fixture
def store(tmp_path):
    db = SQLiteDBManager(str(tmp_path / "library.db"))
    conn = sqlite3.connect(db.path)
    with conn:
        conn.executescript(SQLITE_SCHEMA)
        conn.executemany(
            "INSERT INTO NSH_CUSTOMER (CUSTOMER_ID, FIRST_NAME, LAST_NAME, EMAIL_ADDRESS, ROLE) VALUES (?, ?, ?, ?, ?)",
            [
                (1, "Ada", "Admin", "admin@example.com", "Admin"),
                (7, "Alice", "Reader", "alice@example.com", "customer"),
                (8, "Bob", "Reader", "bob@example.com", "customer"),
            ],
        )
        conn.executemany(
            "INSERT INTO NSH_ROOM (ROOM_ID, CAPACITY, ROOM_STATUS) VALUES (?, ?, 'Available')",
            [(3, 6), (4, 10)],
        )
    conn.close()
    return db


@pytest.fixture
def alice():
    return Identity(subject="uid-alice", email="alice@example.com")


@pytest.fixture
def bob():
    return Identity(subject="uid-bob", email="bob@example.com")


@pytest.fixture
def verifier():
    return TokenVerifier(TEST_SECRET)


def make_token(email, secret=TEST_SECRET, expires_in=3600, **claims):
    payload = {"sub": f"uid-{email}", "email": email, "exp": int(time.time()) + expires_in}
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_header(email):
    return {"Authorization": f"Bearer {make_token(email)}"}


@pytest.fixture
def app(store, verifier):
    app = create_app(Settings(), db=store, verifier=verifier, clock=lambda: TODAY)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def room_status(store, room_id):
    return store.fetch_one("SELECT ROOM_STATUS FROM NSH_ROOM WHERE ROOM_ID = %s", (room_id,))["ROOM_STATUS"]


def reservation_count(store, room_id=None):
    if room_id is None:
        row = store.fetch_one("SELECT COUNT(*) AS N FROM NSH_RESERVATION")
    else:
        row = store.fetch_one("SELECT COUNT(*) AS N FROM NSH_RESERVATION WHERE ROOM_ID = %s", (room_id,))
    return row["N"]
