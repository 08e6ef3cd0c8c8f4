"""SQLite-backed storage for the tuition centre records."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Sequence
from typing import Any

DEFAULT_PATH = "tuitioncentre.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS admin (
    AdminID TEXT PRIMARY KEY,
    AdminPass TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS tutor (
    TutorID TEXT PRIMARY KEY,
    Name TEXT,
    Subject_Experties TEXT NOT NULL DEFAULT 'NONE',
    Available_Tutoring_Date TEXT
);
CREATE TABLE IF NOT EXISTS student (
    StudentID TEXT PRIMARY KEY,
    StudentPass TEXT NOT NULL,
    Name TEXT,
    Age INTEGER,
    Phone_Number TEXT,
    AdminID TEXT,
    AccountStatus TEXT NOT NULL DEFAULT 'ACTIVE'
);
CREATE TABLE IF NOT EXISTS subject (
    SubjectID TEXT PRIMARY KEY,
    Name TEXT,
    Fees REAL NOT NULL DEFAULT 0,
    Quota INTEGER NOT NULL DEFAULT 0,
    Category_Age INTEGER,
    AdminID TEXT,
    TutorID TEXT
);
CREATE TABLE IF NOT EXISTS enrollment (
    StudentID TEXT NOT NULL,
    SubjectID TEXT NOT NULL,
    Feedback TEXT,
    Status TEXT NOT NULL DEFAULT 'UNPAID',
    FeesPeriod TEXT
);
CREATE TABLE IF NOT EXISTS payment (
    PaymentID INTEGER PRIMARY KEY AUTOINCREMENT,
    StudentID TEXT,
    Total_Subject INTEGER,
    Total_Fees REAL,
    Payment_Date TEXT DEFAULT CURRENT_TIMESTAMP,
    AdminID TEXT
);
"""


class DatabaseError(Exception):
    """Raised when the database cannot be reached or a statement fails."""


class Database:
    """A connection to the tuition centre database."""

    def __init__(self, path: str = DEFAULT_PATH) -> None:
        try:
            self._connection = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise DatabaseError("Unable to connect to database") from exc
        self._connection.row_factory = sqlite3.Row

    def create_schema(self) -> None:
        """Create every table the application uses, if missing."""
        try:
            self._connection.executescript(_SCHEMA)
            self._connection.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def execute(self, query: str, params: Sequence[Any] = ()) -> int:
        """Run a statement that returns no rows; return the affected row count."""
        try:
            cursor = self._connection.execute(query, tuple(params))
            self._connection.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor.rowcount

    def query(self, query: str, params: Iterable[Any] = ()) -> list[sqlite3.Row]:
        """Run a query and return all of its rows."""
        try:
            return self._connection.execute(query, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def query_one(self, query: str, params: Iterable[Any] = ()) -> sqlite3.Row | None:
        """Run a query and return its first row, or None when there is none."""
        try:
            return self._connection.execute(query, tuple(params)).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def close(self) -> None:
        """Close the connection."""
        try:
            self._connection.close()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()