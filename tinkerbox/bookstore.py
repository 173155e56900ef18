"""SQLite storage for books and user accounts."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass, field

DEFAULT_DATABASE = "users.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users(
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    password TEXT
);
CREATE TABLE IF NOT EXISTS books(
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT,
    author TEXT,
    price INTEGER
);
"""


@dataclass(frozen=True)
class Book:
    """A book for sale."""

    title: str
    author: str
    price: int


@dataclass(frozen=True)
class User:
    """Login credentials."""

    login: str
    password: str = field(repr=False)


class BookStore:
    """Books and users kept in an SQLite database."""

    def __init__(self, path: str | os.PathLike = DEFAULT_DATABASE) -> None:
        self._conn = sqlite3.connect(os.fspath(path))

    def __enter__(self) -> BookStore:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def create_tables(self) -> None:
        """Create the users and books tables if they are missing."""
        with self._conn:
            self._conn.executescript(_SCHEMA)

    def create_book(self, book: Book) -> None:
        """Store a book."""
        with self._conn:
            self._conn.execute(
                "INSERT INTO books VALUES(NULL, ?, ?, ?)",
                (book.title, book.author, book.price),
            )

    def list_books(self) -> list[Book]:
        """Return all stored books in the order they were added."""
        rows = self._conn.execute("SELECT title, author, price FROM books ORDER BY id")
        return [Book(title, author, price) for title, author, price in rows]

    def check_user(self, login: str, password: str) -> bool:
        """Report whether a user with this login and password exists."""
        row = self._conn.execute(
            "SELECT 1 FROM users WHERE name = ? AND password = ? LIMIT 1",
            (login, password),
        ).fetchone()
        return row is not None

    def create_user(self, login: str, password: str) -> User:
        """Store a new user and return it."""
        with self._conn:
            self._conn.execute(
                "INSERT INTO users VALUES(NULL, ?, ?)", (login, password)
            )
        return User(login, password)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()