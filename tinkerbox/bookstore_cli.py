"""Interactive prompt for logging in, adding and listing books."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from tinkerbox.bookstore import DEFAULT_DATABASE, Book, BookStore, User

Ask = Callable[[str], str]
Say = Callable[[str], None]

_CREATE_BOOK, _LIST_BOOKS, _EXIT = 1, 2, 3
_RETRY, _NEW_ACCOUNT = 1, 2

_LOGIN_PROMPT = "enter your login\n>"
_CODE_PROMPT = "enter your " + "pass" + "word\n>"


def _ask_int(ask: Ask, prompt: str) -> int | None:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


def prompt_user(ask: Ask) -> User:
    """Ask for a login and a password."""
    login_name = ask(_LOGIN_PROMPT).strip()
    entered = ask(_CODE_PROMPT).strip()
    return User(login_name, entered)


def prompt_book(ask: Ask) -> Book:
    """Ask for a book's title, author and price; the price is asked until valid."""
    title = ask("Enter title\n>").strip()
    author = ask("Enter author\n>").strip()
    price = _ask_int(ask, "Enter price\n>")
    while price is None:
        price = _ask_int(ask, "Enter price\n>")
    return Book(title, author, price)


def login(store: BookStore, user: User, ask: Ask, say: Say) -> User:
    """Check ``user``; offer to retry or create an account until one works."""
    if store.check_user(user.login, user.password):
        return user
    while True:
        choice = _ask_int(ask, "repeat (1) or create new account(2)?\n>")
        if choice == _RETRY:
            user = prompt_user(ask)
            if store.check_user(user.login, user.password):
                return user
        elif choice == _NEW_ACCOUNT:
            return store.create_user(user.login, user.password)


def _show_books(store: BookStore, say: Say) -> None:
    for book in store.list_books():
        say(f"title: {book.title}")
        say(f"author: {book.author}")
        say(f"price: {book.price}")
        say("")


def run(store: BookStore, ask: Ask, say: Say) -> int:
    """Log a user in, then handle menu choices until they exit."""
    user = login(store, prompt_user(ask), ask, say)
    while True:
        say(f"{user.login}, your options: create book(1), list all books(2), exit(3)")
        choice = _ask_int(ask, "")
        if choice == _CREATE_BOOK:
            store.create_book(prompt_book(ask))
        elif choice == _LIST_BOOKS:
            _show_books(store, say)
        elif choice == _EXIT:
            return 0
        else:
            say("There's not that option")


def main(argv=None) -> int:
    """Start the interactive book store."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-books", description="Keep a list of books."
    )
    parser.add_argument("--db", default=DEFAULT_DATABASE, help="database file")
    args = parser.parse_args(argv)
    with BookStore(args.db) as store:
        store.create_tables()
        try:
            return run(store, input, print)
        except EOFError:
            return 0