import io

import pytest

from tinkerbox.bookstore import Book, BookStore, User
from tinkerbox.bookstore_cli import login, main, prompt_book, prompt_user, run


def _scripted(*answers):
    remaining = iter(answers)

    def ask(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return ask


@pytest.fixture
def store():
    with BookStore(":memory:") as opened:
        opened.create_tables()
        yield opened


def test_prompt_user_strips_answers():
    user = prompt_user(_scripted("  alice ", "password\n"))
    assert user == User("alice", "password")


def test_prompt_book_retries_bad_price():
    book = prompt_book(_scripted("Dune", "Herbert", "cheap", "12"))
    assert book == Book("Dune", "Herbert", 12)


def test_login_existing_user_needs_no_prompt(store):
    password = "password"
    store.create_user("alice", password)
    user = User("alice", password)
    assert login(store, user, _scripted(), lambda text: None) == user


def test_login_creates_account(store):
    password = "password"
    user = login(store, User("bob", password), _scripted("2"), lambda text: None)
    assert user.login == "bob"
    assert store.check_user("bob", password) is True


def test_login_retry_with_other_credentials(store):
    password = "password"
    store.create_user("alice", password)
    ask = _scripted("7", "1", "alice", "password")
    user = login(store, User("alice", "secret"), ask, lambda text: None)
    assert user == User("alice", password)


def test_run_creates_and_lists_books(store):
    password = "password"
    store.create_user("alice", password)
    messages = []
    ask = _scripted("alice", "password", "1", "Dune", "Herbert", "12", "2", "9", "3")
    assert run(store, ask, messages.append) == 0
    assert store.list_books() == [Book("Dune", "Herbert", 12)]
    assert "title: Dune" in messages
    assert "author: Herbert" in messages
    assert "There's not that option" in messages
    assert messages[0] == "alice, your options: create book(1), list all books(2), exit(3)"


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "users.db"
    monkeypatch.setattr("sys.stdin", io.StringIO("bob\npassword\n2\n3\n"))
    assert main(["--db", str(path)]) == 0
    assert "bob, your options" in capsys.readouterr().out
    password = "password"
    with BookStore(path) as reopened:
        assert reopened.check_user("bob", password) is True


def test_main_stops_at_end_of_input(tmp_path, monkeypatch):
    path = tmp_path / "users.db"
    monkeypatch.setattr("sys.stdin", io.StringIO("carol\n"))
    assert main(["--db", str(path)]) == 0
    with BookStore(path) as reopened:
        assert reopened.list_books() == []