import io
import socket
import threading
import time

import pytest

from tinkerbox.chat import (
    ChatServer,
    encode_frame,
    parse_private,
    read_frame,
    run_client,
)


def test_encode_frame_wire_format():
    assert encode_frame("hi") == b"\x02\x00\x00\x00hi"


def test_encode_frame_accepts_bytes_and_str_alike():
    assert encode_frame(b"hello") == encode_frame("hello")


def test_frames_round_trip_over_a_socket():
    a, b = socket.socketpair()
    with a, b:
        messages = ["first", "", "third message", "ünïcode"]
        for message in messages:
            a.sendall(encode_frame(message))
        received = [read_frame(b).decode("utf-8") for _ in messages]
    assert received == messages


def test_read_frame_returns_none_at_end_of_stream():
    a, b = socket.socketpair()
    a.close()
    with b:
        assert read_frame(b) is None


def test_read_frame_rejects_truncated_frame():
    a, b = socket.socketpair()
    a.sendall(encode_frame("hello")[:-2])
    a.close()
    with b:
        with pytest.raises(ConnectionError):
            read_frame(b)


def test_encode_frame_rejects_oversized_payload():
    with pytest.raises(ValueError):
        encode_frame(b"x" * ((1 << 20) + 1))


def test_parse_private():
    assert parse_private("/bob hi there") == ("bob", "hi there")
    assert parse_private("hello") is None


def test_parse_private_without_text_is_an_error():
    with pytest.raises(ValueError):
        parse_private("/bob")


def _wait_for(condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return False


@pytest.fixture
def server():
    srv = ChatServer("127.0.0.1", 0)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.close()
    thread.join(timeout=5)


@pytest.fixture
def join(server):
    sockets = []

    def _join(name):
        sock = socket.create_connection(server.address, timeout=5)
        sockets.append(sock)
        sock.sendall(encode_frame(name))
        assert _wait_for(lambda: name in [c.name for c in server.connections])
        return sock

    yield _join
    for sock in sockets:
        sock.close()


def test_new_client_is_announced(join):
    alice = join("alice")
    join("bob")
    assert read_frame(alice) == b"server: bob is connected"


def test_message_goes_to_everyone_else(join):
    alice = join("alice")
    bob = join("bob")
    carol = join("carol")
    assert read_frame(alice) == b"server: bob is connected"
    assert read_frame(alice) == b"server: carol is connected"
    assert read_frame(bob) == b"server: carol is connected"
    alice.sendall(encode_frame("hi"))
    assert read_frame(bob) == b"alice: hi"
    assert read_frame(carol) == b"alice: hi"


def test_private_message_reaches_only_its_target(join):
    alice = join("alice")
    bob = join("bob")
    carol = join("carol")
    assert read_frame(bob) == b"server: carol is connected"
    alice.sendall(encode_frame("/carol psst"))
    assert read_frame(carol) == b"<private> alice: psst"
    alice.sendall(encode_frame("hello"))
    assert read_frame(bob) == b"alice: hello"
    assert read_frame(carol) == b"alice: hello"


def test_leaving_client_is_announced(server, join):
    alice = join("alice")
    bob = join("bob")
    assert read_frame(alice) == b"server: bob is connected"
    bob.close()
    assert read_frame(alice) == b"server: bob is out"
    assert _wait_for(lambda: [c.name for c in server.connections] == ["alice"])


def test_lonely_sender_hears_room_is_empty(join):
    alice = join("alice")
    alice.sendall(encode_frame("anyone?"))
    assert read_frame(alice) == b"server: the room is empty"


def test_route_message_reports_deliveries(server, join):
    alice = join("alice")
    conn = server.connections[0]
    deliveries = server.route_message(conn, "anyone?")
    assert deliveries == [(conn, "server: the room is empty")]
    assert read_frame(alice) == b"server: the room is empty"


def test_route_message_rejects_malformed_private(server, join):
    join("alice")
    join("bob")
    sender = next(c for c in server.connections if c.name == "alice")
    with pytest.raises(ValueError):
        server.route_message(sender, "/bob")


def test_run_client_sends_name_and_lines_and_prints_replies():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    received = []

    def serve():
        conn, _ = listener.accept()
        with conn:
            received.append(read_frame(conn))
            conn.sendall(encode_frame("hello"))
            while (frame := read_frame(conn)) is not None:
                received.append(frame)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    output = io.StringIO()
    try:
        result = run_client("127.0.0.1", port, "alice", ["one\n", "two\n"], output)
        thread.join(timeout=5)
    finally:
        listener.close()
    assert result == 0
    assert received == [b"alice", b"one", b"two"]
    assert output.getvalue() == "> hello\n"