"""A multi-user chat room over TCP with length-prefixed messages."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

DEFAULT_PORT = 3490
BACKLOG = 10
MAX_FRAME = 1 << 20
ROOM_EMPTY = "server: the room is empty"

_HEADER = struct.Struct("<I")
_POLL_INTERVAL = 0.2


def encode_frame(payload: bytes | str) -> bytes:
    """Prefix ``payload`` with its length as a 4-byte little-endian integer."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    payload = bytes(payload)
    if len(payload) > MAX_FRAME:
        raise ValueError("frame payload is too large")
    return _HEADER.pack(len(payload)) + payload


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data.extend(chunk)
    return bytes(data)


def read_frame(sock: socket.socket) -> bytes | None:
    """Read one frame from ``sock``; None when the peer has closed cleanly."""
    header = _recv_exact(sock, _HEADER.size)
    if not header:
        return None
    if len(header) < _HEADER.size:
        raise ConnectionError("connection closed inside a frame header")
    (length,) = _HEADER.unpack(header)
    if length > MAX_FRAME:
        raise ConnectionError("incoming frame is too large")
    payload = _recv_exact(sock, length)
    if len(payload) < length:
        raise ConnectionError("connection closed inside a frame")
    return payload


def parse_private(message: str) -> tuple[str, str] | None:
    """Split ``/<name> <text>`` into ``(name, text)``; None if not private."""
    if not message.startswith("/"):
        return None
    name, sep, body = message[1:].partition(" ")
    if not sep:
        raise ValueError("a private message needs the form '/<name> <text>'")
    return name, body


@dataclass(eq=False)
class Connection:
    """A client in the chat room."""

    index: int
    name: str
    sock: socket.socket = field(repr=False)

    def send(self, text: str) -> None:
        """Send one message to this client."""
        self.sock.sendall(encode_frame(text))


class ChatServer:
    """Accepts clients and relays their messages to each other."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT, backlog: int = BACKLOG) -> None:
        self._backlog = backlog
        self._lock = threading.RLock()
        self._connections: list[Connection] = []
        self._closed = threading.Event()
        self._listener = socket.create_server((host, port), backlog=backlog)
        self._listener.settimeout(_POLL_INTERVAL)

    def __enter__(self) -> ChatServer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def address(self) -> tuple[str, int]:
        """The host and port the server listens on."""
        host, port = self._listener.getsockname()[:2]
        return host, port

    @property
    def connections(self) -> list[Connection]:
        """A snapshot of the connected clients."""
        with self._lock:
            return list(self._connections)

    def serve_forever(self) -> None:
        """Accept clients until :meth:`close` is called."""
        counter = 0
        while not self._closed.is_set():
            try:
                client, peer = self._listener.accept()
            except TimeoutError:
                continue
            except OSError:
                if self._closed.is_set():
                    return
                raise
            print(f"connection from: {peer[0]}")
            try:
                raw_name = read_frame(client)
            except OSError:
                raw_name = None
            if raw_name is None:
                client.close()
                continue
            conn = Connection(counter % self._backlog, raw_name.decode("utf-8", "replace"), client)
            counter += 1
            with self._lock:
                self._connections.append(conn)
                self._broadcast(f"server: {conn.name} is connected", exclude=conn)
            threading.Thread(target=self._handle_client, args=(conn,), daemon=True).start()

    def route_message(self, sender: Connection, message: str) -> list[tuple[Connection, str]]:
        """Deliver ``message`` from ``sender`` and return what went to whom.

        A message of the form ``/<name> <text>`` goes only to that client;
        anything else goes to everyone but the sender. A sender alone in
        the room is told so.
        """
        with self._lock:
            others = [conn for conn in self._connections if conn is not sender]
            deliveries: list[tuple[Connection, str]] = []
            if not others:
                if self._connections == [sender]:
                    deliveries.append((sender, ROOM_EMPTY))
            else:
                private = parse_private(message) if message else None
                if private is not None:
                    name, body = private
                    target = next((conn for conn in others if conn.name == name), None)
                    if target is not None:
                        deliveries.append((target, f"<private> {sender.name}: {body}"))
                else:
                    deliveries.extend((conn, f"{sender.name}: {message}") for conn in others)
            delivered = []
            for conn, text in deliveries:
                try:
                    conn.send(text)
                except OSError:
                    continue
                delivered.append((conn, text))
            return delivered

    def close(self) -> None:
        """Stop accepting clients and disconnect everyone."""
        self._closed.set()
        with self._lock:
            connections, self._connections = self._connections, []
        for conn in connections:
            try:
                conn.sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
            conn.sock.close()
        self._listener.close()

    def _broadcast(self, text: str, exclude: Connection) -> None:
        with self._lock:
            for conn in self._connections:
                if conn is exclude:
                    continue
                try:
                    conn.send(text)
                except OSError:
                    continue

    def _handle_client(self, conn: Connection) -> None:
        try:
            while True:
                raw = read_frame(conn.sock)
                if raw is None:
                    break
                try:
                    self.route_message(conn, raw.decode("utf-8", "replace"))
                except ValueError as exc:
                    print(f"server error: {exc}", file=sys.stderr)
        except OSError:
            pass
        finally:
            self._close_connection(conn)

    def _close_connection(self, conn: Connection) -> None:
        print(f"client({conn.index}) is over")
        with self._lock:
            if conn in self._connections:
                self._broadcast(f"server: {conn.name} is out", exclude=conn)
                self._connections.remove(conn)
        conn.sock.close()


def _receive(sock: socket.socket, output: TextIO) -> None:
    try:
        while (frame := read_frame(sock)) is not None:
            output.write(f"> {frame.decode('utf-8', 'replace')}\n")
            output.flush()
    except OSError:
        pass


def run_client(host: str, port: int, name: str, lines: Iterable[str], output: TextIO) -> int:
    """Join the room as ``name``, send each line, and write what arrives to ``output``."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(encode_frame(name))
        receiver = threading.Thread(target=_receive, args=(sock, output), daemon=True)
        receiver.start()
        for line in lines:
            sock.sendall(encode_frame(line.rstrip("\n")))
        try:
            sock.shutdown(socket.SHUT_WR)
        except OSError:
            pass
        receiver.join()
    return 0


def server_main(argv=None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(prog="tinkerbox-chat-server", description="Chat room server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        server = ChatServer(args.host, args.port)
    except OSError as exc:
        print(f"server error: {exc}", file=sys.stderr)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


def client_main(argv=None) -> int:
    """Join a chat room and relay standard input to it."""
    parser = argparse.ArgumentParser(prog="tinkerbox-chat", description="Chat room client.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--name")
    args = parser.parse_args(argv)
    name = args.name
    if name is None:
        print("enter you name:")
        name = sys.stdin.readline().rstrip("\n")
    print(f"connected to: {args.host}")
    try:
        return run_client(args.host, args.port, name, sys.stdin, sys.stdout)
    except OSError as exc:
        print(f"client error: {exc}", file=sys.stderr)
        return 1