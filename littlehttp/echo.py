"""A plain TCP echo server and a client that says hello to it."""

from __future__ import annotations

import argparse
import socket

_BUFFER_SIZE = 1024
_GREETING = b"Hello"


def echo_once(conn: socket.socket) -> bytes:
    """Read one chunk from ``conn``, write it back and return it."""
    data = conn.recv(_BUFFER_SIZE)
    conn.sendall(data)
    return data


def serve(host: str = "127.0.0.1", port: int = 3000) -> None:
    """Echo one read back to each connecting client, forever."""
    with socket.create_server((host, port)) as listener:
        print(f"Running on port {port}")
        while True:
            conn, _ = listener.accept()
            with conn:
                print("Connection established!")
                echo_once(conn)


def send_hello(host: str = "localhost", port: int = 3000) -> str:
    """Send ``Hello`` to an echo server and return the five bytes it answers with."""
    with socket.create_connection((host, port)) as conn:
        conn.sendall(_GREETING)
        received = b""
        while len(received) < len(_GREETING):
            chunk = conn.recv(len(_GREETING) - len(received))
            if not chunk:
                break
            received += chunk
    return received.decode("utf-8")


def _parse_endpoint(argv: list[str] | None, default_host: str, description: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=3000)
    return parser.parse_args(argv)


def server_main(argv: list[str] | None = None) -> None:
    """Run the echo server."""
    args = _parse_endpoint(argv, "127.0.0.1", "Run the TCP echo server.")
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        pass


def client_main(argv: list[str] | None = None) -> None:
    """Say hello to the echo server and print its reply."""
    args = _parse_endpoint(argv, "localhost", "Send a greeting to the TCP echo server.")
    reply = send_hello(args.host, args.port)
    print(f'Got response from server: "{reply}"')