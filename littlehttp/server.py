"""A small single-threaded HTTP server."""

from __future__ import annotations

import argparse
import socket

from littlehttp.request import parse_request
from littlehttp.router import route

_READ_SIZE = 90
DEFAULT_ADDRESS = "localhost:3000"


class Server:
    """Listens on ``host:port`` and answers one connection at a time."""

    def __init__(self, socket_addr: str) -> None:
        host, sep, port = socket_addr.rpartition(":")
        if not sep or not host:
            raise ValueError(f"address must be host:port, got {socket_addr!r}")
        try:
            self.port = int(port)
        except ValueError:
            raise ValueError(f"invalid port in address {socket_addr!r}") from None
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port out of range in address {socket_addr!r}")
        self.host = host
        self.socket_addr = socket_addr

    def handle_connection(self, conn: socket.socket) -> None:
        """Read one request from ``conn``, route it and write the response."""
        raw = conn.recv(_READ_SIZE)
        request = parse_request(raw.decode("utf-8"))
        route(request, conn)

    def run(self) -> None:
        """Serve connections until interrupted."""
        with socket.create_server((self.host, self.port)) as listener:
            print(f"Running on {self.socket_addr}")
            while True:
                conn, _ = listener.accept()
                with conn:
                    print("Connection established")
                    self.handle_connection(conn)


def main(argv: list[str] | None = None) -> None:
    """Start the HTTP server."""
    parser = argparse.ArgumentParser(description="Run the HTTP server.")
    parser.add_argument("address", nargs="?", default=DEFAULT_ADDRESS, help="host:port to listen on")
    args = parser.parse_args(argv)
    try:
        Server(args.address).run()
    except KeyboardInterrupt:
        pass