import socket
import threading

import pytest

from littlehttp.echo import client_main, echo_once, send_hello


@pytest.fixture
def echo_server():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    echoed = []

    def run():
        conn, _ = listener.accept()
        with conn:
            echoed.append(echo_once(conn))

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    yield port, echoed, thread
    thread.join(timeout=5)
    listener.close()


def test_echo_once_returns_and_writes_data():
    client, served = socket.socketpair()
    with client, served:
        client.sendall(b"ping-pong")
        assert echo_once(served) == b"ping-pong"
        assert client.recv(1024) == b"ping-pong"


def test_send_hello_round_trip(echo_server):
    port, _, _ = echo_server
    assert send_hello("127.0.0.1", port) == "Hello"


def test_server_sees_greeting(echo_server):
    port, echoed, thread = echo_server
    reply = send_hello("127.0.0.1", port)
    thread.join(timeout=5)
    assert reply == "Hello"
    assert echoed == [b"Hello"]


def test_client_main_prints_reply(echo_server, capsys):
    port, _, _ = echo_server
    client_main(["--host", "127.0.0.1", "--port", str(port)])
    assert capsys.readouterr().out == 'Got response from server: "Hello"\n'


def test_send_hello_refused():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    listener.close()
    with pytest.raises(OSError):
        send_hello("127.0.0.1", port)