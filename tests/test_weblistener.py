import socket

import pytest

from tictacnet.weblistener import BUFFER_SIZE, WebListener


def test_receive_returns_sent_bytes():
    with WebListener("127.0.0.1", 0) as listener:
        with socket.create_connection(listener.address) as client:
            client.sendall(b"hello")
            assert listener.receive_info() == b"hello"


def test_receive_caps_at_buffer_size():
    payload = bytes(range(256)) * 3
    with WebListener("127.0.0.1", 0) as listener:
        with socket.create_connection(listener.address) as client:
            client.sendall(payload)
            data = listener.receive_info()
    assert 0 < len(data) <= BUFFER_SIZE
    assert payload.startswith(data)


def test_address_reports_bound_host():
    with WebListener("127.0.0.1", 0) as listener:
        host, port = listener.address
    assert host == "127.0.0.1"
    assert port > 0


def test_invalid_address_raises():
    with pytest.raises(ValueError):
        WebListener("not-an-address", 0)


def test_port_in_use_raises():
    with WebListener("127.0.0.1", 0) as first:
        port = first.address[1]
        with pytest.raises(OSError):
            WebListener("127.0.0.1", port)


def test_receive_after_close_raises():
    listener = WebListener("127.0.0.1", 0)
    listener.close()
    with pytest.raises(OSError):
        listener.receive_info()