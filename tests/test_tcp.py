import socket
import struct
import threading
from types import SimpleNamespace

import pytest

from dnsdog.transport.errors import NetworkError, ResponseWireError, TruncatedResponse
from dnsdog.transport.tcp import TcpTransport, length_prefixed_read, prefix_with_length
from dnsdog.wire import WireIOError


class _Chunks:
    def __init__(self, *chunks):
        self.chunks = list(chunks)

    def recv(self, size):
        if not self.chunks:
            return b""
        chunk = self.chunks.pop(0)
        assert len(chunk) <= size
        return chunk


def _recv_exact(conn, count):
    data = b""
    while len(data) < count:
        chunk = conn.recv(count - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _serve_tcp(reply):
    server = socket.create_server(("127.0.0.1", 0))
    server.settimeout(5)
    received = []

    def run():
        with server:
            conn, _ = server.accept()
            with conn:
                (length,) = struct.unpack(">H", _recv_exact(conn, 2))
                received.append(_recv_exact(conn, length))
                conn.sendall(struct.pack(">H", len(reply)) + reply)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return server.getsockname()[1], received, thread


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _request(payload=b"query"):
    return SimpleNamespace(to_bytes=lambda: payload)


def test_prefix_with_length():
    assert prefix_with_length(b"abc") == b"\x00\x03abc"


def test_prefix_too_long():
    with pytest.raises(ValueError):
        prefix_with_length(bytes(0x10000))


def test_read_whole_message_at_once():
    assert length_prefixed_read(_Chunks(b"\x00\x03abc")) == b"abc"


def test_read_one_byte_then_rest():
    assert length_prefixed_read(_Chunks(b"\x00", b"\x03abc")) == b"abc"


def test_read_across_several_chunks():
    stream = _Chunks(b"\x00\x06ab", b"cd", b"ef")
    assert length_prefixed_read(stream) == b"abcdef"


def test_read_nothing():
    with pytest.raises(TruncatedResponse):
        length_prefixed_read(_Chunks())


def test_read_one_byte_then_nothing():
    with pytest.raises(TruncatedResponse):
        length_prefixed_read(_Chunks(b"\x00"))


def test_read_stream_ends_early():
    with pytest.raises(TruncatedResponse):
        length_prefixed_read(_Chunks(b"\x00\x06ab", b"cd"))


def test_send_round_trip():
    reply = b"the answer"
    port, received, thread = _serve_tcp(reply)
    transport = TcpTransport(f"127.0.0.1:{port}", parser=lambda data: data)
    assert transport.send(_request()) == reply
    thread.join(5)
    assert received == [b"query"]


def test_send_long_reply():
    reply = bytes(range(256)) * 40
    port, _, thread = _serve_tcp(reply)
    transport = TcpTransport(f"127.0.0.1:{port}", parser=len)
    assert transport.send(_request()) == len(reply)
    thread.join(5)


def test_wire_error_is_wrapped():
    port, _, thread = _serve_tcp(b"x")

    def parser(data):
        raise WireIOError()

    with pytest.raises(ResponseWireError):
        TcpTransport(f"127.0.0.1:{port}", parser=parser).send(_request())
    thread.join(5)


def test_connection_refused():
    transport = TcpTransport(f"127.0.0.1:{_closed_port()}", parser=bytes)
    with pytest.raises(NetworkError):
        transport.send(_request())


def test_invalid_address():
    with pytest.raises(NetworkError):
        TcpTransport("127.0.0.1:notaport", parser=bytes).send(_request())