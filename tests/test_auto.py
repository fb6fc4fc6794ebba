import socket
import struct
import threading
from types import SimpleNamespace

from dnsdog.transport.auto import AutoTransport


def _parser(data):
    return SimpleNamespace(payload=data, flags=SimpleNamespace(truncated=data[:1] == b"T"))


def _request():
    return SimpleNamespace(to_bytes=lambda: b"query")


def _recv_exact(conn, count):
    data = b""
    while len(data) < count:
        chunk = conn.recv(count - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _udp_server(reply):
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(5)

    def run():
        with server:
            _, peer = server.recvfrom(4096)
            server.sendto(reply, peer)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return server.getsockname()[1], thread


def _tcp_server(port, reply, received):
    server = socket.create_server(("127.0.0.1", port))
    server.settimeout(5)

    def run():
        with server:
            conn, _ = server.accept()
            with conn:
                (length,) = struct.unpack(">H", _recv_exact(conn, 2))
                received.append(_recv_exact(conn, length))
                conn.sendall(struct.pack(">H", len(reply)) + reply)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


def test_untruncated_udp_answer_is_used():
    port, thread = _udp_server(b"full answer")
    response = AutoTransport(f"127.0.0.1:{port}", parser=_parser).send(_request())
    thread.join(5)
    assert response.payload == b"full answer"
    assert response.flags.truncated is False


def test_truncated_answer_retries_over_tcp():
    port, udp_thread = _udp_server(b"T")
    received = []
    tcp_thread = _tcp_server(port, b"answer over tcp", received)
    response = AutoTransport(f"127.0.0.1:{port}", parser=_parser).send(_request())
    udp_thread.join(5)
    tcp_thread.join(5)
    assert response.payload == b"answer over tcp"
    assert received == [b"query"]