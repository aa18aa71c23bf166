import json

import pytest

from filehttpd import environment
from filehttpd.request import HTTPRequest, Method
from filehttpd.request_handler import handle_client, handle_request, read_request
from filehttpd.responses import ERROR_RESPONSE


class FakeClient:
    def __init__(self, chunks=(), fail=False):
        self._chunks = list(chunks)
        self._fail = fail
        self.sent = b""
        self.closed = False

    def recv(self, size):
        if self._fail:
            raise ConnectionResetError("reset")
        return self._chunks.pop(0) if self._chunks else b""

    def sendall(self, data):
        self.sent += data

    def close(self):
        self.closed = True


@pytest.fixture
def env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "resources").mkdir()
    config = {"loggerFilter": 2, "home": "html/home.html", "port": 0}
    (tmp_path / "resources" / "config.json").write_text(json.dumps(config))
    (tmp_path / "html").mkdir()
    (tmp_path / "html" / "home.html").write_bytes(b"<p>home</p>")
    environment.setup_file_environment()
    return tmp_path


def test_read_request_joins_chunks():
    client = FakeClient([b"GET /a HTTP/1.1\r\n", b"Host: x\r\n\r\n"])
    request = read_request(client)
    assert request.method is Method.GET
    assert request.target == "/a"
    assert request.http_version == "HTTP/1.1"
    assert request.headers == {"Host": "x"}
    assert request.client is client


def test_read_request_connection_lost():
    assert read_request(FakeClient([b"GET / HTTP/1.1\r\n"])) is None


def test_read_request_connection_error():
    assert read_request(FakeClient(fail=True)) is None


def test_handle_request_root_sends_home(env):
    client = FakeClient()
    handle_request(HTTPRequest(Method.GET, "/", "HTTP/1.1", client=client))
    assert client.sent.startswith(b"HTTP/1.1 200 OK\r\n")
    assert client.sent.endswith(b"<p>home</p>")


def test_handle_request_post_sends_nothing(env):
    client = FakeClient()
    handle_request(HTTPRequest(Method.POST, "/", "HTTP/1.1", client=client))
    assert client.sent == b""


def test_handle_client_answers_and_closes(env):
    client = FakeClient([b"GET / HTTP/1.1\r\n\r\n"])
    request = handle_client(client)
    assert request.target == "/"
    assert client.closed is True
    assert client.sent.endswith(b"<p>home</p>")


def test_handle_client_lost_connection_closes(env):
    client = FakeClient()
    assert handle_client(client) is None
    assert client.closed is True
    assert client.sent == b""


def test_handle_client_failure_sends_server_error(env):
    (env / "resources" / "config.json").unlink()
    client = FakeClient([b"GET /nowhere HTTP/1.1\r\n\r\n"])
    handle_client(client)
    assert client.sent == ERROR_RESPONSE
    assert client.closed is True