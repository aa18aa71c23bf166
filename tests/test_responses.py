from filehttpd.responses import send_html, send_result
from filehttpd.result import ContentType, HTTPResult


class FakeClient:
    def __init__(self):
        self.sent = b""

    def sendall(self, data):
        self.sent += data


def test_send_result_writes_serialised_result():
    client = FakeClient()
    result = HTTPResult(ContentType.TEXT_PLAIN, b"hi")
    send_result(client, result)
    assert client.sent == result.to_bytes()


def test_send_html_sends_file_as_html(tmp_path):
    page = tmp_path / "page.html"
    page.write_bytes(b"hello")
    client = FakeClient()
    result = send_html(client, page)
    assert client.sent == (
        b"HTTP/1.1 200 OK\r\nContent-Type: text/HTML\r\nContent-Length: 5\r\n\r\nhello"
    )
    assert result.content == b"hello"


def test_send_html_missing_file_sends_empty_page(tmp_path):
    client = FakeClient()
    result = send_html(client, tmp_path / "missing.html")
    assert result.length == 0
    assert client.sent.startswith(b"HTTP/1.1 200 OK\r\n")
    assert client.sent.endswith(b"Content-Length: 0\r\n\r\n")