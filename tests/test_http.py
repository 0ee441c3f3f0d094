import io
import socket
import urllib.error
from http.client import IncompleteRead, RemoteDisconnected
from unittest.mock import MagicMock

import pytest

from gist_client import http
from gist_client.http import ConnectionError, Session, Timeout


def fake_urlopen_response(status: int, body: bytes):
    resp = MagicMock()
    resp.status = status
    resp.reason = "OK"
    resp.read.return_value = body
    resp.headers = {"Content-Type": "application/json"}
    resp.__enter__.return_value = resp
    return resp


def test_request_encodes_json_body(monkeypatch):
    urlopen = MagicMock(return_value=fake_urlopen_response(201, b'{"id": "1"}'))
    monkeypatch.setattr(http.urllib.request, "urlopen", urlopen)

    response = Session().request(
        method="POST", url="https://api.github.com/gists", json={"body": "hi"}, headers={"Accept": "x"}, timeout=3
    )

    request = urlopen.call_args.args[0]
    assert request.get_method() == "POST"
    assert request.data == b'{"body": "hi"}'
    assert request.get_header("Content-type") == "application/json"
    assert urlopen.call_args.kwargs["timeout"] == 3
    assert response.status_code == 201
    assert response.json() == {"id": "1"}


def test_http_error_is_returned_as_response(monkeypatch):
    error = urllib.error.HTTPError(
        "https://api.github.com/gists/x", 404, "Not Found", {}, io.BytesIO(b'{"message": "Not Found"}')
    )
    monkeypatch.setattr(http.urllib.request, "urlopen", MagicMock(side_effect=error))

    response = Session().request(method="GET", url="https://api.github.com/gists/x")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


@pytest.mark.parametrize(
    "raised, expected",
    [
        (socket.timeout("timed out"), Timeout),
        (urllib.error.URLError(socket.timeout("timed out")), Timeout),
        (urllib.error.URLError("Name or service not known"), ConnectionError),
        (RemoteDisconnected("Remote end closed connection without response"), ConnectionError),
        (ConnectionResetError(104, "Connection reset by peer"), ConnectionError),
    ],
)
def test_network_failures_are_mapped(monkeypatch, raised, expected):
    monkeypatch.setattr(http.urllib.request, "urlopen", MagicMock(side_effect=raised))

    with pytest.raises(expected):
        Session().request(method="GET", url="https://api.github.com/gists/1")


def test_empty_body_decodes_to_none():
    assert http.Response(status_code=204, reason="", content=b"", headers={}).json() is None


def test_short_read_is_a_connection_error(monkeypatch):
    resp = fake_urlopen_response(200, b"")
    resp.read.side_effect = IncompleteRead(b'{"id": "4', 40)
    monkeypatch.setattr(http.urllib.request, "urlopen", MagicMock(return_value=resp))

    with pytest.raises(ConnectionError, match="IncompleteRead"):
        Session().request(method="GET", url="https://api.github.com/gists/4")
