import http.client
import json
import logging
import socket
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Timeout(Exception):
    """Raised when a request exceeds the allotted timeout."""


class ConnectionError(Exception):
    """Raised when a network connection cannot be established."""


@dataclass
class Response:
    status_code: int
    reason: str
    content: bytes
    headers: Dict[str, str]

    def json(self) -> Any:
        return json.loads(self.content.decode() or "null")


class Session:
    """One blocking HTTP exchange per call; error statuses are returned, not raised."""

    def request(
        self,
        *,
        method: str,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Response:
        headers = dict(headers or {})
        data = self._prepare_body(json, headers)
        request = urllib.request.Request(url, data=data, headers=headers, method=method)
        logger.debug("%s %s", method, url)
        try:
            return self._exchange(request, timeout)
        except socket.timeout as exc:
            raise Timeout(str(exc)) from exc
        except urllib.error.URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise Timeout(str(exc.reason)) from exc
            raise ConnectionError(str(exc.reason)) from exc
        # Failures after the request is sent (dropped connection, short read)
        # are not wrapped in URLError by urlopen.
        except (OSError, http.client.HTTPException) as exc:
            raise ConnectionError(f"{type(exc).__name__}: {exc}") from exc

    @staticmethod
    def _exchange(request: urllib.request.Request, timeout: Optional[float]) -> Response:
        try:
            with urllib.request.urlopen(request, timeout=timeout) as resp:
                return Response(resp.status, resp.reason or "", resp.read(), dict(resp.headers))
        except urllib.error.HTTPError as exc:
            return Response(exc.code, exc.reason or "", exc.read(), dict(exc.headers or {}))

    @staticmethod
    def _prepare_body(body: Optional[Any], headers: Dict[str, str]) -> Optional[bytes]:
        if body is None:
            return None
        headers.setdefault("Content-Type", "application/json")
        return json.dumps(body).encode()
