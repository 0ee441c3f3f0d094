import logging
from typing import Any, List, Optional

from .config import ClientConfig
from .errors import ApiError
from .http import ConnectionError, Response, Session, Timeout
from .types import ErrorResponse, Headers, HttpMethod, ListOf, Payload, Shape

logger = logging.getLogger(__name__)


class GitHubClient:
    """Blocking GitHub API transport that decodes JSON bodies into typed records."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[Session] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.timeout = self.config.timeout
        self.session = session or Session()
        self.default_headers: Headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.token:
            self.default_headers["Authorization"] = f"Bearer {self.config.token}"

    def get(self, path: str, shape: Shape) -> Any:
        return self._request("GET", path, shape, operation=f"GET {path}")

    def post(self, path: str, body: Optional[Payload], shape: Shape) -> Any:
        return self._request("POST", path, shape, operation=f"POST {path}", json_body=body)

    def put(self, path: str, body: Optional[Payload], shape: Shape) -> Any:
        return self._request("PUT", path, shape, operation=f"PUT {path}", json_body=body)

    def _request(
        self,
        method: HttpMethod,
        path: str,
        shape: Shape,
        *,
        operation: str,
        json_body: Optional[Payload] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=self.default_headers,
                timeout=self.timeout,
            )
        except (Timeout, ConnectionError) as exc:
            logger.warning("%s: %s", operation, exc)
            raise ApiError(status_code=0, message=str(exc), operation=operation) from exc

        data = self._decode_response(response, operation)
        return self._convert(data, shape, response.status_code, operation)

    def _decode_response(self, response: Response, operation: str) -> Any:
        if 200 <= response.status_code < 300:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise ApiError(
                    status_code=response.status_code,
                    message=f"Invalid JSON in response: {exc}",
                    operation=operation,
                ) from exc
        raise self._build_error(response, operation)

    def _build_error(self, response: Response, operation: str) -> ApiError:
        message = response.reason or "Request failed"
        details: Optional[ErrorResponse] = None

        try:
            body = response.json()
            if isinstance(body, dict):
                details = body  # type: ignore[assignment]
                message = body.get("message", message)
        except ValueError:
            pass

        logger.warning("%s failed with status %s: %s", operation, response.status_code, message)
        return ApiError(status_code=response.status_code, message=message, operation=operation, details=details)

    @staticmethod
    def _convert(data: Any, shape: Shape, status_code: int, operation: str) -> Any:
        if isinstance(shape, ListOf):
            if not isinstance(data, list):
                raise ApiError(
                    status_code=status_code,
                    message=f"Expected a JSON array of {shape.item.__name__}",
                    operation=operation,
                )
            items: List[Any] = []
            for item in data:
                if not isinstance(item, dict):
                    raise ApiError(
                        status_code=status_code,
                        message=f"Expected {shape.item.__name__} objects in array",
                        operation=operation,
                    )
                items.append(GitHubClient._from_json(shape.item, item, status_code, operation))
            return items
        if not isinstance(data, dict):
            raise ApiError(
                status_code=status_code,
                message=f"Expected a JSON object for {shape.__name__}",
                operation=operation,
            )
        return GitHubClient._from_json(shape, data, status_code, operation)

    @staticmethod
    def _from_json(record: Any, data: dict, status_code: int, operation: str) -> Any:
        # Nested fields of the wrong JSON type fail inside the record constructors.
        try:
            return record.from_json(data)
        except (AttributeError, TypeError) as exc:
            raise ApiError(
                status_code=status_code,
                message=f"Malformed {record.__name__} in response: {exc}",
                operation=operation,
            ) from exc
