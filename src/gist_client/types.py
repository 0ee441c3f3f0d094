from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generic,
    List,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Type,
    TypedDict,
    TypeVar,
    Union,
)

T = TypeVar("T")


@dataclass
class User:
    login: Optional[str] = None
    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            login=data.get("login"),
            id=data.get("id"),
            name=data.get("name"),
            url=data.get("url"),
            html_url=data.get("html_url"),
            avatar_url=data.get("avatar_url"),
        )

    def to_json(self) -> Dict[str, Any]:
        return _compact(
            login=self.login,
            id=self.id,
            name=self.name,
            url=self.url,
            html_url=self.html_url,
            avatar_url=self.avatar_url,
        )


@dataclass
class GistFile:
    filename: Optional[str] = None
    content: Optional[str] = None
    size: Optional[int] = None
    raw_url: Optional[str] = None
    language: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "GistFile":
        return cls(
            filename=data.get("filename"),
            content=data.get("content"),
            size=data.get("size"),
            raw_url=data.get("raw_url"),
            language=data.get("language"),
            type=data.get("type"),
        )

    def to_json(self) -> Dict[str, Any]:
        # Server-computed fields are never sent back.
        return _compact(filename=self.filename, content=self.content)


@dataclass
class Gist:
    """A gist as returned by the API, or a partial one built for create/update."""

    id: Optional[str] = None
    repo: Optional[str] = None
    description: Optional[str] = None
    user: Optional[User] = None
    files: Dict[str, GistFile] = field(default_factory=dict)
    public: Optional[bool] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    comments: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Gist":
        # v3 responses carry the owner as "owner"; older payloads used "user".
        owner = data.get("user") or data.get("owner")
        files = data.get("files") or {}
        return cls(
            id=_as_str(data.get("id")),
            repo=_as_str(data.get("repo", data.get("id"))),
            description=data.get("description"),
            user=User.from_json(owner) if owner else None,
            files={name: GistFile.from_json(f or {}) for name, f in files.items()},
            public=data.get("public"),
            url=data.get("url"),
            html_url=data.get("html_url"),
            comments=data.get("comments"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def to_json(self) -> Dict[str, Any]:
        payload = _compact(
            id=self.id,
            repo=self.repo,
            description=self.description,
            public=self.public,
        )
        if self.user is not None:
            payload["user"] = self.user.to_json()
        if self.files:
            payload["files"] = {name: f.to_json() for name, f in self.files.items()}
        return payload


@dataclass
class Comment:
    id: Optional[int] = None
    body: Optional[str] = None
    user: Optional[User] = None
    url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Comment":
        author = data.get("user")
        return cls(
            id=data.get("id"),
            body=data.get("body"),
            user=User.from_json(author) if author else None,
            url=data.get("url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass(frozen=True)
class ListOf(Generic[T]):
    """Shape marker asking the transport to decode a JSON array of ``item``."""

    item: Type[T]


Shape = Union[Type[T], ListOf[T]]


class Transport(Protocol):
    def get(self, path: str, shape: Shape) -> Any: ...

    def post(self, path: str, body: Optional["Payload"], shape: Shape) -> Any: ...

    def put(self, path: str, body: Optional["Payload"], shape: Shape) -> Any: ...


class ErrorResponse(TypedDict, total=False):
    message: str
    documentation_url: Optional[str]
    errors: Optional[List[Any]]


HttpMethod = Literal["GET", "POST", "PUT"]

Payload = Dict[str, Any]
Headers = Dict[str, str]


def _compact(**fields: Any) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def _as_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
