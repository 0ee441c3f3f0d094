from .client import GitHubClient
from .config import ClientConfig
from .errors import ApiError, PreconditionError
from .gists import GistService
from .types import Comment, Gist, GistFile, ListOf, User

__all__ = [
    "GitHubClient",
    "ClientConfig",
    "ApiError",
    "PreconditionError",
    "GistService",
    "Comment",
    "Gist",
    "GistFile",
    "ListOf",
    "User",
]
