"""Path builders for the gist endpoints.

Every function is pure: identifiers in, path string out. Arguments are
assumed to be validated by the caller.
"""

from typing import Optional

SEGMENT_GISTS = "/gists"
SEGMENT_USERS = "/users"
SEGMENT_COMMENTS = "/comments"

# The v2 API addressed resources as ``/gists/1.json``; v3 takes bare paths.
SUFFIX_JSON = ""


def gist_path(gist_id: str, suffix: str = SUFFIX_JSON) -> str:
    return f"{SEGMENT_GISTS}/{gist_id}{suffix}"


def gists_path(login: Optional[str] = None, suffix: str = SUFFIX_JSON) -> str:
    """``/users/{login}/gists`` for a user, ``/gists`` when no login is given."""
    prefix = f"{SEGMENT_USERS}/{login}" if login is not None else ""
    return f"{prefix}{SEGMENT_GISTS}{suffix}"


def comments_path(gist_id: str, suffix: str = SUFFIX_JSON) -> str:
    return f"{SEGMENT_GISTS}/{gist_id}{SEGMENT_COMMENTS}{suffix}"
