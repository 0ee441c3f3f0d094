"""Service for fetching, creating and commenting on gists."""

import logging
from typing import List

from . import paths
from .errors import require
from .types import Comment, Gist, ListOf, Transport

logger = logging.getLogger(__name__)

FIELD_BODY = "body"


class GistService:
    """Gist endpoints on top of a :class:`~gist_client.types.Transport`.

    Each method checks its arguments first and raises
    :class:`~gist_client.errors.PreconditionError` without touching the
    transport. Transport failures propagate as raised.
    """

    def __init__(self, client: Transport) -> None:
        self.client = require(client, "Client cannot be None")

    def get_gist(self, id: str) -> Gist:
        require(id, "Gist id cannot be None")
        logger.debug("Fetching gist %s", id)
        return self.client.get(paths.gist_path(id), Gist)

    def get_gists(self, user: str) -> List[Gist]:
        """Get gists for the given user login, in the order the API lists them."""
        require(user, "User cannot be None")
        logger.debug("Listing gists for %s", user)
        return self.client.get(paths.gists_path(user), ListOf(Gist))

    def create_gist(self, gist: Gist) -> Gist:
        """Create a gist, under its owner when ``gist.user`` is set."""
        require(gist, "Gist cannot be None")
        login = None
        if gist.user is not None:
            login = require(gist.user.login, "User login name cannot be None")
        logger.debug("Creating gist for %s", login or "anonymous")
        return self.client.post(paths.gists_path(login), gist.to_json(), Gist)

    def update_gist(self, gist: Gist) -> Gist:
        require(gist, "Gist cannot be None")
        repo = require(gist.repo, "Repository cannot be None")
        logger.debug("Updating gist %s", repo)
        return self.client.put(paths.gist_path(repo), gist.to_json(), Gist)

    def create_comment(self, gist_id: str, comment: str) -> Comment:
        require(gist_id, "Gist id cannot be None")
        require(comment, "Gist comment cannot be None")
        logger.debug("Commenting on gist %s", gist_id)
        return self.client.post(paths.comments_path(gist_id), {FIELD_BODY: comment}, Comment)

    def get_comments(self, gist_id: str) -> List[Comment]:
        require(gist_id, "Gist id cannot be None")
        logger.debug("Listing comments on gist %s", gist_id)
        return self.client.get(paths.comments_path(gist_id), ListOf(Comment))
