import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "gist-client"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for :class:`gist_client.GitHubClient`."""

    token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config from ``GITHUB_TOKEN``, ``GITHUB_API_URL`` and ``GITHUB_TIMEOUT``."""

        env = os.environ if environ is None else environ
        raw_timeout = env.get("GITHUB_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"GITHUB_TIMEOUT must be a number, got {raw_timeout!r}") from None
        return cls(
            token=env.get("GITHUB_TOKEN") or None,
            base_url=env.get("GITHUB_API_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )
