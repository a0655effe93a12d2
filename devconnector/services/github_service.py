import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from .exceptions import GithubProfileNotFoundError, UpstreamError

logger = logging.getLogger(__name__)


class GithubService:
    """Relays a user's most recent public repositories from the GitHub API."""

    REPO_LIMIT = 5

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = "https://api.github.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict:
        headers = {
            "User-Agent": "devconnector",
            "Accept": "application/vnd.github+json",
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def list_repositories(self, username: str) -> List[Any]:
        """
        Fetch up to five repositories for ``username``, oldest created first.

        Raises:
            GithubProfileNotFoundError: If GitHub answers with anything but 200
            UpstreamError: If GitHub cannot be reached
        """
        url = f"{self.base_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": self.REPO_LIMIT, "sort": "created", "direction": "asc"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(f"GitHub request for {username!r} failed: {e}")
            raise UpstreamError(f"GitHub request failed: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"GitHub returned {response.status_code} for user {username!r}"
            )
            raise GithubProfileNotFoundError(username, response.status_code)

        return response.json()
