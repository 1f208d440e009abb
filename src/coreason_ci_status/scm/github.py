from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from coreason_ci_status.config import Settings
from coreason_ci_status.domain.status import CombinedResult, CommitRef
from coreason_ci_status.exceptions import RemoteError
from coreason_ci_status.ui.console import StatusConsole
from coreason_ci_status.utils.logger import logger


def build_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    Creates the HTTP client for the GitHub REST API from settings.

    Args:
        settings: Application settings (base URL, headers, token, timeout).
        transport: Optional transport override, used to substitute a fake endpoint.
    """
    headers: Dict[str, str] = {
        "Accept": "application/vnd.github+json",
        "User-Agent": settings.user_agent,
        "X-GitHub-Api-Version": settings.api_version,
    }
    if settings.GITHUB_TOKEN:
        headers["Authorization"] = f"Bearer {settings.GITHUB_TOKEN.get_secret_value()}"

    return httpx.AsyncClient(
        base_url=settings.api_url,
        headers=headers,
        timeout=settings.request_timeout,
        transport=transport,
    )


class GitHubStatusClient:
    """
    Fetches the combined CI status of a commit from the GitHub REST API.
    """

    def __init__(self, client: httpx.AsyncClient, console: Optional[StatusConsole] = None) -> None:
        self.client = client
        self.console = console or StatusConsole()

    async def get_combined_status(self, ref: CommitRef) -> CombinedResult:
        """
        Fetches the combined status for the commit in a single request.

        Args:
            ref: The commit and repository to check.

        Returns:
            The combined state and every individual check, in reporting order.

        Raises:
            RemoteError: If the request fails or the response is not a combined status.
        """
        self.console.info(f"Checking {ref.owner}/{ref.repo}:{ref.short_sha}\n")

        path = f"/repos/{ref.owner}/{ref.repo}/commits/{ref.sha}/status"
        logger.debug(f"GET {path}")
        try:
            response = await self.client.get(path)
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPStatusError as e:
            logger.debug(f"GitHub returned {e.response.status_code} for {path}")
            raise RemoteError(f"GitHub API request failed with status {e.response.status_code}: {path}") from e
        except httpx.HTTPError as e:
            logger.debug(f"GitHub request failed: {e}")
            raise RemoteError(f"GitHub API request failed: {e}") from e
        except ValueError as e:
            raise RemoteError(f"Failed to parse GitHub response: {e}") from e

        if not isinstance(payload, dict):
            raise RemoteError(f"Unexpected format from GitHub: expected object, got {type(payload).__name__}")

        try:
            result = CombinedResult.from_api(payload)
        except ValidationError as e:
            raise RemoteError(f"Malformed combined status from GitHub: {e}") from e

        logger.debug(f"Combined state '{result.state}' with {result.check_count} checks")
        return result
