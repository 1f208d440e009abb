from typing import NoReturn, Optional, Tuple

from coreason_ci_status.domain.status import CommitRef
from coreason_ci_status.exceptions import LocalEnvironmentError
from coreason_ci_status.utils.logger import logger
from coreason_ci_status.utils.shell import AsyncShellExecutor, ShellError


def _handle_shell_error(e: ShellError, context: str) -> NoReturn:
    """Helper to map ShellError to LocalEnvironmentError."""
    detail = e.result.stderr.strip() or str(e)
    raise LocalEnvironmentError(f"{context}: {detail}") from e


def _strip_git_suffix(segment: str) -> str:
    return segment[: -len(".git")] if segment.endswith(".git") else segment


def parse_owner_repo(url: str) -> Tuple[str, str]:
    """
    Extracts (owner, repo) from a remote URL.

    Remote URLs come in many shapes, so the last two path segments are taken as
    owner and repo. Handles both https://host/owner/repo.git and
    git@host:owner/repo.git. The host is not validated.

    Raises:
        LocalEnvironmentError: If the URL does not have two path segments.
    """
    parts = url.strip().rstrip("/").split("/")
    if len(parts) < 2:
        # git@host:repo.git style, with no owner segment to split on
        raise LocalEnvironmentError(f"Cannot determine owner/repo from remote URL: {url!r}")

    owner = _strip_git_suffix(parts[-2])
    repo = _strip_git_suffix(parts[-1])
    if ":" in owner:
        # SSH-style git@github.com:owner
        owner = owner.rsplit(":", 1)[1]

    if not owner or not repo:
        raise LocalEnvironmentError(f"Cannot determine owner/repo from remote URL: {url!r}")
    return owner, repo


class AsyncGitInterface:
    """
    Async interface for reading the commit and repository of the local checkout.
    """

    def __init__(self, shell_executor: Optional[AsyncShellExecutor] = None, remote: str = "origin") -> None:
        self.shell = shell_executor or AsyncShellExecutor()
        self.remote = remote

    async def get_head_sha(self) -> str:
        """
        Returns the full hash of the checked-out commit.

        Raises:
            LocalEnvironmentError: If this is not a git checkout or it has no commits.
        """
        try:
            result = await self.shell.run(["git", "rev-parse", "HEAD"])
        except ShellError as e:
            logger.debug(f"Failed to read HEAD: {e}")
            _handle_shell_error(e, "Failed to read the current commit")

        sha = result.stdout.strip()
        if not sha:
            raise LocalEnvironmentError("Failed to read the current commit: git returned no hash")
        return sha

    async def get_remote_url(self) -> str:
        """
        Returns the URL configured for the remote.

        Raises:
            LocalEnvironmentError: If the remote is not configured.
        """
        key = f"remote.{self.remote}.url"
        try:
            result = await self.shell.run(["git", "config", "--get", key])
        except ShellError as e:
            logger.debug(f"Failed to read {key}: {e}")
            _handle_shell_error(e, f"No URL configured for remote '{self.remote}'")

        url = result.stdout.strip()
        if not url:
            raise LocalEnvironmentError(f"No URL configured for remote '{self.remote}'")
        return url

    async def get_commit_ref(self) -> CommitRef:
        """
        Reads the current commit and the owner/repo pair of the remote.
        """
        sha = await self.get_head_sha()
        url = await self.get_remote_url()
        owner, repo = parse_owner_repo(url)
        logger.debug(f"Resolved {owner}/{repo} at {sha} from {url}")
        return CommitRef(sha=sha, owner=owner, repo=repo)
