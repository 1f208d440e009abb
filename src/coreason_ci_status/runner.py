from coreason_ci_status.exceptions import LocalEnvironmentError, RemoteError
from coreason_ci_status.resolver import ExitCode, OutcomeResolver
from coreason_ci_status.scm.git import AsyncGitInterface
from coreason_ci_status.scm.github import GitHubStatusClient
from coreason_ci_status.ui.console import StatusConsole
from coreason_ci_status.utils.logger import logger


class CIStatusRunner:
    """
    Reads the local commit, fetches its combined status and resolves the outcome, in that order.
    """

    def __init__(
        self,
        git: AsyncGitInterface,
        github: GitHubStatusClient,
        resolver: OutcomeResolver,
        console: StatusConsole,
    ) -> None:
        self.git = git
        self.github = github
        self.resolver = resolver
        self.console = console

    async def run(self) -> ExitCode:
        """
        Executes one check of the current commit.

        Returns:
            The exit code for the process. ExitCode.ERROR if the local checkout or the
            remote API could not be read; the resolver does not run in that case.
        """
        try:
            ref = await self.git.get_commit_ref()
            result = await self.github.get_combined_status(ref)
        except (LocalEnvironmentError, RemoteError) as e:
            logger.info(f"Aborting: {e}")
            self.console.warning(str(e))
            return ExitCode.ERROR

        return self.resolver.resolve(result)
