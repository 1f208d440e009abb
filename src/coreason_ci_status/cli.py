# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ci_status

import asyncio
import sys
from typing import Optional

import typer

from coreason_ci_status.config import Settings, get_settings
from coreason_ci_status.resolver import ExitCode, OutcomeResolver
from coreason_ci_status.runner import CIStatusRunner
from coreason_ci_status.scm.git import AsyncGitInterface
from coreason_ci_status.scm.github import GitHubStatusClient, build_http_client
from coreason_ci_status.ui.console import StatusConsole
from coreason_ci_status.utils.logger import configure_logging, logger
from coreason_ci_status.utils.shell import AsyncShellExecutor

app = typer.Typer(
    name="coreason-ci-status",
    help="Coreason CI Status: exit with the CI state of the current commit.",
    add_completion=False,
)


async def _check(settings: Settings, console: StatusConsole) -> ExitCode:
    # Composition Root
    git = AsyncGitInterface(shell_executor=AsyncShellExecutor(), remote=settings.remote)
    resolver = OutcomeResolver(required_checks=settings.required_checks, console=console)

    async with build_http_client(settings) as http_client:
        github = GitHubStatusClient(http_client, console=console)
        runner = CIStatusRunner(git=git, github=github, resolver=resolver, console=console)
        return await runner.run()


@app.command()
def check(
    required_tests: Optional[int] = typer.Option(
        None, "--required-tests", "-r", min=0, help="Number of checks that must have reported for success."
    ),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Base URL of the GitHub REST API."),
    remote: Optional[str] = typer.Option(None, "--remote", help="Git remote identifying the repository."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log diagnostics to stderr."),
) -> None:
    """
    Checks the CI status of the current commit.

    Exit codes: 0 passed, 1 error getting status, 2 tests failed,
    3 tests pending, 4 the required number of tests weren't run.
    """
    try:
        configure_logging()
        overrides = {
            key: value
            for key, value in {"required_checks": required_tests, "api_url": api_url, "remote": remote}.items()
            if value is not None
        }
        # Command-line options take precedence over the environment
        settings = Settings(**overrides) if overrides else get_settings()

        configure_logging("DEBUG" if verbose else settings.log_level, settings.log_file)
        logger.debug(f"Required checks: {settings.required_checks}, API: {settings.api_url}")

        exit_code = asyncio.run(_check(settings, StatusConsole()))
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(ExitCode.ERROR)

    sys.exit(exit_code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
