import asyncio
from dataclasses import dataclass
from typing import List

from coreason_ci_status.utils.logger import logger


@dataclass
class CommandResult:
    """Result of a shell command execution."""

    exit_code: int
    stdout: str
    stderr: str


class ShellError(RuntimeError):
    """Raised when a shell command cannot be started or exits non-zero."""

    def __init__(self, message: str, result: CommandResult):
        super().__init__(message)
        self.result = result


class AsyncShellExecutor:
    """Runs read-only commands (such as git lookups) to completion and captures their output."""

    async def run(self, command: List[str]) -> CommandResult:
        """
        Runs `command` and waits for it to exit.

        Raises:
            ShellError: If the command cannot be started or exits non-zero.
        """
        logger.debug(f"Executing async: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ShellError(f"Failed to execute {command[0]}: {e}", CommandResult(-1, "", str(e))) from e

        stdout, stderr = await process.communicate()
        result = CommandResult(
            exit_code=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(),
            stderr=stderr.decode(),
        )
        if result.exit_code == 0:
            return result

        detail = result.stderr.strip() or result.stdout.strip()
        message = f"Command failed with exit code {result.exit_code}"
        raise ShellError(f"{message}: {detail}" if detail else message, result)
