from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from coreason_ci_status.utils.shell import AsyncShellExecutor, CommandResult, ShellError


def _process(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> MagicMock:
    process = MagicMock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.returncode = returncode
    return process


@pytest.mark.asyncio
async def test_run_success() -> None:
    executor = AsyncShellExecutor()
    with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock, return_value=_process(b"abc\n")) as mock_exec:
        result = await executor.run(["git", "rev-parse", "HEAD"])

    assert result == CommandResult(exit_code=0, stdout="abc\n", stderr="")
    assert mock_exec.await_args is not None
    assert mock_exec.await_args.args == ("git", "rev-parse", "HEAD")


@pytest.mark.asyncio
async def test_run_non_zero_uses_stderr() -> None:
    executor = AsyncShellExecutor()
    process = _process(b"", b"fatal: not a git repository\n", 128)
    with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock, return_value=process):
        with pytest.raises(ShellError, match="exit code 128: fatal: not a git repository") as excinfo:
            await executor.run(["git", "rev-parse", "HEAD"])

    assert excinfo.value.result.exit_code == 128
    assert excinfo.value.result.stderr == "fatal: not a git repository\n"


@pytest.mark.asyncio
async def test_run_non_zero_falls_back_to_stdout() -> None:
    executor = AsyncShellExecutor()
    with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock, return_value=_process(b"oops", b"", 1)):
        with pytest.raises(ShellError, match="exit code 1: oops"):
            await executor.run(["false"])


@pytest.mark.asyncio
async def test_run_non_zero_no_output() -> None:
    """`git config --get` exits 1 silently when the key is missing."""
    executor = AsyncShellExecutor()
    with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock, return_value=_process(b"", b"", 1)):
        with pytest.raises(ShellError, match="^Command failed with exit code 1$"):
            await executor.run(["git", "config", "--get", "remote.origin.url"])


@pytest.mark.asyncio
async def test_run_start_failure() -> None:
    executor = AsyncShellExecutor()
    with patch("asyncio.create_subprocess_exec", new_callable=AsyncMock, side_effect=FileNotFoundError("no git")):
        with pytest.raises(ShellError, match="Failed to execute git: no git") as excinfo:
            await executor.run(["git", "rev-parse", "HEAD"])

    assert excinfo.value.result.exit_code == -1
