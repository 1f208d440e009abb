import io
from typing import Any, Callable, Dict, List, Optional

import pytest
from rich.console import Console

from coreason_ci_status.ui.console import StatusConsole


class CapturedConsole(StatusConsole):
    """StatusConsole writing to in-memory buffers."""

    def __init__(self) -> None:
        self.out_buffer = io.StringIO()
        self.err_buffer = io.StringIO()
        super().__init__(
            out=Console(file=self.out_buffer, color_system=None, highlight=False, width=200),
            err=Console(file=self.err_buffer, color_system=None, highlight=False, width=200),
        )

    @property
    def stdout(self) -> str:
        return self.out_buffer.getvalue()

    @property
    def stderr(self) -> str:
        return self.err_buffer.getvalue()


@pytest.fixture
def console() -> CapturedConsole:
    return CapturedConsole()


def _make_payload(state: str, check_states: List[str], sha: Optional[str] = None) -> Dict[str, Any]:
    """Builds a combined status body shaped like the GitHub API response."""
    return {
        "state": state,
        "sha": sha or "a" * 40,
        "total_count": len(check_states),
        "statuses": [
            {
                "state": check_state,
                "description": f"check {i} {check_state}",
                "context": f"ci/check-{i}",
                "target_url": f"https://ci.example.com/{i}",
            }
            for i, check_state in enumerate(check_states)
        ],
    }


PayloadFactory = Callable[..., Dict[str, Any]]


@pytest.fixture
def make_payload() -> PayloadFactory:
    return _make_payload
