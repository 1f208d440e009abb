from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CIState(str, Enum):
    """The states reported by the GitHub commit status API."""

    SUCCESS = "success"
    PENDING = "pending"
    ERROR = "error"
    FAILURE = "failure"

    @classmethod
    def parse(cls, value: str) -> Optional["CIState"]:
        """Returns the matching member, or None for a state this tool does not know."""
        try:
            return cls(value)
        except ValueError:
            return None


class CommitRef(BaseModel):
    """The commit being checked and the repository it belongs to."""

    model_config = ConfigDict(frozen=True)

    sha: str = Field(..., description="Full hash of the checked-out commit")
    owner: str = Field(..., description="Repository owner (user or organisation)")
    repo: str = Field(..., description="Repository name")

    @property
    def short_sha(self) -> str:
        return self.sha[:10]


class CheckStatus(BaseModel):
    """One reported CI check."""

    model_config = ConfigDict(frozen=True)

    state: str = Field(..., description="Raw state as reported, possibly unknown")
    description: str = Field("", description="Human-readable description of the check result")
    context: Optional[str] = Field(None, description="Name of the check (e.g. ci/circleci)")

    @field_validator("description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class CombinedResult(BaseModel):
    """The combined state of a commit plus every individual check, in reporting order."""

    model_config = ConfigDict(frozen=True)

    state: str = Field(..., description="Combined state as computed by the remote service")
    statuses: List[CheckStatus] = Field(default_factory=list)
    sha: Optional[str] = Field(None, description="Commit the result was reported for")

    @property
    def check_count(self) -> int:
        return len(self.statuses)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "CombinedResult":
        """
        Builds a CombinedResult from the JSON body of the combined status endpoint.

        Raises:
            pydantic.ValidationError: If the payload does not have the expected shape.
        """
        return cls.model_validate(
            {
                "state": payload.get("state"),
                "statuses": payload.get("statuses", []),
                "sha": payload.get("sha"),
            }
        )
