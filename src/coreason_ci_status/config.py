# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ci_status

"""
Configuration management for Coreason CI Status.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="CI_STATUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Policy
    required_checks: int = Field(
        default=1, ge=0, description="Minimum number of reported checks for a successful combined status to pass."
    )

    # Remote status API
    api_url: str = Field(default="https://api.github.com", description="Base URL of the GitHub REST API.")
    api_version: str = Field(default="2022-11-28", description="Value of the X-GitHub-Api-Version header.")
    user_agent: str = Field(default="github-ci-status", description="User-Agent sent with every request.")
    request_timeout: Optional[float] = Field(
        default=None, gt=0, description="HTTP timeout in seconds. None waits for the response."
    )

    # Local checkout
    remote: str = Field(default="origin", description="Name of the git remote identifying the repository.")

    log_level: str = Field(default="WARNING", description="Level of the stderr log sink.")
    log_file: Optional[Path] = Field(default=None, description="Optional file receiving DEBUG logs.")

    # Optional Secrets
    GITHUB_TOKEN: Optional[SecretStr] = Field(default=None, validation_alias="GITHUB_TOKEN")

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """
        Normalise the API base URL so paths can be appended with a single slash.
        """
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("api_url must not be empty.")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Returns a cached instance of the Settings class.
    """
    return Settings()
