"""Configuration management for the link budget CGI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_logs: bool = Field(default=True, description="Emit JSON logs")
    # Request log file; if None, logs go to stderr (stdout carries the response).
    log_file: str | None = Field(default="link_budget.log", description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, description="Number of rotated log files to keep")


class SessionConfig(BaseModel):
    """File-backed session settings."""

    # One JSON record per session identifier lives here.
    directory: str = Field(default="/tmp/sessions", description="Session storage root")
    # Records older than this are cleared on load.
    expiry_seconds: float = Field(default=3600.0, gt=0, description="Session expiry (seconds)")
    cookie_name: str = Field(default="session_id", description="Cookie carrying the session identifier")
    secure_cookie: bool = Field(default=True, description="Mark the session cookie Secure")
    http_only_cookie: bool = Field(default=True, description="Mark the session cookie HttpOnly")


class LinkBudgetSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use LINK_BUDGET_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="LINK_BUDGET_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "LinkBudgetSettings":
        data = tomllib.loads(Path(path).read_text())
        return cls.model_validate(data)
