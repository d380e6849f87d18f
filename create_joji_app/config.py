"""Configuration management for create-joji-app."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_PACKAGE_MANAGERS = ("npm", "pnpm", "yarn", "bun")


class Settings(BaseSettings):
    """Tool settings, read from JOJI_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="JOJI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Prompt defaults
    default_location: Path = Field(default_factory=Path.cwd)
    default_project_name: str = "my-react-app"

    # Dependency install
    package_manager: str = "npm"
    install_timeout: int = 600  # npm install can take a while on a cold cache

    # === Git Settings ===
    git_init: bool = True
    git_commit_message: str = "Initial commit from create-joji-app"
    git_timeout: int = 60

    # Logging
    debug: bool = False
    json_logs: bool = False

    @field_validator("package_manager")
    @classmethod
    def validate_package_manager(cls, v: str) -> str:
        """Only package managers that understand `<pm> install` and `<pm> run dev`."""
        v = v.strip().lower()
        if v not in SUPPORTED_PACKAGE_MANAGERS:
            raise ValueError(
                f"Package manager must be one of: {', '.join(SUPPORTED_PACKAGE_MANAGERS)}"
            )
        return v

    @field_validator("install_timeout", "git_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Timeout must be a positive number of seconds")
        return v

    @field_validator("git_commit_message")
    @classmethod
    def validate_commit_message(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Git commit message must not be empty")
        return v


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use.

    Raises:
        pydantic.ValidationError: when a JOJI_* value is invalid
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def get_config_dict() -> dict[str, Any]:
    """Get config as a plain dict (for --debug output and run records)."""
    settings = get_settings()
    return {
        "default_location": str(settings.default_location),
        "default_project_name": settings.default_project_name,
        "package_manager": settings.package_manager,
        "git_init": settings.git_init,
        "install_timeout": settings.install_timeout,
        "git_timeout": settings.git_timeout,
        "debug": settings.debug,
    }
