"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

TOKEN_ENV_VAR = "GITHUB_TOKEN"


@dataclass
class GitHubConfig:
    """GitHub API settings."""
    api_base: str = "https://api.github.com"
    timeout: float = 30.0
    user_agent: str = "release-scribe"


@dataclass
class ReleaseConfig:
    """Release command defaults."""
    default_org: str = "dojo"
    draft: bool = True


@dataclass(frozen=True)
class ClientConfig:
    """Everything the API client needs, passed in explicitly."""
    token: str
    api_base: str = "https://api.github.com"
    timeout: float = 30.0
    user_agent: str = "release-scribe"


@dataclass
class Settings:
    """Application settings."""

    # From environment only
    github_token: Optional[str] = None

    # Config sections
    github: GitHubConfig = field(default_factory=GitHubConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    @property
    def default_org(self) -> str:
        return self.release.default_org

    def client_config(self) -> ClientConfig:
        """Build the API client configuration.

        Raises:
            ValueError: If no GitHub token is available.
        """
        if not self.github_token:
            raise ValueError(f'Cannot find "{TOKEN_ENV_VAR}" in environment.')
        return ClientConfig(
            token=self.github_token,
            api_base=self.github.api_base.rstrip("/"),
            timeout=self.github.timeout,
            user_agent=self.github.user_agent,
        )


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(github_token=os.getenv(TOKEN_ENV_VAR) or None)

    for key, value in (config.get("github") or {}).items():
        setattr(settings.github, key, value)

    for key, value in (config.get("release") or {}).items():
        setattr(settings.release, key, value)

    return settings
