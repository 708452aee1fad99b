"""Configuration settings for the sync tool."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, field_validator

from ..exceptions import ConfigurationError
from ..github.client import DEFAULT_TIMEOUT, GITHUB_API_URL, MAX_PER_PAGE
from ..models import Scope

# Environment variable -> description, in the order they are reported
REQUIRED_ENV_VARS = {
    'GITHUB_TOKEN': 'GitHub Personal Access Token',
    'GITHUB_OWNER': 'Owner/organization name',
    'GITHUB_REPO': 'Repository name',
}
OPTIONAL_ENV_VARS = {
    'GITHUB_ENVIRONMENT': '(Optional) Environment name (e.g., production, staging)',
}

# Options that may come from a settings file; credentials never do
FILE_OPTIONS = ('csv_file', 'backup_dir', 'api_url', 'timeout', 'per_page', 'log_level', 'log_file')


class SyncSettings(BaseModel):
    """Settings for a single sync run."""
    token: str
    owner: str
    repo: str
    environment: Optional[str] = None

    csv_file: Path = Path("variables.csv")
    backup_dir: Path = Path("backups")

    api_url: str = GITHUB_API_URL
    timeout: float = DEFAULT_TIMEOUT
    per_page: int = MAX_PER_PAGE

    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @field_validator('environment')
    @classmethod
    def empty_environment_is_repository_scope(cls, v):
        return v or None

    @field_validator('per_page')
    @classmethod
    def validate_per_page(cls, v):
        if not 1 <= v <= MAX_PER_PAGE:
            raise ValueError(f'per_page must be between 1 and {MAX_PER_PAGE}')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        if v.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Unknown log level: {v}')
        return v.upper()

    @field_validator('api_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip('/')

    @property
    def scope(self) -> Scope:
        """The owner/repo/environment this run reads and writes."""
        return Scope(owner=self.owner, repo=self.repo, environment=self.environment)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "SyncSettings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            **overrides: Non-credential options, e.g. from the command line

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If a required variable is missing
        """
        environ = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_ENV_VARS if not environ.get(name)]
        if missing:
            raise ConfigurationError(missing_variables_message(missing))

        options = {key: value for key, value in overrides.items() if value is not None}
        try:
            return cls(
                token=environ['GITHUB_TOKEN'],
                owner=environ['GITHUB_OWNER'],
                repo=environ['GITHUB_REPO'],
                environment=environ.get('GITHUB_ENVIRONMENT'),
                **options
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_yaml(config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load non-credential options from a YAML file.

        Args:
            config_path: Path to the settings file

        Returns:
            Options mapping, suitable as ``from_env`` overrides

        Raises:
            ConfigurationError: If the file is missing, malformed or names unknown options
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")

        unknown = sorted(set(data) - set(FILE_OPTIONS))
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s) in {config_path}: {', '.join(unknown)}"
            )
        return data


def missing_variables_message(missing) -> str:
    """Describe the missing environment variables and what each one is for."""
    lines = [
        "Missing required information: " + ", ".join(missing),
        "Please set the following environment variables:",
    ]
    for name, description in {**REQUIRED_ENV_VARS, **OPTIONAL_ENV_VARS}.items():
        lines.append(f"  {name:<19} - {description}")
    return "\n".join(lines)
