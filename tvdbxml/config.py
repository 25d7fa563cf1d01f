"""
Configuration management
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class Config:
    """Client configuration"""

    api_key: str
    base_url: str = "http://thetvdb.com"
    timeout: float = 10.0  # Seconds per HTTP request
    max_results: int = 5
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a YAML file"""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env_and_file(
        cls,
        config_path: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> "Config":
        """
        Load configuration from file and/or environment variables

        Args:
            config_path: YAML configuration file
            overrides: Values that take priority over file and environment,
                       e.g. command line options. None values are ignored.
        """
        config_data: dict[str, Any] = {}

        if config_path and config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        # Environment variables take priority
        if os.getenv("TVDB_API_KEY"):
            config_data["api_key"] = os.getenv("TVDB_API_KEY")
        if os.getenv("TVDB_BASE_URL"):
            config_data["base_url"] = os.getenv("TVDB_BASE_URL")
        timeout_env = os.getenv("TVDB_TIMEOUT")
        if timeout_env:
            try:
                config_data["timeout"] = float(timeout_env)
            except ValueError as e:
                raise ValueError(f"Invalid TVDB_TIMEOUT: {timeout_env}") from e

        for key, value in (overrides or {}).items():
            if value is not None:
                config_data[key] = value

        if not config_data.get("api_key"):
            raise ValueError(
                "Incomplete configuration. A TheTVDB API key is required. "
                "Use a config file or the TVDB_API_KEY environment variable."
            )

        return cls(**config_data)

    def to_file(self, config_path: Path):
        """Save configuration to a YAML file"""
        data = {
            "api_key": self.api_key,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "max_results": self.max_results,
            "log_level": self.log_level,
        }

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
