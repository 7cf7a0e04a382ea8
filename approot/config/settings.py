"""Environment driven settings for the path registry and its middleware."""

import os
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from approot.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


class Settings(BaseModel):
    """Runtime configuration, usually read from the environment or a .env file."""
    root_path: str = Field(default_factory=os.getcwd)
    server_mode: str = "production"
    script_name: str = "/index.py"
    auto_discover: bool = True
    validate_paths: bool = False
    paths_file: Optional[str] = None
    log_level: str = "INFO"
    log_to_file: bool = False

    model_config = {
        "str_strip_whitespace": True,
        "extra": "ignore",
    }

    @field_validator("log_level")
    def log_level_must_be_known(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Load ``APP_*`` variables, after applying a .env file if one exists."""
        load_dotenv(env_file)
        values = {
            "server_mode": os.getenv("APP_SERVER_MODE"),
            "script_name": os.getenv("APP_SCRIPT_NAME"),
            "paths_file": os.getenv("APP_PATHS_FILE"),
            "log_level": os.getenv("APP_LOG_LEVEL"),
            "root_path": os.getenv("APP_ROOT"),
        }
        settings = cls(
            **{key: value for key, value in values.items() if value},
            auto_discover=_env_flag("APP_AUTO_DISCOVER", True),
            validate_paths=_env_flag("APP_VALIDATE_PATHS", False),
            log_to_file=_env_flag("APP_LOG_TO_FILE", False),
        )
        return settings

    def load_overrides(self) -> Dict[str, str]:
        """
        Read path overrides from ``paths_file``.

        The YAML document must hold a ``paths`` mapping of category to path.
        Relative paths are taken relative to ``root_path``.
        """
        if not self.paths_file:
            return {}

        with open(self.paths_file, "r") as f:
            data = yaml.safe_load(f) or {}

        section = data.get("paths") if isinstance(data, dict) else None
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(f"'paths' in {self.paths_file} must be a mapping")

        overrides: Dict[str, str] = {}
        for category, path in section.items():
            if path is None:
                raise ValueError(
                    f"No path given for '{category}' in {self.paths_file}"
                )
            path = str(path)
            if not os.path.isabs(path):
                path = os.path.join(self.root_path, path)
            overrides[str(category)] = path

        logger.info("Loaded %d path override(s) from %s", len(overrides), self.paths_file)
        return overrides
