# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.13
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Literal, Final

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from namenorm.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "namenorm.yml"

RenamerStrategy = Literal["direct", "script"]
SortField = Literal["mtime", "name", "size", "form"]


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so that environment overrides set by tests apply.
    """
    return (
        Path("/etc/namenorm") / USER_CFG,  # System defaults
        Path.home() / ".config" / "namenorm" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "namenorm" / USER_CFG,  # XDG override
        Path(os.getenv("NAMENORM_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Later candidates override earlier ones. Files that cannot be read or
    parsed are logged and skipped.
    """
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        if candidate == Path("") / USER_CFG:  # Skip empty env vars
            continue
        if not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"expected a mapping, got {type(data).__name__}")
            merged_data.update(data)
            found_configs.append(str(candidate))
            logger.debug(f"Loaded config from {candidate}")
        except (OSError, yaml.YAMLError, ConfigError) as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    else:
        logger.debug(f"No {USER_CFG} found, using defaults")
    return merged_data


class UserConfig(BaseModel):
    """Settings for scanning, renaming, and logging."""
    local_log: Optional[Path] = None
    renamer: RenamerStrategy = "direct"
    shell: str = "/bin/bash"
    script_name: str = Field(default="rename_to_nfc.sh", min_length=1)
    default_sort: SortField = "mtime"

    @field_validator("script_name")
    @classmethod
    def script_name_is_plain(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"script_name must be a plain filename, got {value!r}")
        return value

    @field_validator("local_log", mode="before")
    @classmethod
    def expand_user(cls, value):
        if isinstance(value, str) and value:
            return Path(value).expanduser()
        return value or None

    @classmethod
    def load(cls, candidates: Optional[tuple[Path, ...]] = None) -> UserConfig:
        """Load and validate the merged user configuration.

        Raises:
            ConfigError: If the merged values fail validation
        """
        if candidates is None:
            candidates = _get_user_config_search_paths()
        data = _load_merged_config_data(candidates)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid namenorm configuration: {e}") from e


def load_user_config() -> UserConfig:
    return UserConfig.load()
