# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("SyncListSettings", "settings")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SyncListSettings(BaseSettings, frozen=True):
    """Package settings with environment variable support.

    Event backends are deliberately not part of the settings: every list
    receives its backend explicitly (see ``ObservableList.configure``).
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNCLIST_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = "WARNING"
    LOG_EVENTS: bool = False
    SORTED_SEARCH: Literal["binary", "linear"] = "binary"

    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL", mode="before")
    def _validate_log_level(cls, value: Any) -> str:
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return level


settings = SyncListSettings()
SyncListSettings._instance = settings
