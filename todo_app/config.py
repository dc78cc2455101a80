"""
TO-DO APP - Runtime Configuration
=================================
Colour and log level, from the environment and then CLI flags.
No config files.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "TODO_APP_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"


class AppConfig(BaseModel):
    """Settings for one interactive session"""
    color: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from environment variables"""
        environ = os.environ if environ is None else environ

        data = {"color": not environ.get(NO_COLOR_ENV)}
        if environ.get(LOG_LEVEL_ENV):
            data["log_level"] = environ[LOG_LEVEL_ENV]
        return cls(**data)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
