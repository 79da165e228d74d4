"""Runtime configuration for commitit.

Settings are resolved from, in increasing priority:
built-in defaults, ~/.commitit/config.yaml, environment variables
(a .env file in the working directory is loaded first).
"""

import os
from enum import Enum
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from commitit.exceptions import ConfigurationError


class MessageSource(Enum):
    """Where commit messages come from."""

    LOCAL = "local"
    DELEGATE = "delegate"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_MESSAGE_SOURCE = MessageSource.LOCAL
DEFAULT_DELEGATE_TIMEOUT = 30.0
DEFAULT_GIT_TIMEOUT = 60.0
DEFAULT_LOG_LEVEL = "WARNING"

# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

ENV_MESSAGE_SOURCE = "COMMITIT_MESSAGE_SOURCE"
ENV_DELEGATE_URL = "COMMITIT_DELEGATE_URL"
ENV_DELEGATE_TIMEOUT = "COMMITIT_DELEGATE_TIMEOUT"
ENV_DELEGATE_TOKEN = "COMMITIT_DELEGATE_TOKEN"


class Settings(BaseModel):
    """Resolved configuration for one invocation."""

    model_config = ConfigDict(frozen=True)

    message_source: MessageSource = DEFAULT_MESSAGE_SOURCE
    delegate_url: Optional[str] = None
    delegate_timeout: float = Field(default=DEFAULT_DELEGATE_TIMEOUT, gt=0)
    delegate_token: Optional[str] = None
    git_timeout: float = Field(default=DEFAULT_GIT_TIMEOUT, gt=0)
    editor: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _env_overrides() -> dict[str, Any]:
    env_keys = {
        "message_source": ENV_MESSAGE_SOURCE,
        "delegate_url": ENV_DELEGATE_URL,
        "delegate_timeout": ENV_DELEGATE_TIMEOUT,
        "delegate_token": ENV_DELEGATE_TOKEN,
    }
    overrides = {}
    for field, env_var in env_keys.items():
        value = os.getenv(env_var)
        if value:
            overrides[field] = value
    return overrides


def load_config(**overrides: Any) -> Settings:
    """Load settings from the global config file and environment.

    Args:
        **overrides: Explicit values (e.g. from CLI options) that win over
            every other source. None values are ignored.

    Returns:
        The resolved Settings.

    Raises:
        ConfigurationError: If the config file is unreadable or a value is invalid.
    """
    # Import here so tests can redirect the config directory
    from commitit import global_config

    load_dotenv(find_dotenv(usecwd=True))

    values: dict[str, Any] = {}
    file_config = global_config.load_global_config()
    for field in Settings.model_fields:
        if file_config.get(field) is not None:
            values[field] = file_config[field]
    values.update(_env_overrides())
    values.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(values.get("message_source"), str):
        values["message_source"] = values["message_source"].strip().lower()

    try:
        return Settings(**values)
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        raise ConfigurationError(f"Invalid configuration: {errors}")
