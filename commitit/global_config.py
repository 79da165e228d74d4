"""Global configuration management for commitit.

Handles user-level configuration stored in ~/.commitit/config.yaml:
message source, delegate endpoint, timeouts, editor and log level.
"""

from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from commitit.exceptions import ConfigurationError


class GlobalConfigError(ConfigurationError):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".commitit"


def get_global_config_dir() -> Path:
    """Get the global commitit configuration directory.

    Returns:
        Path to ~/.commitit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.commitit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commitit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _set_value(key: str, value: Any) -> None:
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def get_message_source() -> Optional[str]:
    """Get the configured message source ("local" or "delegate")."""
    return load_global_config().get("message_source")


def set_message_source(source: str) -> None:
    """Set the message source in global config."""
    _set_value("message_source", source)


def get_delegate_url() -> Optional[str]:
    """Get the delegate endpoint URL, or None if not set."""
    return load_global_config().get("delegate_url")


def set_delegate_url(url: str) -> None:
    """Set the delegate endpoint URL in global config."""
    _set_value("delegate_url", url)


def get_editor_preference() -> Optional[str]:
    """Get the user's preferred editor from global config.

    Returns:
        Editor command string, or None if not set.
    """
    return load_global_config().get("editor")


def set_editor_preference(editor: str) -> None:
    """Set the user's preferred editor in global config.

    Args:
        editor: Editor command (e.g., "nano", "vim", "code --wait")
    """
    _set_value("editor", editor)


def is_configured() -> bool:
    """Check if commitit has a global config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
