"""Global configuration management for tt.

Handles user-level configuration stored in ~/.tt/config.yaml:
- api_key: Key for the OpenAI-compatible endpoint
- base_url: Endpoint base URL
- default_model: Model used when --model is not given
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from tt.config import API_KEY_ENV_VAR, Settings
from tt.errors import ErrorKind, TTError


class GlobalConfigError(TTError):
    """Raised when there's an error with global configuration."""

    kind = ErrorKind.PRECONDITION


_CONFIG_DIR = Path.home() / ".tt"


def get_global_config_dir() -> Path:
    """Get the global tt configuration directory.

    Returns:
        Path to ~/.tt/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.tt/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.tt/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.tt/config.yaml.

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
    """Save global configuration to ~/.tt/config.yaml.

    The file holds the API key, so it is written owner read/write only.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
        os.chmod(config_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def load_settings() -> Settings:
    """Load the effective settings.

    Values come from ~/.tt/config.yaml. A missing api_key is filled from
    the TT_API_KEY environment variable (a .env file is honoured).

    Returns:
        The validated Settings.

    Raises:
        GlobalConfigError: If the file is unreadable or holds invalid values.
    """
    load_dotenv()
    config = load_global_config()

    try:
        settings = Settings(**config)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration in {get_config_file_path()}:\n{e}")

    if not settings.api_key:
        env_key = os.getenv(API_KEY_ENV_VAR, "").strip()
        if env_key:
            settings = settings.model_copy(update={"api_key": env_key})

    return settings


def set_setting(key: str, value: str) -> None:
    """Store a single setting, validating it against the Settings schema.

    Args:
        key: Setting name (api_key, base_url, default_model).
        value: New value.

    Raises:
        GlobalConfigError: If the key is unknown or the value is invalid.
    """
    if key not in Settings.model_fields:
        raise GlobalConfigError(f"Unknown setting: {key}")

    config = load_global_config()
    config[key] = value

    try:
        Settings(**config)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid value for {key}: {e}")

    save_global_config(config)


def is_configured() -> bool:
    """Check if tt has a config file.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
