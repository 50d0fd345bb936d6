"""Configuration management for netpay.

Configuration is split into two files:

1. settings.json - Machine-specific preferences
   - default_period: monthly, biweekly or annual display
   - export_dir: where exported summaries are written
   - profile: path to profile.yaml (optional, if not colocated)

2. profile.yaml - Saved calculator inputs
   - name: label printed on exported summaries
   - defaults: salary, allowance, sector, work_schedule, overtime_hours,
     night_differential_hours

Config directory resolution:
1. NETPAY_CONFIG_PATH environment variable (if set)
2. ~/.config/netpay/ (XDG_CONFIG_HOME fallback)

Exported summaries default to XDG_DATA_HOME/netpay/ or ~/.local/share/netpay/.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from .schemas import Profile, TaxInputs

logger = logging.getLogger(__name__)

APP_NAME = "netpay"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"

DEFAULT_SETTINGS = {
    "default_period": "monthly",
}


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


class ProfileValidationError(Exception):
    """Raised when profile.yaml does not match the expected schema."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. NETPAY_CONFIG_PATH environment variable
    2. ~/.config/netpay/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("NETPAY_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings.json merged over the defaults."""
    settings_file = get_settings_path()
    settings = dict(DEFAULT_SETTINGS)

    if settings_file.exists():
        with open(settings_file, "r") as f:
            settings.update(json.load(f))

    return settings


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value (falls back to built-in defaults, then default)."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json."""
    settings_file = get_settings_path()
    settings = {}
    if settings_file.exists():
        with open(settings_file, "r") as f:
            settings = json.load(f)
    settings[key] = value
    return save_settings(settings)


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to profile.yaml.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = get_setting("profile")
    if custom_profile:
        profile_path = Path(custom_profile).expanduser()
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}\n\n"
                f"Update with: netpay settings set profile /path/to/profile.yaml"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found at {profile_path}\n\n"
            f"Create one with: netpay profile init"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load and validate profile.yaml.

    Args:
        require_exists: If True, raises ProfileNotFoundError if not found

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
        ProfileValidationError: If the file does not match the Profile schema
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        profile = yaml.safe_load(f) or {}

    try:
        Profile.model_validate(profile)
    except ValidationError as e:
        raise ProfileValidationError(f"Invalid profile {profile_path}:\n{e}") from e

    return profile


def save_profile(profile: dict, path: Optional[Path] = None) -> Path:
    """Validate and save profile.yaml.

    Returns:
        Path to the saved profile file
    """
    try:
        Profile.model_validate(profile)
    except ValidationError as e:
        raise ProfileValidationError(f"Refusing to save invalid profile:\n{e}") from e

    if path is None:
        path = get_profile_path(require_exists=False)

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)

    return path


def get_profile_value(key: str, default: Any = None) -> Any:
    """Get a profile value by dot-notation key (e.g., "defaults.salary")."""
    value = load_profile(require_exists=False)

    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return default

    return value


def set_profile_value(key: str, value: Any) -> Path:
    """Set a profile value by dot-notation key, creating parents as needed."""
    profile = load_profile(require_exists=False)

    parts = key.split(".")
    current = profile
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value

    return save_profile(profile)


def load_default_inputs(**overrides: Any) -> TaxInputs:
    """Build TaxInputs from profile defaults, with explicit overrides on top.

    Overrides that are None are ignored, so CLI options left unset fall
    through to the profile.
    """
    profile = load_profile(require_exists=False)
    defaults = {k: v for k, v in (profile.get("defaults") or {}).items() if v is not None}
    explicit = {k: v for k, v in overrides.items() if v is not None}
    logger.debug(f"inputs: profile defaults {defaults}, overrides {explicit}")
    return TaxInputs(**{**defaults, **explicit})


def get_export_path() -> Path:
    """Directory for exported summaries.

    Resolution order:
    1. settings.json "export_dir"
    2. XDG_DATA_HOME/netpay/ (or ~/.local/share/netpay/)
    """
    custom = get_setting("export_dir")
    if custom:
        return Path(custom).expanduser()

    xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
    return Path(xdg_data_home) / APP_NAME
