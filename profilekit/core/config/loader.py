"""
Configuration loader — reads profile.yml into ProfileSettings.

Reads YAML, validates against the Pydantic schema, and returns a typed
settings object. No profile.yml anywhere is not an error: the defaults
apply.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from profilekit.core.models.settings import ProfileSettings

logger = logging.getLogger(__name__)

# Default config filename
PROFILE_CONFIG_FILE = "profile.yml"


class ConfigError(Exception):
    """Raised when profile configuration is invalid or unreadable."""


def find_profile_file(start_dir: Path | None = None) -> Path | None:
    """Search for profile.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to profile.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PROFILE_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None, search: bool = True) -> ProfileSettings:
    """Load and validate profile settings.

    Args:
        path: Explicit path to profile.yml. Must exist when given.
        search: When ``path`` is None, search upward from the cwd.

    Returns:
        Validated ProfileSettings (defaults when nothing is found).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_profile_file() if search else None
        if path is None:
            logger.debug("No %s found — using defaults", PROFILE_CONFIG_FILE)
            return ProfileSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading profile config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ProfileSettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "profile" key or be flat
    profile_data = dict(data["profile"]) if isinstance(data.get("profile"), dict) else data

    # Merge top-level keys that sit alongside "profile"
    for key in ("version", "cache", "hints", "fragments", "overrides", "warnings"):
        if key in data and key not in profile_data:
            profile_data[key] = data[key]

    try:
        settings = ProfileSettings.model_validate(profile_data)
    except Exception as e:
        raise ConfigError(f"Invalid profile configuration: {e}") from e

    logger.info(
        "Loaded profile '%s' (%d custom fragment(s), %d override(s))",
        settings.name, len(settings.fragments.custom), len(settings.overrides),
    )
    return settings


def profile_root(config_path: Path | None) -> Path:
    """Directory that owns the profile (and its .state/)."""
    return config_path.parent.resolve() if config_path else Path.cwd()
