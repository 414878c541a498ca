"""
Layered settings for signing and variant assembly.

Values are merged in this order, later layers winning:

1. defaults.yaml shipped with the package
2. signing.yaml in the project root (optional)
3. SIGNING_POLICY / KEY_PROPERTIES_FILE environment variables
4. Explicit overrides passed by the caller (task flags)
"""

import os
import logging
from pathlib import Path
from typing import Optional, Dict, Any

import yaml
from pydantic import ValidationError

from .exceptions import InvalidSettingsException
from .models import AppSettings, SigningPolicy

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "signing.yaml"
SETTINGS_SECTION = "signing"

ENV_POLICY = "SIGNING_POLICY"
ENV_KEY_PROPERTIES = "KEY_PROPERTIES_FILE"

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


def _load_package_defaults() -> Dict[str, Any]:
    """Load the defaults shipped with the package."""
    if not _DEFAULTS_PATH.exists():
        raise RuntimeError(f"Required defaults file not found: {_DEFAULTS_PATH}")

    try:
        with open(_DEFAULTS_PATH, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RuntimeError(f"Failed to load required defaults from {_DEFAULTS_PATH}: {e}") from e

    if not config or SETTINGS_SECTION not in config:
        raise RuntimeError(f"Invalid defaults file: missing '{SETTINGS_SECTION}' key in {_DEFAULTS_PATH}")
    return dict(config[SETTINGS_SECTION])


def _load_project_settings(settings_path: Path) -> Dict[str, Any]:
    """Load project overrides from signing.yaml, if it exists."""
    if not settings_path.exists():
        logger.debug(f"Project settings not found: {settings_path} (using package defaults only)")
        return {}

    try:
        with open(settings_path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidSettingsException(f"Not valid YAML: {e}", settings_file=str(settings_path)) from e

    if config is None:
        logger.debug(f"Project settings file is empty: {settings_path}")
        return {}
    if not isinstance(config, dict) or not isinstance(config.get(SETTINGS_SECTION) or {}, dict):
        raise InvalidSettingsException(
            f"Expected a '{SETTINGS_SECTION}:' mapping", settings_file=str(settings_path))

    unexpected = set(config) - {SETTINGS_SECTION}
    if unexpected:
        raise InvalidSettingsException(
            f"Unknown top-level keys: {sorted(unexpected)}", settings_file=str(settings_path))

    logger.info(f"Loaded project settings from {settings_path}")
    return dict(config.get(SETTINGS_SECTION) or {})


def _environment_overrides() -> Dict[str, Any]:
    overrides = {}
    if os.environ.get(ENV_POLICY):
        overrides['policy'] = os.environ[ENV_POLICY]
        logger.debug(f"{ENV_POLICY} overrides policy: {overrides['policy']}")
    if os.environ.get(ENV_KEY_PROPERTIES):
        overrides['key_properties'] = os.environ[ENV_KEY_PROPERTIES]
        logger.debug(f"{ENV_KEY_PROPERTIES} overrides key_properties: {overrides['key_properties']}")
    return overrides


def load_settings(project_root: str = ".", settings_file: Optional[str] = None,
                  policy: Optional[str] = None,
                  key_properties: Optional[str] = None) -> AppSettings:
    """
    Load merged settings for a project.

    Args:
        project_root: Project directory holding signing.yaml and key.properties
        settings_file: Settings file to use instead of <project_root>/signing.yaml
        policy: Explicit policy override ('lenient' or 'strict')
        key_properties: Explicit key.properties path override

    Returns:
        AppSettings with all layers applied

    Raises:
        InvalidSettingsException: If signing.yaml is malformed or has unknown keys
        UnknownSigningPolicyException: If the effective policy is not recognised
    """
    root = Path(project_root)
    settings_path = Path(settings_file) if settings_file else root / SETTINGS_FILENAME

    merged = _load_package_defaults()
    merged.update(_load_project_settings(settings_path))
    merged.update(_environment_overrides())
    if policy:
        merged['policy'] = policy
    if key_properties:
        merged['key_properties'] = key_properties

    merged['policy'] = SigningPolicy.parse(merged.get('policy', SigningPolicy.LENIENT))

    try:
        settings = AppSettings(**merged)
    except ValidationError as e:
        raise InvalidSettingsException(str(e), settings_file=str(settings_path)) from e

    logger.debug(f"Effective settings: policy={settings.policy.value}, "
                 f"key_properties={settings.key_properties}")
    return settings


def key_properties_path(settings: AppSettings, project_root: str = ".") -> Path:
    """Where key.properties lives for these settings."""
    path = Path(settings.key_properties)
    if path.is_absolute():
        return path
    return Path(project_root) / path



def store_file_base(settings: AppSettings, project_root: str = ".") -> Path:
    """Directory a relative storeFile in key.properties is resolved against.

    Gradle resolves ``file()`` in the app module's build script, so this is the
    app module directory rather than the project root.
    """
    return Path(project_root) / settings.app_module
