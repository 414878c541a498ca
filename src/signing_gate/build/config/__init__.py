"""
Signing configuration for build tasks.
"""

from .exceptions import ConfigException
from .models import (
    AppSettings,
    BuildConfiguration,
    BuildVariant,
    KeystoreCredentials,
    LoadParams,
    SigningIdentity,
    SigningPolicy,
    SigningResolution,
)
from .resolver import SigningConfigResolver, resolve_signing
from .settings import load_settings
from .loading import load_build_config


__all__ = [
    'ConfigException',
    'AppSettings',
    'BuildConfiguration',
    'BuildVariant',
    'KeystoreCredentials',
    'LoadParams',
    'SigningIdentity',
    'SigningPolicy',
    'SigningResolution',
    'SigningConfigResolver',
    'resolve_signing',
    'load_settings',
    'load_build_config',
]
