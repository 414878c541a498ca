"""
Build configuration validators package.

Validators are called by load_build_config after variant assembly.
"""

from .base import BaseValidator
from .keystore import StoreFileValidator

DEFAULT_VALIDATORS = (StoreFileValidator,)

__all__ = ['BaseValidator', 'StoreFileValidator', 'DEFAULT_VALIDATORS']
