"""
Build package for signing-gate.

Signing resolution, variant assembly and the tasks that expose them.
"""

from .config import load_build_config, SigningConfigResolver, SigningPolicy
from .variants import assemble_variants

__all__ = [
    'load_build_config',
    'SigningConfigResolver',
    'SigningPolicy',
    'assemble_variants',
]
