"""
Build configuration loading.

One pass runs in four steps: settings, signing resolution, variant assembly,
then validators. A strict-policy failure stops the pass before any variant
is assembled. Nothing is cached between calls.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from .models import BuildConfiguration, LoadParams
from .resolver import SigningConfigResolver
from .settings import load_settings, key_properties_path, store_file_base
from .validators import BaseValidator, DEFAULT_VALIDATORS

logger = logging.getLogger(__name__)


def load_build_config(params: Optional[LoadParams] = None,
                      validators: Optional[Iterable[BaseValidator]] = None) -> BuildConfiguration:
    """
    Load the build configuration for a project.

    Args:
        params: Project root and overrides (defaults to the current directory)
        validators: Validators to run; defaults to DEFAULT_VALIDATORS

    Returns:
        The assembled BuildConfiguration

    Raises:
        ConfigException: Strict-policy signing failures, invalid settings, or a
            failed validator
    """
    from ..variants import assemble_variants

    params = params or LoadParams()
    root = Path(params.project_root)
    logger.debug(f"Loading build configuration for {root.resolve()}")

    settings = load_settings(
        project_root=params.project_root,
        settings_file=params.settings_file,
        policy=params.policy,
        key_properties=params.key_properties,
    )

    properties_file = key_properties_path(settings, params.project_root)
    resolver = SigningConfigResolver(settings.policy)
    signing = resolver.resolve(properties_file, store_file_base(settings, params.project_root))

    config = BuildConfiguration(
        settings=settings,
        default_config=settings.default_config(),
        signing=signing,
        variants=assemble_variants(settings, signing),
    )

    if validators is None:
        validators = [validator_class() for validator_class in DEFAULT_VALIDATORS]
    for validator in validators:
        logger.debug(f"Running validator {validator.name}")
        validator.validate(config)

    logger.info(f"Build configuration loaded: policy={settings.policy.value}, "
                f"release {'signed' if signing.signed else 'unsigned'}")
    return config
