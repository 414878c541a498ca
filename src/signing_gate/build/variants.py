"""Build variant assembly.

Turns settings plus a signing resolution into the debug and release build
types. Debug gets its own application id suffix and display name so it can
be installed next to release. Release takes the production display name and
the signing identity, when there is one. Neither variant shrinks code or
resources.
"""

import logging
from typing import Dict

from .config.models import AppSettings, BuildVariant, SigningResolution, DEBUG, RELEASE

logger = logging.getLogger(__name__)

APP_NAME_RESOURCE = "app_name"


def debug_variant(settings: AppSettings) -> BuildVariant:
    return BuildVariant(
        name=DEBUG,
        application_id=settings.application_id,
        application_id_suffix=settings.debug_application_id_suffix,
        res_values={APP_NAME_RESOURCE: settings.debug_display_name},
        minify_enabled=False,
        shrink_resources=False,
    )


def release_variant(settings: AppSettings, signing: SigningResolution) -> BuildVariant:
    if signing.identity is None:
        logger.warning(f"Release build is unsigned ({signing.outcome.value})")

    return BuildVariant(
        name=RELEASE,
        application_id=settings.application_id,
        res_values={APP_NAME_RESOURCE: settings.display_name},
        signing_identity=signing.identity,
        minify_enabled=False,
        shrink_resources=False,
    )


def assemble_variants(settings: AppSettings, signing: SigningResolution) -> Dict[str, BuildVariant]:
    """
    Assemble the debug and release variants.

    The resolution is consumed once here. Under the strict policy it always
    carries an identity, because resolution raises otherwise.

    Args:
        settings: Application settings
        signing: Output of the signing resolver

    Returns:
        Variants keyed by name ('debug', 'release')
    """
    variants = {
        DEBUG: debug_variant(settings),
        RELEASE: release_variant(settings, signing),
    }
    for variant in variants.values():
        logger.debug(f"Variant '{variant.name}': id={variant.effective_application_id}, "
                     f"app_name={variant.app_name!r}, "
                     f"signed={variant.signing_identity is not None}")
    return variants
