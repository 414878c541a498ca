"""
Keystore-related configuration validators.
"""

import logging
from .base import BaseValidator
from ..exceptions import KeystoreFileNotFoundException
from ..models import BuildConfiguration

logger = logging.getLogger(__name__)


class StoreFileValidator(BaseValidator):
    """Check that the keystore referenced by the release identity exists.

    Only runs when verify_store_file is set and the release variant is signed
    with a storeFile. An identity without storeFile is left to fail when that
    field is used.
    """

    def validate(self, config: BuildConfiguration) -> None:
        if not config.settings.verify_store_file:
            return

        identity = config.release.signing_identity
        if identity is None or identity.store_file is None:
            return

        if not identity.store_file.is_file():
            raise KeystoreFileNotFoundException(
                f"storeFile points to a missing keystore: {identity.store_file}",
                store_file=str(identity.store_file),
            )
        logger.debug(f"Keystore present at {identity.store_file}")
