"""
Release signing resolution.

Decides whether a release signing identity can be built from key.properties
and, under the strict policy, stops configuration at the first missing item.

Two policies are supported:

* lenient - a missing file or a missing keyAlias means "no identity"; the
  release variant is left unsigned. Other missing fields are only reported
  when the identity is used.
* strict - the file and all four keys must be present; the first missing one
  raises with a message naming it. A complete identity also gets both the v1
  and v2 signing schemes enabled.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .exceptions import KeystorePropertiesNotFoundException, MissingSigningPropertyException
from .models import (
    KeystoreCredentials,
    ResolutionOutcome,
    SigningIdentity,
    SigningPolicy,
    SigningResolution,
    SIGNING_KEYS,
)
from .properties import load_properties

logger = logging.getLogger(__name__)

# (credential field, message); paired positionally with the property keys
_STRICT_CHECKS = (
    ("key_alias", "Signing key alias '{key}' not found in {file}"),
    ("key_password", "Signing key password '{key}' not found in {file}"),
    ("store_file", "Keystore path '{key}' not found in {file}"),
    ("store_password", "Keystore password '{key}' not found in {file}"),
)


class SigningConfigResolver:
    """Resolve the release signing identity from a key.properties file.

    The resolver holds no state between calls; resolving twice against the
    same file contents gives equal results.
    """

    def __init__(self, policy: Union[SigningPolicy, str] = SigningPolicy.LENIENT,
                 keys: Tuple[str, str, str, str] = SIGNING_KEYS,
                 identity_name: str = "release"):
        """
        Args:
            policy: 'lenient' or 'strict'
            keys: Property names for alias, key password, store file and store
                password, in that order
            identity_name: Name given to the resulting signing config
        """
        self.policy = SigningPolicy.parse(policy)
        if len(keys) != 4:
            raise ValueError(f"Expected four signing property keys, got {len(keys)}")
        self.keys = tuple(keys)
        self.identity_name = identity_name

    def resolve(self, properties_file: Union[str, Path],
                store_file_base: Optional[Union[str, Path]] = None) -> SigningResolution:
        """
        Resolve the signing identity.

        Args:
            properties_file: Path to key.properties
            store_file_base: Directory that a relative storeFile is resolved
                against (defaults to the properties file's directory)

        Returns:
            SigningResolution describing the outcome

        Raises:
            KeystorePropertiesNotFoundException: strict policy, file missing
            MissingSigningPropertyException: strict policy, a key missing
        """
        properties_file = Path(properties_file)
        root = Path(store_file_base) if store_file_base is not None else properties_file.parent

        if self.policy is SigningPolicy.STRICT:
            return self._resolve_strict(properties_file, root)
        return self._resolve_lenient(properties_file, root)

    def _read(self, properties_file: Path) -> Optional[KeystoreCredentials]:
        if not properties_file.is_file():
            return None
        properties = load_properties(properties_file)
        return KeystoreCredentials.from_properties(properties, keys=self.keys)

    def _resolve_lenient(self, properties_file: Path, root: Path) -> SigningResolution:
        credentials = self._read(properties_file)
        if credentials is None:
            logger.info(f"No {properties_file.name} at {properties_file}; release will be unsigned")
            return self._result(properties_file, ResolutionOutcome.NO_PROPERTIES_FILE)

        if credentials.key_alias is None:
            logger.info(f"{self.keys[0]} not set in {properties_file}; release will be unsigned")
            return self._result(properties_file, ResolutionOutcome.NO_KEY_ALIAS)

        absent = [key for (field, _), key in zip(_STRICT_CHECKS, self.keys)
                  if getattr(credentials, field) is None]
        if absent:
            logger.debug(f"Signing identity built without {', '.join(absent)}; "
                         f"they will fail when used")

        identity = self._identity(credentials, properties_file, root, schemes=False)
        return self._result(properties_file, ResolutionOutcome.SIGNED, identity)

    def _resolve_strict(self, properties_file: Path, root: Path) -> SigningResolution:
        credentials = self._read(properties_file)
        if credentials is None:
            raise KeystorePropertiesNotFoundException(
                f"{properties_file.name} file not found at {properties_file}",
                properties_file=str(properties_file),
            )

        for (field, template), key in zip(_STRICT_CHECKS, self.keys):
            if getattr(credentials, field) is None:
                raise MissingSigningPropertyException(
                    template.format(key=key, file=properties_file.name),
                    property_name=key,
                    properties_file=str(properties_file),
                    policy=self.policy.value,
                )

        identity = self._identity(credentials, properties_file, root, schemes=True)
        return self._result(properties_file, ResolutionOutcome.SIGNED, identity)

    def _identity(self, credentials: KeystoreCredentials, properties_file: Path,
                  root: Path, schemes: bool) -> SigningIdentity:
        store_file = None
        if credentials.store_file is not None:
            store_file = root / credentials.store_file

        identity = SigningIdentity(
            name=self.identity_name,
            key_alias=credentials.key_alias,
            key_password=credentials.key_password,
            store_file=store_file,
            store_password=credentials.store_password,
            v1_signing_enabled=schemes,
            v2_signing_enabled=schemes,
            properties_file=str(properties_file),
        )
        logger.debug(f"Built signing identity '{identity.name}' for alias '{identity.key_alias}'")
        return identity

    def _result(self, properties_file: Path, outcome: ResolutionOutcome,
                identity: Optional[SigningIdentity] = None) -> SigningResolution:
        return SigningResolution(
            policy=self.policy,
            properties_file=str(properties_file),
            outcome=outcome,
            identity=identity,
        )


def resolve_signing(properties_file: Union[str, Path],
                    policy: Union[SigningPolicy, str] = SigningPolicy.LENIENT,
                    store_file_base: Optional[Union[str, Path]] = None,
                    keys: Tuple[str, str, str, str] = SIGNING_KEYS) -> SigningResolution:
    """Resolve the release signing identity in one call."""
    return SigningConfigResolver(policy, keys=keys).resolve(properties_file, store_file_base)
