"""
Pydantic models for signing configuration and build variants.
"""
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Any
from pydantic import BaseModel, ConfigDict, model_validator

from .exceptions import MissingSigningPropertyException, UnknownSigningPolicyException


# Property keys read from key.properties, in the order strict mode checks them
KEY_ALIAS = "keyAlias"
KEY_PASSWORD = "keyPassword"
STORE_FILE = "storeFile"
STORE_PASSWORD = "storePassword"
SIGNING_KEYS = (KEY_ALIAS, KEY_PASSWORD, STORE_FILE, STORE_PASSWORD)

_FIELD_FOR_KEY = {
    KEY_ALIAS: "key_alias",
    KEY_PASSWORD: "key_password",
    STORE_FILE: "store_file",
    STORE_PASSWORD: "store_password",
}

RELEASE = "release"
DEBUG = "debug"

_MASK = "********"


class SigningPolicy(str, Enum):
    """How to react when release signing credentials are incomplete."""
    LENIENT = "lenient"
    STRICT = "strict"

    @classmethod
    def parse(cls, value: Any) -> 'SigningPolicy':
        """Accept a SigningPolicy or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for policy in cls:
            if policy.value == name:
                return policy
        raise UnknownSigningPolicyException(
            f"Unknown signing policy '{value}'", policy=str(value))


class ResolutionOutcome(str, Enum):
    """What the resolver decided."""
    SIGNED = "signed"
    NO_PROPERTIES_FILE = "no_properties_file"
    NO_KEY_ALIAS = "no_key_alias"


class KeystoreCredentials(BaseModel):
    """The four values read from key.properties. Any of them may be absent."""
    model_config = ConfigDict(frozen=True)

    key_alias: Optional[str] = None
    key_password: Optional[str] = None
    store_file: Optional[str] = None
    store_password: Optional[str] = None

    @classmethod
    def from_properties(cls, properties: Dict[str, str],
                        keys: tuple = SIGNING_KEYS) -> 'KeystoreCredentials':
        """Create credentials from a property mapping.

        Args:
            properties: Parsed key.properties content
            keys: Property names for alias, key password, store file and store
                password, in that order
        """
        alias_key, key_password_key, store_file_key, store_password_key = keys
        return cls(
            key_alias=properties.get(alias_key),
            key_password=properties.get(key_password_key),
            store_file=properties.get(store_file_key),
            store_password=properties.get(store_password_key),
        )


class SigningIdentity(BaseModel):
    """A signing config that can be attached to a build variant."""
    model_config = ConfigDict(frozen=True)

    name: str = RELEASE
    key_alias: str
    key_password: Optional[str] = None
    store_file: Optional[Path] = None
    store_password: Optional[str] = None
    v1_signing_enabled: bool = False
    v2_signing_enabled: bool = False
    properties_file: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.key_password, self.store_file, self.store_password)

    def require(self, property_name: str) -> str:
        """Return a field by its key.properties name, failing if it is absent.

        Raises:
            MissingSigningPropertyException: If the field was not in key.properties
        """
        value = getattr(self, _FIELD_FOR_KEY[property_name])
        if value is None:
            raise MissingSigningPropertyException(
                f"{property_name} is not set in {self.properties_file or 'key.properties'}",
                property_name=property_name,
                properties_file=self.properties_file,
            )
        return str(value)

    def injected_properties(self) -> Dict[str, str]:
        """Gradle project properties that apply this identity to an assemble run."""
        return {
            "android.injected.signing.store.file": self.require(STORE_FILE),
            "android.injected.signing.store.password": self.require(STORE_PASSWORD),
            "android.injected.signing.key.alias": self.require(KEY_ALIAS),
            "android.injected.signing.key.password": self.require(KEY_PASSWORD),
        }

    def masked(self) -> Dict[str, Any]:
        """Dictionary view with passwords hidden, for display."""
        data = self.model_dump(mode="json")
        for field in ("key_password", "store_password"):
            if data[field] is not None:
                data[field] = _MASK
        return data


class SigningResolution(BaseModel):
    """Result of resolving the release signing identity."""
    model_config = ConfigDict(frozen=True)

    policy: SigningPolicy
    properties_file: str
    outcome: ResolutionOutcome
    identity: Optional[SigningIdentity] = None

    @model_validator(mode="after")
    def _identity_matches_outcome(self) -> 'SigningResolution':
        if (self.identity is not None) != (self.outcome is ResolutionOutcome.SIGNED):
            raise ValueError(
                f"Outcome '{self.outcome.value}' does not match identity "
                f"({'present' if self.identity is not None else 'absent'})")
        return self

    @property
    def signed(self) -> bool:
        return self.identity is not None

    def masked(self) -> Dict[str, Any]:
        return {
            "policy": self.policy.value,
            "properties_file": self.properties_file,
            "outcome": self.outcome.value,
            "identity": self.identity.masked() if self.identity else None,
        }


class DefaultConfig(BaseModel):
    """Values shared by every variant."""
    model_config = ConfigDict(frozen=True)

    namespace: str
    application_id: str
    compile_sdk: Optional[int] = None
    min_sdk: Optional[int] = None
    target_sdk: Optional[int] = None
    version_code: Optional[int] = None
    version_name: Optional[str] = None


class BuildVariant(BaseModel):
    """A named build type and its resolved settings."""
    model_config = ConfigDict(frozen=True)

    name: str
    application_id: str
    application_id_suffix: Optional[str] = None
    res_values: Dict[str, str] = {}
    signing_identity: Optional[SigningIdentity] = None
    minify_enabled: bool = False
    shrink_resources: bool = False

    @property
    def effective_application_id(self) -> str:
        return self.application_id + (self.application_id_suffix or "")

    @property
    def app_name(self) -> Optional[str]:
        return self.res_values.get("app_name")

    def summary(self) -> Dict[str, Any]:
        """Dictionary view for display; the identity is reduced to its name."""
        return {
            "application_id": self.effective_application_id,
            "app_name": self.app_name,
            "signing_config": self.signing_identity.name if self.signing_identity else None,
            "minify_enabled": self.minify_enabled,
            "shrink_resources": self.shrink_resources,
        }


class AppSettings(BaseModel):
    """Application settings that drive variant assembly and signing."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    namespace: str
    application_id: str
    display_name: str
    debug_display_name: str
    debug_application_id_suffix: Optional[str] = None
    key_properties: str = "key.properties"
    app_module: str = "app"
    policy: SigningPolicy = SigningPolicy.LENIENT
    verify_store_file: bool = False
    compile_sdk: Optional[int] = None
    min_sdk: Optional[int] = None
    target_sdk: Optional[int] = None
    version_code: Optional[int] = None
    version_name: Optional[str] = None

    def default_config(self) -> DefaultConfig:
        return DefaultConfig(
            namespace=self.namespace,
            application_id=self.application_id,
            compile_sdk=self.compile_sdk,
            min_sdk=self.min_sdk,
            target_sdk=self.target_sdk,
            version_code=self.version_code,
            version_name=self.version_name,
        )


class BuildConfiguration(BaseModel):
    """Everything one configuration pass produces."""
    model_config = ConfigDict(frozen=True)

    settings: AppSettings
    default_config: DefaultConfig
    signing: SigningResolution
    variants: Dict[str, BuildVariant]

    @property
    def release(self) -> BuildVariant:
        return self.variants[RELEASE]

    @property
    def debug(self) -> BuildVariant:
        return self.variants[DEBUG]


class LoadParams(BaseModel):
    """Parameters for one configuration pass."""
    project_root: str = "."
    settings_file: Optional[str] = None
    key_properties: Optional[str] = None
    policy: Optional[str] = None
