"""
Exception classes with built-in guidance for signing configuration.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, property_name: str = None,
                 properties_file: str = None, policy: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.property_name = property_name
        self.properties_file = properties_file
        self.policy = policy
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class KeystorePropertiesNotFoundException(ConfigException):
    """Raised in strict mode when the key.properties file does not exist."""
    def __init__(self, message: str, properties_file: str, **kwargs):
        super().__init__(message, error_type="properties_file_missing",
                         properties_file=properties_file, **kwargs)

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ Signing properties file not found: {self.properties_file}
💡 Release signing is strict, so the build cannot continue without it. Either:
   1. Create it from a template: signing-gate signing.init
      then fill in keyAlias, keyPassword, storeFile and storePassword
   2. Or allow an unsigned release build: {command} --policy=lenient
"""


class MissingSigningPropertyException(ConfigException):
    """Raised when a signing property is absent from key.properties.

    Strict mode raises this while resolving. Lenient mode raises it only when
    a field of an incomplete identity is actually used.
    """
    def __init__(self, message: str, property_name: str, properties_file: str = None, **kwargs):
        super().__init__(message, error_type="property_missing", property_name=property_name,
                         properties_file=properties_file, **kwargs)

    def _generate_guidance(self):
        source = self.properties_file or 'key.properties'
        return f"""
❌ {self}
💡 Add the missing entry to {source}:
   {self.property_name}=<value>
"""


class UnknownSigningPolicyException(ConfigException):
    """Raised when a policy name is neither 'lenient' nor 'strict'."""
    def __init__(self, message: str, policy: str, **kwargs):
        super().__init__(message, error_type="unknown_policy", policy=policy, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Unknown signing policy '{self.policy}'
💡 Use one of: lenient, strict
   Set it in signing.yaml (signing.policy), with SIGNING_POLICY, or with --policy
"""


class InvalidSettingsException(ConfigException):
    """Raised when signing.yaml contains unknown keys or invalid values."""
    def __init__(self, message: str, settings_file: str = None, **kwargs):
        self.settings_file = settings_file
        super().__init__(message, error_type="invalid_settings", **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Invalid settings in {self.settings_file or 'signing.yaml'}: {self}
💡 Settings must live under a top-level 'signing:' mapping. Run
   signing-gate signing.variants --debug to see the effective values.
"""


class PropertiesSyntaxException(ConfigException):
    """Raised when a .properties file cannot be parsed."""
    def __init__(self, message: str, line_number: int = None, properties_file: str = None, **kwargs):
        self.line_number = line_number
        super().__init__(message, error_type="properties_syntax",
                         properties_file=properties_file, **kwargs)

    def _generate_guidance(self):
        where = self.properties_file or 'properties file'
        if self.line_number is not None:
            where = f"{where}, line {self.line_number}"
        return f"""
❌ Could not parse {where}: {self}
💡 Unicode escapes must be written as \\uXXXX with four hex digits
"""


class PropertiesReadException(ConfigException):
    """Raised when a .properties file exists but cannot be opened or decoded."""
    def __init__(self, message: str, properties_file: str = None, **kwargs):
        super().__init__(message, error_type="properties_unreadable",
                         properties_file=properties_file, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ {self}
💡 Check that {self.properties_file or 'the properties file'} is a regular file
   readable by the current user and saved as ISO-8859-1 text
"""


class KeystoreFileNotFoundException(ConfigException):
    """Raised when the keystore referenced by storeFile does not exist."""
    def __init__(self, message: str, store_file: str, **kwargs):
        self.store_file = store_file
        super().__init__(message, error_type="keystore_missing", property_name="storeFile", **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Keystore file not found: {self.store_file}
💡 storeFile is resolved against the app module directory (app_module). Either:
   1. Fix the storeFile entry in key.properties
   2. Or turn off the check: set verify_store_file: false in signing.yaml
"""
