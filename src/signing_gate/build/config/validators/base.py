"""
Base validator class for build configuration validation.

Validators run after the variants are assembled and before the
configuration is handed back to the caller.
"""

from abc import ABC, abstractmethod
from ..models import BuildConfiguration


class BaseValidator(ABC):
    """Abstract base class for build configuration validators.

    Each validator checks one requirement and raises a ConfigException when
    it is not met.
    """

    def __init__(self, name: str = None):
        """Initialize the validator.

        Args:
            name: Optional name for the validator (defaults to class name)
        """
        self.name = name or self.__class__.__name__

    @abstractmethod
    def validate(self, config: BuildConfiguration) -> None:
        """Validate an assembled build configuration.

        If the condition that triggers this validator is absent, return without
        doing anything. If it is present but the check fails, raise a
        ConfigException.

        Args:
            config: The assembled build configuration

        Raises:
            ConfigException: If validation fails when conditions are met
        """
        pass
