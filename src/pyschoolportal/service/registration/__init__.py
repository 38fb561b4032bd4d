"""Registration service package."""

from .api import RegistrationService

__all__ = ["RegistrationService"]
