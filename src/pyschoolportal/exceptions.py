"""Library exceptions."""

from __future__ import annotations


class PySchoolPortalError(Exception):
    """Base exception for the library."""


class DomainError(PySchoolPortalError):
    """Raised when a backend answers with a non-success status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    def __repr__(self) -> str:
        return f"DomainError(status={self.status!r}, message={self.message!r})"


class ResponseDecodeError(PySchoolPortalError, ValueError):
    """Raised when a success response cannot be decoded."""


class NetworkError(PySchoolPortalError):
    """Raised when network communication fails."""


class ValidationError(PySchoolPortalError):
    """Raised when inputs fail validation."""
