"""Input validation errors raised by the TOTP services."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Base class for rejected caller input."""


class InvalidSecretLengthError(InvalidInputError):
    """Raised when a secret is not exactly 20 bytes long."""


class InvalidLabelContentError(InvalidInputError):
    """Raised when issuer or account contains the ``:`` label delimiter."""


class InvalidSecretEncodingError(InvalidInputError):
    """Raised when a textual secret is not valid Base32."""


class InvalidWindowError(InvalidInputError):
    """Raised when a verification window is negative."""
