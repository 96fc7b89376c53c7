"""TOTP (RFC 6238) generation, verification and provisioning URIs."""

from __future__ import annotations

from totp_guard.core.errors import (
    InvalidInputError,
    InvalidLabelContentError,
    InvalidSecretEncodingError,
    InvalidSecretLengthError,
    InvalidWindowError,
)
from totp_guard.core.parameters import DEFAULT_PARAMETERS, TotpParameters
from totp_guard.services.otp_generator import OtpGenerator
from totp_guard.services.provisioning import build_key_uri
from totp_guard.services.step_clock import step_from_timestamp
from totp_guard.services.totp_service import Totp

__all__ = [
    "DEFAULT_PARAMETERS",
    "InvalidInputError",
    "InvalidLabelContentError",
    "InvalidSecretEncodingError",
    "InvalidSecretLengthError",
    "InvalidWindowError",
    "OtpGenerator",
    "Totp",
    "TotpParameters",
    "build_key_uri",
    "step_from_timestamp",
]
