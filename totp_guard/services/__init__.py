"""Quick access to the TOTP services."""

from __future__ import annotations

from totp_guard.services.otp_generator import OtpGenerator
from totp_guard.services.provisioning import build_key_uri, encode_secret
from totp_guard.services.step_clock import step_from_timestamp
from totp_guard.services.totp_service import Totp

__all__ = [
    "OtpGenerator",
    "Totp",
    "build_key_uri",
    "encode_secret",
    "step_from_timestamp",
]
