"""Time-based one-time passwords (RFC 6238) for a single shared secret."""

from __future__ import annotations

import base64
import hmac
import time

from totp_guard.core.config import settings
from totp_guard.core.errors import (
    InvalidSecretEncodingError,
    InvalidSecretLengthError,
    InvalidWindowError,
)
from totp_guard.core.logging_config import get_logger, log_event
from totp_guard.core.metrics import VERIFICATIONS_TOTAL
from totp_guard.core.parameters import (
    DEFAULT_PARAMETERS,
    SECRET_LENGTH,
    TotpParameters,
)
from totp_guard.services.otp_generator import OtpGenerator
from totp_guard.services.provisioning import build_key_uri, encode_secret
from totp_guard.services.step_clock import step_from_timestamp

logger = get_logger(module="totp_service")


def _now() -> float:
    return time.time()


def _constant_time_equals(expected: str, candidate: str) -> bool:
    # surrogatepass keeps the encoding total for any str, lone surrogates included
    return hmac.compare_digest(
        expected.encode("utf-8"), candidate.encode("utf-8", "surrogatepass")
    )


def _validate_window(window: int) -> int:
    if window < 0:
        log_event(logger, service="totp_service", event="invalid_window", window=window)
        raise InvalidWindowError("Verification window must not be negative")
    return window


def _decode_base32(text: str) -> bytes:
    normalized = "".join(text.split()).upper()
    normalized += "=" * ((8 - len(normalized) % 8) % 8)
    try:
        return base64.b32decode(normalized)
    except ValueError as exc:
        log_event(logger, service="totp_service", event="invalid_secret_encoding")
        raise InvalidSecretEncodingError("Secret is not valid Base32") from exc


class Totp:
    """Generate and verify 6-digit, 30-second SHA-1 codes.

    The secret must be exactly 20 raw bytes. ``window`` is the number of
    neighbouring steps on each side of the current one that ``verify``
    accepts, defaulting to ``TOTP_DEFAULT_WINDOW`` (``1``).
    """

    def __init__(self, secret: bytes, window: int | None = None) -> None:
        if len(secret) != SECRET_LENGTH:
            log_event(
                logger,
                service="totp_service",
                event="invalid_secret_length",
                length=len(secret),
            )
            raise InvalidSecretLengthError(
                f"Secret has to be {SECRET_LENGTH} bytes long"
            )

        self._secret = bytes(secret)
        self._window = _validate_window(
            settings.DEFAULT_WINDOW if window is None else window
        )
        self._generator = OtpGenerator(self._secret, DEFAULT_PARAMETERS)

    @classmethod
    def from_base32(cls, text: str, window: int | None = None) -> Totp:
        """Build an instance from the Base32 rendering returned by ``secret()``."""

        return cls(_decode_base32(text), window=window)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(window={self._window})"

    @property
    def parameters(self) -> TotpParameters:
        return DEFAULT_PARAMETERS

    @property
    def window(self) -> int:
        return self._window

    def at(self, timestamp: float | int) -> str:
        return self._generator.code_from_step(
            step_from_timestamp(timestamp, DEFAULT_PARAMETERS.period)
        )

    def now(self) -> str:
        return self.at(_now())

    def verify(
        self,
        code: str | int,
        for_time: float | int | None = None,
        window: int | None = None,
    ) -> bool:
        """Check ``code`` against the current step and its neighbours.

        Integer codes are zero-padded to the code width. Every candidate step
        goes through the same constant-time comparison.
        """

        window = self._window if window is None else _validate_window(window)
        if for_time is None:
            for_time = _now()
        candidate = code
        if not isinstance(candidate, str):
            candidate = str(candidate).zfill(DEFAULT_PARAMETERS.digits)
        current = step_from_timestamp(for_time, DEFAULT_PARAMETERS.period)

        # Current step first, it is the most likely match
        if _constant_time_equals(self._generator.code_from_step(current), candidate):
            VERIFICATIONS_TOTAL.labels(outcome="accepted").inc()
            return True

        for step in range(current - window, current + window + 1):
            if step == current:
                continue
            if _constant_time_equals(self._generator.code_from_step(step), candidate):
                VERIFICATIONS_TOTAL.labels(outcome="accepted").inc()
                return True

        VERIFICATIONS_TOTAL.labels(outcome="rejected").inc()
        log_event(
            logger,
            service="totp_service",
            event="totp_verification_rejected",
            level="info",
            window=window,
        )
        return False

    def key_uri(self, issuer: str, account: str) -> str:
        return build_key_uri(self._secret, issuer, account, DEFAULT_PARAMETERS)

    def secret(self, binary: bool = False) -> bytes | str:
        if binary:
            return self._secret
        return encode_secret(self._secret)
