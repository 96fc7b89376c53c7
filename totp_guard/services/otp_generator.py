"""RFC 4226 dynamic truncation over HMAC-SHA1."""

from __future__ import annotations

import hashlib
import hmac
import struct

from totp_guard.core.metrics import CODES_GENERATED_TOTAL
from totp_guard.core.parameters import DEFAULT_PARAMETERS, TotpParameters

# Negative steps are packed as their 64-bit two's-complement pattern.
_COUNTER_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _counter_bytes(step: int) -> bytes:
    return struct.pack(">Q", step & _COUNTER_MASK)


class OtpGenerator:
    """Derive fixed-width decimal codes from time steps for one secret."""

    def __init__(
        self, secret: bytes, parameters: TotpParameters = DEFAULT_PARAMETERS
    ) -> None:
        self._secret = secret
        self._parameters = parameters

    def code_from_step(self, step: int) -> str:
        digest = hmac.new(self._secret, _counter_bytes(step), hashlib.sha1).digest()

        # Low nibble of the last byte picks where the 4 bytes start
        offset = digest[-1] & 0x0F
        code = (
            ((digest[offset] & 0x7F) << 24)
            | (digest[offset + 1] << 16)
            | (digest[offset + 2] << 8)
            | digest[offset + 3]
        )
        otp = code % self._parameters.modulus

        CODES_GENERATED_TOTAL.inc()
        return f"{otp:0{self._parameters.digits}d}"
