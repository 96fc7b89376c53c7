"""Fixed algorithm parameters shared by every TOTP instance."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TotpParameters:
    """Algorithm, code length and period understood by authenticator apps."""

    algorithm: str = "SHA1"
    digits: int = 6
    period: int = 30

    @property
    def modulus(self) -> int:
        return 10**self.digits


# Google Authenticator only supports these values.
DEFAULT_PARAMETERS = TotpParameters()

SECRET_LENGTH = 20
