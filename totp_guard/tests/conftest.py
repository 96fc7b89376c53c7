import os

# Pin configuration before totp_guard reads the environment
os.environ["TOTP_DEFAULT_WINDOW"] = "1"
os.environ.pop("TOTP_ISSUER", None)
os.environ.pop("TOTP_SECRET", None)
os.environ.setdefault("TOTP_LOG_LEVEL", "WARNING")

import pytest

from totp_guard.services.totp_service import Totp

RFC_SECRET = b"12345678901234567890"
RFC_SECRET_BASE32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture()
def rfc_secret() -> bytes:
    """Shared secret used by the RFC 4226 and RFC 6238 test vectors."""
    return RFC_SECRET


@pytest.fixture()
def totp(rfc_secret: bytes) -> Totp:
    return Totp(rfc_secret)
