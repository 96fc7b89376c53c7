"""Provisioning URIs in the Key Uri Format read by authenticator apps."""

from __future__ import annotations

import base64
from urllib.parse import quote, urlencode

from totp_guard.core.errors import InvalidLabelContentError
from totp_guard.core.logging_config import get_logger, log_event
from totp_guard.core.parameters import DEFAULT_PARAMETERS, TotpParameters

logger = get_logger(module="provisioning")


def encode_secret(secret: bytes) -> str:
    """Render raw secret bytes as unpadded RFC 4648 Base32 text."""

    return base64.b32encode(secret).decode("ascii").rstrip("=")


def build_key_uri(
    secret: bytes,
    issuer: str,
    account: str,
    parameters: TotpParameters = DEFAULT_PARAMETERS,
) -> str:
    """Return an ``otpauth://totp/`` URI for ``issuer`` and ``account``.

    The colon separates issuer from account in the label, so neither value
    may contain one. Label and query values are percent-encoded with ``%20``
    for spaces.
    """

    if ":" in issuer + account:
        log_event(logger, service="provisioning", event="invalid_label_content")
        raise InvalidLabelContentError(
            "Neither issuer nor account may contain a colon."
        )

    label = f"{quote(issuer, safe='')}:{quote(account, safe='')}"
    params = urlencode(
        {
            "secret": encode_secret(secret),
            "issuer": issuer,
            "algorithm": parameters.algorithm.upper(),
            "digits": parameters.digits,
            "period": parameters.period,
        },
        quote_via=quote,
    )
    return f"otpauth://totp/{label}?{params}"
