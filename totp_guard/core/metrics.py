from __future__ import annotations

from prometheus_client import Counter

CODES_GENERATED_TOTAL = Counter(
    "totp_codes_generated_total",
    "Total one-time codes derived from a time step.",
)

VERIFICATIONS_TOTAL = Counter(
    "totp_verifications_total",
    "Total code verifications grouped by outcome.",
    ["outcome"],
)
