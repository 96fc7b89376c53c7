from __future__ import annotations

from totp_guard.core.parameters import DEFAULT_PARAMETERS


def step_from_timestamp(
    timestamp: float | int, period: int = DEFAULT_PARAMETERS.period
) -> int:
    """Map a Unix timestamp to its time step.

    Floor division keeps the numbering continuous before the epoch:
    ``-1`` belongs to step ``-1``, not step ``0``.
    """

    return int(timestamp // period)
