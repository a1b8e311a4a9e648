"""Internal helpers for development-time feature flags.

Centralizes how opt-in validation toggles are read so semantics stay
consistent across the result types.
"""

from __future__ import annotations

import os

__all__ = ["VALIDATE_ENV_VAR", "dev_validate_enabled"]

VALIDATE_ENV_VAR = "RAILYARD_VALIDATE"


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Return True when combinators should check what callbacks return.

    When on, ``flat_map`` and ``take`` callbacks must return a ValueResult and
    ``ensure`` predicates must return a bool, or ``CallbackContractError`` is
    raised. Off by default: a wrong return type then surfaces wherever it is
    first used.

    *override* wins when given; otherwise ``RAILYARD_VALIDATE`` must be
    exactly ``"1"``. The variable is read per call, so it can be toggled at
    runtime.
    """
    if override is not None:
        return bool(override)
    return os.getenv(VALIDATE_ENV_VAR) == "1"
