"""Railyard: composable success/failure outcomes without exceptions.

Public API:
    - ValueResult: success with a value, or failure with an error
    - VoidResult: success without a value, or failure with an error
    - Outcome: the read-only contract both share
    - RailyardError and subclasses: contract violations raised by the library
"""

from __future__ import annotations

import logging

from railyard.errors import (
    CallbackContractError,
    IllegalArgumentError,
    InvalidStateError,
    NullArgumentError,
    RailyardError,
)
from railyard.outcome import Outcome
from railyard.value_result import ValueFailure, ValueResult, ValueSuccess
from railyard.void_result import VoidFailure, VoidResult, VoidSuccess

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("railyard")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("railyard").addHandler(logging.NullHandler())

__all__ = [
    "CallbackContractError",
    "IllegalArgumentError",
    "InvalidStateError",
    "NullArgumentError",
    "Outcome",
    "RailyardError",
    "ValueFailure",
    "ValueResult",
    "ValueSuccess",
    "VoidFailure",
    "VoidResult",
    "VoidSuccess",
]
