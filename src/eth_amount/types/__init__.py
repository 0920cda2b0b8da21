"""Reusable type definitions for currency amounts."""

from .base import StrictBaseModel
from .exceptions import (
    AmountDivisionByZeroError,
    AmountError,
    AmountOverflowError,
)
from .uint import BaseUint, Uint64, Uint256

__all__ = [
    # Core types
    "BaseUint",
    "Uint64",
    "Uint256",
    "StrictBaseModel",
    # Exceptions
    "AmountError",
    "AmountOverflowError",
    "AmountDivisionByZeroError",
]
