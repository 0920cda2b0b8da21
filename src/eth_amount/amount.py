"""
Amounts of ether, held exactly in wei.

An `EthereumAmount` stores a single `Uint256` wei count. Arithmetic is checked:
a result that does not fit in 256 bits raises `AmountOverflowError` instead of
wrapping. Conversions to and from decimal ETH go through a float and are
approximate; use `from_wei` when the exact value matters, e.g. when building
a transaction that will be signed.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import Field
from typing_extensions import Self

from . import config
from .coin_model import CryptoAmount
from .constants import ETH_DECIMALS, WEI_PER_ETH
from .types import (
    AmountDivisionByZeroError,
    AmountOverflowError,
    StrictBaseModel,
    Uint64,
    Uint256,
)

logger = logging.getLogger(__name__)


class EthereumAmount(StrictBaseModel, CryptoAmount):
    """An amount of ether, counted in wei (10^-18 ETH)."""

    wei: Uint256 = Field(default=Uint256(0), description="The number of wei in the amount.")

    # =================================================================
    # Construction and conversion
    # =================================================================

    @classmethod
    def from_wei(cls, wei_amount: Uint256 | int) -> Self:
        """Create an amount from an exact wei count."""
        return cls(wei=wei_amount)

    @classmethod
    def from_eth(cls, eth_amount: float) -> Self:
        """
        Create an amount from a decimal value in ETH.

        The value is scaled by 10^18 in floating point and then floored, so
        values with more significant digits than a float carries lose precision.

        Raises:
            TypeError: If `eth_amount` is not a real number.
            ValueError: If `eth_amount` is negative, infinite or NaN.
            AmountOverflowError: If the wei count does not fit in 256 bits.
        """
        if isinstance(eth_amount, bool) or not isinstance(eth_amount, (int, float)):
            raise TypeError(f"Expected float, got {type(eth_amount).__name__}")
        try:
            value = float(eth_amount)
        except OverflowError as e:
            raise AmountOverflowError("multiplying", eth_amount, WEI_PER_ETH) from e
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"ETH amount must be finite and non-negative, got {eth_amount}")

        scaled = value * 10.0**ETH_DECIMALS
        if not math.isfinite(scaled) or not Uint256.fits(math.floor(scaled)):
            raise AmountOverflowError("multiplying", eth_amount, WEI_PER_ETH)
        return cls(wei=Uint256(math.floor(scaled)))

    def eth(self) -> float:
        """
        Return the amount as a decimal value in ETH.

        In the default "u64" conversion mode only the low 64 bits of the wei
        count are converted, so amounts above 2^64 - 1 wei (about 18.4 ETH)
        come out wrong. Set `ETH_AMOUNT_CONVERSION=full` to convert all 256 bits.
        """
        wei = int(self.wei)
        if config.MAJOR_UNIT_CONVERSION == "u64":
            truncated = int(self.wei.low_u64())
            if truncated != wei:
                logger.warning(
                    "Wei count %d exceeds 64 bits; converting truncated value %d",
                    wei,
                    truncated,
                )
            wei = truncated
        return wei / WEI_PER_ETH

    def wei_value(self) -> Uint256:
        """Return the exact number of wei in the amount."""
        return self.wei

    # =================================================================
    # Checked arithmetic
    # =================================================================

    def _require_amount(self, other: Any, op_symbol: str) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Unsupported operand type(s) for {op_symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )

    def _overflow(self, operation: str, rhs: Any) -> AmountOverflowError:
        logger.debug("Checked %s failed for %s and %s", operation, self.wei, rhs)
        return AmountOverflowError(operation, self.wei, rhs)

    def add(self, other: Self) -> Self:
        """
        Return the sum of two amounts.

        Raises:
            AmountOverflowError: If the sum exceeds 2^256 - 1 wei.
        """
        self._require_amount(other, "+")
        wei = self.wei.checked_add(other.wei)
        if wei is None:
            raise self._overflow("adding", other.wei)
        return type(self)(wei=wei)

    def subtract(self, other: Self) -> Self:
        """
        Return the difference of two amounts.

        Raises:
            AmountOverflowError: If `other` is larger than `self`.
        """
        self._require_amount(other, "-")
        wei = self.wei.checked_sub(other.wei)
        if wei is None:
            raise self._overflow("subtracting", other.wei)
        return type(self)(wei=wei)

    def multiply(self, other: Self | int) -> Self:
        """
        Multiply by another amount or by a non-negative integer scalar.

        Raises:
            AmountOverflowError: If the product exceeds 2^256 - 1 wei.
            ValueError: If the scalar is negative.
        """
        if isinstance(other, type(self)):
            wei = self.wei.checked_mul(other.wei)
            if wei is None:
                raise self._overflow("multiplying", other.wei)
            return type(self)(wei=wei)

        if isinstance(other, bool) or not isinstance(other, int):
            self._require_amount(other, "*")
        scalar = int(other)
        if scalar < 0:
            raise ValueError(f"Cannot multiply an amount by a negative scalar: {scalar}")

        # The exact product is compared against the maximum afterwards.
        product = int(self.wei) * scalar
        if not Uint256.fits(product):
            raise self._overflow("multiplying", other)
        return type(self)(wei=Uint256(product))

    def divide(self, other: Self) -> Self:
        """
        Return the floor quotient of two amounts' wei counts.

        Raises:
            AmountDivisionByZeroError: If `other` is zero.
        """
        self._require_amount(other, "//")
        wei = self.wei.checked_div(other.wei)
        if wei is None:
            logger.debug("Checked dividing failed for %s by zero", self.wei)
            raise AmountDivisionByZeroError(self.wei)
        return type(self)(wei=wei)

    def __add__(self, other: Any) -> Self:
        """Checked addition (`+`)."""
        return self.add(other)

    def __sub__(self, other: Any) -> Self:
        """Checked subtraction (`-`)."""
        return self.subtract(other)

    def __mul__(self, other: Any) -> Self:
        """Checked multiplication (`*`) by an amount or an integer scalar."""
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Self:
        """Checked multiplication (`*`) with the scalar on the left."""
        return self.multiply(other)

    def __floordiv__(self, other: Any) -> Self:
        """Checked floor division (`//`)."""
        return self.divide(other)

    # =================================================================
    # Ordering
    # =================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.wei == other.wei

    def __hash__(self) -> int:
        return hash((type(self), int(self.wei)))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.wei < other.wei

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.wei <= other.wei

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.wei > other.wei

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.wei >= other.wei

    def __str__(self) -> str:
        """Human-readable form, e.g. `1.5 ETH (1500000000000000000 wei)`."""
        return f"{self.eth()} ETH ({self.wei} wei)"

    # =================================================================
    # CryptoAmount interface
    # =================================================================

    @classmethod
    def from_main_unit_decimal_value(cls, value: float) -> Self:
        """Create an amount from a decimal value in ETH."""
        return cls.from_eth(value)

    @classmethod
    def from_smallest_unit_integer_value(cls, value: int) -> Self:
        """Create an amount from a wei count that fits in 64 bits."""
        return cls.from_wei(Uint256(Uint64(value)))

    def to_main_unit_decimal_value(self) -> float:
        """Return the amount in ETH."""
        return self.eth()

    def to_smallest_unit_integer_value(self) -> Uint64:
        """
        Return the wei count as a 64-bit integer.

        Raises:
            AmountOverflowError: If the wei count does not fit in 64 bits.
        """
        if not Uint64.fits(int(self.wei)):
            raise AmountOverflowError("converting", self.wei, "Uint64")
        return Uint64(int(self.wei))
