"""Interface shared by the amount types of every supported coin."""

from __future__ import annotations

from abc import ABC, abstractmethod

from typing_extensions import Self

from .types import Uint64


class CryptoAmount(ABC):
    """
    A quantity of a coin, convertible between its main and smallest units.

    The decimal main-unit conversions go through a float and are approximate.
    The smallest-unit conversions are exact but limited to 64 bits.
    """

    @classmethod
    @abstractmethod
    def from_main_unit_decimal_value(cls, value: float) -> Self:
        """Build an amount from a decimal value in the main unit."""

    @classmethod
    @abstractmethod
    def from_smallest_unit_integer_value(cls, value: int) -> Self:
        """Build an amount from an integer count of the smallest unit."""

    @abstractmethod
    def to_main_unit_decimal_value(self) -> float:
        """Return the amount as a decimal value in the main unit."""

    @abstractmethod
    def to_smallest_unit_integer_value(self) -> Uint64:
        """Return the amount as an integer count of the smallest unit."""
