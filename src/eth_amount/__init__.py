"""Checked, fixed-width currency amounts for Ethereum's native asset."""

from .amount import EthereumAmount
from .coin_model import CryptoAmount
from .constants import ETH_DECIMALS, WEI_PER_ETH
from .types import (
    AmountDivisionByZeroError,
    AmountError,
    AmountOverflowError,
    Uint64,
    Uint256,
)

__all__ = [
    "EthereumAmount",
    "CryptoAmount",
    "ETH_DECIMALS",
    "WEI_PER_ETH",
    "Uint64",
    "Uint256",
    "AmountError",
    "AmountOverflowError",
    "AmountDivisionByZeroError",
]
