"""Constants of the Ethereum native currency."""

from __future__ import annotations

from typing import Final

ETH_DECIMALS: Final = 18
"""Number of decimal places between ETH and wei."""

WEI_PER_ETH: Final = 10**ETH_DECIMALS
"""The number of wei in one ETH."""
