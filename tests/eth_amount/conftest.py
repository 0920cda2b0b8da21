"""
Shared pytest fixtures for eth_amount tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from eth_amount import EthereumAmount, Uint256, config


@pytest.fixture
def one_eth() -> EthereumAmount:
    """Exactly one ETH."""
    return EthereumAmount.from_wei(10**18)


@pytest.fixture
def max_amount() -> EthereumAmount:
    """The largest representable amount, 2^256 - 1 wei."""
    return EthereumAmount.from_wei(Uint256.max_value())


@pytest.fixture
def full_conversion(monkeypatch: pytest.MonkeyPatch) -> None:
    """Convert all 256 bits of the wei count to ETH."""
    monkeypatch.setattr(config, "MAJOR_UNIT_CONVERSION", "full")
