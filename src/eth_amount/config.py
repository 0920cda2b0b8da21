"""
Global configuration for currency amounts.

Settings are read from the environment once, at import time.
"""

import os

_SUPPORTED_CONVERSIONS: list[str] = ["u64", "full"]

MAJOR_UNIT_CONVERSION = os.environ.get("ETH_AMOUNT_CONVERSION", "u64").lower()
"""
How a wei count is converted to a decimal ETH value.

- "u64": truncate the wei count to its low 64 bits first (the default).
- "full": convert the full 256-bit wei count.
"""

if MAJOR_UNIT_CONVERSION not in _SUPPORTED_CONVERSIONS:
    raise ValueError(
        f"Invalid ETH_AMOUNT_CONVERSION environment variable: '{MAJOR_UNIT_CONVERSION}'. "
        f"Supported values: {_SUPPORTED_CONVERSIONS}"
    )
