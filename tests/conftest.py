"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "ETH_AMOUNT_CONVERSION" not in os.environ:
    os.environ["ETH_AMOUNT_CONVERSION"] = "u64"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
