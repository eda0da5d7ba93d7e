"""Pytest configuration for pbrtremodel tests."""

import logging

import pytest


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    """Log engine branch decisions so failing tests show them."""
    del config  # Unused but required by hookspec.
    logging.getLogger("pbrtremodel").setLevel(logging.DEBUG)
