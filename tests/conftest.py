"""
Base58Check - Pytest Configuration
====================================
Shared fixtures.
"""

import logging

import pytest
from typer.testing import CliRunner

from base58check.codec import Base58Check
from base58check.config import get_settings
from base58check.constants import EXTENDED_PREFIX_LENGTH


# ============================================================================
# ISOLATION
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_state():
    """Fresh settings cache and a clean base58check logger for every test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    package_logger = logging.getLogger("base58check")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


# ============================================================================
# CODEC FIXTURES
# ============================================================================

@pytest.fixture
def codec():
    """Default codec (Bitcoin alphabet, 1-byte prefix)"""
    return Base58Check()


@pytest.fixture
def extended_codec():
    """Codec splitting a 4-byte version prefix"""
    return Base58Check(prefix_length=EXTENDED_PREFIX_LENGTH)


# ============================================================================
# CLI FIXTURES
# ============================================================================

@pytest.fixture
def cli_runner():
    return CliRunner()
