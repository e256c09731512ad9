# tests/conftest.py
"""
Pytest configuration and fixtures for the SOLID principles tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package logger level changed by DemoConfig."""
    logger = logging.getLogger("solid_principles")
    level = logger.level

    yield

    logger.setLevel(level)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
