"""Pytest configuration for django-zsetproto tests."""

import sys
from pathlib import Path

from tests.fixtures import (
    redis_container,
    redis_container_factory,
    redis_images,
    zclient,
)

# Re-export fixtures so pytest can discover them
__all__ = [
    "redis_container",
    "redis_container_factory",
    "redis_images",
    "zclient",
]


def pytest_configure(config):
    """Add tests directory to Python path."""
    sys.path.insert(0, str(Path(__file__).absolute().parent))
