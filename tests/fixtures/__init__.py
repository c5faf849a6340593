"""Test fixtures for django-zsetproto."""

from tests.fixtures.client import zclient
from tests.fixtures.containers import (
    RedisContainerInfo,
    redis_container,
    redis_container_factory,
    redis_images,
)

__all__ = [
    "RedisContainerInfo",
    "redis_container",
    "redis_container_factory",
    "redis_images",
    "zclient",
]
