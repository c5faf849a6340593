"""Utilities for serializer instantiation and settings lookup."""

from __future__ import annotations

import functools
from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

DEFAULT_SERIALIZER = "django_zsetproto.serializers.string.StringSerializer"


def is_serializer_instance(obj: Any) -> bool:
    """Check if an object is a serializer instance (has dumps/loads methods)."""
    if isinstance(obj, type):
        return False
    return hasattr(obj, "dumps") and hasattr(obj, "loads") and callable(obj.dumps) and callable(obj.loads)


def create_serializer(config: str | type | Any | None, **kwargs: Any) -> Any:
    """Create a serializer instance from config.

    Args:
        config: A dotted path string, a class, an instance, or None for the default
        **kwargs: Keyword arguments to pass to serializer constructor
    """
    if config is None:
        config = DEFAULT_SERIALIZER

    # Already an instance
    if is_serializer_instance(config):
        return config

    # A class (not a string path)
    if isinstance(config, type):
        return config(**kwargs)

    # Dotted path string
    cls = import_string(config)
    return cls(**kwargs)


@functools.cache
def _serializer_for(config: str | type | None) -> Any:
    return create_serializer(config)


def get_default_serializer() -> Any:
    """Return the serializer used when a command is rendered without one.

    Reads ``ZSETPROTO_SERIALIZER`` from Django settings when settings are
    configured, so commands can also be rendered outside a Django project.
    One instance is built per distinct setting value and reused.
    """
    config = None
    if settings.configured:
        config = getattr(settings, "ZSETPROTO_SERIALIZER", None)
    if is_serializer_instance(config):
        return config
    return _serializer_for(config)
