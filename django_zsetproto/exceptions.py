# Derived from django-redis (https://github.com/jazzband/django-redis)
# Copyright (c) 2011-2016 Andrey Antukh <niwi@niwi.nz>
# Copyright (c) 2011 Sean Bleier
# Licensed under BSD-3-Clause
#
# django-redis was used as inspiration for this project.

"""Exceptions for django-zsetproto.

Rendering a command never raises; these cover the serializer boundary and
the transport used by :class:`django_zsetproto.client.SortedSetClient`.
"""

import socket
from typing import Any

# Build exception tuples from available libraries (redis-py / valkey-py).
# These are caught by SortedSetClient.execute.
_exception_list: list[type[Exception]] = [socket.timeout]

try:
    from redis.exceptions import ConnectionError as RedisConnectionError
    from redis.exceptions import TimeoutError as RedisTimeoutError

    _exception_list.extend([RedisConnectionError, RedisTimeoutError])
except ImportError:
    pass

try:
    from valkey.exceptions import ConnectionError as ValkeyConnectionError
    from valkey.exceptions import TimeoutError as ValkeyTimeoutError

    _exception_list.extend([ValkeyConnectionError, ValkeyTimeoutError])
except ImportError:
    pass

_main_exceptions = tuple(_exception_list)


class ConnectionInterruptedError(Exception):
    """Raised when the connection to the store fails mid-command.

    Store error replies (``WRONGTYPE`` and friends) are not wrapped; they
    reach the caller as the client library's ``ResponseError``.

    Attributes:
        connection: The client the command was sent through.
    """

    def __init__(self, connection: Any, parent: Exception | None = None) -> None:
        self.connection = connection
        self.parent = parent
        super().__init__(connection)

    def __str__(self) -> str:
        error_type = type(self.__cause__ or self.parent).__name__
        error_msg = str(self.__cause__ or self.parent)
        return f"Redis {error_type}: {error_msg}"


class SerializerError(Exception):
    """Raised when a member value cannot be written or read.

    This can occur when:
    - The value type is not supported by the configured serializer
    - The reply bytes don't match the serializer's format
    """
