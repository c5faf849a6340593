from typing import Any

import msgpack

from django_zsetproto.exceptions import SerializerError
from django_zsetproto.serializers.base import BaseSerializer


class MessagePackSerializer(BaseSerializer):
    """MessagePack member serializer.

    Produces compact binary members. Supports None, bool, int, float, str,
    bytes, list and dict; anything else fails with ``SerializerError``.
    """

    def dumps(self, obj: Any) -> bytes | str:
        try:
            return msgpack.packb(obj)
        except (TypeError, ValueError) as e:
            raise SerializerError from e

    def loads(self, data: bytes | str) -> Any:
        try:
            if isinstance(data, str):
                data = data.encode()
            return msgpack.unpackb(data, raw=False)
        except Exception as e:
            raise SerializerError from e
