from typing import Any

from django_zsetproto.exceptions import SerializerError
from django_zsetproto.serializers.base import BaseSerializer


class StringSerializer(BaseSerializer):
    """Plain-text serializer, the default for sorted set members.

    Strings and bytes are written verbatim, so members stay readable by any
    other client of the store. Numbers are written as their decimal text
    and are not converted back: a member written as ``42`` reads back as
    ``"42"``.

    Replies are decoded as text using ``encoding``. Members that are not
    valid text in that encoding (binary members written as bytes) are
    returned as raw ``bytes``.

    Example:
        Configure in Django settings::

            ZSETPROTO_SERIALIZER = "django_zsetproto.serializers.string.StringSerializer"
    """

    def __init__(self, encoding: str = "utf-8", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.encoding = encoding

    def dumps(self, obj: Any) -> bytes | str:
        if isinstance(obj, str | bytes):
            return obj
        if isinstance(obj, memoryview):
            return obj.tobytes()
        if isinstance(obj, bool):
            raise SerializerError(f"Cannot write {obj!r} as a sorted set member")
        if isinstance(obj, int):
            return str(obj)
        if isinstance(obj, float):
            return repr(obj)
        raise SerializerError(f"Cannot write {type(obj).__name__} as a sorted set member")

    def loads(self, data: bytes | str) -> Any:
        if not isinstance(data, bytes):
            return data
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError:
            return data
