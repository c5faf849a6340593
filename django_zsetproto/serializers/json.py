import json
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder

from django_zsetproto.exceptions import SerializerError
from django_zsetproto.serializers.base import BaseSerializer


class JSONSerializer(BaseSerializer):
    """JSON member serializer using Django's DjangoJSONEncoder.

    Useful when members are small structured values (ids with a type tag,
    tuples) that other services also need to read. Note that two members
    are equal in the store only if their JSON text is byte-identical, so
    dict members should be built with a stable key order.

    Attributes:
        encoder_class: The JSON encoder class to use. Defaults to DjangoJSONEncoder.
    """

    encoder_class = DjangoJSONEncoder

    def dumps(self, obj: Any) -> bytes | str:
        return json.dumps(obj, cls=self.encoder_class, separators=(",", ":")).encode()

    def loads(self, data: bytes | str) -> Any:
        try:
            if isinstance(data, bytes):
                data = data.decode()
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializerError from e
