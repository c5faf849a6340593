import pickle
from typing import Any

from django.core.exceptions import ImproperlyConfigured

from django_zsetproto.exceptions import SerializerError
from django_zsetproto.serializers.base import BaseSerializer


class PickleSerializer(BaseSerializer):
    """Pickle member serializer for arbitrary Python objects.

    Only use it when every reader of the sorted set is trusted Python code.
    """

    def __init__(self, protocol: int | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if protocol is None:
            protocol = pickle.DEFAULT_PROTOCOL
        if protocol > pickle.HIGHEST_PROTOCOL:
            raise ImproperlyConfigured(
                f"protocol can't be higher than pickle.HIGHEST_PROTOCOL: {pickle.HIGHEST_PROTOCOL}",
            )
        self.protocol = protocol

    def dumps(self, obj: Any) -> bytes | str:
        return pickle.dumps(obj, self.protocol)

    def loads(self, data: bytes | str) -> Any:
        try:
            if isinstance(data, str):
                data = data.encode()
            return pickle.loads(data)  # noqa: S301
        except Exception as e:
            raise SerializerError from e
