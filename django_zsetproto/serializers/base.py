from typing import Any


class BaseSerializer:
    """Base class for sorted set member serializers.

    A serializer is the bridge between Python member values and protocol
    tokens: ``dumps`` is called once per member when a command is rendered,
    ``loads`` once per member when a reply is decoded. Scores, keys and
    keywords never pass through it.

    The interface is duck-type compatible with Django's RedisSerializer from
    ``django.core.cache.backends.redis``; any object with ``dumps`` and
    ``loads`` methods works. Serializers accept ``**kwargs`` so the
    ``OPTIONS`` dict of a cache alias can be passed straight through.
    """

    def __init__(self, **kwargs: Any) -> None:
        pass

    def dumps(self, obj: Any) -> bytes | str:
        raise NotImplementedError

    def loads(self, data: bytes | str) -> Any:
        raise NotImplementedError
