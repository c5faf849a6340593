"""Base class for sorted set command descriptors.

A descriptor holds the arguments of one command call. It renders itself
into the ordered token list the store expects (command name first) and
declares the shape of the reply through its ``reply`` class attribute.
Nothing here talks to the network.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from redis.connection import Connection

from django_zsetproto.compat import get_default_serializer
from django_zsetproto.ranges import format_number
from django_zsetproto.types import ReplyType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from django_zsetproto.types import KeyT, TokenT


@functools.cache
def _command_packer() -> Connection:
    # Never connected; only its RESP command packer is used.
    return Connection()


def pack_command(*args: TokenT) -> bytes:
    """Encode a token sequence as one RESP multi-bulk request."""
    return b"".join(_command_packer().pack_command(*args))


def key_token(key: KeyT) -> TokenT:
    if isinstance(key, memoryview):
        return key.tobytes()
    return key


def member_token(serializer: Any, value: Any) -> TokenT:
    """Write one member value through the serializer."""
    token = serializer.dumps(value)
    # Django's RedisSerializer leaves ints unserialized
    if isinstance(token, int):
        return str(token)
    return token


def score_pairs(response: Iterable[Any]) -> list[tuple[Any, Any]]:
    """Group a WITHSCORES reply into ``(member, score)`` pairs.

    RESP2 replies are flat (``[m1, s1, m2, s2]``), RESP3 replies are
    already nested (``[[m1, s1], [m2, s2]]``).
    """
    items = list(response)
    if items and isinstance(items[0], list | tuple):
        return [(member, score) for member, score in items]
    it = iter(items)
    return list(zip(it, it, strict=True))


_EMPTY_VALUES: dict[ReplyType, Any] = {
    ReplyType.INTEGER: 0,
    ReplyType.OPTIONAL_INTEGER: None,
    ReplyType.OPTIONAL_FLOAT: None,
}


@dataclass(frozen=True)
class SortedSetCommand:
    """One sorted set command invocation.

    Subclasses set ``reply`` and implement ``name`` and ``_tokens``.
    """

    reply: ClassVar[ReplyType]

    @property
    def name(self) -> str:
        raise NotImplementedError

    def _tokens(self, serializer: Any) -> list[TokenT]:
        """Return every token after the command name."""
        raise NotImplementedError

    def args(self, serializer: Any | None = None) -> list[TokenT]:
        """Render the full token sequence, command name first.

        Args:
            serializer: Writes member values. Defaults to the serializer
                configured by ``ZSETPROTO_SERIALIZER``.
        """
        if serializer is None:
            serializer = get_default_serializer()
        return [self.name, *self._tokens(serializer)]

    def pack(self, serializer: Any | None = None) -> bytes:
        """Render the command as wire bytes."""
        return pack_command(*self.args(serializer))

    @property
    def empty_value(self) -> Any:
        """Reply returned in place of a real one when errors are ignored."""
        return _EMPTY_VALUES.get(self.reply, [])

    def parse_response(self, response: Any, serializer: Any | None = None) -> Any:
        """Coerce a raw reply into the declared reply shape."""
        match self.reply:
            case ReplyType.INTEGER:
                return int(response)
            case ReplyType.OPTIONAL_INTEGER:
                return None if response is None else int(response)
            case ReplyType.OPTIONAL_FLOAT:
                return None if response is None else float(response)

        if serializer is None:
            serializer = get_default_serializer()
        if self.reply is ReplyType.MEMBERS_WITH_SCORES:
            return [(serializer.loads(member), float(score)) for member, score in score_pairs(response)]
        return [serializer.loads(member) for member in response]


def number_tokens(*values: float) -> list[str]:
    return [format_number(value) for value in values]
