"""Type aliases and small value objects for django-zsetproto.

Key aliases match redis-py / valkey-py typing, defined locally to avoid
a runtime dependency on either library for type annotations.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from django_zsetproto.ranges import ScoreBound

# Key types - matches redis.typing.KeyT and valkey.typing.KeyT
type KeyT = bytes | str | memoryview

# A single protocol token, as handed to the command packer
type TokenT = bytes | str


class SortOrder(StrEnum):
    """Direction of a range query."""

    ASC = "asc"
    DESC = "desc"

    @property
    def range_command(self) -> str:
        return "ZRANGE" if self is SortOrder.ASC else "ZREVRANGE"

    @property
    def range_by_score_command(self) -> str:
        return "ZRANGEBYSCORE" if self is SortOrder.ASC else "ZREVRANGEBYSCORE"

    @property
    def rank_command(self) -> str:
        return "ZRANK" if self is SortOrder.ASC else "ZREVRANK"


class Aggregate(StrEnum):
    """How ZUNIONSTORE/ZINTERSTORE combine the scores of a shared member."""

    SUM = "SUM"
    MIN = "MIN"
    MAX = "MAX"


class SetOperation(StrEnum):
    """Set combination performed by a store command."""

    UNION = "union"
    INTER = "inter"

    @property
    def store_command(self) -> str:
        return "ZUNIONSTORE" if self is SetOperation.UNION else "ZINTERSTORE"


class ReplyType(StrEnum):
    """Shape of the decoded reply a command promises to its caller."""

    INTEGER = "integer"
    OPTIONAL_INTEGER = "optional_integer"
    OPTIONAL_FLOAT = "optional_float"
    MEMBERS = "members"
    MEMBERS_WITH_SCORES = "members_with_scores"


class Limit(NamedTuple):
    """The ``LIMIT offset count`` pair of a by-score range query."""

    offset: int
    count: int


__all__ = [
    "Aggregate",
    "KeyT",
    "Limit",
    "ReplyType",
    "ScoreBound",
    "SetOperation",
    "SortOrder",
    "TokenT",
]
