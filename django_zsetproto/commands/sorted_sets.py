"""Sorted set (ZSET) command descriptors."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from django_zsetproto.commands.base import SortedSetCommand, key_token, member_token, number_tokens
from django_zsetproto.ranges import format_score_range
from django_zsetproto.types import Aggregate, Limit, ReplyType, SetOperation, SortOrder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from django_zsetproto.types import KeyT, TokenT

WITHSCORES = "WITHSCORES"
WEIGHTS = "WEIGHTS"
AGGREGATE = "AGGREGATE"


@dataclass(frozen=True, init=False)
class ZAdd(SortedSetCommand):
    """ZADD key score member [score member ...]"""

    key: KeyT
    score: float
    member: Any
    score_members: tuple[tuple[float, Any], ...]

    reply = ReplyType.INTEGER

    def __init__(self, key: KeyT, score: float, member: Any, *score_members: tuple[float, Any]) -> None:
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "score", score)
        object.__setattr__(self, "member", member)
        object.__setattr__(self, "score_members", tuple((s, m) for s, m in score_members))

    @property
    def name(self) -> str:
        return "ZADD"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        tokens: list[TokenT] = [key_token(self.key)]
        for score, member in ((self.score, self.member), *self.score_members):
            tokens.extend(number_tokens(score))
            tokens.append(member_token(serializer, member))
        return tokens


@dataclass(frozen=True, init=False)
class ZRem(SortedSetCommand):
    """ZREM key member [member ...]"""

    key: KeyT
    members: tuple[Any, ...]

    reply = ReplyType.INTEGER

    def __init__(self, key: KeyT, member: Any, *members: Any) -> None:
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "members", (member, *members))

    @property
    def name(self) -> str:
        return "ZREM"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), *(member_token(serializer, m) for m in self.members)]


@dataclass(frozen=True)
class ZIncrBy(SortedSetCommand):
    """ZINCRBY key increment member"""

    key: KeyT
    increment: float
    member: Any

    reply = ReplyType.OPTIONAL_FLOAT

    @property
    def name(self) -> str:
        return "ZINCRBY"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), *number_tokens(self.increment), member_token(serializer, self.member)]


@dataclass(frozen=True)
class ZCard(SortedSetCommand):
    """ZCARD key"""

    key: KeyT

    reply = ReplyType.INTEGER

    @property
    def name(self) -> str:
        return "ZCARD"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key)]


@dataclass(frozen=True)
class ZScore(SortedSetCommand):
    """ZSCORE key member"""

    key: KeyT
    member: Any

    reply = ReplyType.OPTIONAL_FLOAT

    @property
    def name(self) -> str:
        return "ZSCORE"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), member_token(serializer, self.member)]


@dataclass(frozen=True)
class ZRange(SortedSetCommand):
    """ZRANGE / ZREVRANGE key start end

    Descending order only changes the command name; ``start`` and ``end``
    keep their positions.
    """

    key: KeyT
    start: int = 0
    end: int = -1
    sort: SortOrder = SortOrder.ASC

    reply = ReplyType.MEMBERS

    @property
    def name(self) -> str:
        return SortOrder(self.sort).range_command

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), str(self.start), str(self.end)]


@dataclass(frozen=True)
class ZRangeWithScores(ZRange):
    """ZRANGE / ZREVRANGE key start end WITHSCORES"""

    reply = ReplyType.MEMBERS_WITH_SCORES

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [*super()._tokens(serializer), WITHSCORES]


@dataclass(frozen=True)
class ZRangeByScore(SortedSetCommand):
    """ZRANGEBYSCORE key min max [LIMIT offset count]

    In descending order the command is ZREVRANGEBYSCORE and the bounds are
    sent as ``max min``.
    """

    key: KeyT
    min: float = -math.inf
    min_inclusive: bool = True
    max: float = math.inf
    max_inclusive: bool = True
    limit: Limit | None = None
    sort: SortOrder = SortOrder.ASC

    reply = ReplyType.MEMBERS

    def __post_init__(self) -> None:
        if self.limit is not None and not isinstance(self.limit, Limit):
            object.__setattr__(self, "limit", Limit(*self.limit))

    @property
    def name(self) -> str:
        return SortOrder(self.sort).range_by_score_command

    def _bounds(self) -> tuple[list[str], list[str]]:
        limit_tokens, min_token, max_token = format_score_range(
            self.min,
            self.min_inclusive,
            self.max,
            self.max_inclusive,
            self.limit,
        )
        if self.sort == SortOrder.DESC:
            return [max_token, min_token], limit_tokens
        return [min_token, max_token], limit_tokens

    def _tokens(self, serializer: Any) -> list[TokenT]:
        bounds, limit_tokens = self._bounds()
        return [key_token(self.key), *bounds, *limit_tokens]


@dataclass(frozen=True)
class ZRangeByScoreWithScores(ZRangeByScore):
    """ZRANGEBYSCORE key min max WITHSCORES [LIMIT offset count]"""

    reply = ReplyType.MEMBERS_WITH_SCORES

    def _tokens(self, serializer: Any) -> list[TokenT]:
        bounds, limit_tokens = self._bounds()
        return [key_token(self.key), *bounds, WITHSCORES, *limit_tokens]


@dataclass(frozen=True)
class ZRank(SortedSetCommand):
    """ZRANK / ZREVRANK key member"""

    key: KeyT
    member: Any
    reverse: bool = False

    reply = ReplyType.OPTIONAL_INTEGER

    @property
    def name(self) -> str:
        return (SortOrder.DESC if self.reverse else SortOrder.ASC).rank_command

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), member_token(serializer, self.member)]


@dataclass(frozen=True)
class ZRemRangeByRank(SortedSetCommand):
    """ZREMRANGEBYRANK key start end"""

    key: KeyT
    start: int = 0
    end: int = -1

    reply = ReplyType.INTEGER

    @property
    def name(self) -> str:
        return "ZREMRANGEBYRANK"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), str(self.start), str(self.end)]


@dataclass(frozen=True)
class ZRemRangeByScore(SortedSetCommand):
    """ZREMRANGEBYSCORE key start end

    Both bounds are closed and written as plain doubles (``inf`` and
    ``-inf`` for the defaults); there is no exclusive form.
    """

    key: KeyT
    start: float = -math.inf
    end: float = math.inf

    reply = ReplyType.INTEGER

    @property
    def name(self) -> str:
        return "ZREMRANGEBYSCORE"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [key_token(self.key), *number_tokens(self.start, self.end)]


@dataclass(frozen=True)
class ZUnionInterStore(SortedSetCommand):
    """ZUNIONSTORE / ZINTERSTORE dst numkeys key [key ...] AGGREGATE agg"""

    operation: SetOperation
    dst_key: KeyT
    keys: tuple[KeyT, ...]
    aggregate: Aggregate = Aggregate.SUM

    reply = ReplyType.INTEGER

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))

    @property
    def name(self) -> str:
        return SetOperation(self.operation).store_command

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [
            key_token(self.dst_key),
            str(len(self.keys)),
            *(key_token(k) for k in self.keys),
            AGGREGATE,
            str(Aggregate(self.aggregate)),
        ]


@dataclass(frozen=True)
class ZUnionInterStoreWeighted(SortedSetCommand):
    """ZUNIONSTORE / ZINTERSTORE dst numkeys key [key ...] WEIGHTS w [w ...] AGGREGATE agg

    ``key_weights`` is an iterable of ``(key, weight)`` pairs or a mapping.
    Weights are written in the same order as their keys.
    """

    operation: SetOperation
    dst_key: KeyT
    key_weights: tuple[tuple[KeyT, float], ...]
    aggregate: Aggregate = Aggregate.SUM

    reply = ReplyType.INTEGER

    def __post_init__(self) -> None:
        pairs: Iterable[tuple[KeyT, float]] = self.key_weights
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        object.__setattr__(self, "key_weights", tuple((k, w) for k, w in pairs))

    @property
    def name(self) -> str:
        return SetOperation(self.operation).store_command

    def _tokens(self, serializer: Any) -> list[TokenT]:
        return [
            key_token(self.dst_key),
            str(len(self.key_weights)),
            *(key_token(k) for k, _ in self.key_weights),
            WEIGHTS,
            *number_tokens(*(w for _, w in self.key_weights)),
            AGGREGATE,
            str(Aggregate(self.aggregate)),
        ]


@dataclass(frozen=True)
class ZCount(SortedSetCommand):
    """ZCOUNT key min max"""

    key: KeyT
    min: float = -math.inf
    max: float = math.inf
    min_inclusive: bool = True
    max_inclusive: bool = True

    reply = ReplyType.INTEGER

    @property
    def name(self) -> str:
        return "ZCOUNT"

    def _tokens(self, serializer: Any) -> list[TokenT]:
        _, min_token, max_token = format_score_range(self.min, self.min_inclusive, self.max, self.max_inclusive)
        return [key_token(self.key), min_token, max_token]


__all__ = [
    "ZAdd",
    "ZCard",
    "ZCount",
    "ZIncrBy",
    "ZRange",
    "ZRangeByScore",
    "ZRangeByScoreWithScores",
    "ZRangeWithScores",
    "ZRank",
    "ZRem",
    "ZRemRangeByRank",
    "ZRemRangeByScore",
    "ZScore",
    "ZUnionInterStore",
    "ZUnionInterStoreWeighted",
]
