from django_zsetproto.commands.base import SortedSetCommand, pack_command
from django_zsetproto.commands.sorted_sets import (
    ZAdd,
    ZCard,
    ZCount,
    ZIncrBy,
    ZRange,
    ZRangeByScore,
    ZRangeByScoreWithScores,
    ZRangeWithScores,
    ZRank,
    ZRem,
    ZRemRangeByRank,
    ZRemRangeByScore,
    ZScore,
    ZUnionInterStore,
    ZUnionInterStoreWeighted,
)

__all__ = [
    "SortedSetCommand",
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
    "pack_command",
]
