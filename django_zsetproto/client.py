"""Clients that send sorted set command descriptors to a store.

Architecture:
- KeyValueSortedSetClient: Base class with all logic, library-agnostic
- RedisSortedSetClient: Sets class attributes for redis-py
- ValkeySortedSetClient: Sets class attributes for valkey-py

The descriptor renders the request and decodes the reply; the client only
owns the connection pools and the exception policy.

Internal attributes:
- _servers: List of server URLs, the first one takes writes
- _pools: Dict of connection pools by index
- _serializer: Serializer instance used for member values
- _ignore_exceptions, _log_ignored_exceptions: Exception handling
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any

import redis
from django.utils.module_loading import import_string

from django_zsetproto.commands import (
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
from django_zsetproto.compat import create_serializer, get_default_serializer
from django_zsetproto.exceptions import ConnectionInterruptedError, _main_exceptions
from django_zsetproto.types import Aggregate, SetOperation, SortOrder

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from django_zsetproto.commands import SortedSetCommand
    from django_zsetproto.types import KeyT, Limit

try:
    import valkey

    _VALKEY_AVAILABLE = True
except ImportError:
    valkey = None  # type: ignore[assignment]
    _VALKEY_AVAILABLE = False

logger = logging.getLogger(__name__)

# Commands that modify the store and must go to the primary server
_WRITE_COMMANDS = frozenset(
    {
        "ZADD",
        "ZREM",
        "ZINCRBY",
        "ZREMRANGEBYRANK",
        "ZREMRANGEBYSCORE",
        "ZUNIONSTORE",
        "ZINTERSTORE",
    }
)


class KeyValueSortedSetClient:
    """Base sorted set client with configurable library.

    Subclasses must set:
    - _lib: The library module (e.g., valkey or redis)
    - _client_class: The client class (e.g., valkey.Valkey)
    - _pool_class: The connection pool class
    """

    _lib: Any = None
    _client_class: type | None = None
    _pool_class: type | None = None

    # Options that shouldn't be passed to the connection pool
    _CLIENT_ONLY_OPTIONS = frozenset(
        {
            "client_class",
            "serializer",
            "ignore_exceptions",
            "log_ignored_exceptions",
        }
    )

    def __init__(
        self,
        servers: str | list[str],
        serializer: str | type | Any | None = None,
        pool_class: str | type | None = None,
        parser_class: str | type | None = None,
        **options: Any,
    ) -> None:
        """Initialize the client.

        Args:
            servers: Server URL or list of URLs; the first one takes writes
            serializer: Serializer instance, class or import path for member values.
                Defaults to ``ZSETPROTO_SERIALIZER`` or the string serializer.
            pool_class: Connection pool class or import path
            parser_class: Parser class or import path
            **options: Additional options passed to connection pool
        """
        if isinstance(servers, str):
            servers = [servers]
        self._servers = servers
        self._pools: dict[int, Any] = {}

        if isinstance(pool_class, str):
            pool_class = import_string(pool_class)
        self._pool_class = pool_class or self.__class__._pool_class  # type: ignore[assignment]

        if isinstance(parser_class, str):
            parser_class = import_string(parser_class)
        if parser_class is None and self._lib is not None:
            parser_class = self._lib.connection.DefaultParser

        self._pool_options: dict[str, Any] = {"parser_class": parser_class}
        for key, value in options.items():
            if key not in self._CLIENT_ONLY_OPTIONS:
                self._pool_options[key] = value

        self._options = options

        if serializer is None:
            self._serializer = get_default_serializer()
        else:
            self._serializer = create_serializer(serializer)

        # Exception handling configuration
        self._ignore_exceptions = options.get("ignore_exceptions", False)
        self._log_ignored_exceptions = options.get("log_ignored_exceptions", False)

    @property
    def serializer(self) -> Any:
        return self._serializer

    # =========================================================================
    # Connection Pool Management
    # =========================================================================

    def _get_connection_pool_index(self, *, write: bool) -> int:
        """Get the pool index for read/write operations."""
        # Write to first server, read from any replica
        if write or len(self._servers) == 1:
            return 0
        return random.randint(1, len(self._servers) - 1)  # noqa: S311

    def _get_connection_pool(self, *, write: bool) -> Any:
        index = self._get_connection_pool_index(write=write)
        if index not in self._pools:
            assert self._pool_class is not None, "Subclasses must set _pool_class"  # noqa: S101
            self._pools[index] = self._pool_class.from_url(  # type: ignore[attr-defined]
                self._servers[index],
                **self._pool_options,
            )
        return self._pools[index]

    def get_client(self, *, write: bool = False) -> Any:
        """Get a client connection for a read or write command."""
        pool = self._get_connection_pool(write=write)
        assert self._client_class is not None, "Subclasses must set _client_class"  # noqa: S101
        return self._client_class(connection_pool=pool)

    def close(self) -> None:
        """Disconnect every connection pool."""
        for pool in self._pools.values():
            pool.disconnect()
        self._pools.clear()

    # =========================================================================
    # Command execution
    # =========================================================================

    def execute(self, command: SortedSetCommand) -> Any:
        """Send a command descriptor and return its decoded reply.

        Connection and timeout errors become ``ConnectionInterruptedError``,
        or return the command's empty value when ``ignore_exceptions`` is
        set. Error replies from the store propagate unchanged.
        """
        client = self.get_client(write=command.name in _WRITE_COMMANDS)
        args = command.args(self._serializer)
        logger.debug("Executing %s with %d arguments", command.name, len(args) - 1)

        try:
            response = client.execute_command(*args)
        except _main_exceptions as e:
            if self._ignore_exceptions:
                if self._log_ignored_exceptions:
                    logger.exception("Exception ignored")
                return command.empty_value
            raise ConnectionInterruptedError(connection=client) from e

        return command.parse_response(response, self._serializer)

    # =========================================================================
    # Sorted Set Operations
    # =========================================================================

    def zadd(self, key: KeyT, mapping: Mapping[Any, float]) -> int:
        """Add members to a sorted set, returning how many were new."""
        pairs = [(score, member) for member, score in mapping.items()]
        if not pairs:
            raise ValueError("zadd requires at least one member")
        (score, member), *rest = pairs
        return self.execute(ZAdd(key, score, member, *rest))

    def zrem(self, key: KeyT, member: Any, *members: Any) -> int:
        """Remove members from a sorted set."""
        return self.execute(ZRem(key, member, *members))

    def zincrby(self, key: KeyT, amount: float, member: Any) -> float | None:
        """Increment the score of a member."""
        return self.execute(ZIncrBy(key, amount, member))

    def zcard(self, key: KeyT) -> int:
        """Get the number of members in a sorted set."""
        return self.execute(ZCard(key))

    def zscore(self, key: KeyT, member: Any) -> float | None:
        """Get the score of a member."""
        return self.execute(ZScore(key, member))

    def zrange(self, key: KeyT, start: int = 0, end: int = -1, *, desc: bool = False) -> list[Any]:
        """Get a range of members by index."""
        return self.execute(ZRange(key, start, end, SortOrder.DESC if desc else SortOrder.ASC))

    def zrange_with_scores(
        self,
        key: KeyT,
        start: int = 0,
        end: int = -1,
        *,
        desc: bool = False,
    ) -> list[tuple[Any, float]]:
        """Get a range of ``(member, score)`` pairs by index."""
        return self.execute(ZRangeWithScores(key, start, end, SortOrder.DESC if desc else SortOrder.ASC))

    def zrangebyscore(
        self,
        key: KeyT,
        min: float = float("-inf"),
        max: float = float("inf"),
        *,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        limit: Limit | tuple[int, int] | None = None,
        desc: bool = False,
    ) -> list[Any]:
        """Get members by score range."""
        return self.execute(
            ZRangeByScore(
                key,
                min=min,
                min_inclusive=min_inclusive,
                max=max,
                max_inclusive=max_inclusive,
                limit=limit,  # type: ignore[arg-type]
                sort=SortOrder.DESC if desc else SortOrder.ASC,
            ),
        )

    def zrangebyscore_with_scores(
        self,
        key: KeyT,
        min: float = float("-inf"),
        max: float = float("inf"),
        *,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
        limit: Limit | tuple[int, int] | None = None,
        desc: bool = False,
    ) -> list[tuple[Any, float]]:
        """Get ``(member, score)`` pairs by score range."""
        return self.execute(
            ZRangeByScoreWithScores(
                key,
                min=min,
                min_inclusive=min_inclusive,
                max=max,
                max_inclusive=max_inclusive,
                limit=limit,  # type: ignore[arg-type]
                sort=SortOrder.DESC if desc else SortOrder.ASC,
            ),
        )

    def zrank(self, key: KeyT, member: Any, *, reverse: bool = False) -> int | None:
        """Get the 0-based rank of a member, or None if it is missing."""
        return self.execute(ZRank(key, member, reverse=reverse))

    def zremrangebyrank(self, key: KeyT, start: int = 0, end: int = -1) -> int:
        """Remove members by rank range."""
        return self.execute(ZRemRangeByRank(key, start, end))

    def zremrangebyscore(self, key: KeyT, start: float = float("-inf"), end: float = float("inf")) -> int:
        """Remove members whose score lies in the closed range ``[start, end]``."""
        return self.execute(ZRemRangeByScore(key, start, end))

    def zunionstore(
        self,
        dst_key: KeyT,
        keys: Iterable[KeyT] | Mapping[KeyT, float],
        aggregate: Aggregate = Aggregate.SUM,
    ) -> int:
        """Store the union of sorted sets; a mapping of key to weight sends WEIGHTS."""
        return self._store(SetOperation.UNION, dst_key, keys, aggregate)

    def zinterstore(
        self,
        dst_key: KeyT,
        keys: Iterable[KeyT] | Mapping[KeyT, float],
        aggregate: Aggregate = Aggregate.SUM,
    ) -> int:
        """Store the intersection of sorted sets; a mapping of key to weight sends WEIGHTS."""
        return self._store(SetOperation.INTER, dst_key, keys, aggregate)

    def _store(
        self,
        operation: SetOperation,
        dst_key: KeyT,
        keys: Iterable[KeyT] | Mapping[KeyT, float],
        aggregate: Aggregate,
    ) -> int:
        if hasattr(keys, "items"):
            return self.execute(ZUnionInterStoreWeighted(operation, dst_key, keys, aggregate))  # type: ignore[arg-type]
        return self.execute(ZUnionInterStore(operation, dst_key, keys, aggregate))  # type: ignore[arg-type]

    def zcount(
        self,
        key: KeyT,
        min: float = float("-inf"),
        max: float = float("inf"),
        *,
        min_inclusive: bool = True,
        max_inclusive: bool = True,
    ) -> int:
        """Count members in a score range."""
        return self.execute(ZCount(key, min, max, min_inclusive, max_inclusive))


# =============================================================================
# RedisSortedSetClient - concrete implementation for redis-py
# =============================================================================

class RedisSortedSetClient(KeyValueSortedSetClient):
    """Sorted set client using redis-py."""

    _lib = redis
    _client_class = redis.Redis
    _pool_class = redis.ConnectionPool


# =============================================================================
# ValkeySortedSetClient - concrete implementation for valkey-py
# =============================================================================

if _VALKEY_AVAILABLE:

    class ValkeySortedSetClient(KeyValueSortedSetClient):
        """Sorted set client using valkey-py."""

        _lib = valkey
        _client_class = valkey.Valkey
        _pool_class = valkey.ConnectionPool

else:

    class ValkeySortedSetClient(KeyValueSortedSetClient):  # type: ignore[no-redef]
        """Sorted set client (requires valkey-py)."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("ValkeySortedSetClient requires valkey-py. Install with: pip install valkey")


__all__ = [
    "KeyValueSortedSetClient",
    "RedisSortedSetClient",
    "ValkeySortedSetClient",
]
