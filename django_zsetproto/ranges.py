"""Score-range formatting shared by the by-score sorted set commands.

Redis accepts a score bound either as a plain number (closed), a number
prefixed with ``(`` (open), or one of the ``-inf``/``+inf`` sentinels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

EXCLUSIVE_MARKER = "("
POSITIVE_INFINITY = "+inf"
NEGATIVE_INFINITY = "-inf"
LIMIT = "LIMIT"


def format_number(value: float) -> str:
    """Render a double the way the store echoes it back (``5`` -> ``"5.0"``)."""
    return repr(float(value))


def format_double(value: float, inclusive: bool = True) -> str:
    """Render a score bound token."""
    if math.isinf(value):
        return POSITIVE_INFINITY if value > 0 else NEGATIVE_INFINITY
    if inclusive:
        return format_number(value)
    return EXCLUSIVE_MARKER + format_number(value)


@dataclass(frozen=True, slots=True)
class ScoreBound:
    """One end of a score range.

    Infinite bounds have no open/closed distinction, so ``inclusive`` is
    ignored for them.
    """

    value: float
    inclusive: bool = True

    @property
    def is_infinite(self) -> bool:
        return math.isinf(self.value)

    @property
    def token(self) -> str:
        return format_double(self.value, self.inclusive)


def format_limit(limit: Sequence[int] | None) -> list[str]:
    """Render the optional ``LIMIT offset count`` clause."""
    if limit is None:
        return []
    offset, count = limit
    return [LIMIT, str(offset), str(count)]


def format_score_range(
    min: float = -math.inf,
    min_inclusive: bool = True,
    max: float = math.inf,
    max_inclusive: bool = True,
    limit: Sequence[int] | None = None,
) -> tuple[list[str], str, str]:
    """Format the three fragments every score-range command needs.

    Returns:
        ``(limit_tokens, min_token, max_token)``. ``limit_tokens`` is empty
        when no limit is given.
    """
    return format_limit(limit), ScoreBound(min, min_inclusive).token, ScoreBound(max, max_inclusive).token
