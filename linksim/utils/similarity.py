"""Jaro and Jaro-Winkler string similarity.

Background reading: Cohen, Ravikumar & Fienberg, "A Comparison of String
Distance Metrics for Name-Matching Tasks" (IJCAI-03 workshop).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from .errors import SequenceTypeError

PREFIX_WEIGHT = 0.1
MAX_PREFIX = 4


def _as_sequence(value: Any, argument: str) -> Sequence:
    # Missing fields compare as empty.
    if value is None:
        return ""
    if isinstance(value, Sequence):
        return value
    raise SequenceTypeError(argument, value)


def _identical(a: Sequence, b: Sequence) -> bool:
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def jaro(a: Optional[Sequence], b: Optional[Sequence]) -> float:
    """Compute Jaro similarity between two sequences.

    Characters match when they are equal and no further apart than
    ``max(len(a), len(b)) // 2 - 1`` positions. Each position of ``a`` claims
    the first unclaimed equal position of ``b`` inside its window.

    Returns 1.0 for identical inputs (including two empty ones), 0.0 when
    exactly one input is empty or nothing matches.
    """
    a = _as_sequence(a, "a")
    b = _as_sequence(b, "b")
    if _identical(a, b):
        return 1.0
    if not a or not b:
        return 0.0

    a_len = len(a)
    b_len = len(b)
    window = max(a_len, b_len) // 2 - 1

    match = 0
    a_matched = [False] * a_len
    b_matched = [False] * b_len

    for i in range(a_len):
        start = max(0, i - window)
        end = min(i + window + 1, b_len)
        # range() is empty when end <= start, e.g. for a negative window.
        for j in range(start, end):
            if b_matched[j]:
                continue
            if a[i] != b[j]:
                continue
            a_matched[i] = True
            b_matched[j] = True
            match += 1
            break

    if not match:
        return 0.0

    t = 0
    point = 0
    for i in range(a_len):
        if not a_matched[i]:
            continue
        while not b_matched[point]:
            point += 1
        if a[i] != b[point]:
            t += 1
        point += 1
    t //= 2

    # Single fraction keeps rounding error below the three-term average.
    numerator = match * match * (a_len + b_len) + a_len * b_len * (match - t)
    denominator = 3 * a_len * b_len * match
    return numerator / denominator


def common_prefix_length(a: Optional[Sequence], b: Optional[Sequence], limit: int = MAX_PREFIX) -> int:
    """Length of the shared leading run of ``a`` and ``b``, capped at ``limit``."""
    a = _as_sequence(a, "a")
    b = _as_sequence(b, "b")
    prefix = 0
    for i in range(min(limit, len(a), len(b))):
        if a[i] != b[i]:
            break
        prefix += 1
    return prefix


def jaro_winkler(a: Optional[Sequence], b: Optional[Sequence]) -> float:
    """Compute Jaro-Winkler similarity between two sequences.

    Boosts the Jaro score by ``0.1`` per shared leading character, for at most
    four characters: ``jaro + 0.1 * prefix * (1 - jaro)``.
    """
    prefix = common_prefix_length(a, b)
    score = jaro(a, b)
    return score + PREFIX_WEIGHT * prefix * (1.0 - score)
