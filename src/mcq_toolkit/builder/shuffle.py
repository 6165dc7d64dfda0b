"""
Module: builder.shuffle

Purpose:
    Pure Fisher-Yates shuffle over a copy of the input.

Key Functions:
    - shuffled(): New list in random order; input untouched
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Return a shuffled copy of items.

    Walks i from the last index down to 1 and swaps with j = rng.randint(0, i),
    so every permutation is equally likely for a uniform rng.

    Args:
        items: Items to reorder (never mutated)
        rng: Random source; a fresh unseeded Random if omitted

    Returns:
        New list with the same elements (same objects) in random order
    """
    rng = rng or random.Random()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
