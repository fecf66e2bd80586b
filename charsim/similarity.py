"""
Cosine similarity over character-count vectors.

Each frequency table is treated as a sparse vector indexed by character:

    cos(A, B) = (A . B) / (|A| * |B|)

Counts are non-negative, so the result lies in [0, 1].
"""

import math
from typing import Mapping

FrequencyTable = Mapping[str, int]


def dot_product(a: FrequencyTable, b: FrequencyTable) -> int:
    return sum(a.get(k, 0) * b.get(k, 0) for k in set(a) | set(b))


def magnitude(table: FrequencyTable) -> float:
    return math.sqrt(sum(count * count for count in table.values()))


def cosine_similarity(a: FrequencyTable, b: FrequencyTable) -> float:
    """
    Compute the cosine similarity of two frequency tables.

    Args:
        a: Character counts of the first text
        b: Character counts of the second text

    Returns:
        Similarity in [0.0, 1.0]; exactly 0.0 when either table is empty
        or all-zero
    """
    denominator = magnitude(a) * magnitude(b)
    if denominator == 0:
        return 0.0

    score = dot_product(a, b) / denominator
    # Rounding in sqrt can land an identical pair a hair above 1.0
    return min(1.0, max(0.0, score))
