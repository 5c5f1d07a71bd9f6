from __future__ import annotations

import math
from collections import Counter


def shannon_entropy(value: str) -> float:
    """
    Calculate Shannon entropy of a string (bits per character).

    A single repeated character scores 0; ``n`` distinct, equally frequent
    characters score ``log2(n)``.
    """
    if not value:
        return 0.0
    length = len(value)
    entropy = 0.0
    for count in Counter(value).values():
        p = count / length
        entropy -= p * math.log2(p)
    return entropy
