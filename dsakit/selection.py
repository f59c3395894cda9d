"""Picking particular elements out of sequences: ranks, majorities, shared letters."""

import heapq
from collections import Counter


def digit_indices(items, target):
    """Return the indices in ``items`` of each decimal digit of ``target``.

    Digits are taken most significant first; for each digit every matching
    index is listed in order. Returns an empty list when nothing matches.
    """
    if target < 0:
        raise ValueError("target must be non-negative")
    digits = [int(ch) for ch in str(target)] if target else []
    return [j for digit in digits for j, value in enumerate(items) if value == digit]


def second_largest(items):
    """Return the largest value strictly below the maximum, or ``None``."""
    top_two = heapq.nlargest(2, set(items))
    return top_two[1] if len(top_two) == 2 else None


def majority_element(items):
    """Return the value occurring in more than half of ``items``, or ``None``."""
    counts = Counter(items)
    for value in items:
        if counts[value] * 2 > len(items):
            return value
    return None


def common_chars(words):
    """Return the characters found in every word, repeated as often as in all of them.

    Characters come in the order they first appear in the first word.
    """
    if not words:
        return []
    shared = Counter(words[0])
    for word in words[1:]:
        shared &= Counter(word)
    return [ch for ch in dict.fromkeys(words[0]) for _ in range(shared[ch])]