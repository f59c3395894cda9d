"""Element deletion, two-sum lookups and anagram checks on sequences."""

from collections import Counter, defaultdict
from itertools import combinations


def delete_first(items, value):
    """Return a copy of ``items`` without the first occurrence of ``value``.

    If ``value`` is absent the copy is returned unchanged.
    """
    result = list(items)
    try:
        result.remove(value)
    except ValueError:
        pass
    return result


def two_sum(nums, target):
    """Return the first index pair ``(i, j)``, ``i < j``, whose values add to ``target``.

    Every pair is tried in order. Returns ``None`` when no pair exists.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return (i, j)
    return None


def two_sum_indexed(nums, target):
    """Find an index pair adding to ``target`` using a value-to-index table.

    For repeated values the table keeps the last index. Returns ``None``
    when no pair exists.
    """
    indices = {value: index for index, value in enumerate(nums)}
    for i, value in enumerate(nums):
        j = indices.get(target - value)
        if j is not None and j != i:
            return (i, j)
    return None


def is_anagram(s, t):
    """Tell whether ``s`` and ``t`` hold the same characters, by sorting."""
    if len(s) != len(t):
        return False
    return sorted(s) == sorted(t)


def is_anagram_counted(s, t):
    """Tell whether ``s`` and ``t`` hold the same characters, by counting."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def group_anagrams(words):
    """Group words that are anagrams of each other.

    Groups come in the order their first word appears; words keep their order.
    """
    groups = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())