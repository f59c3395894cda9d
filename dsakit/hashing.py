"""Set and dictionary based helpers: intersections, unions and counts."""

from collections import Counter


def intersection(a, b):
    """Return the elements of ``a`` that also occur in ``b``, in ``a``'s order."""
    lookup = set(b)
    return [value for value in a if value in lookup]


def union(a, b):
    """Return the set of elements occurring in ``a`` or ``b``."""
    return set(a) | set(b)


def pairs_with_sum(items, x):
    """Return every pair ``(earlier, current)`` adding to ``x``.

    A pair is reported when its second element is reached, with the first
    taken from the values seen before it.
    """
    seen = set()
    pairs = []
    for value in items:
        if x - value in seen:
            pairs.append((x - value, value))
        seen.add(value)
    return pairs


def has_zero_sum_subarray(items):
    """Tell whether some non-empty contiguous run of ``items`` sums to zero."""
    prefixes = {0}
    prefix = 0
    for value in items:
        prefix += value
        if prefix in prefixes:
            return True
        prefixes.add(prefix)
    return False


def count_frequencies(items):
    """Return a dictionary mapping each element to how often it occurs."""
    return dict(Counter(items))


def sorted_by_key(mapping):
    """Return the items of ``mapping`` as ``(key, value)`` pairs sorted by key."""
    return sorted(mapping.items(), key=lambda pair: pair[0])