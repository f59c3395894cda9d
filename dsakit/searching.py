"""Binary search variants and two-pointer searches over sorted sequences."""


def _search(items, x, lean):
    """Binary search for ``x``.

    ``lean`` picks which match to report: 0 stops at the first match seen,
    -1 keeps looking left for the first occurrence, 1 keeps looking right
    for the last one.
    """
    low, high = 0, len(items) - 1
    found = None
    while low <= high:
        mid = (low + high) // 2
        if items[mid] > x:
            high = mid - 1
        elif items[mid] < x:
            low = mid + 1
        else:
            found = mid
            if lean == 0:
                return mid
            if lean < 0:
                high = mid - 1
            else:
                low = mid + 1
    return found


def _pair_indices(ordered, left, right, target):
    """Close two pointers on sorted ``ordered``; return indices adding to ``target``."""
    while left < right:
        pair = ordered[left] + ordered[right]
        if pair == target:
            return left, right
        if pair < target:
            left += 1
        else:
            right -= 1
    return None


def binary_search(items, x):
    """Return an index of ``x`` in sorted ``items``, or ``None`` if absent."""
    return _search(items, x, 0)


def binary_search_recursive(items, x):
    """Recursive binary search; returns an index of ``x`` or ``None``."""

    def search(low, high):
        if low > high:
            return None
        mid = (low + high) // 2
        if items[mid] == x:
            return mid
        if items[mid] > x:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def first_occurrence(items, x):
    """Return the index of the first ``x`` in sorted ``items``, or ``None``."""
    return _search(items, x, -1)


def last_occurrence(items, x):
    """Return the index of the last ``x`` in sorted ``items``, or ``None``."""
    return _search(items, x, 1)


def integer_sqrt(x):
    """Return the floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    low, high, answer = 1, x, 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square > x:
            high = mid - 1
        else:
            low = mid + 1
            answer = mid
    return answer


def has_pair_with_sum(items, x):
    """Tell whether two distinct elements of sorted ``items`` add to ``x``."""
    return _pair_indices(items, 0, len(items) - 1, x) is not None


def find_triplet(items, total):
    """Find three elements adding to ``total``.

    Returns them in ascending order as a tuple, or ``None``. ``items`` is
    left untouched.
    """
    ordered = sorted(items)
    for i, first in enumerate(ordered[:-2]):
        found = _pair_indices(ordered, i + 1, len(ordered) - 1, total - first)
        if found is not None:
            left, right = found
            return (first, ordered[left], ordered[right])
    return None