"""Fixed-size sliding window sums and maxima."""

import heapq


def _check_window(items, k):
    if k <= 0:
        raise ValueError("window size must be positive")
    if k > len(items):
        raise ValueError("window larger than the sequence")


def window_sums(items, k):
    """Return the sum of every window of ``k`` consecutive elements."""
    _check_window(items, k)
    total = sum(items[:k])
    sums = [total]
    for leaving, entering in zip(items, items[k:]):
        total += entering - leaving
        sums.append(total)
    return sums


def max_window_sum(items, k):
    """Return the largest sum over windows of ``k`` consecutive elements."""
    return max(window_sums(items, k))


def max_sliding_window(items, k):
    """Return the maximum of each window of size ``k``, checking each window."""
    if k <= 0:
        raise ValueError("window size must be positive")
    return [max(items[i:i + k]) for i in range(len(items) - k + 1)]


def max_sliding_window_heap(items, k):
    """Return the maximum of each window of size ``k`` using a max-heap."""
    if k <= 0:
        raise ValueError("window size must be positive")
    result = []
    heap = []
    for i, value in enumerate(items):
        heapq.heappush(heap, (-value, i))
        while heap and heap[0][1] <= i - k:
            heapq.heappop(heap)
        if i >= k - 1:
            result.append(-heap[0][0])
    return result