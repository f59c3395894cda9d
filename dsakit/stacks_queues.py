"""Stack and queue based problems: monotonic stacks, windows and water trapping."""

from collections import deque
from itertools import accumulate


def longest_unique_substring(text):
    """Return the length of the longest run of ``text`` with no repeated character."""
    window = deque()
    present = set()
    longest = 0
    for ch in text:
        if ch in present:
            while True:
                dropped = window.popleft()
                present.discard(dropped)
                if dropped == ch:
                    break
        window.append(ch)
        present.add(ch)
        longest = max(longest, len(window))
    return longest


def next_larger(items):
    """Return, for each element, the nearest strictly larger element to its right.

    Positions with no larger element to the right get ``None``.
    """
    result = [None] * len(items)
    stack = []
    for i in reversed(range(len(items))):
        while stack and items[i] >= stack[-1]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(items[i])
    return result


def next_greater_circular(items):
    """Like ``next_larger`` but the search wraps around to the start.

    Only the maxima get ``None``.
    """
    n = len(items)
    result = [None] * n
    stack = []
    for i in reversed(range(2 * n)):
        value = items[i % n]
        while stack and value >= stack[-1]:
            stack.pop()
        if stack:
            result[i % n] = stack[-1]
        stack.append(value)
    return result


def subarrays(items):
    """Return every non-empty contiguous run of ``items``.

    Runs are ordered by start position, then by length.
    """
    items = list(items)
    return [items[i:j] for i in range(len(items)) for j in range(i + 1, len(items) + 1)]


def subarray_minimums(groups):
    """Return the minimum of each sequence in ``groups``."""
    return [min(group) for group in groups]


def sum_subarray_mins(items):
    """Return the sum of the minimum of every contiguous run of ``items``."""
    items = list(items)
    return sum(
        sum(accumulate(items[i:], min))
        for i in range(len(items))
    )


def trap_rain_water(heights):
    """Return the water held between bars, using prefix and suffix maxima."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for height, left, right in zip(heights, left_max, right_max)
        if height < left and height < right
    )


def trap_rain_water_two_pointer(heights):
    """Return the water held between bars, walking two pointers inwards."""
    total = 0
    left_max = right_max = 0
    left, right = 0, len(heights) - 1
    while left < right:
        if heights[left] <= heights[right]:
            if left_max > heights[left]:
                total += left_max - heights[left]
            else:
                left_max = heights[left]
            left += 1
        else:
            if right_max > heights[right]:
                total += right_max - heights[right]
            else:
                right_max = heights[right]
            right -= 1
    return total


def largest_rectangle_area(heights):
    """Return the area of the largest rectangle under a histogram of bar heights."""
    best = 0
    stack = []  # (start index, height), heights strictly increasing
    for i, height in enumerate(list(heights) + [0]):
        start = i
        while stack and stack[-1][1] >= height:
            start, top = stack.pop()
            best = max(best, top * (i - start))
        stack.append((start, height))
    return best


def reversed_queue(queue):
    """Return a new deque holding the elements of ``queue`` in reverse order.

    The elements are passed through a stack; ``queue`` itself is not changed.
    """
    stack = []
    for value in queue:
        stack.append(value)
    result = deque()
    while stack:
        result.append(stack.pop())
    return result