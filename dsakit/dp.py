"""Classic dynamic-programming problems solved bottom-up."""

from math import inf


def fibonacci(n):
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def climb_stairs(n):
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def frog_jump(heights):
    """Return the least energy to reach the last step jumping one or two steps.

    A jump between steps costs the absolute difference of their heights.
    """
    return frog_jump_k(heights, 2)


def frog_jump_k(heights, k):
    """Return the least energy to reach the last step jumping up to ``k`` steps."""
    if not heights:
        raise ValueError("heights must not be empty")
    if k <= 0:
        raise ValueError("k must be positive")
    cost = [0]
    for i in range(1, len(heights)):
        cost.append(
            min(
                cost[j] + abs(heights[i] - heights[j])
                for j in range(max(0, i - k), i)
            )
        )
    return cost[-1]


def max_non_adjacent_sum(nums):
    """Return the largest sum of elements of ``nums`` no two of which are adjacent."""
    if not nums:
        raise ValueError("nums must not be empty")
    before_previous, previous = 0, nums[0]
    for value in nums[1:]:
        before_previous, previous = previous, max(value + before_previous, previous)
    return previous


def house_robber(money):
    """Return the most that can be taken from houses in a circle, no two adjacent."""
    if not money:
        raise ValueError("money must not be empty")
    if len(money) == 1:
        return money[0]
    return max(max_non_adjacent_sum(money[:-1]), max_non_adjacent_sum(money[1:]))


def ninja_training(points):
    """Return the most points over all days, never repeating an activity on consecutive days.

    ``points[day][activity]`` gives the points for that activity on that day.
    """
    if not points or not points[0]:
        raise ValueError("points must not be empty")
    width = len(points[0])
    if any(len(row) != width for row in points):
        raise ValueError("every day needs the same number of activities")

    def best_excluding(row, previous):
        # best[last]: most points up to this day when activity ``last`` is barred;
        # ``last == width`` bars nothing.
        return [
            max(
                (row[i] + previous[i] for i in range(width) if i != last),
                default=0,
            )
            for last in range(width + 1)
        ]

    best = best_excluding(points[0], [0] * width)
    for row in points[1:]:
        best = best_excluding(row, best)
    return best[width]


def unique_paths(m, n):
    """Count right/down paths from the top-left to the bottom-right of an ``m`` by ``n`` grid."""
    if m <= 0 or n <= 0:
        raise ValueError("grid dimensions must be positive")
    return unique_paths_with_obstacles([[0] * n for _ in range(m)])


def unique_paths_with_obstacles(grid):
    """Count right/down paths across ``grid`` avoiding cells that hold 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    row_counts = [0] * width
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == 1:
                row_counts[j] = 0
            elif i == 0 and j == 0:
                row_counts[j] = 1
            elif j > 0:
                row_counts[j] += row_counts[j - 1]
    return row_counts[-1]


__all__ = [
    "fibonacci",
    "climb_stairs",
    "frog_jump",
    "frog_jump_k",
    "max_non_adjacent_sum",
    "house_robber",
    "ninja_training",
    "unique_paths",
    "unique_paths_with_obstacles",
]

_ = inf