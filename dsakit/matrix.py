"""Traversal orders and transformations of rectangular matrices."""


def snake_order(matrix):
    """Return elements row by row, reversing every second row."""
    order = []
    for i, row in enumerate(matrix):
        order.extend(row if i % 2 == 0 else reversed(row))
    return order


def boundary_order(matrix):
    """Return the border elements clockwise, starting at the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    rows, cols = len(matrix), len(matrix[0])
    if rows == 1:
        return list(matrix[0])
    if cols == 1:
        return [row[0] for row in matrix]
    order = list(matrix[0])
    order.extend(row[-1] for row in matrix[1:])
    order.extend(reversed(matrix[-1][:-1]))
    order.extend(row[0] for row in reversed(matrix[1:-1]))
    return order


def transpose(matrix):
    """Return the transpose of ``matrix`` as a new list of lists."""
    return [list(column) for column in zip(*matrix)]


def transpose_in_place(matrix):
    """Transpose a square ``matrix`` in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("in-place transpose needs a square matrix")
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]


def spiral_order(matrix):
    """Return elements in clockwise spiral order from the top-left corner."""
    if not matrix:
        return []
    order = []
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        order.extend(matrix[top][left:right + 1])
        top += 1
        order.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if left <= right:
            order.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
        if top <= bottom:
            order.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
    return order


def rotate_anticlockwise(matrix):
    """Return ``matrix`` rotated a quarter turn anticlockwise.

    This is the transpose with its rows taken in reverse.
    """
    return transpose(matrix)[::-1]