"""Elementary quadratic sorts and a merge of two sorted sequences."""


def bubble_sort(items):
    """Return a sorted copy of ``items`` using bubble sort."""
    result = list(items)
    n = len(result)
    for i in range(n):
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(items):
    """Return a sorted copy of ``items`` using selection sort."""
    result = list(items)
    n = len(result)
    for i in range(n):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items):
    """Return a sorted copy of ``items`` using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        j = i - 1
        while j >= 0 and result[j] > result[j + 1]:
            result[j], result[j + 1] = result[j + 1], result[j]
            j -= 1
    return result


def merge_sorted(a, b):
    """Merge two sorted sequences into one sorted list.

    On equal values the element of ``b`` comes first.
    """
    merged = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged