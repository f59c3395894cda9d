"""A singly linked list with value-addressed insertion and removal."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value, next=None):
        self.value = value
        self.next = next


class SinglyLinkedList:
    """Singly linked list; nodes are addressed by the first one holding a value."""

    def __init__(self, values=()):
        self._head = self._tail = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self):
        previous, node = None, self._head
        while node is not None:
            yield previous, node
            previous, node = node, node.next

    def _locate(self, target):
        for previous, node in self._nodes():
            if node.value == target:
                return previous, node
        raise ValueError(f"{target!r} is not in the list")

    def _link(self, previous, value):
        """Put a new node holding ``value`` right after ``previous`` (None: at the head)."""
        following = self._head if previous is None else previous.next
        node = _Node(value, following)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        if following is None:
            self._tail = node
        self._size += 1

    def _unlink(self, previous, node):
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return node.value

    def _end(self, last):
        """Return the (previous, node) pair of the head or the tail."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        if not last:
            return None, self._head
        return next(pair for pair in self._nodes() if pair[1] is self._tail)

    def __iter__(self):
        for _, node in self._nodes():
            yield node.value

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, value):
        """Prepend ``value``."""
        self._link(None, value)

    def push_back(self, value):
        """Append ``value``."""
        self._link(self._tail, value)

    def insert_before(self, target, value):
        """Insert ``value`` ahead of the first ``target``; ``ValueError`` if absent."""
        previous, _ = self._locate(target)
        self._link(previous, value)

    def insert_after(self, target, value):
        """Insert ``value`` behind the first ``target``; ``ValueError`` if absent."""
        _, node = self._locate(target)
        self._link(node, value)

    def pop_front(self):
        """Remove and return the first value; ``IndexError`` if empty."""
        return self._unlink(*self._end(last=False))

    def pop_back(self):
        """Remove and return the last value; ``IndexError`` if empty."""
        return self._unlink(*self._end(last=True))

    def remove(self, value):
        """Remove the first node holding ``value``; ``ValueError`` if absent."""
        self._unlink(*self._locate(value))

    def remove_after(self, target):
        """Remove and return the value following the first ``target``.

        Raises ``ValueError`` if ``target`` is absent and ``IndexError`` if it
        is the last node.
        """
        _, node = self._locate(target)
        if node.next is None:
            raise IndexError(f"nothing follows {target!r}")
        return self._unlink(node, node.next)

    def clear(self):
        """Drop every node."""
        self._head = self._tail = None
        self._size = 0

    def sort(self):
        """Sort the values in ascending order, in place."""
        for (_, node), value in zip(self._nodes(), sorted(self)):
            node.value = value