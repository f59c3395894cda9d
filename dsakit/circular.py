"""A circular doubly linked list with value-addressed insertion and removal."""


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value):
        self.value = value
        self.prev = self
        self.next = self


class CircularDoublyLinkedList:
    """Circular doubly linked list; the last node links back to the first."""

    def __init__(self, values=()):
        self._head = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _forward(self):
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _locate(self, target):
        for node in self._forward():
            if node.value == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    def __iter__(self):
        for node in self._forward():
            yield node.value

    def __reversed__(self):
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.value
            node = node.prev

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def _link_before(self, successor, value):
        node = _Node(value)
        if successor is None:
            self._head = node
        else:
            node.prev = successor.prev
            node.next = successor
            successor.prev.next = node
            successor.prev = node
        self._size += 1
        return node

    def _unlink(self, node):
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return node.value

    def push_front(self, value):
        """Add ``value`` at the beginning."""
        self._head = self._link_before(self._head, value)

    def push_back(self, value):
        """Add ``value`` at the end."""
        self._link_before(self._head, value)

    def insert_before(self, target, value):
        """Insert ``value`` before the first node holding ``target``.

        Inserting before the first node makes the new node the first.
        Raises ``ValueError`` if ``target`` is absent.
        """
        node = self._locate(target)
        new = self._link_before(node, value)
        if node is self._head:
            self._head = new

    def insert_after(self, target, value):
        """Insert ``value`` after the first node holding ``target``.

        Raises ``ValueError`` if ``target`` is absent.
        """
        node = self._locate(target)
        self._link_before(node.next, value)

    def pop_front(self):
        """Remove and return the first value; ``IndexError`` if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_back(self):
        """Remove and return the last value; ``IndexError`` if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head.prev)

    def _check_removable(self):
        if self._size < 2:
            raise IndexError("needs at least two nodes")

    def remove_before(self, target):
        """Remove and return the value before the first node holding ``target``.

        Before the first node comes the last one. Raises ``IndexError`` when the
        list has fewer than two nodes and ``ValueError`` if ``target`` is absent.
        """
        self._check_removable()
        node = self._locate(target)
        return self._unlink(node.prev)

    def remove_after(self, target):
        """Remove and return the value after the first node holding ``target``.

        After the last node comes the first one. Raises ``IndexError`` when the
        list has fewer than two nodes and ``ValueError`` if ``target`` is absent.
        """
        self._check_removable()
        node = self._locate(target)
        return self._unlink(node.next)

    def clear(self):
        """Remove every node."""
        self._head = None
        self._size = 0