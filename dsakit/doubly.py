"""A doubly linked list with value-addressed insertion and removal."""


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value, prev=None, next=None):
        self.value = value
        self.prev = prev
        self.next = next


class DoublyLinkedList:
    """Doubly linked list; nodes are addressed by the first one holding a value."""

    def __init__(self, values=()):
        self._head = None
        self._tail = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _forward(self):
        node = self._head
        while node is not None:
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
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def _link(self, value, prev, next):
        node = _Node(value, prev, next)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if next is None:
            self._tail = node
        else:
            next.prev = node
        self._size += 1
        return node

    def _unlink(self, node):
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def push_front(self, value):
        """Add ``value`` at the beginning."""
        self._link(value, None, self._head)

    def push_back(self, value):
        """Add ``value`` at the end."""
        self._link(value, self._tail, None)

    def insert_before(self, target, value):
        """Insert ``value`` before the first node holding ``target``.

        Raises ``ValueError`` if ``target`` is absent.
        """
        node = self._locate(target)
        self._link(value, node.prev, node)

    def insert_after(self, target, value):
        """Insert ``value`` after the first node holding ``target``.

        Raises ``ValueError`` if ``target`` is absent.
        """
        node = self._locate(target)
        self._link(value, node, node.next)

    def pop_front(self):
        """Remove and return the first value; ``IndexError`` if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_back(self):
        """Remove and return the last value; ``IndexError`` if empty."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._tail)

    def remove_before(self, target):
        """Remove and return the value before the first node holding ``target``.

        Raises ``ValueError`` if ``target`` is absent and ``IndexError`` if it
        is the first node.
        """
        node = self._locate(target)
        if node.prev is None:
            raise IndexError(f"nothing precedes {target!r}")
        return self._unlink(node.prev)

    def remove_after(self, target):
        """Remove and return the value after the first node holding ``target``.

        Raises ``ValueError`` if ``target`` is absent and ``IndexError`` if it
        is the last node.
        """
        node = self._locate(target)
        if node.next is None:
            raise IndexError(f"nothing follows {target!r}")
        return self._unlink(node.next)

    def clear(self):
        """Remove every node."""
        self._head = self._tail = None
        self._size = 0