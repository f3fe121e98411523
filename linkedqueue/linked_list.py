import logging
from collections.abc import Iterable, Iterator

from linkedqueue.merge_sort import merge_sort
from linkedqueue.utils import copy_to_buffer, to_text

logger = logging.getLogger(__name__)


class ListNode:
    """Node for the singly linked chain of stored strings."""

    def __init__(self, value: str):
        self.value = value
        self.next: ListNode | None = None

    def __repr__(self):
        return f"Node({self.value!r})"


class SequenceContainer:
    """
    Singly linked queue of owned strings with O(1) insertion at both ends.

    Usable as a FIFO (insert_tail + remove_head) or a LIFO (insert_head +
    remove_head). Mutating operations report failure through their return
    value and leave the container untouched when they fail.
    """

    def __init__(self, values: Iterable[str] | None = None):
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self.count = 0

        # Build the chain from the initial values
        for value in values or ():
            if not self.insert_tail(value):
                raise MemoryError("could not allocate node for initial value")

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[str]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __repr__(self):
        return f"SequenceContainer({self.to_list()!r})"

    @staticmethod
    def _new_node(value: str | bytes | bytearray | memoryview) -> ListNode | None:
        """Copy `value` into a fresh node, or return None if memory runs out."""
        try:
            return ListNode(to_text(value))
        except MemoryError:
            logger.debug("allocation failed while creating node")
            return None

    def insert_head(self, value: str | bytes | bytearray | memoryview) -> bool:
        """Insert a copy of `value` at the head of the queue."""
        new_node = self._new_node(value)
        if new_node is None:
            return False

        new_node.next = self.head
        self.head = new_node
        if self.tail is None:
            self.tail = new_node
        self.count += 1
        return True

    def insert_tail(self, value: str | bytes | bytearray | memoryview) -> bool:
        """Insert a copy of `value` at the tail of the queue."""
        new_node = self._new_node(value)
        if new_node is None:
            return False

        if self.tail is None:
            self.head = self.tail = new_node
        else:
            self.tail.next = new_node
            self.tail = new_node
        self.count += 1
        return True

    def remove_head(self, out: bytearray | memoryview | None = None, bufsize: int | None = None) -> bool:
        """
        Remove the head element.

        If `out` is given, the removed value is copied into it as NUL-terminated
        UTF-8, truncated to at most `bufsize - 1` bytes.

        Args:
            out: Optional writable buffer receiving the removed value
            bufsize: Capacity of `out`; defaults to (and is capped at) len(out)

        Returns:
            True if an element was removed, False if the queue was empty
        """
        node = self.head
        if node is None:
            logger.debug("remove_head on empty queue")
            return False

        if out is not None:
            copy_to_buffer(node.value, out, bufsize)

        self.head = node.next
        node.next = None
        if self.head is None:
            self.tail = None
        self.count -= 1
        return True

    def pop_head(self) -> str | None:
        """Remove the head element and return its value, or None if empty."""
        node = self.head
        if node is None:
            return None
        value = node.value
        self.remove_head()
        return value

    def peek_head(self) -> str | None:
        """Return the head value without removing it, or None if empty."""
        return self.head.value if self.head is not None else None

    def peek_tail(self) -> str | None:
        """Return the tail value, or None if empty."""
        return self.tail.value if self.tail is not None else None

    def size(self) -> int:
        """Return the number of stored elements."""
        return self.count

    def reverse(self) -> None:
        """
        Reverse the queue in place by relinking its nodes.

        The original tail stays fixed as an anchor: its `next` holds the
        already reversed prefix while each node after the head is detached
        and pushed in front of that prefix. No node is created or dropped.
        """
        if self.head is None or self.count == 1:
            return

        head, tail = self.head, self.tail
        current = head.next
        tail.next = head
        while current is not tail:
            head.next = current.next
            current.next = tail.next
            tail.next = current
            current = head.next

        head.next = None
        self.head, self.tail = tail, head

    def sort(self) -> None:
        """Stable ascending sort by value, relinking nodes in place."""
        if self.count <= 1:
            return
        self.head, self.tail = merge_sort(self.head, self.count)

    def free(self) -> None:
        """Unlink and drop every node, leaving an empty queue."""
        current = self.head
        self.head = self.tail = None
        self.count = 0
        # Unlink iteratively so a long chain is not released recursively
        while current is not None:
            current.next, current = None, current.next

    def to_list(self) -> list[str]:
        """Convert the queue to a regular list, head first."""
        return list(self)
