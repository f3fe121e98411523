"""
Functional queue interface over an optional container reference.

Every operation accepts `None` in place of a container and treats it as a
failed (or empty) call instead of raising, so callers can chain `create()`
straight into the other operations.
"""

import logging

from linkedqueue.linked_list import SequenceContainer

logger = logging.getLogger(__name__)


def create() -> SequenceContainer | None:
    """Create an empty queue, or return None if it could not be allocated."""
    try:
        return SequenceContainer()
    except MemoryError:
        logger.debug("allocation failed while creating queue")
        return None


def destroy(q: SequenceContainer | None) -> None:
    """Release every element held by `q`. No effect if `q` is None."""
    if q is None:
        return
    q.free()


def insert_front(q: SequenceContainer | None, text: str | bytes | bytearray | memoryview) -> bool:
    """
    Insert a copy of `text` at the head of the queue.

    Returns:
        False if `q` is None or memory could not be allocated, True otherwise
    """
    if q is None:
        logger.debug("insert_front on missing queue")
        return False
    return q.insert_head(text)


def insert_back(q: SequenceContainer | None, text: str | bytes | bytearray | memoryview) -> bool:
    """
    Insert a copy of `text` at the tail of the queue.

    Returns:
        False if `q` is None or memory could not be allocated, True otherwise
    """
    if q is None:
        logger.debug("insert_back on missing queue")
        return False
    return q.insert_tail(text)


def remove_front(
    q: SequenceContainer | None, out: bytearray | memoryview | None = None, bufsize: int | None = None
) -> bool:
    """
    Remove the head element, optionally copying it into `out`.

    Args:
        q: Queue to remove from
        out: Optional writable buffer receiving the removed value as NUL-terminated UTF-8
        bufsize: Capacity of `out`; at most `bufsize - 1` content bytes are written

    Returns:
        False if `q` is None or empty, True otherwise
    """
    if q is None:
        logger.debug("remove_front on missing queue")
        return False
    return q.remove_head(out, bufsize)


def size(q: SequenceContainer | None) -> int:
    if q is None:
        return 0
    return q.size()


def reverse(q: SequenceContainer | None) -> None:
    """Reverse the queue in place. No effect if `q` is None or has fewer than two elements."""
    if q is None:
        return
    q.reverse()


def sort(q: SequenceContainer | None) -> None:
    """Sort the queue ascending in place. No effect if `q` is None or has fewer than two elements."""
    if q is None:
        return
    q.sort()
