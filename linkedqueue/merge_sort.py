"""
Merge sort over singly linked node chains.

Nodes are reordered by rewiring their `next` links only: no node is created,
copied or dropped, and no sentinel node is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkedqueue.linked_list import ListNode


def split_run(head: ListNode | None, length: int) -> ListNode | None:
    """Cut the chain after its first `length` nodes and return the remainder."""
    if head is None:
        return None
    for _ in range(length - 1):
        if head.next is None:
            return None
        head = head.next
    rest = head.next
    head.next = None
    return rest


def merge_runs(left: ListNode, right: ListNode | None) -> tuple[ListNode, ListNode]:
    """
    Merge two sorted runs into one.

    On equal values the node from `left` comes first, which keeps the sort stable.

    Args:
        left: Head of the first sorted run (must not be empty)
        right: Head of the second sorted run, or None

    Returns:
        (head, tail) of the merged run
    """
    if right is None:
        tail = left
        while tail.next is not None:
            tail = tail.next
        return left, tail

    if right.value < left.value:
        head, right = right, right.next
    else:
        head, left = left, left.next
    tail = head

    while left is not None and right is not None:
        if right.value < left.value:
            tail.next, right = right, right.next
        else:
            tail.next, left = left, left.next
        tail = tail.next

    tail.next = left if left is not None else right
    while tail.next is not None:
        tail = tail.next
    return head, tail


def merge_sort(head: ListNode | None, length: int) -> tuple[ListNode | None, ListNode | None]:
    """
    Sort a chain of `length` nodes bottom-up and return its new (head, tail).

    Runs of width 1, 2, 4, ... are merged pairwise in place, so the extra
    space is constant and there is no recursion.
    """
    if head is None or length <= 1:
        return head, head

    tail = head
    width = 1
    while width < length:
        current = head
        head = None
        prev_tail = None
        while current is not None:
            left = current
            right = split_run(left, width)
            current = split_run(right, width)
            run_head, run_tail = merge_runs(left, right)
            if prev_tail is None:
                head = run_head
            else:
                prev_tail.next = run_head
            prev_tail = run_tail
        tail = prev_tail
        width *= 2
    return head, tail
