"""Singly linked lists and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import reduce


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def merge_two(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one; on equal values the second list goes first."""
    anchor = ListNode()
    tail = anchor
    while head1 is not None and head2 is not None:
        if head1.val < head2.val:
            tail.next, head1 = head1, head1.next
        else:
            tail.next, head2 = head2, head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return anchor.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge any number of sorted lists, folding them in from left to right."""
    return reduce(merge_two, lists, None)