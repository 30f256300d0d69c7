"""Singly linked lists: construction, cycle finding, middle and reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: int
    next: Optional[ListNode] = None


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link ``values`` into a list and return its head, or None if empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def find_cycle(head: Optional[ListNode]) -> list[int]:
    """Values around the cycle, starting at its entry; empty if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return []
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    cycle = [slow.data]
    node = slow.next
    while node is not slow:
        cycle.append(node.data)
        node = node.next
    return cycle


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """The middle node; the second of the two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def reverse_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    rest = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return rest