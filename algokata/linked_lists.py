"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def delete_node(node: Optional[ListNode]) -> None:
    """Remove ``node`` from its list given only the node itself.

    The value of the following node is copied in and that node is unlinked.
    A missing node or the tail node is left unchanged.
    """
    if node is None or node.next is None:
        return
    following = node.next
    node.val = following.val
    node.next = following.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the list so nodes at odd positions come before those at even ones."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the middle node (index ``n // 2``) and return the head.

    A list of fewer than two nodes becomes empty.
    """
    if head is None or head.next is None:
        return None
    slow = fast = head
    prev = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        prev = slow
        slow = slow.next
    prev.next = slow.next
    return head


def pair_sum(head: Optional[ListNode]) -> int:
    """Return the largest sum of a node and its twin, or 0 for a short list."""
    values = to_values(head)
    half = len(values) // 2
    twins = zip(values[:half], reversed(values))
    return max((a + b for a, b in twins), default=0)


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return a new list."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next