"""Singly linked list problems."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional


class ListNode:
    """A singly linked list node."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: Optional["ListNode"] = None) -> None:
        self.val = val
        self.next = next

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list holding ``values`` in order; None for no values."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def delete_node(node: ListNode) -> None:
    """Remove ``node``'s value from its list by shifting later values forward.

    The node must not be the last one in its list.
    """
    if node.next is None:
        raise ValueError("cannot delete the last node of a list")
    current = node
    while True:
        current.val = current.next.val
        if current.next.next is None:
            current.next = None
            break
        current = current.next


def remove_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node that has a strictly greater value somewhere to its right."""
    kept = []
    best = None
    for node in reversed(list(_nodes(head))):
        if best is None or node.val >= best:
            kept.append(node)
            best = node.val
    if not kept:
        return None
    kept.reverse()
    for node, following in zip(kept, kept[1:]):
        node.next = following
    kept[-1].next = None
    return kept[0]


def double_it(head: Optional[ListNode]) -> Optional[ListNode]:
    """Double the number whose decimal digits the list holds, most significant first."""
    reversed_head = reverse_list(head)
    carry = 0
    for node in _nodes(reversed_head):
        value = node.val * 2 + carry
        carry, node.val = divmod(value, 10)
    result = reverse_list(reversed_head)
    if carry > 0:
        result = ListNode(carry, result)
    return result