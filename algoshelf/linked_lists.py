"""Algorithms over singly linked lists, and a list container built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from algoshelf.nodes import ListNode, RandomListNode


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant digit first."""
    dummy = ListNode()
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


def copy_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Deep copy a list whose nodes also point to arbitrary nodes of the same list."""
    clones: dict[RandomListNode, RandomListNode] = {}
    node = head
    while node is not None:
        clones[node] = RandomListNode(node.val)
        node = node.next
    for original, clone in clones.items():
        clone.next = clones.get(original.next) if original.next is not None else None
        clone.random = clones.get(original.random) if original.random is not None else None
    return clones.get(head) if head is not None else None


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only the node itself; it must not be the tail."""
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = following.val
    node.next = following.next


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node whose value is among ``nums``; return the new head."""
    banned = set(nums)
    dummy = ListNode(0, head)
    current = dummy
    while current.next is not None:
        if current.next.val in banned:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


class LinkedList:
    """An indexable singly linked list.

    Out-of-range reads give -1 and out-of-range inserts or deletes are ignored.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._sentinel = ListNode()
        self._size = 0
        for value in values:
            self.add_at_tail(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._sentinel.next
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_before(self, index: int) -> ListNode:
        node = self._sentinel
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Value at ``index``, or -1 if there is no such position."""
        if not 0 <= index < self._size:
            return -1
        return self._node_before(index).next.val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first item."""
        self.add_at_index(0, val)

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last item."""
        self.add_at_index(self._size, val)

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` so that it ends up at ``index``; ignored if out of range."""
        if not 0 <= index <= self._size:
            return
        previous = self._node_before(index)
        previous.next = ListNode(val, previous.next)
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the item at ``index``; ignored if out of range."""
        if not 0 <= index < self._size:
            return
        previous = self._node_before(index)
        previous.next = previous.next.next
        self._size -= 1