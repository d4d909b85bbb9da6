"""Node types for singly linked lists and binary trees, with builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

_END = object()


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


@dataclass(eq=False, repr=False)
class LinkedTreeNode(TreeNode):
    """A binary tree node that also points to its right neighbour on the same level."""

    next: Optional[LinkedTreeNode] = None

    def __repr__(self) -> str:
        return f"LinkedTreeNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomListNode:
    """A linked list node with an extra pointer to any node of the list."""

    val: int = 0
    next: Optional[RandomListNode] = None
    random: Optional[RandomListNode] = None

    def __repr__(self) -> str:
        return f"RandomListNode({self.val!r})"


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a linked list from head to tail."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a binary tree from level-order values, None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root