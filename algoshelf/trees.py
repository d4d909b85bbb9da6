"""Algorithms over binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import islice
from typing import Optional

from algoshelf.nodes import LinkedTreeNode, TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Nodes of each level, top to bottom, left to right."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Whether some root-to-leaf path has values summing to ``target_sum``."""
    if root is None:
        return False
    pending = deque([(root, root.val)])
    while pending:
        node, total = pending.popleft()
        if node.left is None and node.right is None and total == target_sum:
            return True
        for child in (node.left, node.right):
            if child is not None:
                pending.append((child, total + child.val))
    return False


def connect(root: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """Point each node's ``next`` to its right neighbour on the same level."""
    for level in _levels(root):
        for node, neighbour in zip(level, level[1:]):
            node.next = neighbour
        level[-1].next = None
    return root


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum of the numbers spelled by the digits along every root-to-leaf path."""

    def walk(node: Optional[TreeNode], prefix: int) -> int:
        if node is None:
            return 0
        value = prefix * 10 + node.val
        if node.left is None and node.right is None:
            return value
        return walk(node.left, value) + walk(node.right, value)

    return walk(root, 0)


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Value of the rightmost node on each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place, swapping every node's children."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Values in left, node, right order."""
    if root is not None:
        yield from inorder(root.left)
        yield root.val
        yield from inorder(root.right)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The ``k``-th smallest value of a binary search tree, counting from 1."""
    if k < 1:
        raise ValueError("k must be at least 1")
    found = next(islice(inorder(root), k - 1, None), None)
    if found is None:
        raise IndexError("the tree holds fewer than k values")
    return found


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def is_same_tree(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """Whether two trees have the same shape and values."""
    if a is None or b is None:
        return a is b
    return a.val == b.val and is_same_tree(a.left, b.left) and is_same_tree(a.right, b.right)


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """Whether some node of ``root`` heads a tree identical to ``sub_root``."""
    if root is None:
        return False
    if is_same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)


def max_level_sum(root: Optional[TreeNode]) -> int:
    """1-based level with the largest sum, the smallest such level on ties; 0 if empty."""
    best_level = 0
    best_sum = None
    for number, level in enumerate(_levels(root), start=1):
        total = sum(node.val for node in level)
        if best_sum is None or total > best_sum:
            best_sum = total
            best_level = number
    return best_level


def check_tree(root: Optional[TreeNode]) -> bool:
    """Whether the root's value equals the sum of its children's values."""
    if root is None:
        return False
    left = root.left.val if root.left is not None else 0
    right = root.right.val if root.right is not None else 0
    return root.val == left + right


def kth_largest_level_sum(root: Optional[TreeNode], k: int) -> int:
    """The ``k``-th largest level sum, counting from 1; -1 if there are fewer levels."""
    if k < 1:
        raise ValueError("k must be at least 1")
    sums = sorted((sum(node.val for node in level) for level in _levels(root)), reverse=True)
    if k > len(sums):
        return -1
    return sums[k - 1]