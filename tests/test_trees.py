import pytest

from algoshelf.nodes import LinkedTreeNode, TreeNode, build_tree
from algoshelf.trees import (
    check_tree,
    connect,
    has_path_sum,
    inorder,
    invert_tree,
    is_same_tree,
    is_subtree,
    kth_largest_level_sum,
    kth_smallest,
    lowest_common_ancestor,
    max_level_sum,
    right_side_view,
    sum_numbers,
)

BST_VALUES = [4, 2, 6, 1, 3, 5, 7]


def _chain(values):
    """A tree where every node has only a left child."""
    root = None
    for value in reversed(values):
        root = TreeNode(value, root)
    return root


def test_has_path_sum_single_node():
    assert has_path_sum(TreeNode(7), 7) is True
    assert has_path_sum(TreeNode(7), 8) is False


def test_has_path_sum_needs_a_leaf():
    values = [1, 2, 3]
    root = _chain(values)
    assert has_path_sum(root, sum(values)) is True
    assert has_path_sum(root, values[0]) is False
    assert has_path_sum(None, 0) is False


def test_connect_links_each_level():
    leaves = [LinkedTreeNode(v) for v in (4, 5, 6, 7)]
    left = LinkedTreeNode(2, leaves[0], leaves[1])
    right = LinkedTreeNode(3, leaves[2], leaves[3])
    root = LinkedTreeNode(1, left, right)

    assert connect(root) is root
    assert root.next is None
    assert left.next is right
    assert right.next is None
    chain = []
    node = leaves[0]
    while node is not None:
        chain.append(node.val)
        node = node.next
    assert chain == [4, 5, 6, 7]
    assert connect(None) is None


def test_sum_numbers_reads_digits_along_path():
    assert sum_numbers(_chain([1, 2, 3])) == int("123")
    assert sum_numbers(None) == 0


def test_sum_numbers_adds_leaf_numbers():
    root = TreeNode(4, TreeNode(9), TreeNode(0))
    assert sum_numbers(root) == int("49") + int("40")


def test_right_side_view_example():
    root = build_tree([1, 2, 3, None, 5, None, 4])
    assert right_side_view(root) == [1, 3, 4]


def test_right_side_view_of_chain_shows_every_node():
    values = [8, 3, 1]
    assert right_side_view(_chain(values)) == values
    assert right_side_view(None) == []


def test_invert_tree_reverses_inorder():
    root = build_tree(BST_VALUES)
    before = list(inorder(root))
    assert list(inorder(invert_tree(root))) == before[::-1]


def test_invert_twice_restores_tree():
    root = build_tree([3, 1, 5, None, 2, 4])
    twice = invert_tree(invert_tree(build_tree([3, 1, 5, None, 2, 4])))
    assert is_same_tree(root, twice)
    assert invert_tree(None) is None


def test_inorder_of_bst_is_sorted():
    assert list(inorder(build_tree(BST_VALUES))) == sorted(BST_VALUES)


def test_kth_smallest_matches_sorted_values():
    root = build_tree(BST_VALUES)
    ordered = sorted(BST_VALUES)
    for k in range(1, len(ordered) + 1):
        assert kth_smallest(root, k) == ordered[k - 1]


def test_kth_smallest_errors():
    root = build_tree(BST_VALUES)
    with pytest.raises(ValueError):
        kth_smallest(root, 0)
    with pytest.raises(IndexError):
        kth_smallest(root, len(BST_VALUES) + 1)


def test_lowest_common_ancestor():
    root = build_tree(BST_VALUES)
    one, three, seven = root.left.left, root.left.right, root.right.right
    assert lowest_common_ancestor(root, one, three) is root.left
    assert lowest_common_ancestor(root, one, seven) is root
    assert lowest_common_ancestor(root, root.left, three) is root.left


def test_is_same_tree():
    assert is_same_tree(build_tree([1, 2, 3]), build_tree([1, 2, 3]))
    assert not is_same_tree(build_tree([1, 2]), build_tree([1, None, 2]))
    assert is_same_tree(None, None)
    assert not is_same_tree(TreeNode(1), None)


def test_is_subtree():
    root = build_tree(BST_VALUES)
    assert is_subtree(root, build_tree([2, 1, 3]))
    assert not is_subtree(root, build_tree([2, 1]))
    assert is_subtree(root, build_tree([7]))
    assert not is_subtree(None, None)


def test_max_level_sum():
    assert max_level_sum(TreeNode(10, TreeNode(1), TreeNode(2))) == 1
    assert max_level_sum(TreeNode(1, TreeNode(5), TreeNode(6))) == 2
    assert max_level_sum(TreeNode(3, TreeNode(1), TreeNode(2))) == 1
    assert max_level_sum(None) == 0


def test_check_tree():
    assert check_tree(TreeNode(10, TreeNode(4), TreeNode(6))) is True
    assert check_tree(TreeNode(5, TreeNode(3), TreeNode(1))) is False
    assert check_tree(TreeNode(0)) is True
    assert check_tree(None) is False


def test_kth_largest_level_sum_on_chain():
    values = [3, 1, 2]
    root = _chain(values)
    ranked = sorted(values, reverse=True)
    for k in range(1, len(values) + 1):
        assert kth_largest_level_sum(root, k) == ranked[k - 1]
    assert kth_largest_level_sum(root, len(values) + 1) == -1


def test_kth_largest_level_sum_edge_cases():
    assert kth_largest_level_sum(None, 1) == -1
    with pytest.raises(ValueError):
        kth_largest_level_sum(TreeNode(1), 0)