import pytest

from treekit.tree import (
    Node,
    contains,
    count_leaves,
    count_nodes,
    height,
    inorder,
    is_strictly_binary,
    main,
    postorder,
    preorder,
)


@pytest.fixture
def strict_tree():
    return Node(
        1,
        Node(2, Node(4, Node(8), Node(9)), Node(5, Node(10), Node(11))),
        Node(3, Node(7), Node(14)),
    )


@pytest.fixture
def non_strict_tree():
    return Node(1, Node(2, Node(4), Node(5)), Node(3, None, Node(6)))


def _chain(values):
    root = None
    for value in reversed(values):
        root = Node(value, root, None)
    return root


def test_empty_tree_measures():
    assert count_nodes(None) == 0
    assert count_leaves(None) == 0
    assert height(None) == -1


def test_single_node():
    node = Node(42)
    assert count_nodes(node) == 1
    assert count_leaves(node) == 1
    assert height(node) == 0


def test_node_count_matches_traversal_length(strict_tree):
    assert count_nodes(strict_tree) == len(list(preorder(strict_tree)))


def test_traversals_visit_same_values(strict_tree):
    pre = sorted(preorder(strict_tree))
    assert pre == sorted(inorder(strict_tree))
    assert pre == sorted(postorder(strict_tree))


def test_root_position_in_traversals(strict_tree):
    assert list(preorder(strict_tree))[0] == strict_tree.value
    assert list(postorder(strict_tree))[-1] == strict_tree.value


def test_small_tree_orders():
    root = Node(1, Node(2), Node(3))
    assert list(preorder(root)) == [1, 2, 3]
    assert list(inorder(root)) == [2, 1, 3]
    assert list(postorder(root)) == [2, 3, 1]


def test_strict_tree_leaf_invariant(strict_tree):
    assert 2 * count_leaves(strict_tree) - 1 == count_nodes(strict_tree)


def test_chain_height_and_leaves():
    values = [5, 4, 3, 2, 1]
    root = _chain(values)
    assert height(root) == len(values) - 1
    assert count_leaves(root) == 1
    assert list(preorder(root)) == values


def test_contains(strict_tree):
    assert contains(strict_tree, 7) is True
    assert contains(strict_tree, 15) is False
    assert contains(None, 7) is False


def test_strictly_binary(strict_tree, non_strict_tree):
    assert is_strictly_binary(strict_tree) is True
    assert is_strictly_binary(non_strict_tree) is False
    assert is_strictly_binary(None) is True


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "É estritamente binária? Sim" in out
    assert "É estritamente binária? Não" in out
    assert "O item 7 está presente na árvore estrita? Sim" in out
    assert "O item 15 está presente na árvore estrita? Não" in out