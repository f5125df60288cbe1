"""An AVL tree that rebalances with single right rotations only."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class AVLNode:
    """An AVL tree node with its cached height (a leaf has height 1)."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def node_height(node: AVLNode | None) -> int:
    """Return the cached height of ``node``; 0 for an empty tree."""
    return node.height if node is not None else 0


def balance_factor(node: AVLNode | None) -> int:
    """Return left height minus right height; 0 for an empty tree."""
    if node is None:
        return 0
    return node_height(node.left) - node_height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(node_height(node.left), node_height(node.right))


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate ``node`` right and return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right a node without a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(root: AVLNode | None, key: int) -> AVLNode:
    """Insert ``key`` (duplicates ignored) and return the new root."""
    if root is None:
        return AVLNode(key)
    if key < root.key:
        root.left = insert(root.left, key)
    elif key > root.key:
        root.right = insert(root.right, key)
    else:
        return root

    _update_height(root)
    if balance_factor(root) > 1 and key < root.left.key:
        return rotate_right(root)
    return root


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def delete(root: AVLNode | None, key: int) -> AVLNode | None:
    """Remove ``key`` if present and return the new root."""
    if root is None:
        return None
    if key < root.key:
        root.left = delete(root.left, key)
    elif key > root.key:
        root.right = delete(root.right, key)
    elif root.left is None or root.right is None:
        return root.left if root.left is not None else root.right
    else:
        successor = _min_node(root.right)
        root.key = successor.key
        root.right = delete(root.right, successor.key)

    _update_height(root)
    if balance_factor(root) > 1 and balance_factor(root.left) >= 0:
        return rotate_right(root)
    return root


def preorder_keys(root: AVLNode | None) -> Iterator[int]:
    """Yield keys in root, left, right order."""
    if root is not None:
        yield root.key
        yield from preorder_keys(root.left)
        yield from preorder_keys(root.right)


def _build(keys: list[int]) -> AVLNode | None:
    root: AVLNode | None = None
    for key in keys:
        root = insert(root, key)
    return root


def _line(root: AVLNode | None) -> str:
    return "".join(f"{key} " for key in preorder_keys(root))


def main(argv: list[str] | None = None) -> int:
    """Show a right rotation on insertion and the tree before and after a removal."""
    first = _build([30, 20, 10])
    print(f"Árvore 1 (inserção com rotação simples à direita): {_line(first)}")

    second = _build([50, 40, 30, 60])
    print(f"Árvore 2 antes da remoção: {_line(second)}")
    second = delete(second, 60)
    print(f"Árvore 2 após remoção de 60 (rotação simples à direita): {_line(second)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())