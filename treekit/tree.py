"""Binary trees of integers: counting, height, membership and traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node holding an integer value."""

    value: int
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def count_nodes(root: Node | None) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def count_leaves(root: Node | None) -> int:
    """Return the number of nodes that have no children."""
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def height(root: Node | None) -> int:
    """Return the height of the tree; an empty tree has height -1."""
    if root is None:
        return -1
    return 1 + max(height(root.left), height(root.right))


def contains(root: Node | None, value: int) -> bool:
    """Return True if any node of the tree holds ``value``."""
    if root is None:
        return False
    if root.value == value:
        return True
    return contains(root.left, value) or contains(root.right, value)


def is_strictly_binary(root: Node | None) -> bool:
    """Return True if every node has either zero or two children."""
    if root is None or root.is_leaf:
        return True
    if root.left is not None and root.right is not None:
        return is_strictly_binary(root.left) and is_strictly_binary(root.right)
    return False


def preorder(root: Node | None) -> Iterator[int]:
    """Yield values in root, left, right order."""
    if root is not None:
        yield root.value
        yield from preorder(root.left)
        yield from preorder(root.right)


def inorder(root: Node | None) -> Iterator[int]:
    """Yield values in left, root, right order."""
    if root is not None:
        yield from inorder(root.left)
        yield root.value
        yield from inorder(root.right)


def postorder(root: Node | None) -> Iterator[int]:
    """Yield values in left, right, root order."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.value


def _strict_example() -> Node:
    return Node(
        1,
        Node(2, Node(4, Node(8), Node(9)), Node(5, Node(10), Node(11))),
        Node(3, Node(7), Node(14)),
    )


def _non_strict_example() -> Node:
    return Node(1, Node(2, Node(4), Node(5)), Node(3, None, Node(6)))


_ANSWER = {True: "Sim", False: "Não"}


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration on a strict and a non-strict tree."""
    strict = _strict_example()
    non_strict = _non_strict_example()

    for title, walk in (
        ("Percurso Pré-ordem (Estrita):", preorder),
        ("\nPercurso In-ordem (Estrita):", inorder),
        ("\nPercurso Pós-ordem (Estrita):", postorder),
    ):
        print(title)
        for value in walk(strict):
            print(value)

    print(f"\nTotal de nós na árvore estrita: {count_nodes(strict)}")
    print(f"Total de folhas na árvore estrita: {count_leaves(strict)}")
    print(f"Altura da árvore estrita: {height(strict)}")

    print(
        f"\nO item 7 está presente na árvore estrita? {_ANSWER[contains(strict, 7)]}"
    )
    print(
        f"O item 15 está presente na árvore estrita? {_ANSWER[contains(strict, 15)]}"
    )

    print("\nÁrvore Estrita:")
    print(f"É estritamente binária? {_ANSWER[is_strictly_binary(strict)]}")
    print("\nÁrvore Não Estrita:")
    print(f"É estritamente binária? {_ANSWER[is_strictly_binary(non_strict)]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())