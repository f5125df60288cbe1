"""Binary search trees: insertion, ordered walks, maximum removal and balancing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .tree import Node, height, inorder, preorder


class EmptyTreeError(LookupError):
    """Raised when an operation needs at least one node but the tree is empty."""


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` and return the root; equal values go to the right."""
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def insert_unique(root: Node | None, value: int) -> Node:
    """Insert ``value`` unless it is already present; return the root."""
    if root is None:
        return Node(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = Node(value)
                return root
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = Node(value)
                return root
            node = node.right
        else:
            return root


def descending(root: Node | None) -> Iterator[int]:
    """Yield values in right, root, left order, i.e. largest first."""
    if root is not None:
        yield from descending(root.right)
        yield root.value
        yield from descending(root.left)


def remove_max(root: Node | None) -> tuple[Node | None, int]:
    """Remove the largest value; return the new root and the removed value."""
    if root is None:
        raise EmptyTreeError("Árvore vazia ao tentar remover o máximo.")
    if root.right is None:
        return root.left, root.value
    parent = root
    node = root.right
    while node.right is not None:
        parent, node = node, node.right
    parent.right = node.left
    return root, node.value


def is_balanced(root: Node | None) -> bool:
    """Return True if at every node the subtree heights differ by at most one."""
    if root is None:
        return True
    if abs(height(root.left) - height(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def build_balanced(values: Iterable[int]) -> Node | None:
    """Build a balanced tree from values already in ascending order."""
    items = values if isinstance(values, Sequence) else list(values)
    if not items:
        return None
    middle = (len(items) - 1) // 2
    return Node(
        items[middle],
        build_balanced(items[:middle]),
        build_balanced(items[middle + 1 :]),
    )


def rebalance(root: Node | None) -> Node | None:
    """Return a balanced tree holding the same values as ``root``."""
    return build_balanced(list(inorder(root)))


def render(root: Node | None) -> str:
    """Draw the tree sideways: right subtree above, four spaces per level."""

    def lines(node: Node | None, level: int) -> Iterator[str]:
        if node is not None:
            yield from lines(node.right, level + 1)
            yield "    " * level + str(node.value)
            yield from lines(node.left, level + 1)

    return "\n".join(lines(root, 0))


def _build(values: Iterable[int], add=insert) -> Node | None:
    root: Node | None = None
    for value in values:
        root = add(root, value)
    return root


def _joined(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run the descending walk, rebalancing and maximum-removal demonstrations."""
    tree = _build([50, 30, 70, 20, 40, 60, 80])
    print("Itens da BST em ordem decrescente:")
    print(_joined(descending(tree)))

    original = _build([7, 6, 22, 14, 40, 63])
    print(f"Em ordem (árvore original): {_joined(inorder(original))}")
    print(f"Altura da árvore original: {height(original)}")
    if is_balanced(original):
        print("A árvore está balanceada.")
    else:
        print("A árvore NÃO está balanceada.")
        ordered = list(inorder(original))
        print(f"Vetor ordenado gerado da árvore: {_joined(ordered)}")
        balanced = build_balanced(ordered)
        print(f"Em ordem (árvore balanceada): {_joined(inorder(balanced))}")
        print(f"Altura da árvore balanceada: {height(balanced)}")
        print("A árvore está balanceada.")

    root = _build([50, 30, 70, 20, 40, 60, 80], insert_unique)
    print("Árvore:")
    print(render(root))
    print()
    print("Percorrimento em pré-ordem:")
    for value in preorder(root):
        print(value)
    print()

    root, maximum = remove_max(root)
    print(f"Máximo removido: {maximum}")
    print("\nÁrvore depois da remoção do máximo:")
    print(render(root))
    print()
    print("Percorrimento em pré-ordem após remoção:")
    for value in preorder(root):
        print(value)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())