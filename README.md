# treekit

Small, readable binary tree algorithms for study and experimentation.
Pure Python, no dependencies.

## Modules

- `treekit.tree`: the `Node` dataclass (`value`, `left`, `right`, and an
  `is_leaf` property) with `count_nodes`, `count_leaves`, `height` (an empty
  tree has height -1), `contains`, `is_strictly_binary`, and the generator
  traversals `preorder`, `inorder` and `postorder`.
- `treekit.expression`: `ExprNode` arithmetic expression trees and
  `evaluate`, which supports `+`, `-`, `*` and `/` (integer division
  truncating toward zero). An unknown operator or an operator with a missing
  operand raises `ValueError`; division by zero raises `ZeroDivisionError`.
  `example_tree()` builds `((5 + 3) / 4) * (6 - 1)`, which evaluates to 10.
- `treekit.decision`: `DecisionNode` yes/no trees and `diagnose(root, ask)`.
  `ask` is called with each question and returns the answer: `s` follows the
  yes branch, `n` the no branch, anything else asks again. `symptom_tree()`
  builds a small sample tree.
- `treekit.bst`: binary search trees built from `treekit.tree.Node`.
  `insert` sends equal values to the right, `insert_unique` ignores them.
  `descending` yields values largest first, `remove_max` returns
  `(new_root, removed_value)` and raises `EmptyTreeError` on an empty tree,
  `is_balanced` checks subtree heights, `build_balanced` builds a balanced
  tree from ascending values, `rebalance` rebuilds any tree balanced, and
  `render` draws the tree sideways as text.
- `treekit.avl`: `AVLNode` with `insert` (duplicates ignored), `delete`,
  `rotate_right`, `node_height` (0 for an empty tree), `balance_factor` and
  `preorder_keys`.

## Example

```python
from treekit.tree import Node, count_nodes, height, preorder

root = Node(1, Node(2, Node(4), Node(5)), Node(3, None, Node(6)))
print(count_nodes(root))     # 6
print(height(root))          # 2
print(list(preorder(root)))  # [1, 2, 4, 5, 3, 6]
```

```python
from treekit.bst import insert, remove_max, descending

root = None
for value in [50, 30, 70, 20, 40, 60, 80]:
    root = insert(root, value)
root, largest = remove_max(root)
print(largest)                 # 80
print(list(descending(root)))  # [70, 60, 50, 40, 30, 20]
```

## Commands

Each module has a demonstration command that prints its results:

```
treekit-tree
treekit-expression
treekit-diagnose
treekit-bst
treekit-avl
```

`treekit-diagnose` asks yes/no questions on the terminal. Answer `s` for yes
or `n` for no; any other answer repeats the question.

## Limitations

- The AVL tree applies only the single right rotation, on insertion and on
  deletion. Trees that would need a left or double rotation are left
  unbalanced.
- The commands take no options and run fixed sample trees; there is no way
  to load trees from files or save them.

## Tests

```
pip install -e .[test]
pytest
```