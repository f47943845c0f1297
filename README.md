# bintree

A small library of binary trees in which each node knows its parent. You
can build trees, insert nodes, and measure and walk trees. It can also draw
a tree as ASCII art.

## Building a tree

```python
from bintree.tree import Node, insert_left, insert_right

root = Node(98)                # parent defaults to None
root.left = Node(12, root)
root.right = Node(402, root)
insert_right(root.left, 54)    # becomes the right child of 12
insert_left(root, 45)          # 12 moves down to be the left child of 45
```

`insert_left` and `insert_right` put the new node where the current child
was. The old child becomes the new node's child on the same side. The new
node is returned. If the parent is `None`, both functions raise `ValueError`.

## Measuring and walking

```python
from bintree.tree import (
    height, depth, size, leaves, internal_nodes, balance,
    is_full, is_perfect, is_leaf, is_root, sibling, uncle,
    preorder, inorder, postorder, delete,
)

size(root)             # number of nodes
height(root)           # edges on the longest downward path (0 for one node)
depth(root.right)      # edges up to the root
leaves(root)           # nodes with no children
internal_nodes(root)   # nodes with at least one child
balance(root)          # levels in left subtree minus levels in right subtree
is_full(root)          # every node has zero or two children
is_perfect(root)       # full, and all leaves on the same level
list(inorder(root))    # values in left-root-right order
sibling(root.left)     # the other child of the parent, or None
uncle(root.left.left)  # the sibling of the parent, or None
```

`preorder`, `inorder` and `postorder` are generators that yield node
values. `delete(tree)` takes a subtree apart. It detaches the subtree from
its parent and unlinks every node in it.

When one of these functions is given `None`, it returns an empty result:
`0`, `False`, `None`, an empty iteration, or no effect for `delete`.

## Printing

```python
from bintree.printing import render, print_tree

print_tree(root)           # writes to standard output
print_tree(root, file=f)   # or to any text stream
text = render(root)        # the same drawing as a string; "" for None
```

Each value is drawn as a three-digit, zero-padded label. Each level of the
tree takes one line:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demonstrations

The package ships 19 numbered demonstrations, 0 to 18. Each one builds a
sample tree and shows one operation on it. To run one or more, or all of
them when no number is given:

```
bintree-demo 14
bintree-demo 6 7 8
bintree-demo
```

An unknown number is reported as a usage error. From Python,
`bintree.demos.run_demo(14)` returns a demonstration's output as a string.
It raises `ValueError` for an unknown number.