"""Binary tree nodes and the operations that build, walk and measure them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _children(node: Node) -> Iterator[Node]:
    return (child for child in (node.left, node.right) if child is not None)


def insert_left(parent: Optional[Node], value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Optional[Node], value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("cannot insert a child under a missing parent")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def delete(tree: Optional[Node]) -> None:
    """Take apart a whole tree, unlinking every node in it."""
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        elif parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(_children(node))
        node.left = node.right = node.parent = None


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree in in-order."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.value
            node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of the tree in post-order."""
    stack: list[Node] = []
    last: Optional[Node] = None
    node = tree
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and last is not top.right:
            node = top.right
        else:
            yield top.value
            last = stack.pop()


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path from ``tree``.

    A missing tree and a single node both have height 0.
    """
    if tree is None:
        return 0
    return max((height(child) + 1 for child in _children(tree)), default=0)


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def depth(tree: Optional[Node]) -> int:
    """Return the number of edges between ``tree`` and the root above it."""
    if tree is None:
        return 0
    count = 0
    node = tree.parent
    while node is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in the tree."""
    if tree is None:
        return 0
    if is_leaf(tree):
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes that have at least one child."""
    if tree is None or is_leaf(tree):
        return 0
    return 1 + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right subtree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if is_leaf(tree):
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _perfect_below(tree: Optional[Node], level: int, leaf_level: int) -> bool:
    if tree is None:
        return False
    if is_leaf(tree):
        return level == leaf_level
    if tree.left is None or tree.right is None:
        return False
    return _perfect_below(tree.left, level + 1, leaf_level) and _perfect_below(
        tree.right, level + 1, leaf_level
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every internal node has two children and all leaves share a level."""
    if tree is None:
        return False
    return _perfect_below(tree, 0, height(tree))


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    grandparent = node.parent.parent
    if grandparent.left is node.parent:
        return grandparent.right
    return grandparent.left