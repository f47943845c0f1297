"""Sample programs that build small trees and report on them."""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TextIO

from bintree.printing import print_tree
from bintree.tree import (
    Node,
    balance,
    delete,
    depth,
    height,
    inorder,
    insert_left,
    insert_right,
    internal_nodes,
    is_full,
    is_leaf,
    is_perfect,
    is_root,
    leaves,
    postorder,
    preorder,
    sibling,
    size,
    uncle,
)

_NULL = "(nil)"


def _child(parent: Node, value: int) -> Node:
    return Node(value, parent)


def _three_nodes() -> Node:
    root = Node(98)
    root.left = _child(root, 12)
    root.right = _child(root, 402)
    return root


def _full_seven() -> Node:
    root = _three_nodes()
    root.left.left = _child(root.left, 6)
    root.left.right = _child(root.left, 56)
    root.right.left = _child(root.right, 256)
    root.right.right = _child(root.right, 512)
    return root


def _five_nodes() -> Node:
    root = _three_nodes()
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def _nine_nodes() -> Node:
    root = Node(98)
    root.left = _child(root, 12)
    root.right = _child(root, 128)
    root.left.right = _child(root.left, 54)
    root.right.right = _child(root.right, 402)
    root.left.left = _child(root.left, 10)
    root.right.left = _child(root.right, 110)
    root.right.right.left = _child(root.right.right, 200)
    root.right.right.right = _child(root.right.right, 512)
    return root


def _flag(value: bool) -> int:
    return int(value)


def _demo_0(out: TextIO) -> None:
    root = Node(98)
    root.left = _child(root, 12)
    root.left.left = _child(root.left, 6)
    root.left.right = _child(root.left, 16)
    root.right = _child(root, 402)
    root.right.left = _child(root.right, 256)
    root.right.right = _child(root.right, 512)
    print_tree(root, out)


def _demo_1(out: TextIO) -> None:
    root = _three_nodes()
    print_tree(root, out)
    out.write("\n")
    insert_left(root.right, 128)
    insert_left(root, 54)
    print_tree(root, out)


def _demo_2(out: TextIO) -> None:
    root = _three_nodes()
    print_tree(root, out)
    out.write("\n")
    insert_right(root.left, 54)
    insert_right(root, 128)
    print_tree(root, out)


def _demo_3(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    delete(root)


def _report(
    out: TextIO,
    template: str,
    nodes: Iterable[Node],
    measure: Callable[[Node], object],
) -> None:
    for node in nodes:
        out.write(template.format(node.value, measure(node)) + "\n")


def _demo_4(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    nodes = (root, root.right, root.right.right)
    _report(out, "Is {} a leaf: {}", nodes, lambda n: _flag(is_leaf(n)))


def _demo_5(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    nodes = (root, root.right, root.right.right)
    _report(out, "Is {} a root: {}", nodes, lambda n: _flag(is_root(n)))


def _traversal(out: TextIO, walk: Callable[[Node], Iterable[int]]) -> None:
    root = _full_seven()
    print_tree(root, out)
    for value in walk(root):
        out.write(f"{value}\n")


def _demo_6(out: TextIO) -> None:
    _traversal(out, preorder)


def _demo_7(out: TextIO) -> None:
    _traversal(out, inorder)


def _demo_8(out: TextIO) -> None:
    _traversal(out, postorder)


def _measured(out: TextIO, template: str, measure: Callable[[Node], object]) -> None:
    root = _five_nodes()
    print_tree(root, out)
    _report(out, template, (root, root.right, root.left.right), measure)


def _demo_9(out: TextIO) -> None:
    _measured(out, "Height from {}: {}", height)


def _demo_10(out: TextIO) -> None:
    _measured(out, "Depth of {}: {}", depth)


def _demo_11(out: TextIO) -> None:
    _measured(out, "Size of {}: {}", size)


def _demo_12(out: TextIO) -> None:
    _measured(out, "Leaves in {}: {}", leaves)


def _demo_13(out: TextIO) -> None:
    _measured(out, "Nodes in {}: {}", internal_nodes)


def _demo_14(out: TextIO) -> None:
    root = _five_nodes()
    insert_left(root, 45)
    insert_right(root.left, 50)
    insert_left(root.left.left, 10)
    insert_left(root.left.left.left, 8)
    print_tree(root, out)
    nodes = (root, root.right, root.left.left.right)
    _report(out, "Balance of {}: {:+d}", nodes, balance)


def _demo_15(out: TextIO) -> None:
    root = _five_nodes()
    root.left.left = _child(root.left, 10)
    print_tree(root, out)
    nodes = (root, root.left, root.right)
    _report(out, "Is {} full: {}", nodes, lambda n: _flag(is_full(n)))


def _demo_16(out: TextIO) -> None:
    root = _five_nodes()
    root.left.left = _child(root.left, 10)
    root.right.left = _child(root.right, 10)

    print_tree(root, out)
    out.write(f"Perfect: {_flag(is_perfect(root))}\n\n")

    root.right.right.left = _child(root.right.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {_flag(is_perfect(root))}\n\n")

    root.right.right.right = _child(root.right.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {_flag(is_perfect(root))}\n")


def _relative_line(label: str, node: Node, found: Optional[Node]) -> str:
    shown = _NULL if found is None else str(found.value)
    return f"{label} of {node.value}: {shown}\n"


def _demo_17(out: TextIO) -> None:
    root = _nine_nodes()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        out.write(_relative_line("Sibling", node, sibling(node)))


def _demo_18(out: TextIO) -> None:
    root = _nine_nodes()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        out.write(_relative_line("Uncle", node, uncle(node)))


_DEMOS: dict[int, Callable[[TextIO], None]] = {
    0: _demo_0,
    1: _demo_1,
    2: _demo_2,
    3: _demo_3,
    4: _demo_4,
    5: _demo_5,
    6: _demo_6,
    7: _demo_7,
    8: _demo_8,
    9: _demo_9,
    10: _demo_10,
    11: _demo_11,
    12: _demo_12,
    13: _demo_13,
    14: _demo_14,
    15: _demo_15,
    16: _demo_16,
    17: _demo_17,
    18: _demo_18,
}


def run_demo(number: int) -> str:
    """Run the sample program with the given number and return what it prints."""
    try:
        demo = _DEMOS[number]
    except KeyError:
        raise ValueError(f"no demo numbered {number}") from None
    out = io.StringIO()
    demo(out)
    return out.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the numbered demos, or all of them, and print their output."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Run sample binary tree programs."
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        metavar="N",
        help=f"demo numbers from {min(_DEMOS)} to {max(_DEMOS)} (default: all)",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or sorted(_DEMOS)
    unknown = [n for n in numbers if n not in _DEMOS]
    if unknown:
        parser.error(f"no demo numbered {unknown[0]}")
    for number in numbers:
        sys.stdout.write(run_demo(number))
    return 0


if __name__ == "__main__":
    sys.exit(main())