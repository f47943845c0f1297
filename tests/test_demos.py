import pytest

from bintree.demos import main, run_demo
from bintree.printing import render
from bintree.tree import (
    Node,
    balance,
    depth,
    height,
    inorder,
    insert_left,
    insert_right,
    internal_nodes,
    is_perfect,
    leaves,
    postorder,
    preorder,
    size,
)


def _three():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def _five():
    root = _three()
    insert_right(root.left, 54)
    insert_right(root, 128)
    return root


def _seven():
    root = _three()
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo(19)
    with pytest.raises(ValueError):
        run_demo(-1)


def test_demo_0_is_drawing_of_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    assert run_demo(0) == render(root)


def test_demo_1_draws_before_and_after_left_inserts():
    root = _three()
    before = render(root)
    insert_left(root.right, 128)
    insert_left(root, 54)
    assert run_demo(1) == before + "\n" + render(root)


def test_demo_2_draws_before_and_after_right_inserts():
    root = _three()
    before = render(root)
    insert_right(root.left, 54)
    insert_right(root, 128)
    assert run_demo(2) == before + "\n" + render(root)


def test_demo_3_draws_tree_only():
    assert run_demo(3) == render(_five())


@pytest.mark.parametrize(
    "number, walk", [(6, preorder), (7, inorder), (8, postorder)]
)
def test_traversal_demos(number, walk):
    root = _seven()
    drawing = render(root)
    output = run_demo(number)
    assert output.startswith(drawing)
    values = output[len(drawing):].splitlines()
    assert values == [str(v) for v in walk(root)]


@pytest.mark.parametrize(
    "number, template, measure",
    [
        (9, "Height from {}: {}", height),
        (10, "Depth of {}: {}", depth),
        (11, "Size of {}: {}", size),
        (12, "Leaves in {}: {}", leaves),
        (13, "Nodes in {}: {}", internal_nodes),
    ],
)
def test_measure_demos(number, template, measure):
    root = _five()
    nodes = (root, root.right, root.left.right)
    expected = render(root) + "".join(
        template.format(n.value, measure(n)) + "\n" for n in nodes
    )
    assert run_demo(number) == expected


def test_demo_4_leaf_report():
    root = _five()
    lines = run_demo(4)[len(render(root)):].splitlines()
    assert lines[0] == "Is 98 a leaf: 0"
    assert lines[2] == "Is 402 a leaf: 1"


def test_demo_14_balance_uses_sign():
    root = _five()
    insert_left(root, 45)
    insert_right(root.left, 50)
    insert_left(root.left.left, 10)
    insert_left(root.left.left.left, 8)
    lines = run_demo(14)[len(render(root)):].splitlines()
    assert lines[0] == f"Balance of 98: {balance(root):+d}"
    assert all(line.split(": ")[1][0] in "+-" for line in lines)


def test_demo_16_last_tree_is_perfect():
    root = _five()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    root.right.right.left = Node(10, root.right.right)
    root.right.right.right = Node(10, root.right.right)
    output = run_demo(16)
    assert output.endswith(render(root) + f"Perfect: {int(is_perfect(root))}\n")
    assert output.count("Perfect: ") == 3


def test_demo_17_root_has_no_sibling():
    assert run_demo(17).splitlines()[-1] == "Sibling of 98: (nil)"


def test_demo_18_child_of_root_has_no_uncle():
    assert run_demo(18).splitlines()[-1] == "Uncle of 12: (nil)"


@pytest.mark.parametrize("number", range(19))
def test_every_demo_ends_with_newline(number):
    assert run_demo(number).endswith("\n")


def test_main_runs_selected_demo(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == run_demo(4)


def test_main_runs_all_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "".join(run_demo(n) for n in range(19))


def test_main_rejects_unknown_demo(capsys):
    with pytest.raises(SystemExit) as info:
        main(["42"])
    assert info.value.code == 2