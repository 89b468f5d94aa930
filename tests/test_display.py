import io

from bintree.display import print_tree, render
from bintree.metrics import size
from bintree.node import Node


def build_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def test_render_empty():
    assert render(None) == ""


def test_render_single_node():
    assert render(Node(98)) == "98\n"


def test_render_small_tree():
    root = Node(1)
    root.insert_left(2)
    root.insert_right(3)
    assert render(root) == "    3\n1\n    2\n"


def test_render_one_line_per_node():
    root = build_tree()
    lines = render(root).splitlines()
    assert len(lines) == size(root)
    assert lines[len(lines) // 2] == "98"
    assert lines[0].strip() == "512"
    assert lines[-1].strip() == "6"


def test_print_tree_to_file():
    root = build_tree()
    out = io.StringIO()
    print_tree(root, out)
    assert out.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    root = build_tree()
    print_tree(root)
    assert capsys.readouterr().out == render(root)