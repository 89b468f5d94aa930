from bintree.node import Node


def test_new_node_links():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert child.left is None and child.right is None
    assert root.left is None and root.right is None
    assert child.value == 12


def test_repr():
    assert repr(Node(98)) == "Node(98)"


def test_insert_left_on_empty_slot():
    root = Node(98)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.value == 54


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = Node(12, root)
    root.left = old
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = Node(402, root)
    root.right = old
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_is_leaf_and_is_root():
    root = Node(98)
    root.left = Node(12, root)
    right = root.insert_right(402)
    right.insert_right(128)
    assert root.is_root() is True
    assert root.is_leaf() is False
    assert right.is_root() is False
    assert right.is_leaf() is False
    assert right.right.is_leaf() is True
    assert right.right.is_root() is False


def test_delete_subtree_detaches_from_parent():
    root = Node(98)
    right = root.insert_right(402)
    grand = right.insert_left(256)
    right.delete()
    assert root.right is None
    assert right.parent is None
    assert right.left is None
    assert grand.parent is None
    assert root.is_leaf()


def test_delete_root_clears_all_links():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    root.delete()
    assert root.left is None and root.right is None
    assert left.parent is None and right.parent is None