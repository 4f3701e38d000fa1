import pytest

from ternvig.ternary_tree import PrefixIterator, TernaryTree, TreeDomainError

NIL = TernaryTree.NIL


def build():
    root = TernaryTree("This")
    n_a = TernaryTree("is")
    n_b = TernaryTree("tree")
    n_c = TernaryTree("action.")
    n_aa = TernaryTree("a")
    n_aac = TernaryTree("ternary")
    n_bb = TernaryTree("in")
    n_cb = TernaryTree("It")
    n_cc = TernaryTree("works!")
    n_aa.add_right(n_aac)
    n_a.add_left(n_aa)
    n_b.add_middle(n_bb)
    n_c.add_middle(n_cb)
    n_c.add_right(n_cc)
    root.add_left(n_a)
    root.add_middle(n_b)
    root.add_right(n_c)
    return root


EXPECTED_ORDER = ["This", "is", "a", "ternary", "tree", "in", "action.", "It", "works!"]


def test_nil_is_empty_and_node_is_not():
    assert NIL.is_empty()
    assert not TernaryTree("x").is_empty()


def test_new_node_subtrees_are_nil():
    node = TernaryTree("x")
    assert node.left is NIL
    assert node.middle is NIL
    assert node.right is NIL
    assert node.is_leaf()


def test_key_of_node_and_nil():
    assert TernaryTree("This").key == "This"
    with pytest.raises(TreeDomainError, match="Tree is empty"):
        NIL.key


def test_add_stores_given_subtree():
    root = TernaryTree("r")
    child = TernaryTree("c")
    root.add_middle(child)
    assert root.middle is child
    assert not root.is_leaf()


def test_add_to_occupied_slot_raises():
    root = build()
    with pytest.raises(TreeDomainError, match="Subtree is not NIL"):
        root.add_right(TernaryTree("again"))


def test_add_to_nil_raises():
    with pytest.raises(TreeDomainError, match="Operation not supported"):
        NIL.add_left(TernaryTree("x"))


def test_remove_returns_subtree_and_clears_slot():
    root = build()
    right = root.right
    assert root.remove_right() is right
    assert root.right is NIL


def test_remove_empty_slot_raises():
    node = TernaryTree("x")
    with pytest.raises(TreeDomainError, match="Subtree is NIL"):
        node.remove_left()


def test_remove_twice_raises():
    root = build()
    root.remove_middle()
    with pytest.raises(TreeDomainError):
        root.remove_middle()


def test_height_of_leaf_is_zero():
    assert TernaryTree("x").height() == 0


def test_height_grows_by_one_per_level():
    root = build()
    assert root.height() == root.left.height() + 1
    assert root.left.height() == root.left.left.height() + 1
    assert root.left.left.height() == root.left.left.right.height() + 1


def test_height_of_nil_raises():
    with pytest.raises(TreeDomainError, match="Operation not supported"):
        NIL.height()


def test_clone_is_deep_and_preserves_structure():
    root = build()
    copy = root.clone()
    assert copy is not root
    assert copy.left.left.right is not root.left.left.right
    assert copy.left.left.right.key == root.left.left.right.key
    assert copy.middle.left is NIL
    assert list(copy) == list(root)


def test_clone_of_nil_raises():
    with pytest.raises(TreeDomainError, match="NIL as source not permitted."):
        NIL.clone()


def test_assign_copies_deeply():
    root = build()
    target = TernaryTree("old")
    result = target.assign(root)
    assert result is target
    assert list(target) == EXPECTED_ORDER
    assert target.left is not root.left
    assert target.middle.left is NIL


def test_assign_independent_after_copy():
    root = build()
    target = TernaryTree("old")
    target.assign(root)
    root.remove_right()
    assert target.right.key == "action."


def test_assign_self_is_noop():
    root = build()
    left = root.left
    root.assign(root)
    assert root.left is left
    assert list(root) == EXPECTED_ORDER


def test_assign_from_nil_raises():
    root = build()
    with pytest.raises(TreeDomainError, match="NIL as source not permitted."):
        root.assign(NIL)
    assert list(root) == EXPECTED_ORDER


def test_take_moves_subtrees_and_leaves_leaf():
    root = build()
    left = root.left
    moved = root.take()
    assert root.is_leaf()
    assert moved.left is left
    assert moved.key == "This"
    assert list(moved) == EXPECTED_ORDER


def test_take_back_and_forth():
    root = build()
    copy = root.take()
    root = copy.take()
    assert copy.is_leaf()
    assert root.left.left.right.key == "ternary"
    assert root.right.key == "action."


def test_take_of_nil_raises():
    with pytest.raises(TreeDomainError):
        NIL.take()


def test_prefix_iteration_order():
    assert list(build()) == EXPECTED_ORDER


def test_iteration_of_nil_is_empty():
    assert list(PrefixIterator(TernaryTree.NIL)) == []
    assert list(iter(TernaryTree.NIL)) == []


def test_iteration_of_leaf_yields_key():
    assert list(TernaryTree("only")) == ["only"]


def test_prefix_iterator_is_its_own_iterator():
    iterator = PrefixIterator(build())
    assert iter(iterator) is iterator
    assert next(iterator) == "This"
    assert next(iterator) == "is"


def test_prefix_iterator_exhausts():
    iterator = PrefixIterator(TernaryTree("x"))
    assert next(iterator) == "x"
    with pytest.raises(StopIteration):
        next(iterator)


def test_each_key_visited_once():
    root = build()
    keys = list(root)
    assert len(keys) == len(set(keys))