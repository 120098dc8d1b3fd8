import sys

from relative_view.ancestor import is_relative_ancestor
from relative_view.descendant import (
    TraversalResult,
    depth_first_traverse,
    group_descendants,
    group_descendants_by_tags,
    group_descendants_by_types,
    is_relative_descendant,
)


class View:
    def __init__(self, tag=0):
        self.tag = tag
        self.parent = None
        self.children = []

    def add_subview(self, view):
        view.parent = self
        self.children.append(view)
        return view


class Label(View):
    pass


class Button(View):
    pass


def make_tree():
    # root(1) -> left(2) -> [4, 5]; root -> right(3)
    root = View(tag=1)
    left = root.add_subview(View(tag=2))
    right = root.add_subview(View(tag=3))
    left_child1 = left.add_subview(View(tag=4))
    left_child2 = left.add_subview(View(tag=5))
    return root, left, right, left_child1, left_child2


def test_depth_first_traverse_pre_order():
    root, *_ = make_tree()
    visited = []

    result = depth_first_traverse(root, lambda view: visited.append(view.tag) or True)

    assert result is TraversalResult.COMPLETED
    assert bool(result) is True
    assert visited == [2, 4, 5, 3]


def test_depth_first_traverse_without_descendants():
    visited = []
    assert depth_first_traverse(View(), lambda view: visited.append(view) or True) is TraversalResult.COMPLETED
    assert visited == []


def test_depth_first_traverse_interrupt():
    root, *_ = make_tree()
    expected = {
        2: [2],
        4: [2, 4],
        5: [2, 4, 5],
        3: [2, 4, 5, 3],
    }
    for stop_tag, expected_visits in expected.items():
        visited = []

        def visit(view):
            visited.append(view.tag)
            return view.tag != stop_tag

        result = depth_first_traverse(root, visit)
        assert result is TraversalResult.STOPPED
        assert not result
        assert visited == expected_visits


def test_depth_first_traverse_handles_deep_trees():
    root = View()
    node = root
    for _ in range(sys.getrecursionlimit() + 100):
        node = node.add_subview(View())

    count = []
    assert depth_first_traverse(root, lambda view: count.append(1) or True)
    assert len(count) == sys.getrecursionlimit() + 100


def test_is_relative_descendant():
    root, left, right, left_child1, left_child2 = make_tree()

    assert is_relative_descendant(left, root)
    assert is_relative_descendant(left_child2, root)
    assert is_relative_descendant(left_child1, left)
    assert not is_relative_descendant(left_child1, right)
    assert not is_relative_descendant(root, left)
    assert not is_relative_descendant(root, root)
    assert not is_relative_descendant(View(), root)


def test_group_descendants_order_follows_traversal():
    root, left, right, left_child1, left_child2 = make_tree()

    groups = group_descendants(root, lambda view: "all")
    assert groups == {"all": [left, left_child1, left_child2, right]}


def test_group_descendants_by_tags():
    root, left, right, left_child1, left_child2 = make_tree()
    left_child2.tag = 2

    groups = group_descendants_by_tags(root, [2, 3, 99])
    assert groups == {2: [left, left_child2], 3: [right]}
    assert group_descendants_by_tags(root, []) == {}
    assert group_descendants_by_tags(left_child1, [1, 2, 3, 4, 5]) == {}


def test_group_descendants_by_types():
    root = View()
    label = root.add_subview(Label())
    nested_button = label.add_subview(Button())
    button = root.add_subview(Button())
    root.add_subview(View())

    groups = group_descendants_by_types(root, [Button, Label])
    assert list(groups.keys()) == ["Label", "Button"]
    assert groups["Button"] == [nested_button, button]
    assert groups["Label"] == [label]
    assert group_descendants_by_types(root, [View]) == {"View": [root.children[2]]}
    assert group_descendants_by_types(root, []) == {}


def test_ancestor_and_descendant_are_inverse_for_every_pair():
    nodes = list(make_tree())
    outsider = View()
    nodes.append(outsider)

    for a in nodes:
        for b in nodes:
            assert is_relative_ancestor(a, b) == is_relative_descendant(b, a)
            if a is b:
                assert not is_relative_ancestor(a, b)
                assert not is_relative_descendant(a, b)
