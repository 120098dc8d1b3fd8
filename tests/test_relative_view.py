from types import SimpleNamespace

import relative_view
from relative_view.accessor import TK_ACCESSOR, ViewAccessor, matches_tags, matches_types, tag_group_key, type_group_key
from relative_view.relative import RelativeView


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


class FakeWidget:
    """Mimics the parts of a tkinter widget the accessor reads."""

    def __init__(self, master=None, tag=None):
        self.master = master
        self._children = []
        if tag is not None:
            self.tag = tag
        if master is not None:
            master._children.append(self)

    def winfo_children(self):
        return list(self._children)


class FakeFrame(FakeWidget):
    pass


def test_relative_view_wraps_every_direction():
    root = View(tag=3)
    mid = root.add_subview(Label(tag=2))
    leaf = mid.add_subview(View(tag=1))
    peer = mid.add_subview(View(tag=1))

    view = RelativeView(leaf)
    assert view.find_first_ancestor_by_tags([2]) is mid
    assert view.find_first_ancestor_by_types([Label]) is mid
    assert view.find_first_ancestor(lambda v: v.tag == 3) is root
    assert view.is_descendant_of(root)
    assert view.is_descendant_of(RelativeView(mid))
    assert view.is_sibling_of(peer)
    assert not view.is_ancestor_of(root)
    assert RelativeView(root).is_ancestor_of(view)
    assert view.group_ancestors_by_tags([2, 3]) == {2: [mid], 3: [root]}
    assert view.group_ancestors_by_types([Label]) == {"Label": [mid]}
    assert view.group_ancestors(lambda v: v.tag) == {2: [mid], 3: [root]}
    assert view.group_siblings_by_tags([1]) == {1: [peer]}
    assert view.group_siblings_by_types([View]) == {"View": [peer]}
    assert view.group_siblings(lambda v: "x") == {"x": [peer]}

    top = RelativeView(RelativeView(root))
    assert top.node is root
    assert top.group_descendants_by_tags([1]) == {1: [leaf, peer]}
    assert top.group_descendants_by_types([Label]) == {"Label": [mid]}
    assert top.group_descendants(lambda v: None) == {}
    assert top.depth_first_traverse(lambda v: v is not leaf) is relative_view.TraversalResult.STOPPED


def test_tk_accessor_reads_master_and_winfo_children():
    root = FakeWidget()
    frame = FakeFrame(root, tag=10)
    button = FakeWidget(frame, tag=20)
    entry = FakeWidget(frame)

    view = RelativeView(button, accessor=TK_ACCESSOR)
    assert view.find_first_ancestor_by_tags([10]) is frame
    assert view.find_first_ancestor_by_types([FakeFrame]) is frame
    assert view.is_sibling_of(entry)
    assert view.is_descendant_of(root)
    assert RelativeView(root, accessor=TK_ACCESSOR).group_descendants_by_tags([0, 20]) == {20: [button], 0: [entry]}


def test_custom_accessor_for_foreign_tree_shape():
    nodes = {
        "root": SimpleNamespace(up=None, kids=["a", "b"], kind="panel", tag=0),
        "a": SimpleNamespace(up="root", kids=[], kind="text", tag=1),
        "b": SimpleNamespace(up="root", kids=[], kind="panel", tag=1),
    }
    accessor = ViewAccessor(
        parent_of=lambda n: nodes[n.up] if n.up else None,
        children_of=lambda n: [nodes[k] for k in n.kids],
        type_of=lambda n: n.kind,
        type_name=str,
    )

    root = RelativeView(nodes["root"], accessor)
    assert root.group_descendants_by_types(["panel"]) == {"panel": [nodes["b"]]}
    assert RelativeView(nodes["a"], accessor).is_sibling_of(nodes["b"])


def test_match_helpers():
    label = Label(tag=4)
    accessor = relative_view.DEFAULT_ACCESSOR

    assert matches_types(accessor, label, [View, Label])
    assert not matches_types(accessor, label, [View])
    assert not matches_types(accessor, label, [])
    assert matches_tags(accessor, label, [4])
    assert not matches_tags(accessor, label, [])
    assert type_group_key(accessor, [Label])(label) == "Label"
    assert type_group_key(accessor, [View])(label) is None
    assert tag_group_key(accessor, [4, 5])(label) == 4
    assert tag_group_key(accessor, [5])(label) is None


def test_package_lazy_exports():
    assert relative_view.RelativeView is RelativeView
    assert callable(relative_view.group_siblings_by_tags)
    assert "WindowGraph" in dir(relative_view)
