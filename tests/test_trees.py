from hypothesis import given
from hypothesis import strategies as st

from algokit.trees import (
    NULL_MARKER,
    Node,
    bottom_view,
    connect_nodes,
    deserialize,
    diameter,
    height,
    is_balanced,
    is_identical,
    lca,
    leaf_count,
    left_view,
    max_path_sum,
    mirror,
    serialize,
    spiral_level_order,
    vertical_traversal,
)

values = st.integers(min_value=0, max_value=100)
trees = st.recursive(
    st.none(), lambda kids: st.builds(Node, values, kids, kids), max_leaves=20
)
nonempty_trees = st.builds(Node, values, trees, trees)


def _example():
    #      1
    #     / \
    #    2   3
    #   / \    \
    #  4   5    6
    return Node(1, Node(2, Node(4), Node(5)), Node(3, None, Node(6)))


def _values(root):
    out, stack = [], [root]
    while stack:
        node = stack.pop()
        if node is not None:
            out.append(node.val)
            stack.extend((node.left, node.right))
    return out


def _left_chain(n):
    root = None
    for val in range(n):
        root = Node(val, root)
    return root


def _perfect(depth):
    if depth == 0:
        return None
    return Node(depth, _perfect(depth - 1), _perfect(depth - 1))


def _copy(root):
    return deserialize(serialize(root))


def test_bottom_view_example():
    assert bottom_view(_example()) == [4, 2, 5, 3, 6]


def test_vertical_traversal_example():
    assert vertical_traversal(_example()) == [4, 2, 1, 5, 3, 6]


def test_spiral_level_order_example():
    assert spiral_level_order(_example()) == [1, 3, 2, 4, 5, 6]


def test_empty_tree():
    results = (
        height(None),
        diameter(None),
        leaf_count(None),
        max_path_sum(None),
        left_view(None),
        spiral_level_order(None),
        bottom_view(None),
        vertical_traversal(None),
    )
    assert results == (0, 0, 0, 0, [], [], [], [])


def test_max_path_sum_negative_single_node_is_floored():
    assert max_path_sum(Node(-3)) == max_path_sum(None)


@given(nonempty_trees)
def test_max_path_sum_bounds_for_non_negative_values(root):
    vals = _values(root)
    assert max(vals) <= max_path_sum(root) <= sum(vals)


def test_serialize_small_tree():
    assert serialize(Node(1, Node(2))) == [1, 2, NULL_MARKER, NULL_MARKER, NULL_MARKER]


def test_serialize_empty():
    assert serialize(None) == [NULL_MARKER]
    assert deserialize([NULL_MARKER]) is None


@given(trees)
def test_serialize_round_trip(root):
    data = serialize(root)
    assert len(data) == 2 * len(_values(root)) + 1
    assert is_identical(deserialize(data), root)


def test_deserialize_truncated_input():
    assert is_identical(deserialize([1, 2]), Node(1, Node(2)))


@given(trees)
def test_mirror_twice_restores_tree(root):
    original = _copy(root)
    assert is_identical(mirror(mirror(root)), original)


@given(trees)
def test_mirror_preserves_shape_measures(root):
    h, leaves, d = height(root), leaf_count(root), diameter(root)
    mirrored = mirror(root)
    assert (height(mirrored), leaf_count(mirrored), diameter(mirrored)) == (h, leaves, d)


def test_chain_measures():
    for n in range(1, 6):
        chain = _left_chain(n)
        assert height(chain) == n
        assert diameter(chain) == n
        assert leaf_count(chain) == leaf_count(Node(n))


def test_chain_balance():
    assert is_balanced(_left_chain(2))
    assert not is_balanced(_left_chain(3))


def test_perfect_tree_measures():
    for depth in range(1, 6):
        tree = _perfect(depth)
        assert is_balanced(tree)
        assert height(tree) == depth
        assert leaf_count(tree) == 2 ** (depth - 1)
        assert diameter(tree) == 2 * depth - 1


def test_unbalanced_deep_in_tree():
    root = Node(0, _left_chain(3), _left_chain(3))
    assert not is_balanced(root)


@given(nonempty_trees)
def test_diameter_bounds(root):
    assert height(root) <= diameter(root) <= len(_values(root))


@given(nonempty_trees)
def test_left_view_properties(root):
    view = left_view(root)
    assert len(view) == height(root)
    assert view[0] == root.val


@given(nonempty_trees)
def test_traversals_visit_every_node(root):
    vals = sorted(_values(root))
    assert sorted(vertical_traversal(root)) == vals
    spiral = spiral_level_order(root)
    assert sorted(spiral) == vals
    assert spiral[0] == root.val


@given(nonempty_trees)
def test_bottom_view_is_subset(root):
    view = bottom_view(root)
    vals = _values(root)
    assert len(view) <= len(vals)
    assert all(val in vals for val in view)


@given(trees)
def test_identical_with_copy(root):
    assert is_identical(root, _copy(root))


def test_not_identical():
    changed = _example()
    changed.right.right.val = 60
    assert not is_identical(_example(), changed)
    assert not is_identical(_example(), None)
    assert is_identical(None, None)


def test_lca():
    root = _example()
    assert lca(root, 4, 5) is root.left
    assert lca(root, 4, 6) is root
    assert lca(root, 2, 4) is root.left
    assert lca(root, 42, 43) is None


def test_connect_nodes():
    root = _example()
    connect_nodes(root)
    assert root.next_right is None
    assert root.left.next_right is root.right
    assert root.right.next_right is None
    assert root.left.left.next_right is root.left.right
    assert root.left.right.next_right is root.right.right
    assert root.right.right.next_right is None