"""
Unit tests for tree traversal.
"""

import pytest
from i3_window_killer.tree import (
    child_nodes,
    find_focused,
    find_workspace,
    is_floating_chain,
    node_chain,
    window_nodes,
)


@pytest.mark.unit
class TestFindFocused:
    def test_finds_focused_window(self, two_tiled_tree):
        assert find_focused(two_tiled_tree)["id"] == 11

    def test_finds_focused_floating_window(self, floating_tree):
        assert find_focused(floating_tree)["id"] == 21

    def test_no_focused_node(self, node, root):
        tree = root(node(10, node_type="workspace", nodes=[node(11), node(12)]))
        assert find_focused(tree) is None

    def test_focused_root(self, node):
        tree = node(1, node_type="root", focused=True, nodes=[node(2, focused=False)])
        assert find_focused(tree) is tree

    def test_tiled_searched_before_floating(self, node, root):
        # malformed tree with two focused nodes, tiled one wins
        tiled = node(11, focused=True)
        floating = node(12, focused=True)
        tree = root(node(10, node_type="workspace", nodes=[tiled], floating_nodes=[floating]))
        assert find_focused(tree)["id"] == 11

    def test_focused_workspace(self, node, root):
        tree = root(node(10, node_type="workspace", focused=True))
        assert find_focused(tree)["type"] == "workspace"


@pytest.mark.unit
class TestNodeChain:
    def test_chain_from_root_to_target(self, two_tiled_tree):
        target = two_tiled_tree["nodes"][0]["nodes"][0]["nodes"][1]
        chain = node_chain(target, two_tiled_tree)
        assert [n["id"] for n in chain] == [1, 2, 10, 12]

    def test_chain_of_root(self, two_tiled_tree):
        assert node_chain(two_tiled_tree, two_tiled_tree) == [two_tiled_tree]

    def test_chain_through_floating_nodes(self, floating_tree):
        target = find_focused(floating_tree)
        assert [n["id"] for n in node_chain(target, floating_tree)] == [1, 2, 10, 20, 21]

    def test_unreachable_target(self, two_tiled_tree, node):
        assert node_chain(node(99), two_tiled_tree) is None

    def test_matches_by_id(self, two_tiled_tree, node):
        chain = node_chain(node(11), two_tiled_tree)
        assert chain[-1] is two_tiled_tree["nodes"][0]["nodes"][0]["nodes"][0]


@pytest.mark.unit
class TestChainHelpers:
    def test_floating_chain(self, floating_tree):
        chain = node_chain(find_focused(floating_tree), floating_tree)
        assert is_floating_chain(chain)

    def test_tiled_chain(self, floating_tree, node):
        chain = node_chain(node(11), floating_tree)
        assert not is_floating_chain(chain)

    def test_find_workspace(self, two_tiled_tree):
        chain = node_chain(find_focused(two_tiled_tree), two_tiled_tree)
        assert find_workspace(chain)["id"] == 10

    def test_target_is_workspace(self, two_tiled_tree):
        workspace = two_tiled_tree["nodes"][0]["nodes"][0]
        chain = node_chain(workspace, two_tiled_tree)
        assert find_workspace(chain) is workspace

    def test_no_workspace(self, node):
        tree = node(1, node_type="root", nodes=[node(2)])
        assert find_workspace(node_chain(node(2), tree)) is None


@pytest.mark.unit
class TestChildren:
    def test_tiled_before_floating(self, floating_tree):
        workspace = floating_tree["nodes"][0]["nodes"][0]
        assert [n["id"] for n in child_nodes(workspace)] == [11, 12, 20]

    def test_window_nodes_in_preorder(self, floating_tree):
        titles = [n["window_properties"]["title"] for n in window_nodes(floating_tree)]
        assert titles == ["zsh", "vim", "Volume Control"]

    def test_window_node_itself(self, single_window_tree):
        window = find_focused(single_window_tree)
        assert window_nodes(window) == [window]
