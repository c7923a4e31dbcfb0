from typing import Iterator

from i3_window_killer.data_types import Node


def child_nodes(node: Node) -> Iterator[Node]:
    yield from node.get("nodes", [])
    yield from node.get("floating_nodes", [])


def find_focused(node: Node) -> Node | None:
    """
    Depth-first search for the node flagged as focused, tiled children
    before floating ones. Returns None when nothing holds the focus.
    """
    if node.get("focused") is True:
        return node

    for child in child_nodes(node):
        if (found := find_focused(child)) is not None:
            return found

    return None


def node_chain(target: Node, root: Node) -> list[Node] | None:
    """
    Path from `root` down to `target`, both included. The tree carries no
    parent links, so this walks down from the root again on every call.
    """
    if root["id"] == target["id"]:
        return [root]

    for child in child_nodes(root):
        if (chain := node_chain(target, child)) is not None:
            return [root, *chain]

    return None


def is_floating_chain(chain: list[Node]) -> bool:
    for parent, child in zip(chain, chain[1:]):
        if any(n["id"] == child["id"] for n in parent.get("floating_nodes", [])):
            return True
    return False


def find_workspace(chain: list[Node]) -> Node | None:
    # nearest to the target wins
    return next((n for n in reversed(chain) if n.get("type") == "workspace"), None)


def window_nodes(node: Node) -> list[Node]:
    windows = [node] if node.get("window_properties") else []
    for child in child_nodes(node):
        windows.extend(window_nodes(child))
    return windows
