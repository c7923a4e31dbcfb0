import sys
from functools import reduce
from typing import NamedTuple

from i3_window_killer.data_types import Node
from i3_window_killer.gaps import SmartGaps, chain_gaps_visible
from i3_window_killer.tree import node_chain


class NodeRect(NamedTuple):
    """Visible area of a node in absolute pixels, edges instead of sizes."""

    top: int
    right: int
    bottom: int
    left: int


def node_rect(
    node: Node, gaps_visible: bool, outer_gap: int | None = None
) -> NodeRect:
    x, y = node["rect"]["x"], node["rect"]["y"]
    width, height = node["rect"]["width"], node["rect"]["height"]

    if gaps_visible and (gaps := node.get("gaps")):
        x += gaps["left"]
        y += gaps["top"]
        width -= gaps["left"] + gaps["right"]
        height -= gaps["top"] + gaps["bottom"]

        # i3 does not report the global `gaps outer` rule in the node gaps
        if outer_gap is not None:
            x += outer_gap
            y += outer_gap
            width -= 2 * outer_gap
            height -= 2 * outer_gap

    return NodeRect(top=y, right=x + width, bottom=y + height, left=x)


def intersect(a: NodeRect, b: NodeRect) -> NodeRect:
    # no clamping, a misconfigured tree may yield an inverted rect
    return NodeRect(
        top=max(a.top, b.top),
        right=min(a.right, b.right),
        bottom=min(a.bottom, b.bottom),
        left=max(a.left, b.left),
    )


def chain_rect(
    chain: list[Node], gaps_visible: bool, outer_gap: int | None = None
) -> NodeRect:
    rects = [node_rect(n, gaps_visible, outer_gap) for n in chain]
    return reduce(intersect, rects)


def inherited_rect(
    target: Node, root: Node, gaps_visible: bool, outer_gap: int | None = None
) -> NodeRect:
    """
    Area of `target` left visible by all of its ancestors. A target that
    cannot be reached from `root` gets its own rect without any gaps.
    """
    if (chain := node_chain(target, root)) is None:
        print(
            f"Node {target['id']} is not part of the tree, using its raw rect",
            file=sys.stderr,
        )
        return node_rect(target, False)

    return chain_rect(chain, gaps_visible, outer_gap)


def container_rect(
    target: Node, root: Node, smart_gaps: SmartGaps, outer_gap: int | None = None
) -> NodeRect:
    if (chain := node_chain(target, root)) is None:
        return inherited_rect(target, root, False, outer_gap)

    return chain_rect(chain, chain_gaps_visible(chain, smart_gaps), outer_gap)
