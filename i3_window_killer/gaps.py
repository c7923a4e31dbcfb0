from enum import Enum, IntEnum

from i3_window_killer.data_types import Node
from i3_window_killer.tree import (
    child_nodes,
    find_workspace,
    is_floating_chain,
    node_chain,
)

GAPLESS_LAYOUTS = {"stacked", "tabbed"}


class SmartGaps(IntEnum):
    OFF = 0
    ON = 1
    INVERSE_OUTER = 2


class LayoutClass(Enum):
    NONE = "none"
    GAPLESS = "gapless"
    GAPPED = "gapped"


_VISIBLE, _HIDDEN = True, False

# (mode, single child, layout of the first meaningful child) -> gaps visible
GAP_TABLE: dict[tuple[SmartGaps, bool, LayoutClass], bool] = {
    (SmartGaps.OFF, True, LayoutClass.NONE): _HIDDEN,
    (SmartGaps.OFF, True, LayoutClass.GAPLESS): _HIDDEN,
    (SmartGaps.OFF, True, LayoutClass.GAPPED): _HIDDEN,
    (SmartGaps.OFF, False, LayoutClass.NONE): _HIDDEN,
    (SmartGaps.OFF, False, LayoutClass.GAPLESS): _HIDDEN,
    (SmartGaps.OFF, False, LayoutClass.GAPPED): _HIDDEN,
    (SmartGaps.ON, True, LayoutClass.NONE): _HIDDEN,
    (SmartGaps.ON, True, LayoutClass.GAPLESS): _HIDDEN,
    (SmartGaps.ON, True, LayoutClass.GAPPED): _HIDDEN,
    (SmartGaps.ON, False, LayoutClass.NONE): _HIDDEN,
    (SmartGaps.ON, False, LayoutClass.GAPLESS): _HIDDEN,
    (SmartGaps.ON, False, LayoutClass.GAPPED): _VISIBLE,
    (SmartGaps.INVERSE_OUTER, True, LayoutClass.NONE): _VISIBLE,
    (SmartGaps.INVERSE_OUTER, True, LayoutClass.GAPLESS): _HIDDEN,
    (SmartGaps.INVERSE_OUTER, True, LayoutClass.GAPPED): _VISIBLE,
    (SmartGaps.INVERSE_OUTER, False, LayoutClass.NONE): _HIDDEN,
    (SmartGaps.INVERSE_OUTER, False, LayoutClass.GAPLESS): _HIDDEN,
    (SmartGaps.INVERSE_OUTER, False, LayoutClass.GAPPED): _HIDDEN,
}


def _has_split(node: Node) -> bool:
    if len(node.get("nodes", [])) > 1:
        return True
    return any(_has_split(n) for n in node.get("nodes", []))


def first_meaningful_child(workspace: Node) -> Node | None:
    """
    The focused direct child of the workspace, otherwise the first child
    holding a split somewhere below it.
    """
    children = list(child_nodes(workspace))

    if focus := workspace.get("focus"):
        focused = next((c for c in children if c["id"] == focus[0]), None)
        if focused is not None:
            return focused

    return next((c for c in children if _has_split(c)), None)


def classify_layout(node: Node | None) -> LayoutClass:
    if node is None:
        return LayoutClass.NONE
    if node.get("layout") in GAPLESS_LAYOUTS:
        return LayoutClass.GAPLESS
    return LayoutClass.GAPPED


def workspace_layout_class(workspace: Node) -> LayoutClass:
    # a tabbed or stacked workspace hides the gaps between its own children
    if len(workspace.get("nodes", [])) > 1 and workspace.get("layout") in GAPLESS_LAYOUTS:
        return LayoutClass.GAPLESS
    return classify_layout(first_meaningful_child(workspace))


def workspace_gaps_visible(workspace: Node, smart_gaps: SmartGaps) -> bool:
    tiled, floating = workspace.get("nodes", []), workspace.get("floating_nodes", [])
    single = len(tiled) + len(floating) == 1
    layout = workspace_layout_class(workspace)
    return GAP_TABLE[(SmartGaps(smart_gaps), single, layout)]


def chain_gaps_visible(chain: list[Node], smart_gaps: SmartGaps) -> bool:
    # floating windows never take part in the tiling gaps
    if is_floating_chain(chain):
        return False

    if (workspace := find_workspace(chain)) is None:
        return False

    return workspace_gaps_visible(workspace, smart_gaps)


def resolve_gap_visibility(target: Node, root: Node, smart_gaps: SmartGaps) -> bool:
    """
    Whether the gaps of the workspace holding `target` are currently drawn.
    Detached targets and targets outside any workspace get hidden gaps.
    """
    if (chain := node_chain(target, root)) is None:
        return False
    return chain_gaps_visible(chain, smart_gaps)
