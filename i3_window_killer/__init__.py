from i3_window_killer.gaps import SmartGaps, resolve_gap_visibility
from i3_window_killer.geometry import NodeRect, container_rect, inherited_rect
from i3_window_killer.tree import find_focused

__all__ = [
    "NodeRect",
    "SmartGaps",
    "container_rect",
    "find_focused",
    "inherited_rect",
    "resolve_gap_visibility",
]
