from typing import Literal, NotRequired, Optional, TypedDict

NodeType = (
    Literal["root"]
    | Literal["output"]
    | Literal["workspace"]
    | Literal["con"]
    | Literal["floating_con"]
    | Literal["dockarea"]
)

NodeLayout = (
    Literal["splith"]
    | Literal["splitv"]
    | Literal["stacked"]
    | Literal["tabbed"]
    | Literal["dockarea"]
    | Literal["output"]
)


class Rectangle(TypedDict):
    x: int
    y: int
    width: int
    height: int


class Gaps(TypedDict):
    """
    Insets i3-gaps already applied to a node. The global `gaps outer` rule
    is not reflected here.
    """

    inner: int
    outer: int
    top: int
    right: int
    bottom: int
    left: int


WindowProperties = TypedDict(
    "WindowProperties",
    {
        "class": Optional[str],
        "instance": Optional[str],
        "title": Optional[str],
    },
    total=False,
)


class Node(TypedDict):
    id: int
    type: NodeType
    name: Optional[str]
    layout: NodeLayout
    rect: Rectangle
    gaps: NotRequired[Optional[Gaps]]
    nodes: list["Node"]
    floating_nodes: list["Node"]
    focus: list[int]
    focused: bool
    window_properties: NotRequired[WindowProperties]


class CommandOutcome(TypedDict):
    success: bool
    error: NotRequired[str]
