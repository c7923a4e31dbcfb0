from string import Template
from typing import TypedDict

from i3_window_killer.data_types import Node
from i3_window_killer.gaps import SmartGaps
from i3_window_killer.geometry import NodeRect, container_rect
from i3_window_killer.icons import resolve_icon
from i3_window_killer.tree import window_nodes

NodeInfo = TypedDict("NodeInfo", {"class": str, "title": str, "icon": str})


class StyleTemplate(Template):
    """
    `$container.top`, `${nodes.0.icon}`, `$nodes.length` and `$prompt`
    are substituted, `$$` escapes a dollar sign. Other placeholders, such as
    rofi's own `${HOME}` environment lookups, are left for rofi.
    """

    idpattern = r"[_a-z][_a-z0-9]*(?:\.[_a-z0-9]+)*"


OWN_PREFIXES = ("container.", "nodes.")


def nodes_info(
    node: Node, cache: dict[str, str], directories: list[str] | None = None
) -> list[NodeInfo]:
    infos: list[NodeInfo] = []
    for window in window_nodes(node):
        properties = window.get("window_properties") or {}
        wm_class = properties.get("class") or "Unknown"
        title = properties.get("title") or "Unknown"
        icon = resolve_icon(wm_class, cache, directories)
        infos.append({"class": wm_class, "title": title, "icon": icon})
    return infos


def prompt_text(infos: list[NodeInfo]) -> str:
    return "Close nodes" if len(infos) > 1 else "Close node"


def template_context(
    prompt: str, rect: NodeRect, infos: list[NodeInfo]
) -> dict[str, str]:
    context = {f"container.{k}": str(v) for k, v in rect._asdict().items()}
    context["nodes.length"] = str(len(infos))
    context["prompt"] = prompt
    for index, info in enumerate(infos):
        for key, value in info.items():
            context[f"nodes.{index}.{key}"] = value
    return context


def render_styles(template: str, context: dict[str, str]) -> str:
    for match in StyleTemplate.pattern.finditer(template):
        name = match.group("named") or match.group("braced")
        if name is None or name in context:
            continue
        if name.startswith(OWN_PREFIXES):
            raise ValueError(f"Unknown template variable '{name}'")

    return StyleTemplate(template).safe_substitute(context)


def prompt_and_styles(
    node: Node,
    tree: Node,
    template_path: str | None,
    smart_gaps: SmartGaps,
    outer_gap: int | None,
    cache: dict[str, str],
    directories: list[str] | None = None,
) -> tuple[str, str | None]:
    infos = nodes_info(node, cache, directories)
    prompt = prompt_text(infos)

    if template_path is None:
        return prompt, None

    rect = container_rect(node, tree, smart_gaps, outer_gap)
    with open(template_path, "r") as f:
        template = f.read()

    return prompt, render_styles(template, template_context(prompt, rect, infos))
