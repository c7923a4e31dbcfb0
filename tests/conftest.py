"""
Shared pytest fixtures for building i3 trees.
"""

import pytest


def make_node(
    node_id,
    node_type="con",
    layout="splith",
    x=0,
    y=0,
    width=1920,
    height=1080,
    gaps=None,
    nodes=None,
    floating_nodes=None,
    focused=False,
    focus=None,
    wm_class=None,
    title=None,
):
    node = {
        "id": node_id,
        "type": node_type,
        "name": title,
        "layout": layout,
        "rect": {"x": x, "y": y, "width": width, "height": height},
        "gaps": gaps,
        "nodes": nodes or [],
        "floating_nodes": floating_nodes or [],
        "focus": focus or [],
        "focused": focused,
    }
    if wm_class is not None or title is not None:
        node["window_properties"] = {"class": wm_class, "title": title}
    return node


def make_gaps(top=0, right=0, bottom=0, left=0):
    return {"inner": 0, "outer": 0, "top": top, "right": right, "bottom": bottom, "left": left}


def wrap_in_root(*workspaces):
    """root > output > workspaces"""
    output = make_node(2, node_type="output", layout="output", nodes=list(workspaces))
    return make_node(1, node_type="root", nodes=[output])


@pytest.fixture
def node():
    return make_node


@pytest.fixture
def gaps():
    return make_gaps


@pytest.fixture
def two_tiled_tree():
    """Workspace split in two tiled windows with 10px gaps, left one focused."""
    left = make_node(
        11, x=0, width=960, gaps=make_gaps(10, 10, 10, 10), focused=True,
        wm_class="firefox", title="Mozilla Firefox",
    )
    right = make_node(
        12, x=960, width=960, gaps=make_gaps(10, 10, 10, 10),
        wm_class="Alacritty", title="zsh",
    )
    workspace = make_node(10, node_type="workspace", nodes=[left, right], focus=[11, 12])
    return wrap_in_root(workspace)


@pytest.fixture
def single_window_tree():
    window = make_node(
        11, gaps=make_gaps(10, 10, 10, 10), focused=True, wm_class="firefox", title="web"
    )
    workspace = make_node(10, node_type="workspace", nodes=[window], focus=[11])
    return wrap_in_root(workspace)


@pytest.fixture
def floating_tree():
    tiled = make_node(11, gaps=make_gaps(10, 10, 10, 10), wm_class="Alacritty", title="zsh")
    other = make_node(12, gaps=make_gaps(10, 10, 10, 10), wm_class="Alacritty", title="vim")
    window = make_node(
        21, x=100, y=100, width=400, height=300, gaps=make_gaps(10, 10, 10, 10),
        focused=True, wm_class="pavucontrol", title="Volume Control",
    )
    floating = make_node(20, node_type="floating_con", x=100, y=100, width=400,
                         height=300, nodes=[window], focus=[21])
    workspace = make_node(
        10, node_type="workspace", nodes=[tiled, other], floating_nodes=[floating],
        focus=[20, 11, 12],
    )
    return wrap_in_root(workspace)


@pytest.fixture
def root():
    return wrap_in_root


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: pure function tests")
    config.addinivalue_line("markers", "integration: tests touching sockets or processes")
