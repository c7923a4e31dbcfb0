import asyncio
import sys
from signal import SIGINT, SIGTERM

from i3_window_killer.core import I3IPCConnection
from i3_window_killer.icons import load_icon_cache, save_icon_cache
from i3_window_killer.menu import prompt_user
from i3_window_killer.prompt import prompt_and_styles
from i3_window_killer.settings import Options, ensure_cache_dir, parse_options
from i3_window_killer.tree import child_nodes, find_focused


async def kill_focused(options: Options, ipc: I3IPCConnection | None = None) -> bool:
    """
    Asks before closing the focused node. Returns whether a kill command
    was sent.
    """
    if ipc is None:
        ipc = I3IPCConnection()

    cache_file = options["cache_file"]
    if not ensure_cache_dir(cache_file):
        cache_file = None

    async with ipc:
        tree = await ipc.get_tree()

        if (node := find_focused(tree)) is None:
            return False

        # nothing to close on an empty workspace
        if node["type"] == "workspace" and not any(child_nodes(node)):
            return False

        icon_cache = load_icon_cache(cache_file)
        prompt, styles = prompt_and_styles(
            node,
            tree,
            options["template"],
            options["smart_gaps"],
            options["outer_gap"],
            icon_cache,
        )
        save_icon_cache(cache_file, icon_cache)

        if options["dump_styles"] and styles is not None:
            print(styles)

        if not await prompt_user(prompt, options["rofi_config"], styles):
            return False

        for outcome in await ipc.run_command("kill"):
            if not outcome.get("success"):
                print("command did not succeed", file=sys.stderr)
                if error := outcome.get("error"):
                    print(error, file=sys.stderr)

    return True


def main(argv: list[str] | None = None) -> int:
    options = parse_options(argv)

    loop = asyncio.new_event_loop()
    for sig in [SIGINT, SIGTERM]:
        loop.add_signal_handler(sig, lambda: [t.cancel() for t in asyncio.all_tasks(loop)])

    try:
        loop.run_until_complete(kill_focused(options))
    except asyncio.exceptions.CancelledError:
        return 130
    except (OSError, ValueError) as e:
        print(f"{e.__class__.__name__}: {e}", file=sys.stderr)
        return 1
    finally:
        loop.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
