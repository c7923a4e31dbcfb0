import argparse
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TypedDict

from i3_window_killer.gaps import SmartGaps

APP_NAME = "i3-window-killer"
ICONS_CACHE_FILENAME = "icons.json"


class Options(TypedDict):
    rofi_config: str | None
    template: str | None
    outer_gap: int | None
    smart_gaps: SmartGaps
    dump_styles: bool
    cache_file: str | None


def existing_file(path: str) -> str:
    if not os.path.isfile(path):
        raise argparse.ArgumentTypeError(f"{path} is not a file")
    return path


def existing_dir(path: str) -> str:
    if not os.path.isdir(path):
        raise argparse.ArgumentTypeError(f"{path} is not a directory")
    return path


def smart_gaps_value(value: str) -> SmartGaps:
    try:
        return SmartGaps(int(value))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid smart gaps value: {value}")


def default_cache_dir() -> str:
    if xdg_cache := os.environ.get("XDG_CACHE_HOME"):
        return xdg_cache
    if home := os.environ.get("HOME"):
        return os.path.join(home, ".cache")
    return ""


def app_version() -> str:
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Show rofi confirmation prompt before killing the focused i3wm"
        " node",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=app_version())
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        dest="rofi_config",
        help="rofi configuration file (passed as-is to subcommand)",
    )
    parser.add_argument(
        "-t",
        "--template",
        metavar="FILE",
        type=existing_file,
        help=(
            "rofi styles template, placeholders are written $name or ${name}:\n"
            "    $container.top, $container.right, $container.bottom, $container.left\n"
            "        visible edges of the focused node in pixels\n"
            "    $nodes.length\n"
            "        number of windows within the focused node\n"
            "    $nodes.N.class, $nodes.N.title, $nodes.N.icon\n"
            "        X11 class, title and desktop icon of the N-th window\n"
            "    $prompt\n"
            "        the prompt text\n"
            "use $$ for a literal dollar sign, other placeholders are left for rofi"
        ),
    )
    parser.add_argument(
        "-o",
        "--outer-gap",
        metavar="INTEGER",
        type=int,
        help=(
            'Global i3-gaps "gaps outer" rule (in pixels)\n'
            "If present in your i3 config, every node inherits the offset but their\n"
            "gaps property does not reflect it, so this hint helps in calculating\n"
            "the effective gaps."
        ),
    )
    parser.add_argument(
        "-s",
        "--smart-gaps",
        metavar="INTEGER",
        type=smart_gaps_value,
        default=SmartGaps.ON,
        help='Global i3-gaps "smart_gaps" rule (0: off, 1: on, 2: inverse_outer)',
    )
    parser.add_argument(
        "-d",
        "--dump-styles",
        action="store_true",
        help="Dump rendered styles to stdout",
    )
    cache = parser.add_mutually_exclusive_group()
    cache.add_argument(
        "--no-cache", action="store_true", help="Don't read/write cached icons"
    )
    cache.add_argument(
        "--cache-dir",
        metavar="DIR",
        type=existing_dir,
        help=(
            f"Custom cache directory to use (sub-directory [{APP_NAME}] will still "
            "be created).\n"
            "If unspecified, $XDG_CACHE_HOME or $HOME/.cache will be used"
        ),
    )
    return parser


def parse_options(argv: list[str] | None = None) -> Options:
    args = build_parser().parse_args(argv)

    cache_dir = args.cache_dir if args.cache_dir is not None else default_cache_dir()
    cache_file = None
    if cache_dir and not args.no_cache:
        cache_file = os.path.join(cache_dir, APP_NAME, ICONS_CACHE_FILENAME)

    return {
        "rofi_config": args.rofi_config,
        "template": args.template,
        "outer_gap": args.outer_gap,
        "smart_gaps": args.smart_gaps,
        "dump_styles": args.dump_styles,
        "cache_file": cache_file,
    }


def ensure_cache_dir(cache_file: str | None) -> bool:
    if cache_file is None:
        return False

    try:
        os.makedirs(os.path.dirname(cache_file), exist_ok=True)
    except OSError as e:
        print(f"Couldn't create cache directory: {e}", file=sys.stderr)
        return False
    return True
