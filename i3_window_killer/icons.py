import difflib
import os
import sys

import orjson


def application_dirs() -> list[str]:
    data_home = os.environ.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    dirs = [data_home, *data_dirs.split(":")]
    return [os.path.join(d, "applications") for d in dirs if d]


def load_icon_cache(path: str | None) -> dict[str, str]:
    if path is None or not os.path.exists(path):
        return {}

    try:
        with open(path, "rb") as f:
            cache = orjson.loads(f.read())
    except (OSError, orjson.JSONDecodeError) as e:
        print(f"Ignoring unreadable icon cache {path}: {e}", file=sys.stderr)
        return {}

    if not isinstance(cache, dict):
        return {}
    return {k: v for k, v in cache.items() if isinstance(v, str)}


def save_icon_cache(path: str | None, cache: dict[str, str]) -> None:
    if path is None:
        return

    try:
        with open(path, "wb") as f:
            f.write(orjson.dumps(cache, option=orjson.OPT_SORT_KEYS))
    except OSError as e:
        print(f"Couldn't write icon cache {path}: {e}", file=sys.stderr)


def desktop_entry_value(text: str, key: str) -> str | None:
    prefix = f"{key}="
    for line in text.splitlines():
        if line.startswith(prefix):
            return line[len(prefix) :].strip()
    return None


def fuzzy_score(name: str, pattern: str) -> float | None:
    """
    None unless every character of `pattern` shows up in `name` in order,
    ignoring case. Otherwise the similarity ratio of the two strings.
    """
    name, pattern = name.lower(), pattern.lower()
    chars = iter(name)
    if not all(c in chars for c in pattern):
        return None
    return difflib.SequenceMatcher(None, name, pattern).ratio()


def desktop_files(directories: list[str]) -> list[str]:
    files = []
    for directory in directories:
        for dirpath, _, filenames in os.walk(directory):
            files.extend(
                os.path.join(dirpath, f)
                for f in sorted(filenames)
                if f.endswith(".desktop")
            )
    return files


def find_desktop_file(wm_class: str, directories: list[str]) -> str | None:
    best: tuple[float, str] | None = None

    for path in desktop_files(directories):
        try:
            with open(path, "r") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError):
            continue

        if (name := desktop_entry_value(text, "Name")) is None:
            continue
        if (score := fuzzy_score(name, wm_class)) is None:
            continue
        if best is None or score > best[0]:
            best = (score, path)

    return best[1] if best else None


def icon_from_desktop_files(wm_class: str, directories: list[str]) -> str | None:
    if (path := find_desktop_file(wm_class, directories)) is None:
        return None

    try:
        with open(path, "r") as f:
            return desktop_entry_value(f.read(), "Icon") or None
    except (OSError, UnicodeDecodeError):
        return None


def resolve_icon(
    wm_class: str, cache: dict[str, str], directories: list[str] | None = None
) -> str:
    """
    Icon name for a window class. The result is remembered in `cache`,
    the caller decides whether and where to persist it.
    """
    if (icon := cache.get(wm_class)) is not None:
        return icon

    if directories is None:
        directories = application_dirs()

    icon = icon_from_desktop_files(wm_class, directories) or wm_class
    cache[wm_class] = icon
    return icon
