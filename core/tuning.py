"""core/tuning.py — Startup settings from ``data/tuning.toml``.

Viewport size, player speed, asset paths and the collision margin are
read once at startup::

    from core import tuning
    tuning.load()
    speed = tuning.get("player", "speed", PLAYER_SPEED)

The default passed to ``get`` is the built-in value from
``core/constants.py``; a missing file, section or key falls back to it.
A value of the wrong kind (``width = "wide"``) also falls back, with a
``[TUNING]`` line the first time it is read, so a typo in the file
never reaches the camera or the mover.

F5 in the world scene calls ``reload()``.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_tables: dict[str, Any] = {}
_source: Path = DEFAULT_PATH
_reported: set[tuple[str, str]] = set()


def load(path: str | Path | None = None) -> None:
    """Replace the current settings with the contents of *path*.

    A malformed file raises ``tomllib.TOMLDecodeError``; only a missing
    one is tolerated.
    """
    global _tables, _source
    _source = DEFAULT_PATH if path is None else Path(path)
    _reported.clear()
    try:
        with open(_source, "rb") as f:
            _tables = tomllib.load(f)
    except FileNotFoundError:
        _tables = {}
        print(f"[TUNING] {_source} not found — built-in defaults")
        return
    sections = ", ".join(sorted(k for k, v in _tables.items() if isinstance(v, dict)))
    print(f"[TUNING] {_source}: [{sections}]")


def reload() -> None:
    load(_source)


def _table(name: str) -> dict | None:
    """``"player.sprite"`` → the ``[player.sprite]`` table, if present."""
    node: Any = _tables
    for part in name.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, dict) else None


def _same_kind(value: Any, default: Any) -> bool:
    # ints and floats are interchangeable; bools are not numbers here
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


def get(section: str, key: str, default: Any = None) -> Any:
    """Read ``[section] key``, or *default* when absent or mistyped."""
    table = _table(section)
    if table is None or key not in table:
        return default
    value = table[key]
    if default is not None and not _same_kind(value, default):
        if (section, key) not in _reported:
            _reported.add((section, key))
            print(f"[TUNING] [{section}] {key} = {value!r} is not a "
                  f"{type(default).__name__}; using {default!r}")
        return default
    return value

