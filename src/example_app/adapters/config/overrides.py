"""Command-line ``--set SECTION.KEY=VALUE`` overrides for layered Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can yield."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, nested keys, and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: When ``=`` or the section dot is missing, or a path
            component is empty.

    Examples:
        >>> o = parse_override("demo.left=40")
        >>> o.section, o.key_path, o.value
        ('demo', ('left',), 40)

        >>> parse_override("arithmetic.overflow=wrap32").value
        'wrap32'

        >>> parse_override("demo.message=a=b").value
        'a=b'
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    keys = tuple(rest.split("."))
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=keys, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("8")
        8
        >>> coerce_value("-2.5")
        -2.5
        >>> coerce_value("false")
        False
        >>> coerce_value("null")
        >>> coerce_value("wrap64")
        'wrap64'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write *override* into *tree*, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _merge_into(tree, ConfigOverride("demo", ("left",), 1))
        >>> _merge_into(tree, ConfigOverride("demo", ("right",), 2))
        >>> tree
        {'demo': {'left': 1, 'right': 2}}
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` assignment deep-merged on top.

    Keys of a touched section that no override names keep their values.

    Raises:
        ValueError: If any assignment is malformed.

    Examples:
        >>> cfg = Config({"demo": {"left": 5, "right": 3}}, {})
        >>> apply_overrides(cfg, ("demo.left=10",))["demo"]
        {'left': 10, 'right': 3}
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    parsed = [parse_override(raw) for raw in raw_overrides]
    current = config.as_dict()
    # Seed each touched section with its current contents so sibling keys survive.
    tree: dict[str, dict[str, object]] = {}
    for override in parsed:
        if override.section not in tree:
            existing = current.get(override.section)
            tree[override.section] = cast("dict[str, object]", existing) if isinstance(existing, dict) else {}
    for override in parsed:
        _merge_into(tree, override)
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
