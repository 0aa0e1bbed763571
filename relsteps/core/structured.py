"""Helpers for reading untyped TOML/JSON structures.

Used at the boundaries where the release file or `gh` JSON output is
ingested. They validate at runtime and narrow types for static checkers.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripped.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a list of non-blank strings.

    Returns None when the key is missing. Raises TypeError when the value is
    present but is not a list of strings, so config loading can report it.
    """
    value = table.get(key)
    if value is None:
        return None
    items = as_obj_list(value)
    if items is None:
        raise TypeError(f"'{key}' must be a list of strings")
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"'{key}' must be a list of strings")
        s = item.strip()
        if s:
            out.append(s)
    return tuple(out)


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys)."""
    return as_str_dict(table.get(key))
