"""
Path-addressed access into nested data trees.

A path is a sequence of segments: strings address mapping keys, integers
address sequence indices. Paths are kept as sequences and only joined into
an accessor string for display.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any


class _Missing:
    """Marker for a location that holds no value at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


MISSING: Any = _Missing()


def clone_tree(value: Any) -> Any:
    """
    Structural deep copy of a data tree.
    Mappings become dicts, lists and tuples keep their type; every container
    in the result is new, even where the input reuses one object twice.
    """
    if isinstance(value, Mapping):
        return {key: clone_tree(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return tuple(clone_tree(item) for item in value)
    if isinstance(value, list):
        return [clone_tree(item) for item in value]
    return copy.deepcopy(value)


def _as_index(segment: str | int) -> int | None:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def get_path(tree: Any, path: Sequence[str | int]) -> Any:
    """Return the value at ``path`` or MISSING when any segment is absent."""
    current = tree
    for segment in path:
        if isinstance(current, Mapping):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif _is_sequence(current):
            index = _as_index(segment)
            if index is None or index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current


def _new_container(next_segment: str | int) -> dict | list:
    if isinstance(next_segment, int) and _as_index(next_segment) is not None:
        return []
    return {}


def _assign(container: dict | list, segment: str | int, value: Any) -> None:
    if isinstance(container, list):
        index = _as_index(segment)
        while len(container) <= index:
            container.append(None)
        container[index] = value
    else:
        container[segment] = value


def _can_hold(container: Any, segment: str | int) -> bool:
    if isinstance(container, dict):
        return True
    return isinstance(container, (list, tuple)) and _as_index(segment) is not None


def set_path(tree: dict | list, path: Sequence[str | int], value: Any) -> None:
    """
    Write ``value`` at ``path`` inside ``tree``, creating missing
    intermediate containers. Intermediates that cannot hold the next
    segment (scalars, or a list addressed by a key) are replaced; tuples
    on the way are rebuilt as lists.
    """
    if not path:
        raise ValueError("Cannot set a value at an empty path")
    if not isinstance(tree, (dict, list)) or not _can_hold(tree, path[0]):
        raise TypeError(f"Cannot address {format_path(path[:1])} inside {type(tree).__name__}")

    current = tree
    for segment, next_segment in zip(path, path[1:]):
        child = get_path(current, [segment])
        if isinstance(child, tuple) and _can_hold(child, next_segment):
            child = list(child)
            _assign(current, segment, child)
        elif not _can_hold(child, next_segment):
            child = _new_container(next_segment)
            _assign(current, segment, child)
        current = child
    _assign(current, path[-1], value)


def format_path(path: Sequence[str | int]) -> str:
    """Join segments into an accessor such as ``items[0].name``."""
    accessor = ""
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            accessor += f"[{segment}]"
        elif accessor:
            accessor += f".{segment}"
        else:
            accessor = str(segment)
    return accessor
