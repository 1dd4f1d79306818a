"""Messaging – custom data trees and their flat string-map view.

HTTP v1 only accepts ``dict[str, str]`` for custom data, so the tree a caller
attaches is exploded into dotted keys::

    >>> flatten_data({"a": {"b": 1, "c": [10, 20]}})
    {'a.b': '1', 'a.c.0': '10', 'a.c.1': '20', 'data': '{"a":{"b":1,"c":[10,20]}}'}

The reserved ``"data"`` key always carries the compact JSON of the whole tree
and overwrites any flattened entry of the same name.
"""
from __future__ import annotations

import json
from typing import Any, Union

from fcm_push.kernel.errors import SerializationError

DataTree = Union[str, int, float, bool, None, list["DataTree"], dict[str, "DataTree"]]

RESERVED_DATA_KEY = "data"


def to_compact_json(value: Any) -> str:
    """Serialise *value* without whitespace; raise :class:`SerializationError` on failure."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Payload is not JSON serialisable: {exc}", cause=exc) from exc


def _flatten(prefix: str, value: DataTree, output: dict[str, str]) -> None:
    if isinstance(value, dict):
        for key, child in value.items():
            if not isinstance(key, str):
                raise SerializationError(
                    f"Data keys must be strings, got {type(key).__name__} at {prefix or '<root>'!r}"
                )
            _flatten(f"{prefix}.{key}" if prefix else key, child, output)
    elif isinstance(value, (list, tuple)):
        for index, child in enumerate(value):
            _flatten(f"{prefix}.{index}", child, output)
    elif isinstance(value, str):
        output[prefix] = value
    elif value is None or isinstance(value, (bool, int, float)):
        output[prefix] = to_compact_json(value)
    else:
        raise SerializationError(
            f"Unsupported data value of type {type(value).__name__} at {prefix!r}"
        )


def flatten_data(tree: DataTree) -> dict[str, str]:
    """Return the flat ``dict[str, str]`` view of *tree* plus the reserved ``"data"`` copy.

    A ``None`` tree is treated as an empty object. Any other non-object root
    contributes only the reserved key.
    """
    if tree is None:
        tree = {}
    output: dict[str, str] = {}
    if isinstance(tree, dict):
        _flatten("", tree, output)
    output[RESERVED_DATA_KEY] = to_compact_json(tree)
    return output


__all__ = ["DataTree", "RESERVED_DATA_KEY", "flatten_data", "to_compact_json"]
