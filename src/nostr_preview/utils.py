"""Utility functions for nostr-preview."""

import json
from collections.abc import Mapping, MutableMapping
from typing import TypeVar

import yaml

K = TypeVar("K")
V = TypeVar("V")


def merge_maps(base: MutableMapping[K, V], overlay: Mapping[K, V]) -> MutableMapping[K, V]:
    """Overlay one mapping onto another in place.

    CONTRACT:
      Inputs:
        - base: mutable mapping owned by the caller, modified in place
        - overlay: mapping whose entries are written into base

      Outputs:
        - base itself, after the update

      Invariants:
        - Every key of overlay is present in the result with overlay's value
        - Keys only in base keep their value
        - No ordering guarantee beyond the mapping's own

      Properties:
        - Idempotent: merging the same overlay twice equals merging it once
    """
    for key, value in overlay.items():
        base[key] = value
    return base


def pretty_json_or_raw(text: str) -> str:
    """Re-render JSON text as YAML, falling back to the input.

    CONTRACT:
      Inputs:
        - text: arbitrary string, often the content of a metadata event
          Example: '{"name": "alice", "about": "hi"}'

      Outputs:
        - YAML rendering of the parsed document, or text unchanged
          Example: "name: alice\\nabout: hi\\n"

      Invariants:
        - Never raises, including on nesting deeper than the recursion limit
        - Only non-empty JSON objects are re-rendered; arrays, scalars and {}
          come back raw
        - Empty rendering falls back to text

      Algorithm:
        1. Parse text as JSON; on failure return text
        2. If the parsed value is not a non-empty dict, return text
        3. Dump with yaml.safe_dump (block style, insertion order, unicode kept)
        4. Return the dump if non-empty, else text
    """
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError, RecursionError):
        return text

    if not isinstance(parsed, dict) or not parsed:
        return text

    try:
        rendered = yaml.safe_dump(parsed, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except (yaml.YAMLError, RecursionError):
        return text

    return rendered if rendered else text
