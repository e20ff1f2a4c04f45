"""Event kind catalog.

Human-readable labels for the event kinds a preview is likely to show.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .utils import merge_maps

KIND_NAMES: Mapping[int, str] = MappingProxyType(
    {
        0: "profile metadata",
        1: "text note",
        2: "relay recommendation",
        3: "contact list",
        4: "encrypted direct message",
        5: "event deletion",
        6: "repost",
        7: "reaction",
        8: "badge award",
        40: "channel creation",
        41: "channel metadata",
        42: "channel message",
        43: "channel hide message",
        44: "channel mute user",
        1984: "report",
        9735: "zap",
        9734: "zap request",
        10002: "relay list",
        30008: "profile badges",
        30009: "badge definition",
        30078: "app-specific data",
        30023: "article",
    }
)


def kind_label(kind: int) -> str | None:
    """Return the catalog label for kind, or None if the kind is unknown."""
    return KIND_NAMES.get(kind)


def describe_kind(kind: int, overrides: Mapping[int, str] | None = None) -> str:
    """Label a kind for display, honouring caller overrides.

    CONTRACT:
      Inputs:
        - kind: integer event kind
        - overrides: optional mapping of kind to label, layered over the catalog

      Outputs:
        - label string; "kind {kind}" when neither overrides nor catalog know it

      Invariants:
        - KIND_NAMES is never modified
        - An override always wins over the catalog entry
    """
    names = KIND_NAMES
    if overrides:
        names = merge_maps(dict(KIND_NAMES), overrides)
    return names.get(kind, f"kind {kind}")
