"""Event decoding.

Builds Event instances from NIP-01 JSON as delivered by a relay.
"""

import json
from typing import Any

from .errors import EventParseError, InvalidFieldTypeError, InvalidFieldValueError, MissingFieldError
from .models import Event

REQUIRED_FIELDS = ("id", "pubkey")


def load_event(text: str) -> Event:
    """Decode JSON event text into an Event.

    CONTRACT:
      Inputs:
        - text: JSON document holding a single event object
          Example: '{"id": "abc", "pubkey": "def", "kind": 1, "content": "gm"}'

      Outputs:
        - event: validated Event instance

      Error Handling:
        - Invalid JSON raises EventParseError
        - Non-object JSON (array, string, number) raises EventParseError
        - Field problems propagate from parse_event

      Raises:
        - EventParseError, MissingFieldError, InvalidFieldTypeError, InvalidFieldValueError
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise EventParseError(f"Invalid event JSON: {e}") from None

    if not isinstance(data, dict):
        raise EventParseError(f"Event must be a JSON object, got {type(data).__name__}")

    return parse_event(data)


def parse_event(data: dict[str, Any]) -> Event:
    """Validate a decoded event object and convert it to an Event.

    CONTRACT:
      Inputs:
        - data: dictionary decoded from event JSON

      Outputs:
        - event: Event instance

      Invariants:
        - id and pubkey are required non-empty strings
        - kind defaults to 1, must be a non-negative integer (bool rejected)
        - content defaults to "", must be a string
        - created_at, when present, is a non-negative integer
        - tags defaults to (), must be a list of lists of strings; stored as tuples
        - sig, when present, is a string
        - Unknown fields are ignored

      Properties:
        - Fail-fast: raises on the first invalid field
        - Deterministic: same data yields an equal Event

      Raises:
        - MissingFieldError: id or pubkey absent
        - InvalidFieldTypeError: field has the wrong type
        - InvalidFieldValueError: empty id/pubkey or negative integer
    """
    for name in REQUIRED_FIELDS:
        if name not in data or data[name] is None:
            raise MissingFieldError(f"Missing required field: {name}")
        if not isinstance(data[name], str):
            raise InvalidFieldTypeError(f"Field '{name}' must be a string")
        if not data[name]:
            raise InvalidFieldValueError(f"Field '{name}' must not be empty")

    kind = data.get("kind", 1)
    if not _is_int(kind):
        raise InvalidFieldTypeError("Field 'kind' must be an integer")
    if kind < 0:
        raise InvalidFieldValueError(f"Field 'kind' must be non-negative, got {kind}")

    content = data.get("content", "")
    if content is None:
        content = ""
    if not isinstance(content, str):
        raise InvalidFieldTypeError("Field 'content' must be a string")

    created_at = data.get("created_at")
    if created_at is not None:
        if not _is_int(created_at):
            raise InvalidFieldTypeError("Field 'created_at' must be an integer")
        if created_at < 0:
            raise InvalidFieldValueError(f"Field 'created_at' must be non-negative, got {created_at}")

    tags = data.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, list) or not all(_is_tag(tag) for tag in tags):
        raise InvalidFieldTypeError("Field 'tags' must be a list of string lists")

    sig = data.get("sig")
    if sig is not None and not isinstance(sig, str):
        raise InvalidFieldTypeError("Field 'sig' must be a string")

    return Event(
        id=data["id"],
        pubkey=data["pubkey"],
        kind=kind,
        content=content,
        created_at=created_at,
        tags=tuple(tuple(tag) for tag in tags),
        sig=sig,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_tag(tag: Any) -> bool:
    return isinstance(tag, list) and all(isinstance(item, str) for item in tag)
