"""Data models for nostr-preview.

Events handed in by the relay layer, client links, and assembled previews.
"""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Event:
    """Signed Nostr event as delivered by a relay (NIP-01).

    Only id and pubkey are needed to build client links; the remaining
    fields feed the preview body.
    """

    id: str
    pubkey: str
    kind: int = 1
    content: str = ""
    created_at: int | None = None
    tags: tuple[tuple[str, ...], ...] = ()
    sig: str | None = None


class ClientLink(NamedTuple):
    """Display name and URL of a third-party viewer."""

    name: str
    url: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "url": self.url}


@dataclass
class Preview:
    """Everything a page template needs to render one link preview."""

    code: str
    style: str
    kind: int
    kind_name: str
    clients: list[ClientLink]
    content: str
    content_html: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "style": self.style,
            "kind": self.kind,
            "kind_name": self.kind_name,
            "clients": [client.to_dict() for client in self.clients],
            "content": self.content,
            "content_html": self.content_html,
        }
