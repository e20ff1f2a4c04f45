"""nostr-preview: link-unfurling previews for Nostr events."""

__version__ = "0.1.0"
