"""Exception hierarchy for nostr-preview.

The rendering utilities never raise; these errors come from decoding
caller-supplied input (event JSON, CLI options).
"""


class NostrPreviewError(Exception):
    """Base class for all nostr-preview errors."""


class EventParseError(NostrPreviewError):
    """Event text is not valid JSON or not a JSON object."""


class MissingFieldError(NostrPreviewError):
    """Required event field is absent."""


class InvalidFieldTypeError(NostrPreviewError):
    """Event field has the wrong type."""


class InvalidFieldValueError(NostrPreviewError):
    """Event field has the right type but an unacceptable value."""


class InvalidKindOverrideError(NostrPreviewError):
    """Kind label override is not of the form KIND=LABEL."""
