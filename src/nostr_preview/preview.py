"""Preview assembly.

Combines kind label, preview style, client links and formatted content for
one event request.
"""

from collections.abc import Mapping

from .clients import generate_client_list
from .formatting import basic_formatting
from .kinds import describe_kind
from .models import Event, Preview
from .preview_style import get_preview_style
from .utils import pretty_json_or_raw

# Kinds whose content is a JSON document rather than prose.
STRUCTURED_KINDS = frozenset({0, 3, 40, 41, 30078})


def build_preview(
    code: str, event: Event, headers: Mapping[str, str], kind_overrides: Mapping[int, str] | None = None
) -> Preview:
    """Build the preview for event, requested as code by a client sending headers.

    CONTRACT:
      Inputs:
        - code: entity code from the request path
        - event: Event the code resolved to
        - headers: request headers (User-Agent and Accept are read)
        - kind_overrides: optional extra kind labels

      Outputs:
        - preview: Preview instance

      Invariants:
        - clients[0] is the native client link
        - content_html == basic_formatting(content)
        - Structured kinds show pretty-printed content when it parses as JSON

      Raises:
        - Does not raise
    """
    content = render_content(event)
    return Preview(
        code=code,
        style=get_preview_style(headers),
        kind=event.kind,
        kind_name=describe_kind(event.kind, kind_overrides),
        clients=generate_client_list(code, event),
        content=content,
        content_html=basic_formatting(content),
    )


def render_content(event: Event) -> str:
    """Return event content as it should be displayed."""
    if event.kind in STRUCTURED_KINDS:
        return pretty_json_or_raw(event.content)
    return event.content
