"""CLI output formatting for structured JSON results."""

import json

from .models import Preview


def format_preview(preview: Preview) -> str:
    """Format a preview as a single-line JSON object.

    CONTRACT:
      Inputs:
        - preview: Preview instance

      Outputs:
        - json_string: single-line JSON with keys code, style, kind, kind_name,
          clients, content, content_html

      Invariants:
        - Output is valid JSON (parseable by json.loads)
        - Keys sorted alphabetically; client list keeps its order
        - Non-ASCII characters preserved (no \\u escapes)
        - No trailing newline (caller adds if needed)

      Raises:
        - Does not raise (assumes valid inputs)
    """
    return json.dumps(preview.to_dict(), ensure_ascii=False, sort_keys=True, separators=(", ", ": "))
