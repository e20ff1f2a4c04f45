"""Preview style detection from request headers.

Link-unfurling crawlers announce themselves in the User-Agent; each one
gets its own rendering profile.
"""

from collections.abc import Mapping

TELEGRAM = "telegram"
TWITTER = "twitter"
MATTERMOST = "mattermost"
SLACK = "slack"
DISCORD = "discord"
WHATSAPP = "whatsapp"
HTML = ""
UNKNOWN = "unknown"

# Checked in order, first hit wins.
BOT_SIGNATURES: tuple[tuple[str, str], ...] = (
    ("telegrambot", TELEGRAM),
    ("twitterbot", TWITTER),
    ("mattermost", MATTERMOST),
    ("slack", SLACK),
    ("discord", DISCORD),
    ("whatsapp", WHATSAPP),
)


def detect_preview_style(user_agent: str | None, accept: str | None) -> str:
    """Classify a requester by its User-Agent and Accept headers.

    CONTRACT:
      Inputs:
        - user_agent: User-Agent header value or None
        - accept: Accept header value or None

      Outputs:
        - style: one of BOT_SIGNATURES' styles, "" for a plain HTML client,
          or "unknown"

      Invariants:
        - User-Agent matching is case-insensitive substring matching
        - Bot signatures take priority over the Accept header

      Algorithm:
        1. Lowercase user_agent
        2. Return the style of the first signature contained in it
        3. If accept contains "text/html", return ""
        4. Otherwise return "unknown"
    """
    ua = (user_agent or "").lower()

    for signature, style in BOT_SIGNATURES:
        if signature in ua:
            return style

    if "text/html" in (accept or ""):
        return HTML

    return UNKNOWN


def get_preview_style(headers: Mapping[str, str]) -> str:
    """Detect the preview style from a header mapping (header names are case-insensitive)."""
    user_agent = _header(headers, "User-Agent")
    accept = _header(headers, "Accept")
    return detect_preview_style(user_agent, accept)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    if name in headers:
        return headers[name]

    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None
