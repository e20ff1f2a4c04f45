"""Basic HTML formatting of note content.

Turns raw note text into a small HTML fragment: image URLs become <img>
tags, nostr: mentions become relative links, other URLs become anchors.
Lines are handled independently and joined with <br/>.

Matching works on whitespace-delimited tokens so that long tokens and long
whitespace runs are processed in linear time. Whitespace is the ASCII set
space, tab, newline, form feed and carriage return; anything else (NBSP
included) is part of a token.
"""

import re

LINE_BREAK = "<br/>"
ELLIPSIS = "…"
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif")
WHITESPACE = " \t\n\f\r"
SCHEMES = ("https://", "http://")

# Mentions shorter than this are shown in full.
MIN_ABBREVIATED_LENGTH = 12

TOKEN_PATTERN = re.compile(r"[^ \t\n\f\r]+")
MENTION_PATTERN = re.compile(r"nostr:((?:npub|note|nevent|nprofile)1[a-z0-9]+)")


def basic_formatting(text: str) -> str:
    """Format every line of text and join the results with <br/>.

    CONTRACT:
      Inputs:
        - text: raw note content, may contain newlines
          Example: "gm\\nhttps://example.com/cat.png"

      Outputs:
        - html: HTML fragment
          Example: 'gm<br/><img src="https://example.com/cat.png" alt="">'

      Invariants:
        - Number of <br/> separators added equals the number of newlines in text
        - Empty lines stay empty segments
        - No leading or trailing separator beyond the join

      Properties:
        - Never raises
        - Deterministic: same text yields same html
        - Linear in the length of text
    """
    return LINE_BREAK.join(replace_urls_with_tags(line) for line in text.split("\n"))


def replace_urls_with_tags(line: str) -> str:
    """Rewrite images, mentions and links in a single line.

    CONTRACT:
      Inputs:
        - line: one line of note content (no newline)

      Outputs:
        - line with markup substituted

      Invariants:
        - At most one image substitution per line, and it ends processing
        - Whitespace around an image URL is consumed
        - Whitespace before a mention is consumed
        - Every mention and every remaining URL is replaced

      Algorithm:
        1. For each image extension in IMAGE_EXTENSIONS order:
           a. Find the first token holding http(s)://<at least one char><ext>
           b. On the first hit, replace that URL and the whitespace around it
              with <img src="URL" alt=""> and return the line
        2. Replace every nostr:(npub|note|nevent|nprofile)1... mention with
           <a href="/ID">abbreviated ID</a>
        3. Replace every token containing http(s):// with <a href="URL">URL</a>,
           URL running from the last scheme in the token to the token end
        4. Return the line
    """
    for extension in IMAGE_EXTENSIONS:
        span = _find_image(line, extension)
        if span:
            start, end, src = span
            return line[:start] + f'<img src="{src}" alt="">' + line[end:]

    line = _replace_mentions(line)
    return TOKEN_PATTERN.sub(_link_token, line)


def abbreviate(identifier: str) -> str:
    """Shorten an entity code to its first and last six characters."""
    if len(identifier) < MIN_ABBREVIATED_LENGTH:
        return identifier
    return identifier[:6] + ELLIPSIS + identifier[-6:]


def _find_image(line: str, extension: str) -> tuple[int, int, str] | None:
    """Locate the first image URL ending in extension.

    Returns (start, end, url) where start/end cover the URL plus the
    whitespace consumed around it, or None.
    """
    for token in TOKEN_PATTERN.finditer(line):
        text = token.group()
        scheme_at, scheme = _first_scheme(text)
        if scheme is None:
            continue
        # The leftmost scheme needs the fewest characters after it.
        ext_at = text.rfind(extension)
        if ext_at < scheme_at + len(scheme) + 1:
            continue

        url_start = token.start() + scheme_at
        url_end = token.start() + ext_at + len(extension)
        start = len(line[: token.start()].rstrip(WHITESPACE)) if scheme_at == 0 else url_start
        end = len(line) - len(line[url_end:].lstrip(WHITESPACE)) if url_end == token.end() else url_end
        return start, end, line[url_start:url_end]

    return None


def _first_scheme(token: str) -> tuple[int, str | None]:
    found = [(token.find(scheme), scheme) for scheme in SCHEMES]
    found = [(index, scheme) for index, scheme in found if index >= 0]
    if not found:
        return -1, None
    return min(found)


def _replace_mentions(line: str) -> str:
    parts = []
    last = 0
    for match in MENTION_PATTERN.finditer(line):
        parts.append(line[last : match.start()].rstrip(WHITESPACE))
        parts.append(_mention_link(match))
        last = match.end()
    parts.append(line[last:])
    return "".join(parts)


def _mention_link(match: re.Match) -> str:
    identifier = match.group(1)
    if not identifier:
        return match.group(0)
    return f'<a href="/{identifier}">{abbreviate(identifier)}</a>'


def _link_token(match: re.Match) -> str:
    token = match.group()
    end = len(token)
    while True:
        at = token.rfind("http", 0, end)
        if at < 0:
            return token
        for scheme in SCHEMES:
            if token.startswith(scheme, at) and len(token) > at + len(scheme):
                url = token[at:]
                return f'<a href="{url}">{url}</a>'
        end = at + 3
