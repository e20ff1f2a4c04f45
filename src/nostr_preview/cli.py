"""CLI entrypoint for nostr-preview.

Renders the preview of one event as JSON, the way the web handler would for
a given requester.
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .cli_output import format_preview
from .errors import InvalidKindOverrideError, NostrPreviewError
from .event import load_event
from .kinds import kind_label
from .preview import build_preview


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint.

    CONTRACT:
      Inputs:
        - argv: list of command-line argument strings (or None to use sys.argv)

      Outputs:
        - exit_code: integer, 0 for success, non-zero for failure

      Invariants:
        - Prints exactly one JSON object to stdout on success
        - Prints "ERROR: {error_type}: {message}" to stderr on failure
        - Unknown kinds produce a warning, not a failure

      Algorithm:
        1. Parse CLI arguments
        2. Read event file as UTF-8
        3. Decode and validate the event
        4. Warn if the kind has no label
        5. Build the preview from code, event and request headers
        6. Print the preview JSON and return 0

      Error Handling:
        - Catch all NostrPreviewError exceptions
        - Catch file access errors
        - Return 1 for any error

      Raises:
        - Does not raise (catches all exceptions and converts to exit codes)
    """
    try:
        args = parse_arguments(argv if argv is not None else sys.argv[1:])

        event = load_event(read_event_file(args["event_file"]))

        overrides = args["kind_overrides"]
        if event.kind not in overrides and kind_label(event.kind) is None:
            sys.stderr.write(f"WARNING: no label for kind {event.kind}\n")

        headers = {"User-Agent": args["user_agent"], "Accept": args["accept"]}
        preview = build_preview(args["code"], event, headers, overrides)

        print(format_preview(preview))

        return 0

    except NostrPreviewError as e:
        error_type = type(e).__name__
        sys.stderr.write(f"ERROR: {error_type}: {str(e)}\n")
        return 1
    except FileNotFoundError as e:
        sys.stderr.write(f"ERROR: FileNotFoundError: {str(e)}\n")
        return 1
    except PermissionError as e:
        sys.stderr.write(f"ERROR: PermissionError: {str(e)}\n")
        return 1
    except UnicodeDecodeError as e:
        sys.stderr.write(f"ERROR: UnicodeDecodeError: {str(e)}\n")
        return 1
    except SystemExit:
        raise
    except Exception as e:
        sys.stderr.write(f"ERROR: {type(e).__name__}: {str(e)}\n")
        return 1


def parse_arguments(argv: list[str]) -> dict:
    """Parse CLI arguments into structured dictionary.

    CONTRACT:
      Inputs:
        - argv: list of command-line argument strings (excluding program name)

      Outputs:
        - args: dictionary with keys:
          * code: entity code string
          * event_file: Path to event JSON file
          * user_agent: string (default "")
          * accept: string (default "")
          * kind_overrides: dict mapping int kind to label

      Invariants:
        - code and --event are required
        - --kind-name may repeat; later values for the same kind win
        - Invalid arguments cause error with usage message

      Raises:
        - InvalidKindOverrideError: --kind-name value is not KIND=LABEL
        - SystemExit: argparse usage errors
    """
    parser = argparse.ArgumentParser(
        prog="nostr-preview", description="Render the link preview of a Nostr event as JSON"
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("code", help="NIP-19 entity code (npub1..., note1..., nevent1..., naddr1...)")
    parser.add_argument("--event", dest="event_file", required=True, help="JSON file holding the event")
    parser.add_argument("--user-agent", dest="user_agent", default="", help="User-Agent header of the requester")
    parser.add_argument("--accept", dest="accept", default="", help="Accept header of the requester")
    parser.add_argument(
        "--kind-name",
        dest="kind_names",
        action="append",
        default=[],
        metavar="KIND=LABEL",
        help="Label for an event kind, overriding the built-in catalog (repeatable)",
    )

    parsed = parser.parse_args(argv)

    return {
        "code": parsed.code,
        "event_file": Path(parsed.event_file),
        "user_agent": parsed.user_agent,
        "accept": parsed.accept,
        "kind_overrides": parse_kind_overrides(parsed.kind_names),
    }


def parse_kind_overrides(values: list[str]) -> dict[int, str]:
    """Parse KIND=LABEL strings into a kind to label mapping."""
    overrides = {}
    for value in values:
        kind, sep, label = value.partition("=")
        kind = kind.strip()
        label = label.strip()
        if not sep or not label:
            raise InvalidKindOverrideError(f"Expected KIND=LABEL, got: {value!r}")
        try:
            number = int(kind)
        except ValueError:
            raise InvalidKindOverrideError(f"Kind must be an integer, got: {kind!r}") from None
        if number < 0:
            raise InvalidKindOverrideError(f"Kind must be non-negative, got: {number}")
        overrides[number] = label
    return overrides


def read_event_file(file_path: Path) -> str:
    """Read event file content as UTF-8.

    Raises FileNotFoundError (mentioning the path) if the file does not exist.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    return file_path.read_text(encoding="utf-8")


if __name__ == "__main__":
    sys.exit(main())
