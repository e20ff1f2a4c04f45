"""Alternate client links for an entity code.

Each prefix family gets a hand-curated list of web viewers. The native
client deep link (nostr: URI) always leads the list.
"""

from .models import ClientLink, Event

NATIVE_CLIENT = "native client"


def generate_client_list(code: str, event: Event) -> list[ClientLink]:
    """Build the ordered list of viewers that can open code.

    CONTRACT:
      Inputs:
        - code: NIP-19 entity code, e.g. "nevent1...", "npub1...", "naddr1..."
        - event: Event the code resolved to (id and pubkey are used)

      Outputs:
        - list of ClientLink, first entry always ("native client", "nostr:" + code)

      Invariants:
        - Ordering is fixed for a given prefix family
        - Codes with no recognised prefix yield only the native client link
        - No validation of the code beyond its prefix; never raises

      Algorithm:
        1. "nevent" or "note": thread viewers, URLs from code or event.id
        2. "npub" or "nprofile": profile viewers, URLs from code or event.pubkey
        3. "naddr": long-form article viewers
        4. Anything else: native client only
    """
    native = ClientLink(NATIVE_CLIENT, "nostr:" + code)

    if code.startswith(("nevent", "note")):
        return [
            native,
            ClientLink("Snort", "https://Snort.social/e/" + code),
            ClientLink("Coracle", "https://coracle.social/" + code),
            ClientLink("Satellite", "https://satellite.earth/thread/" + event.id),
            ClientLink("Iris", "https://iris.to/" + code),
            ClientLink("Yosup", "https://yosup.app/thread/" + event.id),
            ClientLink("Nostr.band", "https://nostr.band/" + code),
            ClientLink("Primal", "https://primal.net/thread/" + event.id),
            ClientLink("Nostribe", "https://www.nostribe.com/post/" + event.id),
            ClientLink("Nostrid", "https://web.nostrid.app/note/" + event.id),
        ]

    if code.startswith(("npub", "nprofile")):
        return [
            native,
            ClientLink("Snort", "https://snort.social/p/" + code),
            ClientLink("Coracle", "https://coracle.social/" + code),
            ClientLink("Satellite", "https://satellite.earth/@" + code),
            ClientLink("Iris", "https://iris.to/" + code),
            ClientLink("Yosup", "https://yosup.app/profile/" + event.pubkey),
            ClientLink("Nostr.band", "https://nostr.band/" + code),
            ClientLink("Primal", "https://primal.net/profile/" + event.pubkey),
            ClientLink("Nostribe", "https://www.nostribe.com/profile/" + event.pubkey),
            ClientLink("Nostrid", "https://web.nostrid.app/account/" + event.pubkey),
        ]

    if code.startswith("naddr"):
        return [
            native,
            ClientLink("habla", "https://habla.news/a/" + code),
            ClientLink("blogstack", "https://blogstack.io/" + code),
        ]

    return [native]
