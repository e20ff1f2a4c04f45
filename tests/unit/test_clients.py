"""Unit tests for alternate client link generation."""

from hypothesis import assume, given
from hypothesis import strategies as st

from nostr_preview.clients import generate_client_list
from nostr_preview.models import ClientLink, Event

KNOWN_PREFIXES = ("nevent", "note", "npub", "nprofile", "naddr")

EVENT = Event(id="abc", pubkey="def")

codes = st.text(alphabet="023456789acdefghjklmnpqrstuvwxyz", min_size=1, max_size=60)


class TestThreadClients:
    """nevent and note codes link to thread viewers."""

    def test_nevent_native_first(self):
        """Native client deep link leads the list."""
        links = generate_client_list("nevent1xyz", EVENT)
        assert links[0] == ClientLink("native client", "nostr:nevent1xyz")
        assert links[0].name == "native client"
        assert links[0].url == "nostr:nevent1xyz"

    def test_nevent_satellite_uses_event_id(self):
        links = generate_client_list("nevent1xyz", EVENT)
        assert ClientLink("Satellite", "https://satellite.earth/thread/abc") in links

    def test_note_order(self):
        """Viewer order is fixed."""
        links = generate_client_list("note1xyz", EVENT)
        assert [link.name for link in links] == [
            "native client",
            "Snort",
            "Coracle",
            "Satellite",
            "Iris",
            "Yosup",
            "Nostr.band",
            "Primal",
            "Nostribe",
            "Nostrid",
        ]

    def test_note_urls(self):
        links = dict(generate_client_list("note1xyz", EVENT))
        assert links["Snort"] == "https://Snort.social/e/note1xyz"
        assert links["Coracle"] == "https://coracle.social/note1xyz"
        assert links["Iris"] == "https://iris.to/note1xyz"
        assert links["Yosup"] == "https://yosup.app/thread/abc"
        assert links["Nostr.band"] == "https://nostr.band/note1xyz"
        assert links["Primal"] == "https://primal.net/thread/abc"
        assert links["Nostribe"] == "https://www.nostribe.com/post/abc"
        assert links["Nostrid"] == "https://web.nostrid.app/note/abc"


class TestProfileClients:
    """npub and nprofile codes link to profile viewers."""

    def test_npub_urls(self):
        links = dict(generate_client_list("npub1xyz", EVENT))
        assert links["native client"] == "nostr:npub1xyz"
        assert links["Snort"] == "https://snort.social/p/npub1xyz"
        assert links["Satellite"] == "https://satellite.earth/@npub1xyz"
        assert links["Yosup"] == "https://yosup.app/profile/def"
        assert links["Primal"] == "https://primal.net/profile/def"
        assert links["Nostribe"] == "https://www.nostribe.com/profile/def"
        assert links["Nostrid"] == "https://web.nostrid.app/account/def"

    def test_nprofile_same_family(self):
        assert len(generate_client_list("nprofile1xyz", EVENT)) == 10


class TestArticleClients:
    def test_naddr(self):
        assert generate_client_list("naddr1xyz", EVENT) == [
            ClientLink("native client", "nostr:naddr1xyz"),
            ClientLink("habla", "https://habla.news/a/naddr1xyz"),
            ClientLink("blogstack", "https://blogstack.io/naddr1xyz"),
        ]


class TestFallback:
    """Unrecognised codes get only the native client link."""

    def test_unknown_prefix(self):
        assert generate_client_list("unknownprefix", EVENT) == [
            ClientLink("native client", "nostr:unknownprefix")
        ]

    def test_empty_code(self):
        assert generate_client_list("", EVENT) == [ClientLink("native client", "nostr:")]

    @given(codes)
    def test_unrecognised_prefix_singleton(self, code):
        assume(not code.startswith(KNOWN_PREFIXES))
        assert generate_client_list(code, EVENT) == [ClientLink("native client", "nostr:" + code)]


class TestInvariants:
    @given(st.sampled_from(KNOWN_PREFIXES), codes)
    def test_native_client_always_first(self, prefix, data):
        code = f"{prefix}1{data}"
        links = generate_client_list(code, EVENT)
        assert links[0] == ClientLink("native client", "nostr:" + code)

    @given(st.sampled_from(KNOWN_PREFIXES), codes)
    def test_deterministic(self, prefix, data):
        code = f"{prefix}1{data}"
        assert generate_client_list(code, EVENT) == generate_client_list(code, EVENT)

    def test_to_dict(self):
        link = generate_client_list("naddr1xyz", EVENT)[1]
        assert link.to_dict() == {"name": "habla", "url": "https://habla.news/a/naddr1xyz"}
