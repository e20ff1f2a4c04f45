"""End-to-end tests running the nostr-preview CLI in a subprocess."""

import json
import subprocess
import sys

import pytest

PROFILE = {
    "id": "d" * 64,
    "pubkey": "e" * 64,
    "kind": 0,
    "created_at": 1700000000,
    "tags": [],
    "content": json.dumps({"name": "alice", "about": "hello https://alice.example"}),
    "sig": "f" * 128,
}


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "nostr_preview", *args], capture_output=True, text=True, timeout=30, encoding="utf-8"
    )


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(PROFILE), encoding="utf-8")
    return path


class TestCliE2E:
    def test_profile_preview(self, profile_file):
        result = run_cli("npub1xyz", "--event", str(profile_file), "--user-agent", "Discordbot/2.0")

        assert result.returncode == 0, result.stderr
        output = json.loads(result.stdout)
        assert output["style"] == "discord"
        assert output["kind_name"] == "profile metadata"
        assert output["content"] == "name: alice\nabout: hello https://alice.example\n"
        assert output["content_html"] == (
            'name: alice<br/>about: hello <a href="https://alice.example">https://alice.example</a><br/>'
        )
        assert [c["name"] for c in output["clients"]][:2] == ["native client", "Snort"]

    def test_error_exit_code(self, tmp_path):
        result = run_cli("npub1xyz", "--event", str(tmp_path / "missing.json"))
        assert result.returncode == 1
        assert result.stderr.startswith("ERROR: FileNotFoundError:")
        assert result.stdout == ""

    def test_usage_error(self):
        result = run_cli("npub1xyz")
        assert result.returncode == 2
        assert "--event" in result.stderr

    def test_version(self):
        result = run_cli("--version")
        assert result.returncode == 0
        assert result.stdout.startswith("nostr-preview ")
