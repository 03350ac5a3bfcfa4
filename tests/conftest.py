"""Pytest configuration to make the local package importable without installation."""
import json
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeGemini:
    """Stand-in for GeminiClient: canned replies keyed by file content."""

    def __init__(self, replies=None, default=None):
        self.replies = replies or {}
        self.default = default
        self.calls = []

    def generate(self, data, mime_type, prompt):
        self.calls.append((data, mime_type, prompt))
        reply = self.replies.get(data, self.default)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


@pytest.fixture
def fake_gemini():
    return FakeGemini


@pytest.fixture
def invoice_folder(tmp_path: Path) -> Path:
    """An empty folder to drop documents into."""

    folder = tmp_path / "inbox"
    folder.mkdir()
    return folder


@pytest.fixture
def write_file(invoice_folder: Path):
    """Create a file in the invoice folder whose bytes are its own name."""

    def _write(name: str) -> Path:
        path = invoice_folder / name
        path.write_bytes(name.encode("utf-8"))
        return path

    return _write
