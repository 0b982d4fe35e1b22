from __future__ import annotations

import pytest

from clientlookup.source import is_remote


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("http://example.com/data.json", True),
        ("https://api.example.com/x", True),
        ("/local/path.json", False),
        ("data/clients.json", False),
        ("not-a-url", False),
        ("ftp://host", False),
        ("file:///tmp/clients.json", False),
        ("http://[::1", False),
        ("", False),
        (None, False),
    ],
)
def test_is_remote(source, expected: bool) -> None:
    assert is_remote(source) is expected
