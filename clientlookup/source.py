"""
source.py - Data Source Classification
=======================================
Decides whether the configured client data source is a remote URL or a
local file path.
"""

from urllib.parse import urlparse

REMOTE_SCHEMES = ("http", "https")


def is_remote(source) -> bool:
    """
    Return True only if source is an http:// or https:// URL.

    Bare file paths, other schemes (ftp://, file://), empty values and
    strings that cannot be parsed as a URI all return False.

    Examples:
        is_remote("https://api.example.com/x")  -> True
        is_remote("/local/path.json")           -> False
        is_remote("not-a-url")                  -> False
        is_remote("ftp://host")                 -> False
    """
    if not isinstance(source, str) or not source:
        return False

    try:
        scheme = urlparse(source).scheme
    except ValueError:
        # e.g. "http://[bad" - unbalanced IPv6 brackets
        return False

    return scheme in REMOTE_SCHEMES
