"""
loader.py - Client Data Loader
===============================
This module loads client data from its configured source and turns it into
validated Client objects.

Pipeline:
---------
    source string
      -> is_remote()                 local path or http(s) URL?
      -> fetch_local() / fetch_remote()   raw JSON value
      -> build_all()                 validated list of Client objects

Every failure is raised as a DataError subclass (see errors.py) and is left
for the caller to handle.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List

from .config import Settings
from .errors import FileError, FileNotFound, ParseError, PermissionDenied
from .factory import build_all
from .http_client import HttpClient
from .models import Client, JsonValue, reject_json_constant
from .source import is_remote

logger = logging.getLogger(__name__)


# =============================================================================
# FETCHERS
# =============================================================================

def fetch_local(filepath: str) -> JsonValue:
    """
    Read a local file and decode it as JSON.

    Raises:
        FileNotFound: If the file does not exist
        PermissionDenied: If the file exists but cannot be read
        FileError: If reading fails for another OS-level reason
        ParseError: If the file is not valid UTF-8 JSON
    """
    path = Path(filepath)
    try:
        exists = path.exists()
    except PermissionError as e:
        raise PermissionDenied(f"Permission denied when reading {filepath}") from e
    except OSError as e:
        raise FileError(f"Could not read {filepath}: {e.strerror or e}") from e

    if not exists:
        raise FileNotFound(f"JSON file not found: {filepath}")

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise PermissionDenied(f"Permission denied when reading {filepath}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Invalid JSON in file {filepath}: {e}") from e
    except OSError as e:
        raise FileError(f"Could not read {filepath}: {e.strerror or e}") from e

    try:
        return json.loads(text, parse_constant=reject_json_constant)
    except ValueError as e:
        raise ParseError(f"Invalid JSON in file {filepath}: {e}") from e


def fetch_remote(url: str, client: HttpClient) -> JsonValue:
    """Download and decode JSON from url (see HttpClient.get_json for errors)."""
    return client.get_json(url)


# =============================================================================
# LOADER
# =============================================================================

class ClientLoader:
    """
    Loads clients from the source named in the settings.

    The command line layer holds one of these and calls load() once.

    Args:
        settings: Resolved configuration (source location, timeout)
        http_client_factory: Builds the HTTP client for remote sources.
                             Tests pass a fake here.
    """

    def __init__(
        self,
        settings: Settings,
        http_client_factory: Callable[[Settings], HttpClient] = HttpClient,
    ):
        self.settings = settings
        self.http_client_factory = http_client_factory

    @property
    def source(self) -> str:
        return self.settings.client_json_path

    def fetch_raw(self) -> JsonValue:
        """Fetch the raw JSON value from the configured source."""
        if not is_remote(self.source):
            return fetch_local(self.source)

        client = self.http_client_factory(self.settings)
        try:
            return fetch_remote(self.source, client)
        finally:
            client.close()

    def load(self) -> List[Client]:
        """
        Fetch, validate and convert the client data.

        Raises:
            DataError: Any loading or validation failure, unchanged
        """
        logger.info(f"Using client data from: {self.source}")

        raw = self.fetch_raw()
        clients = build_all(raw)

        logger.debug(f"Loaded {len(clients)} client(s)")
        return clients
