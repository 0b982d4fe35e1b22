"""
config.py - Configuration Management
=====================================
This module works out where client data comes from and how the remote
fetch behaves. Settings can come from a command line option, from
environment variables (optionally kept in a .env file at the project root),
or from built-in defaults.

Precedence for the data source:
-------------------------------
    --client-json-path option  >  CLIENT_JSON_PATH  >  bundled sample file

Environment Variables Used:
---------------------------
- CLIENT_JSON_PATH          : (Optional) Local JSON file path or http(s) URL
- CLIENT_LOOKUP_TIMEOUT_SEC : (Optional) Timeout in seconds for the remote
                              fetch. Unset means no timeout.

Example .env file:
------------------
CLIENT_JSON_PATH=https://clients.example.com/clients.json
CLIENT_LOOKUP_TIMEOUT_SEC=10
"""

from dataclasses import dataclass
import os
from pathlib import Path
from dotenv import load_dotenv


# Sample data shipped inside the package
DEFAULT_CLIENT_JSON_PATH = str(Path(__file__).resolve().parent / "data" / "sample_clients.json")


# =============================================================================
# SETTINGS DATACLASS
# =============================================================================

@dataclass
class Settings:
    """Container for all application configuration values."""

    # Local JSON file path or http(s) URL to load clients from
    client_json_path: str = DEFAULT_CLIENT_JSON_PATH

    # Remote fetch timeout; None leaves the request without a timeout
    timeout_sec: float | None = None


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clean(v: str | None) -> str | None:
    """
    Clean and normalize an environment variable or option value.

    Examples:
        _clean('  data.json  ') -> 'data.json'
        _clean('"quoted"')      -> 'quoted'
        _clean('')              -> None
        _clean(None)            -> None
    """
    if v is None:
        return None

    v = v.strip()

    if len(v) >= 2 and v[0] == v[-1] and v[0] in ('"', "'"):
        v = v[1:-1]

    return v if v else None


def _parse_timeout(raw: str | None) -> float | None:
    value = _clean(raw)
    if value is None:
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise RuntimeError(
            f"CLIENT_LOOKUP_TIMEOUT_SEC must be a number of seconds, got {value!r}"
        ) from None
    if timeout <= 0:
        raise RuntimeError(
            f"CLIENT_LOOKUP_TIMEOUT_SEC must be greater than zero, got {value!r}"
        )
    return timeout


# =============================================================================
# MAIN CONFIGURATION LOADER
# =============================================================================

def load_settings(client_json_path: str | None = None) -> Settings:
    """
    Load application configuration.

    Args:
        client_json_path: Value of the --client-json-path option, if given.
                          It wins over the environment and the default.
                          Only surrounding whitespace is stripped from it.

    Returns:
        Settings: The resolved configuration

    Raises:
        RuntimeError: If CLIENT_LOOKUP_TIMEOUT_SEC is set but not a positive number
    """
    # The .env file lives in the project root (one level up from clientlookup/).
    # load_dotenv never overrides variables already set in the environment.
    root_env = Path(__file__).resolve().parents[1] / ".env"
    load_dotenv(dotenv_path=root_env)

    if client_json_path is not None:
        source = client_json_path.strip()
    else:
        source = _clean(os.getenv("CLIENT_JSON_PATH")) or DEFAULT_CLIENT_JSON_PATH

    return Settings(
        client_json_path=source,
        timeout_sec=_parse_timeout(os.getenv("CLIENT_LOOKUP_TIMEOUT_SEC")),
    )
