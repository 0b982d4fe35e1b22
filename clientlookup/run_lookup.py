"""
run_lookup.py - Main Application Entry Point
=============================================
Command line front end for searching client data.

What it does:
-------------
1. Resolves the client data source (option > CLIENT_JSON_PATH > sample file)
2. Loads and validates the client list from a local file or URL
3. Runs the requested query and prints the results

Usage:
------
    client-lookup name "Jane"
    client-lookup duplicate_emails
    client-lookup --json https://clients.example.com/clients.json name doe
    python -m clientlookup name "John Doe" --debug

Command Line Options:
---------------------
    --client-json-path, --json : Local JSON file path or http(s) URL
    --debug                    : Enable debug logging

Exit status is 1 if the client data cannot be loaded or the configuration is
invalid, and 0 otherwise (including when a query finds nothing).
"""

import sys
import logging
import argparse
from typing import Dict, List, Optional, Sequence

from .config import load_settings
from .errors import DataError
from .loader import ClientLoader
from .models import Client
from .queries import find_duplicate_emails, search_by_name


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

LOG_LEVEL = logging.INFO

# Width of the separator line between results
RULE = "-" * 50


# =============================================================================
# LOGGING SETUP
# =============================================================================

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%H:%M:%S'
)

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT FUNCTIONS
# =============================================================================

def print_name_results(search_term: str, matches: List[Client]):
    if not matches:
        print(f"No clients found matching '{search_term}'.")
        return

    print(f"Found {len(matches)} matching client(s):")
    print(RULE)
    for index, client in enumerate(matches, start=1):
        print(f"Client #{index}:")
        print(client.render())
        print(RULE)


def print_duplicate_results(duplicates: Dict[str, List[Client]]):
    if not duplicates:
        print("No duplicate email addresses found.")
        return

    print(f"Found {len(duplicates)} duplicate email(s):")
    print(RULE)
    for index, (email, clients) in enumerate(duplicates.items(), start=1):
        print(f"Duplicate Email #{index}: {email}")
        for client in clients:
            print(f"  - {client.full_name} (ID: {client.id})")
        print(RULE)


# =============================================================================
# COMMANDS
# =============================================================================

class ClientLookup:
    """
    Runs lookup commands against clients provided by a loader.

    The loader is called at most once; its result is reused for the rest
    of the process.
    """

    def __init__(self, loader: ClientLoader):
        self.loader = loader
        self._clients: Optional[List[Client]] = None

    @property
    def clients(self) -> List[Client]:
        if self._clients is None:
            self._clients = self.loader.load()
        return self._clients

    def name(self, search_term: str):
        """Search for clients by name (partial, case-insensitive matches)."""
        print(f"Searching for client(s) with name: {search_term}")
        print_name_results(search_term, search_by_name(self.clients, search_term))

    def duplicate_emails(self):
        """Find clients that share an email address."""
        print("Searching for clients with duplicate email addresses...")
        print_duplicate_results(find_duplicate_emails(self.clients))


# =============================================================================
# COMMAND LINE ARGUMENT PARSING
# =============================================================================

def _add_common_options(parser: argparse.ArgumentParser, default):
    parser.add_argument(
        '--client-json-path', '--json',
        dest='client_json_path',
        default=default,
        metavar='PATH_OR_URL',
        help='Path to local JSON file or URL to JSON endpoint '
             '(default: $CLIENT_JSON_PATH or the bundled sample file)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=default if default is argparse.SUPPRESS else False,
        help='Enable debug logging'
    )


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Options are accepted both before and after the command name.

    Returns:
        Namespace with command, client_json_path, debug and, for the
        name command, search_term
    """
    parser = argparse.ArgumentParser(
        prog='client-lookup',
        description='Search client records loaded from a JSON file or URL',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  client-lookup name "Jane"
  client-lookup duplicate_emails
  client-lookup --json https://clients.example.com/clients.json name doe
        """
    )
    _add_common_options(parser, default=None)

    # Subparser copies use SUPPRESS so they don't clobber values given
    # before the command name
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, default=argparse.SUPPRESS)

    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    name_parser = commands.add_parser(
        'name',
        parents=[common],
        help='Search for a client by name (partial matches included)'
    )
    name_parser.add_argument('search_term', help='Full or partial client name')

    commands.add_parser(
        'duplicate_emails',
        aliases=['duplicate-emails'],
        parents=[common],
        help='Find clients with the same email addresses'
    )

    return parser.parse_args(argv)


# =============================================================================
# MAIN EXECUTION FUNCTION
# =============================================================================

def run_lookup(argv: Optional[Sequence[str]] = None):
    """
    Main execution logic for the client lookup tool.

    Loading errors are reported once here and end the process with exit
    status 1. Queries that find nothing are not errors.
    """
    args = parse_arguments(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = load_settings(args.client_json_path)
        lookup = ClientLookup(ClientLoader(settings))

        if args.command == 'name':
            lookup.name(args.search_term)
        else:
            lookup.duplicate_emails()

    except DataError as e:
        logger.error(f"Error loading client data: {e}")
        sys.exit(1)

    except RuntimeError as e:
        # Invalid configuration
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


def main():
    run_lookup()


if __name__ == '__main__':
    main()
