"""
queries.py - Client Queries
============================
Read-only queries over a loaded list of clients. None of these raise: an
empty result is a normal outcome.
"""

from typing import Dict, List, Sequence

from .models import Client


def search_by_name(clients: Sequence[Client], term: str) -> List[Client]:
    """Clients whose full name contains term, in their original order."""
    return [client for client in clients if client.matches_name(term)]


def normalize_email(email) -> str:
    # Lower-case only: emails are not expected to hold internal whitespace
    return "" if email is None else str(email).lower()


def find_duplicate_emails(clients: Sequence[Client]) -> Dict[str, List[Client]]:
    """
    Group clients that share an email address (case-insensitive).

    Clients with an empty email are never grouped. Only groups with two or
    more members are returned. Both the groups and the clients inside each
    group keep first-occurrence order.

    Example:
        emails "Shared@Example.com", "shared@example.com", "unique@example.com"
        -> {"shared@example.com": [first client, second client]}
    """
    grouped: Dict[str, List[Client]] = {}

    for client in clients:
        email = normalize_email(client.email)
        if not email:
            continue
        grouped.setdefault(email, []).append(client)

    return {email: group for email, group in grouped.items() if len(group) > 1}
