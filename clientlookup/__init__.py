"""
clientlookup - Client Record Lookup
====================================

A small command line tool that loads client records from a local JSON file
or an HTTP endpoint and answers two questions about them: which clients
match a name, and which clients share an email address.

Modules:
--------
- config.py      : Configuration (option, environment / .env, defaults)
- errors.py      : DataError hierarchy for every loading failure
- models.py      : Client record model (name matching, CLI rendering)
- source.py      : Local path vs. remote URL classification
- http_client.py : HTTP client for remote JSON
- loader.py      : Local file fetcher and the ClientLoader pipeline
- factory.py     : Validation and conversion of raw JSON into Clients
- queries.py     : Name search and duplicate email grouping
- run_lookup.py  : Main entry point and command dispatch

Usage:
------
    client-lookup name "Jane"
    client-lookup duplicate_emails
    python -m clientlookup --json https://clients.example.com/clients.json name doe

Input:
------
A JSON array of objects, each with "id", "full_name" and "email" fields.
Any other fields are ignored.
"""

__version__ = "0.1.0"
