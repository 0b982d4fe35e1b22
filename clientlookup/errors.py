"""
errors.py - Data Loading Errors
================================
Every failure that can happen while loading client data is raised as one of
these exceptions. They all share the DataError parent so the command line
layer can catch the whole family in one place and exit with a non-zero code.

Hierarchy:
----------
    DataError
    ├── FileError
    │   ├── FileNotFound      : local JSON file does not exist
    │   └── PermissionDenied  : local JSON file exists but cannot be read
    ├── NetworkError          : connection failure, timeout or non-2xx response
    ├── ParseError            : file or response body is not valid JSON
    └── ValidationError       : JSON has the wrong shape or missing fields
"""

from typing import List, Optional


class DataError(Exception):
    """Base class for all client data loading failures."""


class FileError(DataError):
    """The local JSON file could not be read."""


class FileNotFound(FileError):
    pass


class PermissionDenied(FileError):
    pass


class NetworkError(DataError):
    pass


class ParseError(DataError):
    pass


class ValidationError(DataError):
    """
    Raised when the parsed JSON is not a usable list of clients.

    Attributes:
        problems: Every problem found, in the order it was found. For
                  top-level shape errors this holds a single entry.
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        super().__init__(message)
        self.problems = problems if problems is not None else [message]
