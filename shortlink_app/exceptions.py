"""
Exceptions raised by the edge data layer.

Not-found is never an exception here (accessors return None / False), and
database errors from SQLAlchemy propagate to the caller untouched.
"""

from typing import Any, List, Optional


class EdgeDataError(Exception):
    """Base class for errors raised by shortlink_app"""


class RowShapeError(EdgeDataError, ValueError):
    """A row returned by the database does not match its declared record shape"""

    def __init__(self, table: str, errors: Optional[List[Any]] = None):
        self.table = table
        self.errors = errors or []
        super().__init__(
            f"Row from {table} does not match the expected shape: {self.errors}"
        )


class KeyGenerationError(EdgeDataError):
    """Every candidate key collided with an existing link"""

    def __init__(self, domain: str, attempts: int):
        self.domain = domain
        self.attempts = attempts
        super().__init__(
            f"Could not generate a unique key for {domain} after {attempts} attempts"
        )
