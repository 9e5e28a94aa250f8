"""User domain record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Read-only account record exposed by the user directory."""

    id: int
    name: str
    email: str
