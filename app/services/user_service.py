"""User service operations."""

from app.models.user import User

USERS: tuple[User, ...] = (
    User(id=1, name="Alice", email="alice@example.com"),
    User(id=2, name="Bob", email="bob@example.com"),
    User(id=3, name="Charlie", email="charlie@example.com"),
)


def list_users() -> tuple[User, ...]:
    """Return every user in id order."""
    return USERS
