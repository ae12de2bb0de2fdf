"""Users resource client."""

from typing import TYPE_CHECKING

from mergegate.types.pulls import User

if TYPE_CHECKING:
    from mergegate.transport import HTTPTransport


class UsersClient:
    """Client for user profile lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(self, login: str) -> User:
        """
        Get a user's public profile.

        Name and email are None when the user keeps them private.
        """
        data = self.transport.request("GET", f"/users/{login}")
        return User(
            login=data.get("login", login),
            name=data.get("name"),
            email=data.get("email"),
        )
