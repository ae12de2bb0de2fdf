"""
Trigger collaborators: what caused a build, who may merge, and which pull
requests are being tracked.
"""

import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from mergegate.exceptions import ConfigurationError
from mergegate.types.pulls import PullRequestSnapshot, User


@dataclass(frozen=True)
class TriggerCause:
    """Pull request trigger that started a build."""

    pull_id: int
    trigger_sender: User | None = None
    comment_body: str | None = None
    mergeable: bool | None = None  # None when the remote has not decided yet


@runtime_checkable
class TriggerPolicy(Protocol):
    """Who the bot is, who is an admin and what the trigger phrase is."""

    @property
    def trigger_phrase(self) -> str: ...

    def is_bot_user(self, user: User | None) -> bool: ...

    def is_admin(self, user: User) -> bool: ...

    def is_trigger_phrase(self, text: str) -> bool: ...


@runtime_checkable
class PullRequestStore(Protocol):
    """Read-only lookup of tracked pull requests."""

    def get(self, pull_id: int) -> PullRequestSnapshot | None: ...


def _split_logins(value: str) -> list[str]:
    return [login for login in re.split(r"[\s,]+", value) if login]


class StaticTriggerPolicy:
    """
    Trigger policy backed by a fixed admin list.

    The trigger phrase is a case-insensitive regular expression searched
    anywhere in the comment body.

    Example:
        ```python
        policy = StaticTriggerPolicy(
            trigger_phrase=r"merge\\s+it",
            admins=["alice", "bob"],
            bot_login="merge-bot",
        )
        policy.is_trigger_phrase("Please MERGE it")  # True
        ```
    """

    def __init__(
        self,
        trigger_phrase: str,
        admins: Iterable[str] = (),
        bot_login: str | None = None,
    ) -> None:
        try:
            self._pattern = re.compile(trigger_phrase, re.IGNORECASE | re.DOTALL)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid trigger phrase {trigger_phrase!r}: {e}"
            ) from e
        self._trigger_phrase = trigger_phrase
        self.admins = frozenset(login.lower() for login in admins)
        self.bot_login = bot_login

    @classmethod
    def from_env(cls) -> "StaticTriggerPolicy":
        """
        Create a trigger policy from environment variables.

        Environment variables:
            MERGEGATE_TRIGGER_PHRASE: Trigger phrase regular expression (required)
            MERGEGATE_ADMINS: Admin logins separated by whitespace or commas (optional)
            MERGEGATE_BOT_LOGIN: Login of the bot account (optional)

        Raises:
            ConfigurationError: If the trigger phrase is missing or invalid
        """
        phrase = os.environ.get("MERGEGATE_TRIGGER_PHRASE")
        if not phrase:
            raise ConfigurationError("MERGEGATE_TRIGGER_PHRASE environment variable not set")

        return cls(
            trigger_phrase=phrase,
            admins=_split_logins(os.environ.get("MERGEGATE_ADMINS", "")),
            bot_login=os.environ.get("MERGEGATE_BOT_LOGIN") or None,
        )

    @property
    def trigger_phrase(self) -> str:
        return self._trigger_phrase

    def is_bot_user(self, user: User | None) -> bool:
        if user is None or self.bot_login is None:
            return False
        return user.login.lower() == self.bot_login.lower()

    def is_admin(self, user: User) -> bool:
        return user.login.lower() in self.admins

    def is_trigger_phrase(self, text: str) -> bool:
        return self._pattern.search(text) is not None


class InMemoryPullRequestStore:
    """Pull request store held in a dictionary keyed by pull request number."""

    def __init__(self, pulls: Mapping[int, PullRequestSnapshot] | None = None) -> None:
        self._pulls: dict[int, PullRequestSnapshot] = dict(pulls or {})

    def put(self, snapshot: PullRequestSnapshot) -> None:
        self._pulls[snapshot.number] = snapshot

    def get(self, pull_id: int) -> PullRequestSnapshot | None:
        return self._pulls.get(pull_id)

    def __len__(self) -> int:
        return len(self._pulls)
