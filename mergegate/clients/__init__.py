"""GitHub resource clients."""

from mergegate.clients.git import RefsClient
from mergegate.clients.issues import IssuesClient
from mergegate.clients.pulls import PullsClient
from mergegate.clients.users import UsersClient

__all__ = [
    "PullsClient",
    "IssuesClient",
    "RefsClient",
    "UsersClient",
]
