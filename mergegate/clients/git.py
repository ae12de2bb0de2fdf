"""Git references resource client."""

from functools import partial
from typing import TYPE_CHECKING
from urllib.parse import quote

from mergegate.types.pulls import Ref

if TYPE_CHECKING:
    from mergegate.transport import HTTPTransport


def _short_ref(ref: str) -> str:
    """Strip the "refs/" prefix: the API addresses refs as "heads/<branch>"."""
    return ref[len("refs/"):] if ref.startswith("refs/") else ref


def _ref_path(ref: str) -> str:
    """Percent-encode a short ref for use as a URL path; branch names may contain "#" or "%"."""
    return quote(_short_ref(ref), safe="/")


class RefsClient:
    """Client for git reference operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get(self, repo: str, ref: str) -> Ref:
        """
        Get a git reference.

        Args:
            repo: Repository full name ("owner/name")
            ref: Reference such as "heads/feature"

        Returns:
            Ref bound to this client, so ``ref.delete()`` works

        Raises:
            NotFoundError: If the reference does not exist
        """
        short = _short_ref(ref)
        data = self.transport.request("GET", f"/repos/{repo}/git/ref/{_ref_path(short)}")
        return Ref(
            ref=data.get("ref", f"refs/{short}"),
            sha=(data.get("object") or {}).get("sha", ""),
            repository=repo,
            _deleter=partial(self.delete, repo, short),
        )

    def delete(self, repo: str, ref: str) -> None:
        """
        Delete a git reference.

        Args:
            repo: Repository full name ("owner/name")
            ref: Reference such as "heads/feature"
        """
        self.transport.request("DELETE", f"/repos/{repo}/git/refs/{_ref_path(ref)}")
