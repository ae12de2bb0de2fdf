"""Merge policy configuration."""

import os
from dataclasses import dataclass

from mergegate.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_flag(name: str) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid {name}: {raw!r}. Must be true or false")


@dataclass(frozen=True)
class MergePolicy:
    """Which gates are enforced before an automatic merge."""

    only_admins_merge: bool = False
    only_trigger_phrase: bool = False
    disallow_own_code: bool = False
    fail_on_non_merge: bool = False
    delete_on_merge: bool = False
    merge_comment: str = ""

    @classmethod
    def from_env(cls) -> "MergePolicy":
        """
        Create a policy from environment variables.

        Environment variables:
            MERGEGATE_ONLY_ADMINS_MERGE: Only admins may trigger a merge
            MERGEGATE_ONLY_TRIGGER_PHRASE: The comment must contain the trigger phrase
            MERGEGATE_DISALLOW_OWN_CODE: The commentor must not have committed code
            MERGEGATE_FAIL_ON_NON_MERGE: Fail the build when the merge is refused
            MERGEGATE_DELETE_ON_MERGE: Delete the head branch after merging
            MERGEGATE_MERGE_COMMENT: Commit message used for the merge

        Returns:
            Configured MergePolicy

        Raises:
            ConfigurationError: If a flag holds something other than a boolean
        """
        return cls(
            only_admins_merge=_env_flag("MERGEGATE_ONLY_ADMINS_MERGE"),
            only_trigger_phrase=_env_flag("MERGEGATE_ONLY_TRIGGER_PHRASE"),
            disallow_own_code=_env_flag("MERGEGATE_DISALLOW_OWN_CODE"),
            fail_on_non_merge=_env_flag("MERGEGATE_FAIL_ON_NON_MERGE"),
            delete_on_merge=_env_flag("MERGEGATE_DELETE_ON_MERGE"),
            merge_comment=os.environ.get("MERGEGATE_MERGE_COMMENT", ""),
        )
