"""Merging the pull request and cleaning up its branch."""

from mergegate.logging import BuildLog
from mergegate.remote import REMOTE_ERRORS, RemoteRepository
from mergegate.types.decision import BranchDeletion
from mergegate.types.policy import MergePolicy
from mergegate.types.pulls import PullRequestSnapshot


class MergeActuator:
    """Performs the merge and the optional head branch deletion."""

    def __init__(self, remote: RemoteRepository, log: BuildLog) -> None:
        self.remote = remote
        self.log = log

    def merge(self, pr: PullRequestSnapshot, policy: MergePolicy) -> BranchDeletion:
        """
        Merge ``pr`` with the policy's merge comment.

        The merge is attempted once. A merge error is logged and re-raised;
        branch deletion errors are logged and reported in the returned
        BranchDeletion.
        """
        self.log.println("Merging the pull request")
        try:
            self.remote.merge(pr, policy.merge_comment)
        except REMOTE_ERRORS as e:
            self.log.print_exception(f"Failed to merge pull request #{pr.number}", e)
            raise
        self.log.println("Pull request successfully merged")

        if not policy.delete_on_merge:
            return BranchDeletion.skipped(pr.head_ref)
        return self.delete_branch(pr)

    def delete_branch(self, pr: PullRequestSnapshot) -> BranchDeletion:
        branch = pr.head_ref
        try:
            ref = self.remote.get_ref(pr.repository, f"heads/{branch}")
            ref.delete()
        except Exception as e:
            self.log.print_exception(f"Unable to delete branch {branch}", e)
            return BranchDeletion.failed(branch, str(e))
        self.log.println(f"Deleted branch {branch}")
        return BranchDeletion.succeeded(branch)
