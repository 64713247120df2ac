"""Branch-name parsing for the organization's git branch format."""

from linear_utils.errors import IncompatibleBranchFormat
from linear_utils.models import BranchSpec

SUPPORTED_BRANCH_FORMAT = "{username}/{issueIdentifier}-{issueTitle}"


def parse_branch_name(git_branch_format: str | None, branch: str) -> BranchSpec:
    """Extract the assignee and issue identifier from a branch name.

    Only the ``{username}/{issueIdentifier}-{issueTitle}`` format is understood:

        bob/eng-42-refactor-login → assignee="bob", issue_identifier="ENG-42"

    Title words after the identifier are dropped, so ``bob/eng-42-4-fix`` is
    still ``ENG-42``.
    """
    if git_branch_format != SUPPORTED_BRANCH_FORMAT:
        raise IncompatibleBranchFormat(
            f"Organization branch format {git_branch_format!r} is not supported "
            f"(expected {SUPPORTED_BRANCH_FORMAT!r})"
        )

    slash_parts = branch.split("/")
    if len(slash_parts) != 2:
        raise IncompatibleBranchFormat(f"Branch {branch!r} must look like <username>/<team>-<number>-<title>")
    username, id_title = slash_parts

    id_title_parts = id_title.split("-")
    if len(id_title_parts) < 2 or not id_title_parts[0] or not id_title_parts[1]:
        raise IncompatibleBranchFormat(f"Branch {branch!r} has no issue identifier after '/'")

    prefix, number = id_title_parts[0], id_title_parts[1]
    return BranchSpec(
        assignee=username or None,
        issue_identifier=f"{prefix.upper()}-{number}",
    )
