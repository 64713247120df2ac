"""Branch → issue sync: advance the issue to its team's draft state and assign it."""

import logging

from linear_utils.branch import parse_branch_name
from linear_utils.errors import AssigneeResolutionFailed, MissingDraftStateOrIssueState, MissingTeam
from linear_utils.models import Issue, User
from linear_utils.providers.base import IssueTracker

logger = logging.getLogger(__name__)

# State types that come before the draft state; anything else counts as already advanced.
ADVANCEABLE_STATE_TYPES = frozenset({"triage", "backlog", "unstarted"})


def advance_to_draft_state(tracker: IssueTracker, issue_identifier: str) -> Issue:
    """Move the issue to its team's draft state unless it is already there or further along."""
    issue = tracker.get_issue(issue_identifier)
    if issue.team is None:
        raise MissingTeam(f"Issue {issue.identifier} does not belong to a Team")

    draft_state = tracker.team_draft_state(issue.team.id)
    if draft_state is None or issue.state is None:
        raise MissingDraftStateOrIssueState(
            f"Team {issue.team.key} does not have a draft state OR issue {issue.identifier} does not have a state"
        )

    if issue.state.type not in ADVANCEABLE_STATE_TYPES:
        logger.info("Issue %s is already '%s' or further along.", issue.identifier, draft_state.name)
        return issue

    logger.info("Setting Issue %s to '%s' ...", issue.identifier, draft_state.name)
    tracker.update_issue(issue.id, state_id=draft_state.id)
    logger.info("Successfully set Issue %s to '%s'.", issue.identifier, draft_state.name)
    return issue.model_copy(update={"state": draft_state})


def resolve_user(tracker: IssueTracker, display_name: str) -> User:
    users = tracker.users_by_display_name(display_name)
    if len(users) != 1:
        raise AssigneeResolutionFailed(
            f"Unable to get User information to assign: {len(users)} users have display name '{display_name}'"
        )
    return users[0]


def assign_if_unassigned(tracker: IssueTracker, issue: Issue, assignee: str | None) -> Issue:
    """Assign the issue to the user with display name ``assignee``.

    An existing assignee is never overwritten.
    """
    if not assignee:
        return issue
    if issue.assignee is not None:
        logger.info("Issue %s is already assigned. Not overwriting.", issue.identifier)
        return issue

    user = resolve_user(tracker, assignee)
    logger.info("Assigning Issue %s to %s ...", issue.identifier, assignee)
    tracker.update_issue(issue.id, assignee_id=user.id)
    logger.info("Successfully assigned Issue %s to %s.", issue.identifier, assignee)
    return issue.model_copy(update={"assignee": user})


def on_create_branch(tracker: IssueTracker, branch: str) -> Issue:
    """Sync the Linear issue named by a freshly created branch.

    Stages run in order and any failure stops the rest:
    organization lookup, branch parsing, state advance, assignment.
    """
    org = tracker.organization()
    spec = parse_branch_name(org.git_branch_format, branch)
    logger.debug("Branch %r → assignee=%r issue=%s", branch, spec.assignee, spec.issue_identifier)

    issue = advance_to_draft_state(tracker, spec.issue_identifier)
    return assign_if_unassigned(tracker, issue, spec.assignee)
