"""Shared test fixtures."""

import pytest

from linear_utils.branch import SUPPORTED_BRANCH_FORMAT
from linear_utils.models import Issue, Organization, Team, User, WorkflowState
from linear_utils.providers.base import IssueTracker


class FakeTracker(IssueTracker):
    """In-memory tracker that records every update call."""

    def __init__(
        self,
        issue: Issue,
        draft_state: WorkflowState | None,
        users: list[User] | None = None,
        git_branch_format: str | None = SUPPORTED_BRANCH_FORMAT,
    ) -> None:
        self.issue = issue
        self.draft_state = draft_state
        self.users = users or []
        self.org = Organization(id="org_1", name="Acme", git_branch_format=git_branch_format)
        self.updates: list[dict] = []
        self.requested_issues: list[str] = []

    def viewer(self) -> User:
        return User(id="viewer_1", name="CI Bot", display_name="ci-bot")

    def organization(self) -> Organization:
        return self.org

    def get_issue(self, identifier: str) -> Issue:
        self.requested_issues.append(identifier)
        return self.issue

    def update_issue(self, issue_id: str, *, state_id: str | None = None, assignee_id: str | None = None) -> None:
        update = {"issue_id": issue_id}
        if state_id is not None:
            update["state_id"] = state_id
        if assignee_id is not None:
            update["assignee_id"] = assignee_id
        self.updates.append(update)

    def team_draft_state(self, team_id: str) -> WorkflowState | None:
        return self.draft_state

    def users_by_display_name(self, display_name: str) -> list[User]:
        return [u for u in self.users if u.display_name == display_name]


@pytest.fixture
def engineering_team() -> Team:
    return Team(id="team_eng", name="Engineering", key="ENG")


@pytest.fixture
def draft_state() -> WorkflowState:
    return WorkflowState(id="state_ready", name="Ready", type="unstarted")


@pytest.fixture
def triage_issue(engineering_team: Team) -> Issue:
    return Issue(
        id="issue_42",
        identifier="ENG-42",
        title="Refactor login",
        url="https://linear.app/acme/issue/ENG-42",
        state=WorkflowState(id="state_triage", name="Triage", type="triage"),
        team=engineering_team,
        assignee=None,
    )


@pytest.fixture
def bob() -> User:
    return User(id="user_bob", name="Bob Builder", display_name="bob")


@pytest.fixture
def make_tracker():
    return FakeTracker
