"""Linear GraphQL API client."""

import logging

import httpx

from linear_utils.errors import IssueNotFound, LinearAPIError
from linear_utils.models import Issue, Organization, Team, User, WorkflowState
from linear_utils.providers.base import IssueTracker
from linear_utils.settings import LinearSettings

logger = logging.getLogger(__name__)

ENDPOINT = "https://api.linear.app/graphql"

_VIEWER = """
query Viewer {
  viewer { id name displayName }
}
"""

_ORGANIZATION = """
query Organization {
  organization { id name gitBranchFormat }
}
"""

_GET_ISSUE = """
query GetIssue($id: String!) {
  issue(id: $id) {
    id
    identifier
    title
    url
    state { id name type }
    team { id name key }
    assignee { id name displayName }
  }
}
"""

_TEAM_DRAFT_STATE = """
query TeamDraftState($id: String!) {
  team(id: $id) {
    draftWorkflowState { id name type }
  }
}
"""

_UPDATE_ISSUE = """
mutation UpdateIssue($id: String!, $input: IssueUpdateInput!) {
  issueUpdate(id: $id, input: $input) {
    success
  }
}
"""

_USERS_BY_DISPLAY_NAME = """
query UsersByDisplayName($displayName: String!) {
  users(filter: { displayName: { eq: $displayName } }) {
    nodes { id name displayName }
  }
}
"""


def _user_from_node(node: dict) -> User:
    return User(id=node["id"], name=node["name"], display_name=node["displayName"])


def _state_from_node(node: dict) -> WorkflowState:
    return WorkflowState(id=node["id"], name=node["name"], type=node["type"])


class LinearClient(IssueTracker):
    def __init__(self, settings: LinearSettings) -> None:
        self._authorization = settings.authorization
        self._timeout = settings.timeout
        if self._authorization is None:
            logger.warning("No Linear credentials configured (LINEAR_API_KEY); requests are unauthenticated")

    def _gql(self, query: str, variables: dict | None = None) -> dict:
        headers = {"Content-Type": "application/json"}
        if self._authorization:
            headers["Authorization"] = self._authorization
        response = httpx.post(
            ENDPOINT,
            json={"query": query, "variables": variables or {}},
            headers=headers,
            timeout=self._timeout,
        )
        if response.status_code == 401:
            raise LinearAPIError("Linear API returned 401. Set LINEAR_API_KEY to a valid personal API key.")
        response.raise_for_status()
        data = response.json()
        if "errors" in data:
            raise LinearAPIError(f"Linear API error: {data['errors']}", errors=data["errors"])
        return data["data"]

    def viewer(self) -> User:
        data = self._gql(_VIEWER)
        return _user_from_node(data["viewer"])

    def organization(self) -> Organization:
        node = self._gql(_ORGANIZATION)["organization"]
        return Organization(id=node["id"], name=node["name"], git_branch_format=node.get("gitBranchFormat"))

    def get_issue(self, identifier: str) -> Issue:
        try:
            data = self._gql(_GET_ISSUE, {"id": identifier})
        except LinearAPIError as exc:
            # Linear reports unknown identifiers as "Entity not found: Issue".
            if any(str(e.get("message", "")).startswith("Entity not found") for e in exc.errors):
                raise IssueNotFound(f"Issue '{identifier}' not found in Linear") from exc
            raise
        node = data["issue"]
        if not node:
            raise IssueNotFound(f"Issue '{identifier}' not found in Linear")
        team = node.get("team")
        return Issue(
            id=node["id"],
            identifier=node["identifier"],
            title=node["title"],
            url=node["url"],
            state=_state_from_node(node["state"]) if node.get("state") else None,
            team=Team(id=team["id"], name=team["name"], key=team["key"]) if team else None,
            assignee=_user_from_node(node["assignee"]) if node.get("assignee") else None,
        )

    def team_draft_state(self, team_id: str) -> WorkflowState | None:
        team = self._gql(_TEAM_DRAFT_STATE, {"id": team_id})["team"]
        if not team or not team.get("draftWorkflowState"):
            return None
        return _state_from_node(team["draftWorkflowState"])

    def update_issue(
        self,
        issue_id: str,
        *,
        state_id: str | None = None,
        assignee_id: str | None = None,
    ) -> None:
        update: dict[str, str] = {}
        if state_id is not None:
            update["stateId"] = state_id
        if assignee_id is not None:
            update["assigneeId"] = assignee_id
        if not update:
            return
        data = self._gql(_UPDATE_ISSUE, {"id": issue_id, "input": update})
        if not data["issueUpdate"]["success"]:
            raise LinearAPIError("Linear issueUpdate returned success=false")

    def users_by_display_name(self, display_name: str) -> list[User]:
        data = self._gql(_USERS_BY_DISPLAY_NAME, {"displayName": display_name})
        return [_user_from_node(n) for n in data["users"]["nodes"]]
