"""Abstract base class for the issue tracker API surface the workflow consumes."""

from abc import ABC, abstractmethod

from linear_utils.models import Issue, Organization, User, WorkflowState


class IssueTracker(ABC):
    @abstractmethod
    def viewer(self) -> User: ...

    @abstractmethod
    def organization(self) -> Organization: ...

    @abstractmethod
    def get_issue(self, identifier: str) -> Issue: ...

    @abstractmethod
    def update_issue(
        self,
        issue_id: str,
        *,
        state_id: str | None = None,
        assignee_id: str | None = None,
    ) -> None: ...

    @abstractmethod
    def team_draft_state(self, team_id: str) -> WorkflowState | None: ...

    @abstractmethod
    def users_by_display_name(self, display_name: str) -> list[User]: ...
