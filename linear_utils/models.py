"""Shared pydantic models: the contract between the tracker client and the workflow."""

from pydantic import BaseModel, ConfigDict


class WorkflowState(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str  # triage | backlog | unstarted | started | completed | canceled


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    key: str  # identifier prefix, e.g. ENG


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    display_name: str


class Organization(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    git_branch_format: str | None = None


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # Linear UUID
    identifier: str  # ENG-123
    title: str
    url: str
    state: WorkflowState | None = None
    team: Team | None = None
    assignee: User | None = None


class BranchSpec(BaseModel):
    """Assignee and issue identifier encoded in a branch name."""

    model_config = ConfigDict(frozen=True)

    assignee: str | None = None
    issue_identifier: str
