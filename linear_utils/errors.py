"""Exceptions raised while syncing a branch to its Linear issue."""


class LinearUtilsError(Exception):
    """Base class for every failure the CLI reports and exits on."""


class IncompatibleBranchFormat(LinearUtilsError):
    """The branch name or the organization's branch format is not the supported one."""


class MissingTeam(LinearUtilsError):
    pass


class MissingDraftStateOrIssueState(LinearUtilsError):
    pass


class AssigneeResolutionFailed(LinearUtilsError):
    """Zero or several users matched the requested display name."""


class IssueNotFound(LinearUtilsError):
    pass


class ConfigurationError(LinearUtilsError):
    """Settings from env, .env or the config file could not be loaded."""


class LinearAPIError(LinearUtilsError):
    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
