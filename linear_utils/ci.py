"""GitHub Actions input bridge.

Inside an Actions job the ``command`` and ``on_create_branch`` inputs stand in
for shell arguments. They are appended after whatever was passed on the command
line, so ``linear-utils`` with no arguments behaves like
``linear-utils <command> <on_create_branch>``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CiContext(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INPUT_", extra="ignore")

    job: str | None = Field(default=None, validation_alias="GITHUB_JOB")
    command: str = ""
    on_create_branch: str = ""

    @property
    def active(self) -> bool:
        return bool(self.job)

    def arguments(self) -> list[str]:
        # Trimmed like @actions/core getInput; unset inputs contribute nothing.
        values = (self.command.strip(), self.on_create_branch.strip())
        return [v for v in values if v]


def merge_arguments(cli_args: list[str], ci: CiContext) -> list[str]:
    """Return the argument list typer should dispatch on."""
    if not ci.active:
        return list(cli_args)
    return [*cli_args, *ci.arguments()]
