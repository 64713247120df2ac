"""Credential resolution: env vars, .env, then ~/.config/linear-utils/config.toml."""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict
from tomlkit.exceptions import ParseError

from linear_utils.errors import ConfigurationError

CONFIG_PATH = Path.home() / ".config" / "linear-utils" / "config.toml"


class LinearSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LINEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr | None = None  # LINEAR_API_KEY, sent verbatim
    access_token: SecretStr | None = None  # LINEAR_ACCESS_TOKEN, sent as Bearer
    timeout: float = 30.0

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Config file values arrive as init kwargs; env and .env must win over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @property
    def authorization(self) -> str | None:
        """Value for the Authorization header, or None to send the request unauthenticated."""
        if self.api_key:
            return self.api_key.get_secret_value()
        if self.access_token:
            return f"Bearer {self.access_token.get_secret_value()}"
        return None


@lru_cache(maxsize=1)
def _load_toml() -> tomlkit.TOMLDocument:
    """Load ~/.config/linear-utils/config.toml, returning empty document if missing."""
    if not CONFIG_PATH.exists():
        return tomlkit.document()
    with CONFIG_PATH.open() as f:
        try:
            return tomlkit.load(f)
        except ParseError as exc:
            raise ConfigurationError(f"Invalid TOML in {CONFIG_PATH}: {exc}") from exc


def _file_defaults(config: Mapping) -> dict:
    # Only top-level scalars map onto settings fields; tables are ignored.
    return {k: v for k, v in config.items() if k in LinearSettings.model_fields and not isinstance(v, Mapping)}


def get_settings() -> LinearSettings:
    """Resolve credentials once for this process.

    Precedence (highest to lowest):
    1. LINEAR_API_KEY / LINEAR_ACCESS_TOKEN / LINEAR_TIMEOUT env vars
    2. The same keys in .env in cwd
    3. api_key / access_token / timeout in ~/.config/linear-utils/config.toml
    4. Defaults (no credentials)
    """
    defaults = _file_defaults(_load_toml().unwrap())
    try:
        return LinearSettings(**defaults)
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())
        raise ConfigurationError(f"Invalid Linear settings ({problems})") from exc
