"""
Runtime configuration for gclone.

Settings are resolved once per invocation from an optional TOML file and
``GCLONE_*`` environment variables, then handed to each component. The
resulting object is frozen.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore[attr-defined]

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Settings loaded from env or the gclone TOML file."""

    model_config = SettingsConfigDict(
        env_prefix="GCLONE_",
        extra="ignore",
        frozen=True,
    )

    container: str = "github"
    host_url: str = "https://github.com"
    api_root: str = "https://api.github.com"
    request_timeout: Optional[float] = None
    git_executable: str = "git"
    trash_command: str = "trash"

    @field_validator("host_url", "api_root")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class SettingsError(ValueError):
    """Raised when the config file or a GCLONE_* variable cannot be used."""


_CONFIG_ENV_VAR = "GCLONE_CONFIG_PATH"


def _default_config_file() -> Path:
    return Path.home() / ".config" / "gclone" / "settings.toml"


def _load_toml_config() -> Dict[str, Any]:
    """Load configuration from the first TOML file found on disk."""
    candidates: List[Path] = []
    config_override = os.getenv(_CONFIG_ENV_VAR)
    if config_override:
        candidates.append(Path(config_override))
    candidates.append(_default_config_file())

    for candidate in candidates:
        if candidate.is_file():
            with candidate.open("rb") as handle:
                try:
                    return tomllib.load(handle)
                except tomllib.TOMLDecodeError as exc:
                    raise SettingsError(f"{candidate}: {exc}") from exc
    return {}


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        raise SettingsError(f"[{name}] must be a table in the gclone config file")
    return value


def _flatten_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Translate grouped TOML sections into AppSettings keyword arguments."""
    data: Dict[str, Any] = {}

    layout = _section(raw, "layout")
    if _blank_to_none(layout.get("container")) is not None:
        data["container"] = layout["container"]

    remote = _section(raw, "remote")
    if _blank_to_none(remote.get("host_url")) is not None:
        data["host_url"] = remote["host_url"]
    if _blank_to_none(remote.get("api_root")) is not None:
        data["api_root"] = remote["api_root"]
    if "request_timeout" in remote:
        data["request_timeout"] = _blank_to_none(remote["request_timeout"])

    tools = _section(raw, "tools")
    if _blank_to_none(tools.get("git")) is not None:
        data["git_executable"] = tools["git"]
    if _blank_to_none(tools.get("trash")) is not None:
        data["trash_command"] = tools["trash"]

    return data


def load_settings() -> AppSettings:
    """Resolve settings for one invocation; raises ``SettingsError`` on bad input."""
    raw = _load_toml_config()
    try:
        return AppSettings(**_flatten_config(raw))
    except ValidationError as exc:
        raise SettingsError(f"invalid gclone setting: {exc}") from exc
