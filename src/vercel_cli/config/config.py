"""
Persisted settings for the Vercel CLI.

Settings live in a small YAML file (``~/.config/vercel-cli/config.yaml`` by default)
and can be overridden with ``VERCEL_``-prefixed environment variables.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "vercel-cli" / "config.yaml"

CONFIG_KEYS = ("api_key", "team_id", "base_url")


class Config(BaseSettings):
    """Settings used to authenticate and address API requests.

    Load order precedence (highest to lowest):
    - Environment variables with ``VERCEL_`` prefix
    - Values from the settings file
    - Defaults in this class
    """

    api_key: Optional[str] = Field(default=None, description="Vercel API token")
    team_id: Optional[str] = Field(default=None, description="Default team ID")
    base_url: Optional[str] = Field(
        default=None, description="API base URL (defaults to https://api.vercel.com)"
    )

    model_config = {
        "env_prefix": "VERCEL_",
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return env_settings, init_settings

    @classmethod
    def from_file(cls, file_path: str) -> "Config":
        """Load settings from a YAML file; a missing file yields env/defaults only."""
        return cls(**read_settings_file(Path(file_path)))

    def is_configured(self) -> bool:
        """Credentials count as configured when a token or a custom API URL is set."""
        return bool(self.api_key) or bool(self.base_url)


def read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return data


class ConfigStore:
    """File-backed configuration provider.

    Every read goes back to disk so that a ``config set`` takes effect on the
    next request without any cached state.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else DEFAULT_CONFIG_PATH

    def load(self) -> Config:
        return Config.from_file(str(self.path))

    def get(self, key: str) -> Optional[str]:
        if key not in CONFIG_KEYS:
            raise KeyError(f"Unknown configuration key: {key}")
        return getattr(self.load(), key)

    def set(self, key: str, value: Optional[str]) -> None:
        """Persist ``key``; a ``None`` value removes it from the file."""
        if key not in CONFIG_KEYS:
            raise KeyError(f"Unknown configuration key: {key}")

        data = read_settings_file(self.path)
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
        self._write(data)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()

    def is_configured(self) -> bool:
        return self.load().is_configured()

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            f.write("# Vercel CLI configuration\n")
            f.write("# WARNING: Do not commit your API token\n\n")
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
