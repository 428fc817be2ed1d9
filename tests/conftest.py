import pytest
from rich.console import Console

from vercel_cli.cli import formatters


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    """Keep VERCEL_* variables from the host environment out of settings resolution."""
    for name in ("VERCEL_API_KEY", "VERCEL_TEAM_ID", "VERCEL_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _plain_consoles(monkeypatch):
    """Render without color codes and without wrapping so output is easy to assert on."""
    monkeypatch.setattr(formatters, "console", Console(color_system=None, width=200))
    monkeypatch.setattr(
        formatters, "err_console", Console(stderr=True, color_system=None, width=200)
    )
