# taskboard/core/settings.py
"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``."""

    platform_id = (platform or sys.platform).lower()
    environ = dict(env or os.environ)
    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = Path(environ.get("APPDATA") or home_dir / "Library" / "Application Support")
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return (base.expanduser() / sanitized)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


APP_NAME = "Taskboard"


DATA_DIR = get_default_data_dir(APP_NAME)
DB_PATH = Path(os.getenv("TASKBOARD_DB") or DATA_DIR / "tasks.db").expanduser()
LOG_DIR = Path(os.getenv("TASKBOARD_LOG_DIR") or "logs")


@dataclass(frozen=True)
class ApiSettings:
    host: str = os.getenv("TASKBOARD_HOST", "127.0.0.1")
    port: int = _env_int("TASKBOARD_PORT", 8000)
    prefix: str = "/api"
    request_timeout_sec: float = 10.0

    @property
    def base_url(self) -> str:
        override = os.getenv("TASKBOARD_API_URL")
        if override:
            return override.rstrip("/")
        return f"http://{self.host}:{self.port}{self.prefix}"


API = ApiSettings()


@dataclass(frozen=True)
class ThemeColors:
    safe_surface_bg: str = "#F1F5F9"
    text_subtle: str = "#6B7280"
    completed_text: str = "#94A3B8"


@dataclass(frozen=True)
class UISettings:
    app_title: str = APP_NAME
    theme_mode: str = "system"
    color_scheme_seed: str = "#2563EB"
    window_min_width: int = 900
    window_min_height: int = 600
    form_width: int = 380
    theme: ThemeColors = field(default_factory=ThemeColors)


UI = UISettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "DB_PATH",
    "LOG_DIR",
    "API",
    "UI",
    "get_default_data_dir",
]
