"""Runtime settings for the résumé parser.

Values come from the environment; a ``.env`` file at the repository root
is read once and only fills variables that are not already set.

  • RESUME_PARSER_LOCALE  rule table used when no locale is passed (default ``pt_BR``)
  • RESUME_PARSER_DEBUG   ``1/true/yes/on`` turns on step-by-step parser logging
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from resume_parsing.locale_rules import DEFAULT_LOCALE

_ENV_LOADED = False
_TRUTHY = {"1", "true", "yes", "on"}


def _load_local_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip().strip("'\""))
    _ENV_LOADED = True


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_settings() -> Dict[str, Any]:
    _load_local_env()
    locale = (os.getenv("RESUME_PARSER_LOCALE") or "").strip() or DEFAULT_LOCALE
    return {
        "locale": locale,
        "debug": _env_flag("RESUME_PARSER_DEBUG"),
    }


__all__ = ["get_settings"]
