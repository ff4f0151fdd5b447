"""Lazy-loaded constants"""

import io
import os
import sys
import typing as t
from pathlib import Path

from classlogging import LogLevel

from .cli import get_cli_arg
from .helpers import (
    Optional,
    Mandatory,
    maybe_path,
    maybe_non_negative_int,
    maybe_positive_int,
)
from ..environment import Env

__all__ = [
    "C",
    "LOG_LEVELS",
]

LOG_LEVELS: t.Tuple[str, ...] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)


def _stderr_is_tty() -> bool:
    try:
        return os.isatty(sys.stderr.fileno())
    except (io.UnsupportedOperation, ValueError):
        return False


class C:
    """Runtime constants"""

    LOG_LEVEL: Mandatory[str] = Mandatory(
        lambda: get_cli_arg("log_level", valid_options=LOG_LEVELS),
        lambda: Env.ACTIONKIT_LOG_LEVEL or None,
        lambda: LogLevel.ERROR,
    )
    LOG_FILE: Optional[Path] = Optional(
        lambda: maybe_path(Env.ACTIONKIT_LOG_FILE),
    )
    ENV_FILE: Mandatory[Path] = Mandatory(
        lambda: maybe_path(Env.ACTIONKIT_ENV_FILE),
        lambda: Path().resolve() / ".env",
    )
    SNAPSHOT_FILE: Mandatory[Path] = Mandatory(
        lambda: maybe_path(get_cli_arg("file")),
        lambda: maybe_path(Env.ACTIONKIT_SNAPSHOT_FILE),
        lambda: Path().resolve() / "actionkit.yml",
    )
    ASSETS_BASE_URL: Mandatory[str] = Mandatory(
        lambda: Env.ACTIONKIT_ASSETS_BASE_URL,
    )
    EDITOR_BASE_PATH: Mandatory[str] = Mandatory(
        lambda: Env.ACTIONKIT_EDITOR_BASE_PATH or None,
        lambda: "/page-{parent_entity_id}/edit",
    )
    SAAS_PLUGIN_PACKAGE_NAME: Mandatory[str] = Mandatory(
        lambda: Env.ACTIONKIT_SAAS_PLUGIN_PACKAGE_NAME or None,
        lambda: "google-sheets-plugin",
    )
    ENTITY_ICON_SIZE: Mandatory[int] = Mandatory(
        lambda: maybe_positive_int(Env.ACTIONKIT_ENTITY_ICON_SIZE),
    )
    NAME_SEARCH_LIMIT: Optional[int] = Optional(
        lambda: maybe_non_negative_int(Env.ACTIONKIT_NAME_SEARCH_LIMIT),
    )
    USE_COLOR: Mandatory[bool] = Mandatory(
        lambda: Env.ACTIONKIT_FORCE_COLOR,
        _stderr_is_tty,
    )
