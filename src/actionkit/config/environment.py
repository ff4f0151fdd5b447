"""Separate environment-centric module"""

import typing as t

from named_env import (
    EnvironmentNamespace,
    OptionalString,
    OptionalTernary,
    OptionalInteger,
)

__all__ = [
    "Env",
]


class Env(EnvironmentNamespace):
    """
    ACTIONKIT_LOG_LEVEL:
        Specifies the log level.
        Default is ERROR.
    ACTIONKIT_LOG_FILE:
        Specifies the log file.
        Defaults to the standard error stream.
    ACTIONKIT_ENV_FILE:
        Which file to load environment variables from. Expected format is k=v.
        Default is .env in the current directory.
    ACTIONKIT_SNAPSHOT_FILE:
        Snapshot file (plugins and actions) used by the command-line interface.
        Default is actionkit.yml in the current directory.
    ACTIONKIT_ASSETS_BASE_URL:
        Base URL prepended to relative plugin icon locations.
        Default is empty, which leaves icon locations untouched.
    ACTIONKIT_EDITOR_BASE_PATH:
        Editor base path template, must contain the {parent_entity_id} placeholder.
        Default is '/page-{parent_entity_id}/edit'.
    ACTIONKIT_SAAS_PLUGIN_PACKAGE_NAME:
        Package name of the only SaaS connector, used for every SaaS editor route.
        Default is 'google-sheets-plugin'.
    ACTIONKIT_ENTITY_ICON_SIZE:
        Width and height of plugin asset icons, in pixels.
        Default is 16.
    ACTIONKIT_NAME_SEARCH_LIMIT:
        Maximum number of numeric suffixes tried while looking for a free action name.
        Default is 0, which means no limit.
    ACTIONKIT_FORCE_COLOR:
        When specified, this will force the colored or non-coloured log output, according to the setting.
    """

    ACTIONKIT_LOG_LEVEL: str = OptionalString("")
    ACTIONKIT_LOG_FILE: str = OptionalString("")
    ACTIONKIT_ENV_FILE: str = OptionalString("")
    ACTIONKIT_SNAPSHOT_FILE: str = OptionalString("")
    ACTIONKIT_ASSETS_BASE_URL: str = OptionalString("")
    ACTIONKIT_EDITOR_BASE_PATH: str = OptionalString("")
    ACTIONKIT_SAAS_PLUGIN_PACKAGE_NAME: str = OptionalString("")
    ACTIONKIT_ENTITY_ICON_SIZE: int = OptionalInteger(16)  # type: ignore
    ACTIONKIT_NAME_SEARCH_LIMIT: int = OptionalInteger(0)  # type: ignore
    ACTIONKIT_FORCE_COLOR: t.Optional[bool] = OptionalTernary(None)  # type: ignore
