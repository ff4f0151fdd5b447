"""Types collection"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing as t

__all__ = [
    "ActionKind",
    "PluginDescriptor",
    "ActionRecord",
    "GRAPHQL_PLUGIN_PACKAGE_NAME",
    "HTTP_METHOD_CONFIG_KEY",
    "is_graphql_plugin",
]

GRAPHQL_PLUGIN_PACKAGE_NAME: str = "graphql-plugin"
HTTP_METHOD_CONFIG_KEY: str = "httpMethod"


class ActionKind(enum.Enum):
    """Connector category of an action"""

    API = "API"
    SAAS = "SAAS"
    DB = "DB"
    REMOTE = "REMOTE"
    AI = "AI"
    INTERNAL = "INTERNAL"

    def __repr__(self) -> str:
        return self.name

    __str__ = __repr__

    @classmethod
    def coerce(cls, value: t.Union[ActionKind, str]) -> t.Optional[ActionKind]:
        """Kind by itself or by its value, None for unknown values"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class PluginDescriptor:
    """Connector metadata backing an action kind"""

    id: str
    kind: ActionKind
    name: str = ""
    package_name: str = ""
    icon_location: t.Optional[str] = None
    is_graphql: bool = False


def is_graphql_plugin(plugin: t.Optional[PluginDescriptor]) -> bool:
    """Check whether the plugin is the GraphQL flavour of the REST API connector"""
    if plugin is None:
        return False
    return plugin.is_graphql or plugin.package_name == GRAPHQL_PLUGIN_PACKAGE_NAME


@dataclasses.dataclass(frozen=True)
class ActionRecord:
    """An action entity as seen by the page owning it"""

    id: str
    name: str
    page_id: str
    kind: ActionKind
    plugin_id: t.Optional[str] = None
    config: t.Mapping[str, t.Any] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Detach from the source mapping and forbid in-place changes
        object.__setattr__(self, "config", types.MappingProxyType(dict(self.config)))

    @property
    def http_method(self) -> t.Optional[str]:
        """Configured HTTP method, if any"""
        method: t.Any = self.config.get(HTTP_METHOD_CONFIG_KEY)
        return method if isinstance(method, str) and method else None
