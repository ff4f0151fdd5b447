"""
Action type registry.
When new action plugins appear, they are added to the ACTION_PLUGIN_MAP table:
there should be no other place that dispatches on the action kind.
"""

from __future__ import annotations

import dataclasses
import typing as t
import uuid

import classlogging

from .actions.constants import QUERY_EDITOR_KINDS
from .actions.types import ActionKind, ActionRecord, PluginDescriptor, is_graphql_plugin
from .config.constants import C
from .exceptions import IntegrityError
from .icons import DB_QUERY_ICON, EntityIcon, Icon, MethodIcon, get_asset_url
from .routes import api_editor_id_url, query_editor_id_url, saas_editor_api_id_url

__all__ = [
    "ActionGroupConfig",
    "ActionRegistry",
    "build_datasources_group",
    "ACTION_PLUGIN_MAP",
    "resolve_action_url",
    "resolve_action_icon",
    "get_action_config",
]

logger = classlogging.get_module_logger()

URLGetterType = t.Callable[[str, str, ActionKind, t.Optional[PluginDescriptor]], str]
IconGetterType = t.Callable[[t.Optional[ActionRecord], t.Optional[PluginDescriptor], bool], t.Optional[Icon]]
AssetURLResolverType = t.Callable[[str], str]


@dataclasses.dataclass(frozen=True)
class ActionGroupConfig:
    """Routing and icon behaviour shared by a group of action kinds"""

    group_name: str
    types: t.FrozenSet[ActionKind]
    icon: Icon
    url_getter: URLGetterType
    icon_getter: IconGetterType
    key: str = dataclasses.field(default_factory=lambda: uuid.uuid4().hex)

    def get_url(
        self,
        parent_entity_id: str,
        id: str,  # pylint: disable=redefined-builtin
        kind: ActionKind,
        plugin: t.Optional[PluginDescriptor] = None,
    ) -> str:
        """Editor path of the action"""
        return self.url_getter(parent_entity_id, id, kind, plugin)

    def get_icon(
        self,
        action: t.Optional[ActionRecord],
        plugin: t.Optional[PluginDescriptor],
        remote_icon: bool = False,
    ) -> t.Optional[Icon]:
        """Icon of the action, if any"""
        return self.icon_getter(action, plugin, remote_icon)


def resolve_action_url(
    parent_entity_id: str,
    kind: ActionKind,
    id: str,  # pylint: disable=redefined-builtin
    plugin: t.Optional[PluginDescriptor] = None,  # pylint: disable=unused-argument
) -> str:
    """Select an editor path by the action kind"""
    if kind is ActionKind.SAAS:
        # Only one SaaS connector exists, so the plugin is not consulted
        return saas_editor_api_id_url(
            parent_entity_id=parent_entity_id,
            plugin_package_name=C.SAAS_PLUGIN_PACKAGE_NAME,
            api_id=id,
        )
    if kind in QUERY_EDITOR_KINDS:
        return query_editor_id_url(parent_entity_id=parent_entity_id, query_id=id)
    return api_editor_id_url(parent_entity_id=parent_entity_id, api_id=id)


def resolve_action_icon(
    action: t.Optional[ActionRecord],
    plugin: t.Optional[PluginDescriptor],
    remote_icon: bool = False,
    asset_url_resolver: AssetURLResolverType = get_asset_url,
) -> t.Optional[Icon]:
    """Pick the most specific icon: method badge, then plugin asset, then database glyph"""
    if plugin is None:
        return None
    if plugin.kind is ActionKind.API and not remote_icon and not is_graphql_plugin(plugin):
        if action is not None and (method := action.http_method):
            return MethodIcon(method)
    if plugin.icon_location:
        size: int = C.ENTITY_ICON_SIZE
        return EntityIcon(src=asset_url_resolver(plugin.icon_location), width=size, height=size)
    if plugin.kind is ActionKind.DB:
        return DB_QUERY_ICON
    return None


class ActionRegistry(classlogging.LoggerMixin):
    """Immutable kind-to-group lookup table"""

    def __init__(self, groups: t.Iterable[ActionGroupConfig], require_complete: bool = True) -> None:
        self._groups: t.Tuple[ActionGroupConfig, ...] = tuple(groups)
        self._by_kind: t.Dict[ActionKind, ActionGroupConfig] = {}
        for group in self._groups:
            for kind in group.types:
                if (owner := self._by_kind.get(kind)) is not None:
                    raise IntegrityError(
                        f"Action kind {kind} is claimed by both {owner.group_name!r} and {group.group_name!r}"
                    )
                self._by_kind[kind] = group
        uncovered: t.List[str] = [kind.name for kind in ActionKind if kind not in self._by_kind]
        if uncovered and require_complete:
            raise IntegrityError(f"Action kinds not covered by any group: {uncovered}")

    def __iter__(self) -> t.Iterator[ActionGroupConfig]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def lookup(self, kind: t.Union[ActionKind, str]) -> t.Optional[ActionGroupConfig]:
        """Find the group covering the kind"""
        if (known_kind := ActionKind.coerce(kind)) is None or (group := self._by_kind.get(known_kind)) is None:
            self.logger.warning(f"No action group covers kind {kind!r}")
            return None
        return group


def build_datasources_group(asset_url_resolver: AssetURLResolverType = get_asset_url) -> ActionGroupConfig:
    """The single group serving every data source kind"""

    def get_icon(
        action: t.Optional[ActionRecord],
        plugin: t.Optional[PluginDescriptor],
        remote_icon: bool,
    ) -> t.Optional[Icon]:
        return resolve_action_icon(action, plugin, remote_icon=remote_icon, asset_url_resolver=asset_url_resolver)

    return ActionGroupConfig(
        group_name="Datasources",
        types=frozenset(ActionKind),
        icon=DB_QUERY_ICON,
        url_getter=lambda parent_entity_id, id, kind, plugin: resolve_action_url(
            parent_entity_id=parent_entity_id,
            kind=kind,
            id=id,
            plugin=plugin,
        ),
        icon_getter=get_icon,
    )


ACTION_PLUGIN_MAP: ActionRegistry = ActionRegistry([build_datasources_group()])


def get_action_config(kind: t.Union[ActionKind, str]) -> t.Optional[ActionGroupConfig]:
    """Default registry lookup"""
    logger.debug(f"Looking up action group for kind {kind!r}")
    return ACTION_PLUGIN_MAP.lookup(kind)
