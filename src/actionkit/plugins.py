"""In-memory plugin catalog"""

import typing as t

import classlogging

from .actions.types import ActionKind, ActionRecord, PluginDescriptor
from .exceptions import IntegrityError

__all__ = [
    "PluginCatalog",
]


class PluginCatalog(classlogging.LoggerMixin):
    """Connector descriptors by id"""

    def __init__(self, plugins: t.Iterable[PluginDescriptor] = ()) -> None:
        self._plugins: t.Dict[str, PluginDescriptor] = {}
        for plugin in plugins:
            self.register(plugin)

    def register(self, plugin: PluginDescriptor) -> None:
        """Add a descriptor"""
        if plugin.id in self._plugins:
            raise IntegrityError(f"Plugin registered twice: {plugin.id!r}")
        self.logger.debug(f"Registering plugin {plugin.id!r} of kind {plugin.kind}")
        self._plugins[plugin.id] = plugin

    def get(self, plugin_id: t.Optional[str], kind: t.Optional[ActionKind] = None) -> t.Optional[PluginDescriptor]:
        """Find a descriptor; a kind mismatch counts as a miss"""
        if plugin_id is None or (plugin := self._plugins.get(plugin_id)) is None:
            return None
        if kind is not None and plugin.kind is not kind:
            self.logger.warning(f"Plugin {plugin_id!r} is of kind {plugin.kind}, not {kind}")
            return None
        return plugin

    def for_action(self, action: ActionRecord) -> t.Optional[PluginDescriptor]:
        """Descriptor backing the action"""
        return self.get(action.plugin_id, kind=action.kind)

    def __iter__(self) -> t.Iterator[PluginDescriptor]:
        return iter(self._plugins.values())

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self._plugins
