"""YAML-based snapshot load routines"""

from __future__ import annotations

import dataclasses
import typing as t
from pathlib import Path

import dacite
import yaml
from classlogging import LoggerMixin

from .actions.types import ActionKind, ActionRecord, PluginDescriptor
from .exceptions import IntegrityError, LoadError
from .plugins import PluginCatalog
from .store import ActionStore

__all__ = [
    "Snapshot",
    "SnapshotLoader",
]

DataclassType = t.TypeVar("DataclassType")


@dataclasses.dataclass
class Snapshot:
    """Loaded plugins and actions"""

    catalog: PluginCatalog
    store: ActionStore


class SnapshotLoader(LoggerMixin):
    """Loader for YAML snapshot documents:

    plugins:
      - id: postgres-plugin
        kind: DB
        icon_location: icons/postgres.svg
    actions:
      - id: q1
        name: Query1
        page_id: page-A
        kind: DB
        plugin_id: postgres-plugin
    """

    ALLOWED_ROOT_KEYS: t.Set[str] = {"plugins", "actions"}
    _DACITE_CONFIG: dacite.Config = dacite.Config(cast=[ActionKind], strict=True)

    def __init__(self) -> None:
        self._files_stack: t.List[str] = []

    def _throw(self, message: str) -> t.NoReturn:
        """Raise loader exception from text"""
        raise LoadError(message=message, stack=list(self._files_stack))

    def _build(self, data_class: t.Type[DataclassType], node: t.Any, entity: str) -> DataclassType:
        if not isinstance(node, dict):
            self._throw(f"Unrecognized {entity} node type: {type(node)!r} (expected a dict)")
        try:
            return dacite.from_dict(data_class=data_class, data=node, config=self._DACITE_CONFIG)
        except (dacite.DaciteError, ValueError) as e:
            self._throw(f"Invalid {entity} node: {e}")

    def _get_list(self, root: t.Dict[str, t.Any], key: str) -> t.List[t.Any]:
        nodes: t.Any = root.get(key) or []
        if not isinstance(nodes, list):
            self._throw(f"Unrecognized {key!r} content type: {type(nodes)!r} (expected a list)")
        return nodes

    def loads(self, data: t.Union[str, bytes]) -> Snapshot:
        """Load snapshot from text"""
        try:
            root: t.Any = yaml.safe_load(data)
        except yaml.YAMLError as e:
            self._throw(f"Malformed YAML: {e}")
        if root is None:
            root = {}
        if not isinstance(root, dict):
            self._throw(f"Unrecognized snapshot root type: {type(root)!r} (expected a dict)")
        if unexpected_keys := set(root) - self.ALLOWED_ROOT_KEYS:
            self._throw(f"Unrecognized root keys: {sorted(unexpected_keys)}")
        try:
            catalog = PluginCatalog(
                self._build(PluginDescriptor, node, "plugin") for node in self._get_list(root, "plugins")
            )
            actions: t.List[ActionRecord] = [
                self._build(ActionRecord, node, "action") for node in self._get_list(root, "actions")
            ]
            for action in actions:
                if action.plugin_id is not None and action.plugin_id not in catalog:
                    self._throw(f"Action {action.id!r} refers to an unknown plugin: {action.plugin_id!r}")
            store = ActionStore(actions)
        except IntegrityError as e:
            self._throw(str(e))
        self.logger.debug(f"Loaded {len(catalog)} plugins and {len(store)} actions")
        return Snapshot(catalog=catalog, store=store)

    def load(self, source_file: t.Union[str, Path]) -> Snapshot:
        """Load snapshot from file"""
        source_file_path: Path = Path(source_file)
        self._files_stack.append(str(source_file_path))
        self.logger.debug(f"Loading snapshot file: {source_file_path}")
        try:
            if not source_file_path.is_file():
                self._throw(f"Snapshot file not found: {source_file_path}")
            return self.loads(source_file_path.read_bytes())
        finally:
            self._files_stack.pop()
