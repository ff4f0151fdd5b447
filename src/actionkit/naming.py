"""
Scoped unique names for new and copied actions.
Names are unique within a page only. Actions outside the store (other pages not loaded,
other applications) are not taken into account.
"""

import collections
import itertools
import types
import typing as t

import classlogging

from .actions.types import ActionRecord
from .config.constants import C
from .exceptions import NameCollisionExhausted
from .store import ActionStore

__all__ = [
    "COPY_SUFFIX",
    "group_by_page",
    "get_next_entity_name",
    "UniqueNameGenerator",
]

COPY_SUFFIX: str = "Copy"

PageGroupsType = t.Mapping[str, t.Tuple[ActionRecord, ...]]


def group_by_page(actions: t.Iterable[ActionRecord]) -> PageGroupsType:
    """Read-only page id to actions mapping"""
    groups: t.DefaultDict[str, t.List[ActionRecord]] = collections.defaultdict(list)
    for action in actions:
        groups[action.page_id].append(action)
    return types.MappingProxyType({page_id: tuple(page_actions) for page_id, page_actions in groups.items()})


def get_next_entity_name(
    prefix: str,
    existing_names: t.Iterable[str],
    limit: t.Optional[int] = None,
) -> str:
    """Append the smallest positive integer suffix giving a free name.
    :param prefix: name base
    :param existing_names: names already taken
    :param limit: candidates to try before giving up, unlimited when None"""
    taken: t.FrozenSet[str] = frozenset(existing_names)
    counter: t.Iterable[int] = itertools.count(1) if limit is None else range(1, limit + 1)
    for index in counter:
        if (candidate := f"{prefix}{index}") not in taken:
            return candidate
    raise NameCollisionExhausted(prefix=prefix, limit=limit or 0)


class UniqueNameGenerator(classlogging.LoggerMixin):
    """Resolve collision-free action names against a store"""

    def __init__(self, store: ActionStore) -> None:
        self._store: ActionStore = store
        self._groups: t.Optional[PageGroupsType] = None
        self._groups_version: t.Optional[int] = None
        self._unsubscribe: t.Callable[[], None] = store.subscribe(self._on_store_change, weak=True)

    def _on_store_change(self, store: ActionStore) -> None:
        self.logger.debug(f"Dropping page grouping due to store version {store.version}")
        self._groups = None

    def close(self) -> None:
        """Stop listening to the store"""
        self._unsubscribe()

    def __enter__(self) -> "UniqueNameGenerator":
        return self

    def __exit__(self, *args: t.Any) -> None:
        self.close()

    @property
    def groups(self) -> PageGroupsType:
        """Actions grouped by page, recalculated after store changes"""
        if self._groups is None or self._groups_version != self._store.version:
            self._groups = group_by_page(self._store.actions)
            self._groups_version = self._store.version
        return self._groups

    def page_action_names(self, page_id: str) -> t.List[str]:
        """Names taken on the page"""
        return [action.name for action in self.groups.get(page_id, ())]

    def resolve_name(self, name: str, destination_page_id: str, is_copy: bool = False) -> str:
        """Return the name itself if it is free on the page, otherwise a suffixed variant"""
        action_names: t.List[str] = self.page_action_names(destination_page_id)
        if name not in action_names:
            return name
        resolved: str = get_next_entity_name(
            prefix=f"{name}{COPY_SUFFIX}" if is_copy else name,
            existing_names=action_names,
            limit=C.NAME_SEARCH_LIMIT,
        )
        self.logger.debug(f"Name {name!r} is taken on page {destination_page_id!r}, using {resolved!r}")
        return resolved

    __call__ = resolve_name
