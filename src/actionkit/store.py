"""
Reactive holder of the current action collection.
Every mutation produces a new immutable snapshot, bumps the version and notifies subscribers.
"""

import dataclasses
import typing as t
import weakref

import classlogging

from .actions.types import ActionRecord
from .exceptions import IntegrityError

__all__ = [
    "ActionStore",
    "SubscriberType",
]

SnapshotType = t.Tuple[ActionRecord, ...]
SubscriberType = t.Callable[["ActionStore"], None]
SubscriberRefType = t.Callable[[], t.Optional[SubscriberType]]


class ActionStore(classlogging.LoggerMixin):
    """Single-writer action collection"""

    def __init__(self, actions: t.Iterable[ActionRecord] = ()) -> None:
        self._actions: SnapshotType = self._validated(actions)
        self._version: int = 0
        self._subscribers: t.List[SubscriberRefType] = []

    @staticmethod
    def _validated(actions: t.Iterable[ActionRecord]) -> SnapshotType:
        snapshot: SnapshotType = tuple(actions)
        seen_ids: t.Set[str] = set()
        for action in snapshot:
            if action.id in seen_ids:
                raise IntegrityError(f"Action declared twice: {action.id!r}")
            seen_ids.add(action.id)
        return snapshot

    @property
    def actions(self) -> SnapshotType:
        """Current snapshot"""
        return self._actions

    @property
    def version(self) -> int:
        """Incremented on every change"""
        return self._version

    def __len__(self) -> int:
        return len(self._actions)

    def get(self, action_id: str) -> t.Optional[ActionRecord]:
        """Find an action by id"""
        for action in self._actions:
            if action.id == action_id:
                return action
        return None

    @property
    def subscribers_count(self) -> int:
        """Live subscribers number"""
        self._drop_dead_subscribers()
        return len(self._subscribers)

    def _drop_dead_subscribers(self) -> None:
        self._subscribers = [ref for ref in self._subscribers if ref() is not None]

    def subscribe(self, subscriber: SubscriberType, weak: bool = False) -> t.Callable[[], None]:
        """Register a change listener; the result unregisters it.
        Weak subscriptions must be bound methods and vanish together with their owner."""
        ref: SubscriberRefType = weakref.WeakMethod(subscriber) if weak else (lambda: subscriber)  # type: ignore
        self._subscribers.append(ref)

        def unsubscribe() -> None:
            self._subscribers = [item for item in self._subscribers if item is not ref]

        return unsubscribe

    def _commit(self, snapshot: SnapshotType) -> None:
        self._actions = snapshot
        self._version += 1
        self.logger.debug(f"Action collection changed: version {self._version}, {len(snapshot)} actions")
        self._drop_dead_subscribers()
        for ref in list(self._subscribers):
            if (subscriber := ref()) is not None:
                subscriber(self)

    def replace(self, actions: t.Iterable[ActionRecord]) -> None:
        """Swap the whole collection"""
        self._commit(self._validated(actions))

    def add(self, action: ActionRecord) -> None:
        """Append an action"""
        self._commit(self._validated(self._actions + (action,)))

    def remove(self, action_id: str) -> ActionRecord:
        """Delete an action by id"""
        if (action := self.get(action_id)) is None:
            raise KeyError(action_id)
        self._commit(tuple(item for item in self._actions if item.id != action_id))
        return action

    def rename(self, action_id: str, new_name: str) -> ActionRecord:
        """Change an action name"""
        if (action := self.get(action_id)) is None:
            raise KeyError(action_id)
        renamed: ActionRecord = dataclasses.replace(action, name=new_name)
        self._commit(tuple(renamed if item.id == action_id else item for item in self._actions))
        return renamed
