"""Actions-related constants"""

import typing as t

from .types import ActionKind

__all__ = [
    "QUERY_EDITOR_KINDS",
]

# Kinds edited with the generic query editor
QUERY_EDITOR_KINDS: t.FrozenSet[ActionKind] = frozenset(
    {
        ActionKind.DB,
        ActionKind.REMOTE,
        ActionKind.AI,
        ActionKind.INTERNAL,
    }
)
