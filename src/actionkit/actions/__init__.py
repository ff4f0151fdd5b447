"""The package describes action entities and their connectors"""

from .types import (
    ActionKind,
    ActionRecord,
    PluginDescriptor,
    is_graphql_plugin,
)
