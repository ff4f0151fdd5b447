"""Action routing, icons and scoped naming for a low-code editor"""

from .actions.types import (
    ActionKind,
    ActionRecord,
    PluginDescriptor,
)
from .config.constants import C
from .exceptions import (
    BaseError,
    IntegrityError,
    LoadError,
    NameCollisionExhausted,
)
from .loader import Snapshot, SnapshotLoader
from .naming import UniqueNameGenerator, get_next_entity_name
from .plugins import PluginCatalog
from .registry import (
    ACTION_PLUGIN_MAP,
    ActionGroupConfig,
    ActionRegistry,
    get_action_config,
    resolve_action_icon,
    resolve_action_url,
)
from .store import ActionStore
from .version import __version__
