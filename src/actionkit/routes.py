"""
Editor path builders.
Every builder returns a normalized relative path under the editor base path of the container.
"""

import re
import typing as t

from .config.constants import C

__all__ = [
    "normalize_path",
    "editor_base_path",
    "api_editor_id_url",
    "query_editor_id_url",
    "saas_editor_api_id_url",
]

_SLASHES_PATTERN: t.Pattern = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Collapse duplicate slashes, drop the trailing one and ensure the leading one"""
    collapsed: str = _SLASHES_PATTERN.sub("/", f"/{path}")
    return collapsed.rstrip("/") or "/"


def _require(**parts: str) -> None:
    for part_name, part_value in parts.items():
        if not part_value:
            raise ValueError(f"Empty path component: {part_name!r}")


def editor_base_path(parent_entity_id: str) -> str:
    """Editor root of the container"""
    _require(parent_entity_id=parent_entity_id)
    return C.EDITOR_BASE_PATH.format(parent_entity_id=parent_entity_id)


def api_editor_id_url(parent_entity_id: str, api_id: str) -> str:
    """API editor path"""
    _require(api_id=api_id)
    return normalize_path(f"{editor_base_path(parent_entity_id)}/api/{api_id}")


def query_editor_id_url(parent_entity_id: str, query_id: str) -> str:
    """Query editor path"""
    _require(query_id=query_id)
    return normalize_path(f"{editor_base_path(parent_entity_id)}/queries/{query_id}")


def saas_editor_api_id_url(parent_entity_id: str, plugin_package_name: str, api_id: str) -> str:
    """SaaS connector editor path"""
    _require(plugin_package_name=plugin_package_name, api_id=api_id)
    return normalize_path(f"{editor_base_path(parent_entity_id)}/saas/{plugin_package_name}/api/{api_id}")
