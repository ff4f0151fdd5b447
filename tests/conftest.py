"""Session-wide fixtures"""
# pylint: disable=missing-function-docstring,unused-argument,redefined-outer-name

import sys
import typing as t
from pathlib import Path

import classlogging
import pytest

from actionkit.actions.types import ActionKind, ActionRecord, PluginDescriptor
from actionkit.config.environment import Env
from actionkit.plugins import PluginCatalog
from actionkit.store import ActionStore

_PROJECT_ROOT: Path = Path(__file__).parents[1]


def pytest_sessionstart(session):
    source_dir: Path = _PROJECT_ROOT / "src"
    assert source_dir.is_dir()
    sys.path.append(str(source_dir))


@pytest.fixture(scope="session")
def project_root() -> Path:
    return _PROJECT_ROOT


@pytest.fixture(autouse=True, scope="session")
def configure_logging() -> None:
    classlogging.configure_logging(level=classlogging.LogLevel.DEBUG)


@pytest.fixture(scope="session", autouse=True)
def disable_env_cache() -> None:
    """Do not cache environment variables values for varying tests"""
    Env.cache_values = False


@pytest.fixture
def rest_plugin() -> PluginDescriptor:
    return PluginDescriptor(
        id="restapi-plugin",
        kind=ActionKind.API,
        name="REST API",
        package_name="restapi-plugin",
        icon_location="icons/rest.svg",
    )


@pytest.fixture
def graphql_plugin() -> PluginDescriptor:
    return PluginDescriptor(
        id="graphql-plugin",
        kind=ActionKind.API,
        name="GraphQL API",
        package_name="graphql-plugin",
        icon_location="icons/graphql.svg",
    )


@pytest.fixture
def postgres_plugin() -> PluginDescriptor:
    return PluginDescriptor(id="postgres-plugin", kind=ActionKind.DB, name="PostgreSQL")


@pytest.fixture
def sheets_plugin() -> PluginDescriptor:
    return PluginDescriptor(
        id="google-sheets-plugin",
        kind=ActionKind.SAAS,
        name="Google Sheets",
        package_name="google-sheets-plugin",
    )


@pytest.fixture
def catalog(
    rest_plugin: PluginDescriptor,
    graphql_plugin: PluginDescriptor,
    postgres_plugin: PluginDescriptor,
    sheets_plugin: PluginDescriptor,
) -> PluginCatalog:
    return PluginCatalog([rest_plugin, graphql_plugin, postgres_plugin, sheets_plugin])


@pytest.fixture
def page_actions() -> t.List[ActionRecord]:
    return [
        ActionRecord(id="a1", name="Api1", page_id="page-A", kind=ActionKind.API, plugin_id="restapi-plugin"),
        ActionRecord(id="q1", name="Query1", page_id="page-A", kind=ActionKind.DB, plugin_id="postgres-plugin"),
        ActionRecord(id="q2", name="Query11", page_id="page-A", kind=ActionKind.DB, plugin_id="postgres-plugin"),
        ActionRecord(id="q3", name="Query2", page_id="page-B", kind=ActionKind.DB, plugin_id="postgres-plugin"),
    ]


@pytest.fixture
def store(page_actions: t.List[ActionRecord]) -> ActionStore:
    return ActionStore(page_actions)
