"""CLI fixtures"""

import typing as t
from pathlib import Path

import classlogging
import pytest
from dotenv.main import DotEnv

from actionkit.config.constants.cli import reset_cli_args

SNAPSHOT_TEXT: str = """---
plugins:
  - {id: restapi-plugin, kind: API, icon_location: icons/rest.svg}
  - {id: postgres-plugin, kind: DB}
  - {id: google-sheets-plugin, kind: SAAS}
actions:
  - {id: a1, name: Api1, page_id: page-A, kind: API, plugin_id: restapi-plugin, config: {httpMethod: DELETE}}
  - {id: q1, name: Query1, page_id: page-A, kind: DB, plugin_id: postgres-plugin}
  - {id: q2, name: Query1Copy1, page_id: page-A, kind: DB, plugin_id: postgres-plugin}
  - {id: s1, name: Sheet1, page_id: page-B, kind: SAAS, plugin_id: google-sheets-plugin}
"""


def _noop(*args, **kwargs) -> None:  # pylint: disable=unused-argument
    return None


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch: pytest.MonkeyPatch) -> t.Generator[None, None, None]:
    """Forget CLI args between invocations and keep the environment intact"""
    monkeypatch.setattr(DotEnv, "set_as_environment_variables", _noop)
    monkeypatch.setattr(classlogging, "configure_logging", _noop)
    reset_cli_args()
    yield
    reset_cli_args()


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """Snapshot written to a temporary file"""
    path: Path = tmp_path / "actionkit.yml"
    path.write_text(SNAPSHOT_TEXT, encoding="utf-8")
    return path
