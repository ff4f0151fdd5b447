"""Command-line interface entry"""

import functools
import sys
import typing as t
from pathlib import Path

import classlogging
import click
import dotenv

import actionkit
from actionkit.actions.types import ActionRecord, PluginDescriptor
from actionkit.config.constants import C, LOG_LEVELS
from actionkit.config.constants.cli import cliargs_receiver
from actionkit.config.environment import Env
from actionkit.exceptions import BaseError
from actionkit.icons import Icon
from actionkit.loader import Snapshot, SnapshotLoader
from actionkit.naming import UniqueNameGenerator
from actionkit.registry import ACTION_PLUGIN_MAP, ActionGroupConfig, get_action_config

logger = classlogging.get_module_logger()


@click.group
@click.option(
    "-l",
    "--log-level",
    help="Logging level. Defaults to ERROR. Also configurable via the ACTIONKIT_LOG_LEVEL environment variable.",
    type=click.Choice(list(LOG_LEVELS)),
)
@click.option(
    "-f",
    "--file",
    help="Snapshot file with plugins and actions. Defaults to actionkit.yml in the current directory. "
    "Also configurable via the ACTIONKIT_SNAPSHOT_FILE environment variable.",
)
@cliargs_receiver
def main() -> None:
    """Action routing and naming inspector"""


def wrap_cli_command(func):
    """Standard loading and error handling"""

    @main.command
    @functools.wraps(func)
    def wrapped(*args, **kwargs):
        dotenv_path: Path = C.ENV_FILE
        dotenv_loaded: bool = dotenv.load_dotenv(dotenv_path=dotenv_path)
        classlogging.configure_logging(
            level=C.LOG_LEVEL,
            colorize=C.USE_COLOR and not C.LOG_FILE,
            main_file=C.LOG_FILE,
            stream=None if C.LOG_FILE else classlogging.LogStream.STDERR,
        )
        if dotenv_loaded:
            logger.info(f"Loaded environment variables from {dotenv_path}")
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except BaseError as e:
            logger.debug("", exc_info=True)
            sys.stderr.write(f"! {e}\n")
            sys.exit(e.CODE)
        except Exception:
            logger.exception("Unhandled error")
            sys.exit(1)

    return wrapped


def _load_snapshot() -> Snapshot:
    return SnapshotLoader().load(C.SNAPSHOT_FILE)


def _locate(snapshot: Snapshot, action_id: str) -> t.Tuple[ActionRecord, t.Optional[PluginDescriptor]]:
    if (action := snapshot.store.get(action_id)) is None:
        raise click.BadParameter(f"Unknown action: {action_id!r}", param_hint="ACTION_ID")
    return action, snapshot.catalog.for_action(action)


@wrap_cli_command
@click.argument("action_id")
def url(action_id: str) -> None:
    """Show the editor path of an action."""
    action, plugin = _locate(_load_snapshot(), action_id)
    if (group := get_action_config(action.kind)) is None:
        return
    print(group.get_url(action.page_id, action.id, action.kind, plugin))


@wrap_cli_command
@click.argument("action_id")
@click.option("--remote-icon", help="Prefer the plugin icon over the HTTP method badge.", is_flag=True, default=False)
def icon(action_id: str, remote_icon: bool) -> None:
    """Show the icon markup of an action."""
    action, plugin = _locate(_load_snapshot(), action_id)
    group: t.Optional[ActionGroupConfig] = get_action_config(action.kind)
    resolved: t.Optional[Icon] = None if group is None else group.get_icon(action, plugin, remote_icon)
    if resolved is not None:
        print(resolved.render())


@wrap_cli_command
@click.argument("name")
@click.option("-p", "--page", "page_id", help="Destination page id.", required=True)
@click.option("-c", "--copy", "is_copy", help="Name a copy of an existing action.", is_flag=True, default=False)
def name(name: str, page_id: str, is_copy: bool) -> None:  # pylint: disable=redefined-outer-name
    """Suggest a free action name on a page."""
    with UniqueNameGenerator(_load_snapshot().store) as generator:
        print(generator.resolve_name(name, page_id, is_copy=is_copy))


@wrap_cli_command
def check() -> None:
    """Check snapshot validity."""
    snapshot: Snapshot = _load_snapshot()
    logger.info(f"Registry groups number: {len(ACTION_PLUGIN_MAP)}")
    logger.info(f"Located actions number: {len(snapshot.store)}")


@main.group
def info() -> None:
    """Package information."""


@info.command
def version() -> None:
    """Show package version."""
    print(actionkit.__version__)


@info.command
def env_vars() -> None:
    """Show environment variables that are taken into account."""
    print(Env.__doc__)
