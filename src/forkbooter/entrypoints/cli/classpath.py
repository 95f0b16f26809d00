"""FORKBOOTER classpath CLI: inspect and edit fork properties files.

Every command works on one properties file (``--file``, or the path in
``FORKBOOTER_PROPERTIES``) and one key prefix (``--prefix``, default
``classPathUrl.``). Classpath elements are stored as ``<prefix>0``,
``<prefix>1``, ... exactly as a forked booter reads them.

Behavior
- Classpath output (locators, URLs, the joined string) goes to **stdout**;
  human-oriented notices go to **stderr**.
- Edits rewrite the file atomically.

Failure modes
- No ``--file`` and no ``FORKBOOTER_PROPERTIES`` → ``ClickException`` with guidance.
- Missing or malformed file (for read-only commands) → ``ClickException``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import click_extra as clickx

from forkbooter import config
from forkbooter.adapters.properties import (
    InMemoryPropertyStore,
    PropertiesFile,
    PropertiesFileError,
)
from forkbooter.domain import Classpath, DomainError

from .helpers import success, warn

logger = logging.getLogger(__name__)

MISSING_PROPERTIES_PATH_MSG = (
    "No properties file given and FORKBOOTER_PROPERTIES is not set.\n\n"
    "Pass --file, or set it before running this command, e.g.:\n"
    "  export FORKBOOTER_PROPERTIES='target/booter.properties'\n"
    "  or in PowerShell:\n"
    "  $env:FORKBOOTER_PROPERTIES='target/booter.properties'"
)

FILE_NOT_FOUND_MSG = "Properties file {path} does not exist."
MALFORMED_FILE_MSG = "Properties file {path} is malformed: {reason}"
NEW_FILE_NOTICE = "Properties file {path} does not exist yet; it will be created."


def _properties_file(path: Path | None) -> PropertiesFile:
    if path is None:
        try:
            path = config.get_properties_path()
        except config.PropertiesPathNotSetError as e:
            raise click.ClickException(MISSING_PROPERTIES_PATH_MSG) from e
    return PropertiesFile(path)


def _load(props: PropertiesFile, *, missing_ok: bool = False) -> InMemoryPropertyStore:
    try:
        return props.load()
    except FileNotFoundError as e:
        if not missing_ok:
            raise click.ClickException(FILE_NOT_FOUND_MSG.format(path=props.path)) from e
        warn(NEW_FILE_NOTICE.format(path=props.path))
        return InMemoryPropertyStore()
    except PropertiesFileError as e:
        raise click.ClickException(
            MALFORMED_FILE_MSG.format(path=props.path, reason=e)
        ) from e


def _clear_prefix(store: InMemoryPropertyStore, prefix: str) -> None:
    index = 0
    while f"{prefix}{index}" in store:
        store.remove(f"{prefix}{index}")
        index += 1


file_option = click.option(
    "--file",
    "-f",
    "properties_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Fork properties file (defaults to $FORKBOOTER_PROPERTIES).",
)

prefix_option = click.option(
    "--prefix",
    "-p",
    default=config.DEFAULT_PREFIX,
    show_default=True,
    help="Key prefix the classpath elements are stored under.",
)


@click.group(cls=clickx.ExtraGroup)
def classpath() -> None:
    """Classpath commands for fork properties files."""


@classpath.command()
@file_option
@prefix_option
@click.option(
    "--urls",
    is_flag=True,
    help="Print each element resolved to a URL instead of the raw locator.",
)
def show(properties_path: Path | None, prefix: str, urls: bool) -> None:
    """Print the classpath stored under PREFIX, one element per line."""
    store = _load(_properties_file(properties_path))
    cp = Classpath.read_from_fork_properties(store, prefix)
    logger.info("%s", cp.get_compact_log_message(f"{prefix}*:"))
    try:
        elements = cp.get_as_url_list() if urls else cp.get_class_path()
    except DomainError as e:
        raise click.ClickException(str(e)) from e
    for element in elements:
        click.echo(element)


@classpath.command()
@file_option
@prefix_option
@click.argument("locators", nargs=-1, required=True)
def add(properties_path: Path | None, prefix: str, locators: tuple[str, ...]) -> None:
    """Append LOCATORS to the classpath under PREFIX, skipping duplicates."""
    props = _properties_file(properties_path)
    store = _load(props, missing_ok=True)
    cp = Classpath.read_from_fork_properties(store, prefix)
    before = len(cp)
    for locator in locators:
        cp.add_class_path_element_url(locator)
    cp.write_to_fork_properties(store, prefix)
    props.save(store)
    success(f"Added {len(cp) - before} classpath element(s) under '{prefix}'.")


@classpath.command()
@file_option
@prefix_option
@click.option(
    "--from",
    "sources",
    multiple=True,
    required=True,
    help="Prefix of a classpath to join. Give exactly two, in order.",
)
def join(properties_path: Path | None, prefix: str, sources: tuple[str, ...]) -> None:
    """Join the classpaths of two prefixes and store the result under PREFIX."""
    if len(sources) != 2:
        raise click.UsageError("--from must be given exactly twice.")
    props = _properties_file(properties_path)
    store = _load(props)
    first, second = (
        Classpath.read_from_fork_properties(store, source) for source in sources
    )
    joined = Classpath.join(first, second)
    _clear_prefix(store, prefix)
    joined.write_to_fork_properties(store, prefix)
    props.save(store)
    success(f"Joined {len(joined)} classpath element(s) under '{prefix}'.")


@classpath.command()
@file_option
@prefix_option
@click.option(
    "--property",
    "property_name",
    default=config.DEFAULT_SYSTEM_PROPERTY,
    show_default=True,
    help="Name of the property the string is meant for (used in the log line).",
)
def export(properties_path: Path | None, prefix: str, property_name: str) -> None:
    """Print the classpath as one path-separator joined string."""
    store = _load(_properties_file(properties_path))
    cp = Classpath.read_from_fork_properties(store, prefix)
    sink = InMemoryPropertyStore()
    cp.write_to_system_property(property_name, sink)
    logger.info("%s=%s", property_name, sink.get(property_name))
    click.echo(sink.get(property_name))
