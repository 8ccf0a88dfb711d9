"""symcache CLI"""

import sys
from pathlib import Path
from typing import Optional

import click

from symcache import __version__
from symcache.cache.layout import CacheLayout
from symcache.config import (
    get_cache_dir,
    get_cache_limit,
    get_install_command,
    get_link_name,
)
from symcache.constants import DEFAULT_MANIFEST
from symcache.exceptions import SymcacheError
from symcache.install.orchestrator import InstallOrchestrator
from symcache.links.manager import LinkManager
from symcache.model.manifest import read_manifest, resolve_identity

from .debug import add_debug_option
from .utils.logging import logger


cache_dir_option = click.option(
    "-d",
    "--cache-dir",
    envvar="SYMCACHE_DIR",
    default=None,
    help="Overrides where symcache stores installed packages.",
)

_CACHE_OPTIONS = [
    click.option(
        "-p",
        "--package",
        "package_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=DEFAULT_MANIFEST,
        show_default=True,
        help="Where to look for the package.json file.",
    ),
    cache_dir_option,
    click.option(
        "--key",
        default=None,
        help=(
            "Overrides the name used to identify this package (usually taken from "
            "package.json). Characters such as / \\ : become _, so 'a/b' and 'a_b' "
            "share one cache directory."
        ),
    ),
    click.option(
        "--limit",
        type=click.IntRange(min=0),
        default=None,
        help="Sets the number of cache entries to keep for this package.",
    ),
]


def cache_options(f):
    """Options shared by every command that works on one package's cache."""
    for option in reversed(_CACHE_OPTIONS):
        f = option(f)
    return f


command_option = click.option(
    "--command",
    "install_command",
    default=None,
    help="Overrides the install command (default: npm install).",
)


def _orchestrator(
    cache_dir: Optional[str], limit: Optional[int], install_command: Optional[str]
) -> InstallOrchestrator:
    layout = CacheLayout(get_cache_dir(cache_dir))
    link_manager = LinkManager(Path.cwd() / get_link_name())
    return InstallOrchestrator(
        layout,
        link_manager,
        command=get_install_command(install_command),
        limit=get_cache_limit(limit),
        cwd=Path.cwd(),
    )


def _fail(error: Exception):
    logger.error("")
    logger.error(f"Error: {error}")
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="symcache")
@click.pass_context
def cli(ctx):
    """
    Caches installed dependencies per package.json content and links
    node_modules to the matching cache entry.
    """
    ctx.ensure_object(dict)


@cli.command("install")
@cache_options
@command_option
def install(package_file, cache_dir, key, limit, install_command):
    """Installs the packages to the cache or restores the link."""
    try:
        orchestrator = _orchestrator(cache_dir, limit, install_command)
        manifest = read_manifest(package_file)
        identity = resolve_identity(package_file, key, snapshot=manifest)
        orchestrator.install(manifest, identity)
    except (SymcacheError, ValueError) as e:
        _fail(e)
    logger.info("Success - exiting...")


@cli.command("reinstall")
@cache_options
@command_option
def reinstall(package_file, cache_dir, key, limit, install_command):
    """Deletes the current cache entry (if any) and then installs normally."""
    try:
        orchestrator = _orchestrator(cache_dir, limit, install_command)
        manifest = read_manifest(package_file)
        identity = resolve_identity(package_file, key, snapshot=manifest)
        orchestrator.reinstall(manifest, identity)
    except (SymcacheError, ValueError) as e:
        _fail(e)
    logger.info("Success - exiting...")


@cli.command("clean")
@cache_options
def clean(package_file, cache_dir, key, limit):
    """Cleans the cache, only keeping the entries that satisfy the limit."""
    try:
        orchestrator = _orchestrator(cache_dir, limit, None)
        identity = resolve_identity(package_file, key)
        result = orchestrator.clean(identity)
    except (SymcacheError, ValueError) as e:
        _fail(e)

    if not result.ok:
        logger.warning(f"Failed to delete {len(result.failed)} cache entries:")
        for path, error in result.failed:
            logger.warning(f"  {path}: {error}")
        sys.exit(1)
    logger.info("Success - exiting...")


@cli.command("open")
@cache_dir_option
def open_cache(cache_dir):
    """Opens the root cache directory in the file browser."""
    root = get_cache_dir(cache_dir)
    root.mkdir(parents=True, exist_ok=True)
    logger.info(f"Opening {root}")
    click.launch(str(root))


for _command in cli.commands.values():
    add_debug_option(_command)
add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
