"""
WP Update Handler CLI — check a local plugin or theme against its release API.

Usage:
    wp-update-handler check ./wp-content/plugins/my-plugin/my-plugin.php --url https://example.com/api.json
    wp-update-handler release ./wp-content/themes/my-theme --theme --url https://example.com/theme.json
    wp-update-handler clear-cache ./wp-content/plugins/my-plugin/my-plugin.php --cache-db ./transients.db
"""

import json
import logging

import click

from wp_update_handler.core.cache import DEFAULT_CACHE_TTL


def _parse_pairs(pairs, option_name):
    """Turn ``out.path=value`` strings into a dict."""
    result = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected PATH=VALUE, got {pair!r}", param_hint=option_name)
        result[key] = value
    return result


def _configure_logging(verbose):
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _build_checker(path, url, theme, ttl, mappings, overrides, cache_db):
    from wp_update_handler.core.cache import ReleaseCache
    from wp_update_handler.core.checker import PluginUpdateChecker, ThemeUpdateChecker
    from wp_update_handler.core.config import UpdaterConfigBuilder
    from wp_update_handler.models.metadata import PackageMetadata
    from wp_update_handler.stores import get_store

    config = (
        UpdaterConfigBuilder()
        .url(url)
        .cache_ttl(ttl)
        .data_map(_parse_pairs(mappings, "--map"))
        .data_overrides(_parse_pairs(overrides, "--override"))
        .build()
    )
    cache = ReleaseCache(store=get_store(cache_db))

    if theme:
        return ThemeUpdateChecker(PackageMetadata.for_theme(path), config, cache=cache)
    return PluginUpdateChecker(PackageMetadata.for_plugin(path), config, cache=cache)


def checker_options(func):
    """Options shared by every command that talks to the release API."""
    options = [
        click.argument("path", type=click.Path(exists=True)),
        click.option("--url", "-u", required=True, help="Release API URL."),
        click.option("--theme", is_flag=True, help="PATH is a theme directory, not a plugin file."),
        click.option(
            "--ttl",
            type=click.IntRange(min=0),
            default=DEFAULT_CACHE_TTL,
            envvar="WP_UPDATE_HANDLER_TTL",
            show_default=True,
            help="Cache lifetime in seconds.",
        ),
        click.option("--map", "-m", "mappings", multiple=True, help="Field map entry OUTPUT.PATH=REMOTE.PATH."),
        click.option("--override", "-O", "overrides", multiple=True, help="Override entry OUTPUT.PATH=VALUE."),
        click.option(
            "--cache-db",
            type=click.Path(),
            default=None,
            envvar="WP_UPDATE_HANDLER_CACHE_DB",
            help="SQLite file for cached releases (in-memory if omitted).",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(package_name="wp-update-handler")
def cli():
    """WP Update Handler — update checks for self-hosted plugins and themes."""
    pass


@cli.command()
@checker_options
def check(path, url, theme, ttl, mappings, overrides, cache_db, verbose):
    """Check whether a newer release is available."""
    from rich.console import Console
    from rich.table import Table

    _configure_logging(verbose)
    with _build_checker(path, url, theme, ttl, mappings, overrides, cache_db) as checker:
        release = checker.get_release()
        has_update = checker.is_update(release)
    available = release.get("version")

    table = Table(title=f"{checker.variant.value.title()}: {checker.identity}")
    table.add_column("Installed")
    table.add_column("Available")
    table.add_column("Status")

    if not release:
        status = "[yellow]no release info[/yellow]"
    elif has_update:
        status = "[green]update available[/green]"
    else:
        status = "up to date"

    table.add_row(checker.metadata.version() or "-", str(available or "-"), status)
    Console().print(table)


@cli.command()
@checker_options
def release(path, url, theme, ttl, mappings, overrides, cache_db, verbose):
    """Print the normalized release record as JSON."""
    _configure_logging(verbose)
    with _build_checker(path, url, theme, ttl, mappings, overrides, cache_db) as checker:
        release = checker.get_release()
    click.echo(json.dumps(release, indent=2, sort_keys=True))


@cli.command(name="clear-cache")
@click.argument("path", type=click.Path(exists=True))
@click.option("--theme", is_flag=True, help="PATH is a theme directory, not a plugin file.")
@click.option(
    "--cache-db",
    type=click.Path(),
    required=True,
    envvar="WP_UPDATE_HANDLER_CACHE_DB",
    help="SQLite file holding cached releases.",
)
def clear_cache(path, theme, cache_db):
    """Remove the cached release for a plugin or theme."""
    from wp_update_handler.core.cache import (
        PLUGIN_CACHE_PREFIX,
        THEME_CACHE_PREFIX,
        ReleaseCache,
        cache_key,
    )
    from wp_update_handler.models.metadata import PackageMetadata
    from wp_update_handler.stores import get_store

    _configure_logging(False)
    if theme:
        key = cache_key(THEME_CACHE_PREFIX, PackageMetadata.for_theme(path).identity())
    else:
        key = cache_key(PLUGIN_CACHE_PREFIX, PackageMetadata.for_plugin(path).identity())
    cache = ReleaseCache(store=get_store(cache_db))
    try:
        cache.delete(key)
    finally:
        cache.close()
    click.echo(f"Cleared {key}")


if __name__ == "__main__":
    cli()
