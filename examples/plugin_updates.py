"""
Example: Wire a plugin's update checks into a hook registry.

Usage:
    python examples/plugin_updates.py path/to/my-plugin/my-plugin.php https://example.com/api/my-plugin.json
"""

import sys
from pathlib import Path

from wp_update_handler.core.cache import ReleaseCache
from wp_update_handler.core.checker import PluginUpdateChecker
from wp_update_handler.core.config import UpdaterConfigBuilder
from wp_update_handler.core.hooks import PLUGINS_TRANSIENT_FILTER, HookRegistry, UpdateTransient, register_hooks
from wp_update_handler.models.metadata import PackageMetadata
from wp_update_handler.stores.sqlite import SQLiteCacheStore


def main(plugin_file: str, url: str):
    # GitHub-style release payloads keep the zip and banner under "assets"
    config = (
        UpdaterConfigBuilder()
        .url(url)
        .data_map({"download_link": "assets.zip", "banners.2x": "assets.banner"})
        .cache_ttl(3600)
        .build()
    )

    checker = PluginUpdateChecker(
        PackageMetadata.for_plugin(plugin_file),
        config,
        cache=ReleaseCache(store=SQLiteCacheStore(db_path=Path("./transients.db"))),
    )

    hooks = HookRegistry()
    register_hooks(checker, hooks)

    with checker:
        transient = hooks.apply_filters(PLUGINS_TRANSIENT_FILTER, UpdateTransient())
    if checker.identity in transient.response:
        print(f"\n✅ Update available: {transient.response[checker.identity]['new_version']}")
    else:
        print(f"\n✔ {checker.identity} is up to date")


if __name__ == "__main__":
    main(sys.argv[1], sys.argv[2])
