"""
Update Checker — cache -> fetch -> normalize -> store.

Answers the two questions the host asks on its update schedule: "what is the
latest release?" and "is it newer than what is installed?". Remote failures
never propagate; they degrade to an empty record and leave the cache empty so
the next call fetches again.
"""

import logging
from typing import Any

from wp_update_handler.core.cache import (
    PLUGIN_CACHE_PREFIX,
    THEME_CACHE_PREFIX,
    ReleaseCache,
    cache_key,
)
from wp_update_handler.core.config import UpdaterConfig
from wp_update_handler.core.fetcher import ReleaseFetcher
from wp_update_handler.core.normalizer import ReleaseNormalizer, ReleaseVariant
from wp_update_handler.core.version import is_version_newer
from wp_update_handler.models.metadata import PackageMetadata

logger = logging.getLogger(__name__)


CACHE_PREFIXES = {
    ReleaseVariant.PLUGIN: PLUGIN_CACHE_PREFIX,
    ReleaseVariant.THEME: THEME_CACHE_PREFIX,
}


class UpdateChecker:
    """
    Checks a remote release API for updates to one installed package.

    Collaborators are injected: the metadata source, the cache (and through it
    the backing store), and the fetcher (and through it the HTTP client).
    """

    def __init__(
        self,
        metadata: PackageMetadata,
        config: UpdaterConfig,
        variant: ReleaseVariant = ReleaseVariant.PLUGIN,
        cache: ReleaseCache | None = None,
        fetcher: ReleaseFetcher | None = None,
    ):
        self.metadata = metadata
        self.config = config
        self.variant = variant
        self.cache = cache or ReleaseCache()
        self.fetcher = fetcher or ReleaseFetcher()
        self.normalizer = ReleaseNormalizer(variant)

    @property
    def identity(self) -> str:
        return self.metadata.identity()

    @property
    def cache_key(self) -> str:
        return cache_key(CACHE_PREFIXES[self.variant], self.identity)

    def get_release(self) -> dict[str, Any]:
        """
        Fetch details on the latest release.

        Returns:
            The normalized release record, or an empty dict when the release
            API could not be reached or returned unusable data.
        """
        key = self.cache_key
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        result = self.fetcher.fetch(self.config.url)
        if not result.ok:
            logger.warning(
                f"[FETCH] No release info for {self.identity}: {result.error.value}"
                + (f" ({result.detail})" if result.detail else "")
            )
            return {}

        release = self.normalizer.normalize(
            result.data,
            self.metadata,
            self.config.data_map,
            self.config.data_overrides,
        )
        self.cache.set(key, release, self.config.cache_ttl)
        logger.info(f"[CHECK] Fetched release {release.get('version')!r} for {self.identity}")
        return release

    def has_update(self) -> bool:
        """Check if the latest release is newer than the installed version."""
        return self.is_update(self.get_release())

    def is_update(self, release: dict[str, Any]) -> bool:
        """Check if an already fetched release is newer than the installed version."""
        version = release.get("version")
        if version is None or version == "":
            return False
        return is_version_newer(self.metadata.version(), str(version))

    def clear_cache(self) -> None:
        """Drop the cached release so the next call fetches again."""
        self.cache.delete(self.cache_key)

    def close(self) -> None:
        """Close the HTTP client and the cache store."""
        self.fetcher.close()
        self.cache.close()

    def __enter__(self) -> "UpdateChecker":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class PluginUpdateChecker(UpdateChecker):
    """UpdateChecker producing plugin-shaped records."""

    def __init__(self, metadata: PackageMetadata, config: UpdaterConfig, **kwargs):
        super().__init__(metadata, config, variant=ReleaseVariant.PLUGIN, **kwargs)


class ThemeUpdateChecker(UpdateChecker):
    """UpdateChecker producing theme-shaped records."""

    def __init__(self, metadata: PackageMetadata, config: UpdaterConfig, **kwargs):
        super().__init__(metadata, config, variant=ReleaseVariant.THEME, **kwargs)
