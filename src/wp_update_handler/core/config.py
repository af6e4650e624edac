"""
Updater configuration.

An UpdaterConfig is immutable once built. Embedders assemble one with the
fluent UpdaterConfigBuilder, whose setters return the builder so calls chain:

    config = (
        UpdaterConfigBuilder()
        .url("https://example.com/api/my-plugin.json")
        .data_map({"banners.2x": "assets.banner"})
        .cache_ttl(3600)
        .build()
    )

Each ``data_map``/``data_overrides`` call replaces the previous mapping.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wp_update_handler.core.cache import DEFAULT_CACHE_TTL
from wp_update_handler.errors import ConfigurationError, FrozenConfigError


@dataclass(frozen=True)
class UpdaterConfig:
    """Release API URL, cache ttl, field map and overrides."""

    url: str
    cache_ttl: int = DEFAULT_CACHE_TTL
    data_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    data_overrides: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not self.url:
            raise ConfigurationError("A release API URL is required")
        if self.cache_ttl < 0:
            raise ConfigurationError(f"cache_ttl must not be negative, got {self.cache_ttl}")
        # Freeze the mappings so the config cannot change after construction
        object.__setattr__(self, "data_map", MappingProxyType(dict(self.data_map)))
        object.__setattr__(self, "data_overrides", MappingProxyType(_as_json_values(self.data_overrides)))


def _as_json_values(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    Copy overrides in the form a persistent cache will hand them back.

    Tuples become lists and non-string keys become strings, so a record read
    from any cache store equals the freshly normalized one.
    """
    try:
        return json.loads(json.dumps(dict(overrides), allow_nan=False))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"data_overrides must hold JSON-compatible values: {e}") from e


class UpdaterConfigBuilder:
    """Chained setters for UpdaterConfig; unusable after build()."""

    def __init__(self):
        self._url: str | None = None
        self._cache_ttl: int = DEFAULT_CACHE_TTL
        self._data_map: dict[str, str] = {}
        self._data_overrides: dict[str, Any] = {}
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise FrozenConfigError("Configuration has already been built")

    def url(self, url: str) -> "UpdaterConfigBuilder":
        """Set the release API URL."""
        self._check_open()
        self._url = url
        return self

    def cache_ttl(self, seconds: int) -> "UpdaterConfigBuilder":
        """Set how long a fetched release stays cached, in seconds."""
        self._check_open()
        self._cache_ttl = abs(int(seconds))
        return self

    def data_map(self, mapping: Mapping[str, str]) -> "UpdaterConfigBuilder":
        """Set the output-path -> remote-path field map."""
        self._check_open()
        if not isinstance(mapping, Mapping):
            raise ConfigurationError(f"data_map must be a mapping, got {type(mapping).__name__}")
        self._data_map = dict(mapping)
        return self

    def data_overrides(self, overrides: Mapping[str, Any]) -> "UpdaterConfigBuilder":
        """Set output-path -> literal value overrides."""
        self._check_open()
        if not isinstance(overrides, Mapping):
            raise ConfigurationError(f"data_overrides must be a mapping, got {type(overrides).__name__}")
        self._data_overrides = dict(overrides)
        return self

    def build(self) -> UpdaterConfig:
        """Freeze the settings into an UpdaterConfig."""
        self._check_open()
        config = UpdaterConfig(
            url=self._url or "",
            cache_ttl=self._cache_ttl,
            data_map=self._data_map,
            data_overrides=self._data_overrides,
        )
        self._built = True
        return config
