"""
Package Metadata Model — read-only view of an installed plugin or theme.

Metadata is read once from a host source (file headers, a fixed dict, ...)
and memoized for the life of the object. Every accessor returns a string;
attributes the host does not provide come back as ``""``.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path

from wp_update_handler.errors import MetadataSourceError, ReadOnlyMetadataError
from wp_update_handler.parsers.headers import (
    parse_plugin_headers,
    parse_theme_headers,
    read_header_block,
)

logger = logging.getLogger(__name__)

MetadataSource = Callable[[], Mapping[str, str]]


class MetadataField(Enum):
    """Known package attributes."""

    AUTHOR_NAME = "author_name"
    AUTHOR_URI = "author_uri"
    DESCRIPTION = "description"
    DOMAIN_PATH = "domain_path"
    LICENSE = "license"
    LICENSE_URI = "license_uri"
    NAME = "name"
    NETWORK = "network"  # "true" for network-only plugins
    REQUIRES = "requires"  # minimum host platform version
    REQUIRES_RUNTIME = "requires_runtime"  # minimum PHP version
    SLUG = "slug"
    TEXT_DOMAIN = "text_domain"
    URI = "uri"
    VERSION = "version"


class StaticSource:
    """Metadata source backed by a fixed dictionary."""

    def __init__(self, values: Mapping[str, str]):
        self.values = dict(values)

    def __call__(self) -> Mapping[str, str]:
        return self.values


class HeaderFileSource:
    """Metadata source that parses the header block of a plugin or theme file."""

    def __init__(self, path: Path, parser: Callable[[str], dict[str, str]]):
        self.path = Path(path)
        self.parser = parser

    def __call__(self) -> Mapping[str, str]:
        try:
            content = read_header_block(self.path)
        except OSError as e:
            raise MetadataSourceError(f"Cannot read headers from {self.path}: {e}") from e
        return self.parser(content)


class PackageMetadata:
    """
    Read-only package attributes.

    Each known attribute has its own accessor (``name()``, ``version()``, ...).
    Item access (``metadata["name"]``) is supported for reading; assignment
    and deletion raise ReadOnlyMetadataError.
    """

    __slots__ = ("_slug", "_source", "_values")

    def __init__(self, slug: str, source: MetadataSource | None = None):
        self._slug = str(slug)
        self._source = source
        self._values: dict[str, str] | None = None

    @classmethod
    def for_plugin(cls, file: str | Path) -> "PackageMetadata":
        """Metadata for a plugin, given the absolute path to its main file."""
        path = Path(file)
        return cls(slug=path.parent.name, source=HeaderFileSource(path, parse_plugin_headers))

    @classmethod
    def for_theme(cls, theme_dir: str | Path) -> "PackageMetadata":
        """Metadata for a theme, given its directory (the one holding style.css)."""
        path = Path(theme_dir)
        return cls(slug=path.name, source=HeaderFileSource(path / "style.css", parse_theme_headers))

    # ──────────────────────────────────────────────
    # Loading
    # ──────────────────────────────────────────────

    def _load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values

        values: dict[str, str] = {}
        if self._source is not None:
            try:
                raw = self._source() or {}
                values = {str(k): "" if v is None else str(v) for k, v in raw.items()}
            except (OSError, ValueError) as e:
                logger.warning(f"[METADATA] Source unavailable for {self._slug}: {e}")
        self._values = values
        return values

    # ──────────────────────────────────────────────
    # Accessors
    # ──────────────────────────────────────────────

    def get(self, field: MetadataField | str) -> str:
        """Return a known attribute by enum member or name."""
        field = MetadataField(field)
        return _ACCESSORS[field](self)

    def _header(self, field: MetadataField) -> str:
        return self._load().get(field.value, "")

    def identity(self) -> str:
        """Stable slug used as cache key and output identity field."""
        return self._slug

    def slug(self) -> str:
        return self._slug

    def name(self) -> str:
        return self._header(MetadataField.NAME)

    def version(self) -> str:
        return self._header(MetadataField.VERSION)

    def author_name(self) -> str:
        return self._header(MetadataField.AUTHOR_NAME)

    def author_uri(self) -> str:
        return self._header(MetadataField.AUTHOR_URI)

    def description(self) -> str:
        return self._header(MetadataField.DESCRIPTION)

    def uri(self) -> str:
        return self._header(MetadataField.URI)

    def requires(self) -> str:
        return self._header(MetadataField.REQUIRES)

    def requires_runtime(self) -> str:
        return self._header(MetadataField.REQUIRES_RUNTIME)

    def license(self) -> str:
        return self._header(MetadataField.LICENSE)

    def license_uri(self) -> str:
        return self._header(MetadataField.LICENSE_URI)

    def text_domain(self) -> str:
        return self._header(MetadataField.TEXT_DOMAIN)

    def domain_path(self) -> str:
        return self._header(MetadataField.DOMAIN_PATH)

    def network(self) -> str:
        return self._header(MetadataField.NETWORK)

    def to_map(self) -> dict[str, str]:
        """Snapshot of every attribute, keys sorted."""
        return {field.value: self.get(field) for field in sorted(MetadataField, key=lambda f: f.value)}

    # ──────────────────────────────────────────────
    # Mapping-style access
    # ──────────────────────────────────────────────

    def __getitem__(self, key: str) -> str:
        try:
            return self.get(key)
        except ValueError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in _FIELD_NAMES

    def __setitem__(self, key, value):
        raise ReadOnlyMetadataError("Setting package metadata values is not allowed!")

    def __delitem__(self, key):
        raise ReadOnlyMetadataError("Unsetting package metadata values is not allowed!")

    def __repr__(self) -> str:
        return f"PackageMetadata(slug={self._slug!r})"


_ACCESSORS: dict[MetadataField, Callable[[PackageMetadata], str]] = {
    MetadataField.AUTHOR_NAME: PackageMetadata.author_name,
    MetadataField.AUTHOR_URI: PackageMetadata.author_uri,
    MetadataField.DESCRIPTION: PackageMetadata.description,
    MetadataField.DOMAIN_PATH: PackageMetadata.domain_path,
    MetadataField.LICENSE: PackageMetadata.license,
    MetadataField.LICENSE_URI: PackageMetadata.license_uri,
    MetadataField.NAME: PackageMetadata.name,
    MetadataField.NETWORK: PackageMetadata.network,
    MetadataField.REQUIRES: PackageMetadata.requires,
    MetadataField.REQUIRES_RUNTIME: PackageMetadata.requires_runtime,
    MetadataField.SLUG: PackageMetadata.slug,
    MetadataField.TEXT_DOMAIN: PackageMetadata.text_domain,
    MetadataField.URI: PackageMetadata.uri,
    MetadataField.VERSION: PackageMetadata.version,
}

_FIELD_NAMES = frozenset(field.value for field in MetadataField)
