"""
Release Normalizer — reshapes remote release data for the host.

Builds the record the host's update pipeline expects from three layers,
later layers winning for the same path:

1. Defaults derived from the remote payload and local package metadata
2. The caller's field map (output path -> remote path)
3. The caller's literal overrides (output path -> value)

Convenience aliases (``new_version``, ``package``, ``url``) are derived last,
so they always reflect the final ``version``/``download_link``/``homepage``.
"""

import copy
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from wp_update_handler.core.paths import data_get, data_set
from wp_update_handler.models.metadata import PackageMetadata

logger = logging.getLogger(__name__)


class ReleaseVariant(Enum):
    """Target record shape."""

    PLUGIN = "plugin"
    THEME = "theme"


# Banner sizes named by pixel density, copied onto the host's high/low names
BANNER_ALIASES = {
    "banners.2x": "banners.high",
    "banners.1x": "banners.low",
}


def format_author(author_name: str, author_uri: str) -> str:
    """Link the author name to the author URI when one is known."""
    if author_uri:
        return f'<a href="{author_uri}">{author_name}</a>'
    return author_name


class ReleaseNormalizer:
    """
    Converts a remote release payload into a plugin or theme update record.

    Normalization is a pure function of its inputs: the same remote data,
    metadata, field map and overrides always produce an equal record.
    """

    def __init__(self, variant: ReleaseVariant = ReleaseVariant.PLUGIN):
        self.variant = variant

    def normalize(
        self,
        remote: Mapping[str, Any],
        metadata: PackageMetadata,
        field_map: Mapping[str, str] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Normalize remote release data.

        Args:
            remote: Decoded JSON from the release API.
            metadata: Local package metadata.
            field_map: Output dot-path -> remote dot-path remapping.
            overrides: Output dot-path -> literal value.

        Returns:
            A fresh nested dict in the host's expected shape.
        """
        # Copies keep the record independent of the remote data and overrides
        record = copy.deepcopy(self._defaults(remote, metadata))

        # Map selected fields
        for output_path, remote_path in (field_map or {}).items():
            data_set(record, output_path, copy.deepcopy(data_get(remote, remote_path)))

        # Override selected fields
        for output_path, value in (overrides or {}).items():
            data_set(record, output_path, copy.deepcopy(value))

        record["new_version"] = record.get("version")
        record["package"] = record.get("download_link")
        record["url"] = record.get("homepage")

        if self.variant is ReleaseVariant.PLUGIN:
            for source_path, target_path in BANNER_ALIASES.items():
                if data_get(record, source_path) is not None and data_get(record, target_path) is None:
                    data_set(record, target_path, data_get(record, source_path))

        logger.debug(
            f"[NORMALIZE] {metadata.identity()} ({self.variant.value}): "
            f"version={record.get('version')!r}, "
            f"{len(field_map or {})} mapped, {len(overrides or {})} overridden"
        )
        return record

    def _defaults(self, remote: Mapping[str, Any], metadata: PackageMetadata) -> dict[str, Any]:
        author_name = metadata.author_name()
        author_uri = metadata.author_uri()
        description = data_get(remote, "description", metadata.description())
        identity = metadata.identity()

        record: dict[str, Any] = {
            "author": format_author(author_name, author_uri),
            "author_name": author_name,
            "author_uri": author_uri,
            "description": description,
            "download_link": data_get(remote, "download_link"),
            "homepage": data_get(remote, "homepage", metadata.uri()),
            "name": metadata.name(),
            "requires": data_get(remote, "requires", metadata.requires()),
            "requires_php": data_get(remote, "requires_php", metadata.requires_runtime()),
            "slug": identity,
            "tested": data_get(remote, "tested"),
            "version": data_get(remote, "version"),
        }

        if self.variant is ReleaseVariant.PLUGIN:
            record.update(
                {
                    "id": identity,
                    "last_updated": data_get(remote, "last_updated"),
                    "plugin": identity,
                    "sections": {"description": description},
                    "short_description": description,
                }
            )
        else:
            record["theme"] = identity

        return record
