"""Tests for the read-only PackageMetadata model."""

import pytest

from wp_update_handler.errors import MetadataSourceError, ReadOnlyMetadataError
from wp_update_handler.models.metadata import (
    MetadataField,
    PackageMetadata,
    StaticSource,
)


@pytest.fixture
def metadata():
    return PackageMetadata(
        slug="acme-widgets",
        source=StaticSource(
            {
                "name": "Acme Widgets",
                "version": "1.4.2",
                "author_name": "Acme Inc",
                "author_uri": "https://acme.test",
                "description": "Adds widgets.",
                "uri": "https://acme.test/widgets",
                "requires": "6.0",
                "requires_runtime": "7.4",
            }
        ),
    )


class CountingSource:
    def __init__(self, values):
        self.values = values
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.values


# ═══════════════════════════════════════════
# Accessors
# ═══════════════════════════════════════════


class TestAccessors:
    def test_named_accessors(self, metadata):
        assert metadata.name() == "Acme Widgets"
        assert metadata.version() == "1.4.2"
        assert metadata.author_name() == "Acme Inc"
        assert metadata.author_uri() == "https://acme.test"
        assert metadata.description() == "Adds widgets."
        assert metadata.uri() == "https://acme.test/widgets"
        assert metadata.requires() == "6.0"
        assert metadata.requires_runtime() == "7.4"

    def test_identity_is_slug(self, metadata):
        assert metadata.identity() == "acme-widgets"
        assert metadata.slug() == "acme-widgets"

    def test_get_by_enum_and_name(self, metadata):
        assert metadata.get(MetadataField.VERSION) == "1.4.2"
        assert metadata.get("requires_runtime") == "7.4"

    def test_get_unknown_field_raises(self, metadata):
        with pytest.raises(ValueError):
            metadata.get("license")

    def test_missing_attribute_is_empty_string(self):
        meta = PackageMetadata("bare", StaticSource({"name": "Bare"}))
        assert meta.author_uri() == ""
        assert meta.version() == ""

    def test_none_value_is_empty_string(self):
        meta = PackageMetadata("bare", StaticSource({"version": None}))
        assert meta.version() == ""

    def test_no_source(self):
        meta = PackageMetadata("orphan")
        assert meta.name() == ""
        assert meta.identity() == "orphan"


class TestMemoization:
    def test_source_read_once(self):
        source = CountingSource({"name": "Once"})
        meta = PackageMetadata("once", source)
        assert meta.name() == "Once"
        assert meta.version() == ""
        meta.to_map()
        assert source.calls == 1

    def test_source_not_read_until_needed(self):
        source = CountingSource({})
        meta = PackageMetadata("lazy", source)
        assert meta.identity() == "lazy"
        assert source.calls == 0


class TestUnavailableSource:
    def test_failing_source_returns_empty_strings(self):
        def broken():
            raise MetadataSourceError("host offline")

        meta = PackageMetadata("broken", broken)
        assert meta.name() == ""
        assert meta.to_map()["slug"] == "broken"

    def test_missing_plugin_file(self, tmp_path):
        meta = PackageMetadata.for_plugin(tmp_path / "gone" / "gone.php")
        assert meta.identity() == "gone"
        assert meta.version() == ""


# ═══════════════════════════════════════════
# Snapshot & Mapping Access
# ═══════════════════════════════════════════


class TestToMap:
    def test_keys_sorted(self, metadata):
        keys = list(metadata.to_map().keys())
        assert keys == sorted(keys)

    def test_contains_all_fields(self, metadata):
        snapshot = metadata.to_map()
        assert set(snapshot) == {field.value for field in MetadataField}
        assert snapshot["slug"] == "acme-widgets"
        assert all(isinstance(value, str) for value in snapshot.values())


class TestReadOnly:
    def test_item_read(self, metadata):
        assert metadata["name"] == "Acme Widgets"

    def test_item_read_unknown_raises_key_error(self, metadata):
        with pytest.raises(KeyError):
            metadata["license"]

    def test_contains(self, metadata):
        assert "version" in metadata
        assert "license" not in metadata

    def test_setting_raises(self, metadata):
        with pytest.raises(ReadOnlyMetadataError):
            metadata["version"] = "9.9"

    def test_deleting_raises(self, metadata):
        with pytest.raises(ReadOnlyMetadataError):
            del metadata["version"]


# ═══════════════════════════════════════════
# Host File Constructors
# ═══════════════════════════════════════════


class TestFromFiles:
    def test_for_plugin(self, tmp_path):
        plugin_dir = tmp_path / "acme-widgets"
        plugin_dir.mkdir()
        main_file = plugin_dir / "acme-widgets.php"
        main_file.write_text("<?php\n/**\n * Plugin Name: Acme Widgets\n * Version: 1.0.0\n */\n")

        meta = PackageMetadata.for_plugin(main_file)
        assert meta.identity() == "acme-widgets"
        assert meta.name() == "Acme Widgets"
        assert meta.version() == "1.0.0"

    def test_for_theme(self, tmp_path):
        theme_dir = tmp_path / "acme-dark"
        theme_dir.mkdir()
        (theme_dir / "style.css").write_text("/*\nTheme Name: Acme Dark\nVersion: 2.1\n*/\n")

        meta = PackageMetadata.for_theme(theme_dir)
        assert meta.identity() == "acme-dark"
        assert meta.name() == "Acme Dark"
        assert meta.version() == "2.1"

    def test_extended_plugin_headers(self, tmp_path):
        plugin_dir = tmp_path / "acme-network"
        plugin_dir.mkdir()
        main_file = plugin_dir / "acme-network.php"
        main_file.write_text(
            "<?php\n/**\n * Plugin Name: Acme Network\n * License: GPL-2.0-or-later\n"
            " * Text Domain: acme-network\n * Domain Path: /languages\n * Network: true\n */\n"
        )

        meta = PackageMetadata.for_plugin(main_file)
        assert meta.license() == "GPL-2.0-or-later"
        assert meta.license_uri() == ""
        assert meta.text_domain() == "acme-network"
        assert meta.domain_path() == "/languages"
        assert meta.network() == "true"
        assert meta["license"] == "GPL-2.0-or-later"
