"""Tests for dotted version comparison."""

import pytest

from wp_update_handler.core.version import compare_versions, is_version_newer


class TestCompareVersions:
    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("1.9", "1.10", -1),
            ("2.0.0", "1.9.9", 1),
            ("1.0", "1.0", 0),
            ("1.0", "1.0.0", 0),
            ("v1.2.0", "1.2", 0),
            ("1.0-beta", "1.0", -1),
            ("1.0-alpha", "1.0-beta", -1),
            ("1.0.1", "1.0-rc1", 1),
            ("10.0", "9.99", 1),
        ],
    )
    def test_ordering(self, left, right, expected):
        assert compare_versions(left, right) == expected


class TestIsVersionNewer:
    def test_newer(self):
        assert is_version_newer("1.9.9", "2.0.0") is True

    def test_equal(self):
        assert is_version_newer("1.0", "1.0") is False

    def test_older(self):
        assert is_version_newer("2.0", "1.5") is False

    def test_empty_candidate(self):
        assert is_version_newer("1.0", "") is False

    def test_empty_current(self):
        assert is_version_newer("", "0.1") is True
