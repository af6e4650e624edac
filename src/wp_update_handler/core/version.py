"""
Version comparison helpers.

Dotted versions are compared segment by segment: numeric chunks numerically
(``1.9 < 1.10``), missing trailing segments count as zero (``1.0 == 1.0.0``)
and a textual chunk such as ``beta`` ranks below any number, so
``1.0-beta < 1.0.0 < 1.0.1``.
"""

from __future__ import annotations

import re
from itertools import zip_longest


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as ``left`` is older than, equal to, or newer than ``right``."""
    left_parts = _version_parts(left)
    right_parts = _version_parts(right)
    for a, b in zip_longest(left_parts, right_parts, fillvalue=0):
        if a == b:
            continue
        if isinstance(a, int) and isinstance(b, int):
            return -1 if a < b else 1
        if isinstance(a, int):
            return 1
        if isinstance(b, int):
            return -1
        return -1 if a < b else 1
    return 0


def is_version_newer(current: str, candidate: str) -> bool:
    """Return True if ``candidate`` is strictly newer than ``current``.

    An empty candidate is never newer. An empty current version is older
    than any non-empty candidate.
    """
    if not _version_parts(candidate):
        return False
    return compare_versions(candidate, current) > 0


def _version_parts(version: str | None) -> list[int | str]:
    version = str(version or "").strip()
    if not version:
        return []
    if version[0] in {"v", "V"}:
        version = version[1:]
    parts: list[int | str] = []
    for chunk in re.split(r"[.\-+_]", version):
        if not chunk:
            continue
        # "2rc1" splits further into 2, "rc", 1
        for piece in re.findall(r"\d+|[^\d]+", chunk):
            parts.append(int(piece) if piece.isdigit() else piece.lower())
    return parts
