"""
Plugin and Theme File Header Parser.

Extracts package metadata from the comment block at the top of a plugin's
main PHP file or a theme's ``style.css`` using regex-based parsing of the
``Key: value`` header format.
"""

import re
from pathlib import Path

# Only the start of the file is scanned for headers
HEADER_READ_BYTES = 8192

# Metadata field -> header label(s), first match wins
PLUGIN_HEADERS = {
    "name": ["Plugin Name"],
    "uri": ["Plugin URI"],
    "version": ["Version"],
    "description": ["Description"],
    "author_name": ["Author"],
    "author_uri": ["Author URI"],
    "requires": ["Requires at least"],
    "requires_runtime": ["Requires PHP"],
    "license": ["License"],
    "license_uri": ["License URI"],
    "text_domain": ["Text Domain"],
    "domain_path": ["Domain Path"],
    "network": ["Network"],
}

THEME_HEADERS = {
    "name": ["Theme Name"],
    "uri": ["Theme URI"],
    "version": ["Version"],
    "description": ["Description"],
    "author_name": ["Author"],
    "author_uri": ["Author URI"],
    "requires": ["Requires at least"],
    "requires_runtime": ["Requires PHP"],
    "license": ["License"],
    "license_uri": ["License URI"],
    "text_domain": ["Text Domain"],
    "domain_path": ["Domain Path"],
}


def parse_headers(content: str, headers: dict[str, list[str]]) -> dict[str, str]:
    """
    Parse file header content and extract package metadata.

    Args:
        content: Raw text from the top of a plugin or theme file.
        headers: Mapping of metadata field names to header labels.

    Returns:
        Dictionary of the fields found. Missing headers are left out.
    """
    result: dict[str, str] = {}
    for field_name, labels in headers.items():
        for label in labels:
            value = _extract_header(content, label)
            if value:
                result[field_name] = value
                break
    return result


def parse_plugin_headers(content: str) -> dict[str, str]:
    """Parse the header block of a plugin's main file."""
    return parse_headers(content, PLUGIN_HEADERS)


def parse_theme_headers(content: str) -> dict[str, str]:
    """Parse the header block of a theme's style.css."""
    return parse_headers(content, THEME_HEADERS)


def read_header_block(path: Path) -> str:
    """Read the part of a file that may contain headers."""
    with open(path, "rb") as f:
        raw = f.read(HEADER_READ_BYTES)
    # Normalize line endings so the multiline regex sees every line
    return raw.decode("utf-8", errors="replace").replace("\r\n", "\n").replace("\r", "\n")


def _extract_header(content: str, label: str) -> str | None:
    """
    Extract a single header line like:
     * Plugin Name: My Plugin

    Comment markers, a leading ``<?php`` and trailing ``*/`` or ``?>`` are stripped.
    """
    pattern = rf"^(?:[ \t]*<\?php)?[ \t/*#@]*{re.escape(label)}:(.*)$"
    match = re.search(pattern, content, re.MULTILINE | re.IGNORECASE)
    if not match:
        return None
    value = re.sub(r"\s*(?:\*/|\?>).*", "", match.group(1)).strip()
    return value or None
