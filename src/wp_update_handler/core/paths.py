"""
Dot-notation access to nested release data.

Paths such as ``"banners.2x"`` or ``"sections.description"`` name a location
inside nested dictionaries. Reads never fail: a missing segment yields the
default. Writes create whatever intermediate dictionaries they need.
"""

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

_MISSING = object()


def _segments(path: str) -> list[str]:
    return [segment for segment in str(path).split(".") if segment != ""]


def _step(container: Any, segment: str) -> Any:
    """Descend one level, returning _MISSING when the segment cannot be followed."""
    if isinstance(container, Mapping):
        return container.get(segment, _MISSING)

    # Lists are indexable by position ("assets.0.url")
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        try:
            return container[int(segment)]
        except (ValueError, IndexError):
            return _MISSING

    return _MISSING


def data_get(container: Any, path: str, default: Any = None) -> Any:
    """
    Read a value from nested data using dot notation.

    Args:
        container: Nested dicts/lists to read from.
        path: Dot-separated key path, e.g. ``"banners.2x"``.
        default: Returned when any segment is missing.

    Returns:
        The value at ``path`` or ``default``.
    """
    current = container
    for segment in _segments(path):
        current = _step(current, segment)
        if current is _MISSING:
            return default
    return current


def data_has(container: Any, path: str) -> bool:
    """Check whether ``path`` exists, even if it holds ``None``."""
    return data_get(container, path, _MISSING) is not _MISSING


def data_set(container: MutableMapping, path: str, value: Any) -> MutableMapping:
    """
    Write a value into nested data using dot notation.

    Intermediate dictionaries are created when missing, and a non-dict value
    found mid-path is replaced by a new dict. The container is mutated in
    place and returned.
    """
    segments = _segments(path)
    if not segments:
        return container

    current = container
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child

    current[segments[-1]] = value
    return container
