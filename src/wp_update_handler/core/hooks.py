"""
Host hook wiring.

The host drives update checks through named filters: each filter receives a
value, passes it through every registered callback in priority order, and
uses whatever comes out. An UpdateChecker contributes to two of them:

- ``site_transient_update_plugins`` / ``site_transient_update_themes``:
  the shared update transient, where the release goes into the ``response``
  bucket (update available) or ``no_update`` bucket (up to date).
- ``plugins_api``: a direct "plugin info" query answered with the full
  release record when the requested slug is ours.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from wp_update_handler.core.checker import UpdateChecker
from wp_update_handler.core.normalizer import ReleaseVariant

logger = logging.getLogger(__name__)

PLUGINS_TRANSIENT_FILTER = "site_transient_update_plugins"
THEMES_TRANSIENT_FILTER = "site_transient_update_themes"
PLUGINS_API_FILTER = "plugins_api"

DEFAULT_PRIORITY = 10
PLUGINS_API_PRIORITY = 20


@runtime_checkable
class HookSink(Protocol):
    """Anything that accepts filter registrations."""

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        ...


class HookRegistry:
    """In-process filter registry with priority ordering."""

    def __init__(self):
        self.filters: dict[str, list[tuple[int, int, Callable[..., Any]]]] = defaultdict(list)
        self._counter = 0

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        # The counter keeps registration order stable within one priority
        self._counter += 1
        self.filters[name].append((priority, self._counter, callback))
        self.filters[name].sort(key=lambda entry: (entry[0], entry[1]))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for _priority, _order, callback in self.filters.get(name, []):
            value = callback(value, *args)
        return value


@dataclass
class UpdateTransient:
    """The host's shared update-check response structure."""

    response: dict[str, Any] = field(default_factory=dict)
    no_update: dict[str, Any] = field(default_factory=dict)
    checked: dict[str, str] = field(default_factory=dict)
    last_checked: float = 0.0


@dataclass
class PluginInfoArgs:
    """Arguments of a ``plugins_api`` query."""

    slug: str | None = None


def register_hooks(checker: UpdateChecker, sink: HookSink) -> None:
    """Attach a checker's filters to the host's hook sink."""
    if checker.variant is ReleaseVariant.PLUGIN:
        sink.add_filter(PLUGINS_API_FILTER, _plugin_info_filter(checker), PLUGINS_API_PRIORITY)
        sink.add_filter(PLUGINS_TRANSIENT_FILTER, _transient_filter(checker))
    else:
        sink.add_filter(THEMES_TRANSIENT_FILTER, _transient_filter(checker))
    logger.debug(f"[HOOKS] Registered {checker.variant.value} hooks for {checker.identity}")


def _transient_filter(checker: UpdateChecker) -> Callable[[Any], Any]:
    def filter_transient(transient: Any) -> Any:
        if not transient or not hasattr(transient, "response") or not hasattr(transient, "no_update"):
            return transient

        release = checker.get_release()
        if checker.is_update(release):
            transient.response[checker.identity] = release
        else:
            transient.no_update[checker.identity] = release
        return transient

    return filter_transient


def _plugin_info_filter(checker: UpdateChecker) -> Callable[..., Any]:
    def filter_plugin_info(response: Any, action: str = "", args: Any = None) -> Any:
        slug = getattr(args, "slug", None)
        if slug is not None and slug == checker.identity:
            return checker.get_release()
        return response

    return filter_plugin_info
