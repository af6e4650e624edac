"""
WP Update Handler - Update notifications for self-hosted plugins and themes.

Fetches a remote JSON release description, normalizes it into the shape the
host's update pipeline expects, and caches the result for a bounded time.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import for the httpx-backed components."""
    if name == "UpdateChecker":
        from wp_update_handler.core.checker import UpdateChecker

        return UpdateChecker
    if name == "PluginUpdateChecker":
        from wp_update_handler.core.checker import PluginUpdateChecker

        return PluginUpdateChecker
    if name == "ThemeUpdateChecker":
        from wp_update_handler.core.checker import ThemeUpdateChecker

        return ThemeUpdateChecker
    if name == "PackageMetadata":
        from wp_update_handler.models.metadata import PackageMetadata

        return PackageMetadata
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "UpdateChecker",
    "PluginUpdateChecker",
    "ThemeUpdateChecker",
    "PackageMetadata",
    "__version__",
]
