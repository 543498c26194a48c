"""
Catalog scraper package.

This package bundles the document source, the rule-driven extraction
pipeline and the site providers that turn catalog pages into records.
"""

__all__ = [
    "document",
    "errors",
    "m3u8",
    "models",
    "parser",
    "pipeline",
    "providers",
    "scripts",
    "settings",
]
