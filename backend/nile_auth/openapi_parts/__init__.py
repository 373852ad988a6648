"""Modular pieces for the programmatic OpenAPI builder.

This package holds the shared components, the endpoint source types and the
per-domain endpoint descriptors the builder consumes.
"""

__all__ = [
    "constants",
    "helpers",
    "sources",
    "registry",
    "domains",
]
