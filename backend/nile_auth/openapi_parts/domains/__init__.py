"""Per-domain endpoint descriptors for the auth service.

Each module exports `build_endpoints()` returning descriptors in the order
they should appear in the published document.
"""

__all__ = [
    "auth",
    "mfa",
    "users",
    "tenants",
    "legacy",
]
