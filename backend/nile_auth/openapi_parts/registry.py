"""Endpoint sources for the published documents.

`default_source()` covers every documented route (legacy and v2);
`v2_source()` narrows it to the `/v2/` surface.
"""
from .constants import COMPONENTS
from .domains import auth, legacy, mfa, tenants, users
from .sources import CompositeEndpointSource, PrefixEndpointSource, StaticEndpointSource

V2_PREFIX = "/v2/"

# order here is the order paths appear in the document
DOMAIN_MODULES = (auth, mfa, users, tenants, legacy)


def default_source() -> CompositeEndpointSource:
    return CompositeEndpointSource(*(StaticEndpointSource(mod.build_endpoints()) for mod in DOMAIN_MODULES))


def v2_source() -> PrefixEndpointSource:
    return PrefixEndpointSource(default_source(), V2_PREFIX)


__all__ = ["COMPONENTS", "V2_PREFIX", "DOMAIN_MODULES", "default_source", "v2_source"]
