"""Pre-v2 routes that are still served and documented."""
from typing import List

from ..sources import EndpointDescriptor
from ._common import LEGACY_DATABASE, endpoint
from .tenants import tenant_user_operations


def build_endpoints() -> List[EndpointDescriptor]:
    users = f"{LEGACY_DATABASE}/tenants/{{tenantId}}/users"
    return [endpoint(users, method, op) for method, op in tenant_user_operations(prefix="legacy").items()]


__all__ = ["build_endpoints"]
