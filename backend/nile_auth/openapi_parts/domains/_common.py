"""Common pieces for the per-domain endpoint descriptor modules."""
from typing import Any, Dict

from ..sources import EndpointDescriptor

V2_DATABASE = "/v2/databases/{database}"
LEGACY_DATABASE = "/databases/{database}"


def endpoint(path: str, method: str, operation: Dict[str, Any]) -> EndpointDescriptor:
    return EndpointDescriptor(path=path, method=method, operation=operation)


__all__ = ["V2_DATABASE", "LEGACY_DATABASE", "endpoint"]
