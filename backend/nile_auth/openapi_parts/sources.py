"""Endpoint descriptor providers consumed by the OpenAPI builder.

A source is anything exposing ``endpoints()`` that yields
``EndpointDescriptor(path, method, operation)`` items. The builder does not
care where they come from, so sources compose freely.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Protocol


@dataclass(frozen=True)
class EndpointDescriptor:
    path: str
    method: str
    operation: Mapping[str, Any]


class EndpointSource(Protocol):
    def endpoints(self) -> Iterable[EndpointDescriptor]:
        ...


class StaticEndpointSource:
    """A fixed list of descriptors, yielded in the order given."""

    def __init__(self, descriptors: Iterable[EndpointDescriptor]):
        self._descriptors: List[EndpointDescriptor] = list(descriptors)

    def endpoints(self) -> Iterator[EndpointDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


class CompositeEndpointSource:
    def __init__(self, *sources: EndpointSource):
        self._sources = sources

    def endpoints(self) -> Iterator[EndpointDescriptor]:
        for source in self._sources:
            yield from source.endpoints()


class PrefixEndpointSource:
    """Only the descriptors whose path starts with ``prefix``."""

    def __init__(self, source: EndpointSource, prefix: str):
        self._source = source
        self.prefix = prefix

    def endpoints(self) -> Iterator[EndpointDescriptor]:
        for desc in self._source.endpoints():
            if isinstance(desc, EndpointDescriptor) and not desc.path.startswith(self.prefix):
                continue
            # malformed items pass through so the builder can reject them
            yield desc


__all__ = [
    "EndpointDescriptor",
    "EndpointSource",
    "StaticEndpointSource",
    "CompositeEndpointSource",
    "PrefixEndpointSource",
]
