"""Deterministic OpenAPI document builder.

`build_document` turns document metadata plus an endpoint source into the
canonical OpenAPI 3.0.0 document (a plain dict). It is a pure function of its
inputs: descriptors are copied, never mutated, and paths keep the order the
source yields them in.

Anything that would make the document wrong rather than merely incomplete
raises `GenerationError`:
- missing/blank title or version
- items that are not `EndpointDescriptor`, bad paths or methods
- operations without `responses`, duplicate (path, method) pairs
- duplicate operationIds, no endpoints at all
- local `$ref`s that do not resolve inside the document
- non-string mapping keys or values other than dict, list, str, number,
  bool and None (they would not survive a JSON or YAML round trip)

`SpecBuilder` wraps it with a process-lifetime cache. This is the canonical
builder module; `nile_auth/openapi.py` re-exports from here.
"""
import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional

from .exceptions import GenerationError
from .openapi_parts.constants import COMPONENTS, HTTP_METHODS, OPENAPI_VERSION
from .openapi_parts.sources import EndpointDescriptor, EndpointSource

__all__ = ["DocumentMetadata", "SpecBuilder", "build_document"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentMetadata:
    title: str
    version: str
    description: Optional[str] = None


def _info(metadata: DocumentMetadata) -> Dict[str, Any]:
    for field in ("title", "version"):
        value = getattr(metadata, field, None)
        if not isinstance(value, str) or not value.strip():
            raise GenerationError(f"document {field} is required", {"field": field, "value": value})
    info = {"title": metadata.title, "version": metadata.version}
    if metadata.description:
        info["description"] = metadata.description
    return info


def _operation_id(method: str, path: str) -> str:
    rid = path.strip("/").replace("/", "_").replace("{", "").replace("}", "")
    return f"auto_{method}_{rid}"


def _collect_paths(source: EndpointSource) -> Dict[str, Dict[str, Any]]:
    try:
        descriptors = list(source.endpoints())
    except (AttributeError, TypeError) as exc:
        raise GenerationError("endpoint source is malformed", {"source": type(source).__name__}) from exc

    paths: Dict[str, Dict[str, Any]] = {}
    operation_ids: Dict[str, str] = {}
    for desc in descriptors:
        if not isinstance(desc, EndpointDescriptor):
            raise GenerationError("endpoint source yielded a non-descriptor", {"item": repr(desc)})
        path, method, operation = desc.path, desc.method, desc.operation
        if not isinstance(path, str) or not path.startswith("/"):
            raise GenerationError("endpoint path must start with '/'", {"path": path})
        if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
            raise GenerationError("unknown HTTP method", {"path": path, "method": method})
        method = method.lower()
        where = f"{method.upper()} {path}"
        if not isinstance(operation, Mapping):
            raise GenerationError(f"{where}: operation must be a mapping", {"path": path, "method": method})
        responses = operation.get("responses")
        if not isinstance(responses, Mapping) or not responses:
            raise GenerationError(f"{where}: operation documents no responses", {"path": path, "method": method})
        if method in paths.get(path, {}):
            raise GenerationError(f"{where} is documented twice", {"path": path, "method": method})

        op = copy.deepcopy(dict(operation))
        op.setdefault("operationId", _operation_id(method, path))
        op_id = op["operationId"]
        if op_id in operation_ids:
            raise GenerationError(
                f"operationId {op_id!r} is used by {operation_ids[op_id]} and {where}",
                {"operationId": op_id},
            )
        operation_ids[op_id] = where
        paths.setdefault(path, {})[method] = op

    if not paths:
        raise GenerationError("endpoint source documented no endpoints")
    return paths


def _tags(paths: Mapping[str, Mapping[str, Any]]):
    names = sorted({tag for ops in paths.values() for op in ops.values() for tag in op.get("tags", [])})
    return [{"name": name, "description": f"{name} endpoints"} for name in names]


def _iter_refs(node: Any) -> Iterator[str]:
    if isinstance(node, Mapping):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield value
            else:
                yield from _iter_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from _iter_refs(item)


def _resolves(document: Mapping[str, Any], pointer: str) -> bool:
    node: Any = document
    for part in pointer[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, Mapping) or part not in node:
            return False
        node = node[part]
    return True


_JSON_SCALARS = (str, int, float, bool, type(None))


def _check_plain(node: Any, where: str = "#") -> None:
    """Only dict/list/str/number/bool/None with string keys may appear.

    Anything else would not survive a JSON or YAML round trip unchanged.
    """
    if isinstance(node, dict):
        for key, value in node.items():
            if not isinstance(key, str):
                raise GenerationError(f"{where}: mapping key {key!r} is not a string", {"key": repr(key)})
            _check_plain(value, f"{where}/{key}")
    elif isinstance(node, list):
        for index, item in enumerate(node):
            _check_plain(item, f"{where}/{index}")
    elif not isinstance(node, _JSON_SCALARS):
        raise GenerationError(f"{where}: {type(node).__name__} is not a JSON value", {"type": type(node).__name__})


def _check_refs(document: Mapping[str, Any]) -> None:
    for target in _iter_refs(document["paths"]):
        if not target.startswith("#/") or not _resolves(document, target):
            raise GenerationError(f"unresolved reference {target}", {"ref": target})


def build_document(
    metadata: DocumentMetadata,
    source: EndpointSource,
    components: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    info = _info(metadata)
    paths = _collect_paths(source)
    if components is None:
        components = COMPONENTS
    if not isinstance(components, Mapping):
        raise GenerationError("components must be a mapping")

    document: Dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": info,
        "paths": paths,
        "components": copy.deepcopy(dict(components)),
        "tags": _tags(paths),
    }
    _check_plain(document)
    _check_refs(document)
    logger.info("Built OpenAPI document %r %s with %d paths", info["title"], info["version"], len(paths))
    return document


class SpecBuilder:
    """Builds one document variant and hands out copies of it.

    With ``cache`` on, the document is assembled on first use and kept for the
    life of the builder. There is no lock: concurrent first calls may each
    assemble it, the results are equal and the last assignment wins.
    """

    def __init__(
        self,
        metadata: DocumentMetadata,
        source: EndpointSource,
        components: Optional[Mapping[str, Any]] = None,
        cache: bool = True,
    ):
        self.metadata = metadata
        self.source = source
        self.components = components
        self.cache = cache
        self._document: Optional[Dict[str, Any]] = None

    def build(self) -> Dict[str, Any]:
        document = self._document
        if document is None:
            document = build_document(self.metadata, self.source, self.components)
            if self.cache:
                self._document = document
        # callers get their own copy so the cached document stays untouched
        return copy.deepcopy(document)

    def clear_cache(self) -> None:
        self._document = None

    def __repr__(self) -> str:
        return f"SpecBuilder({self.metadata.title!r}, {self.metadata.version!r}, cache={self.cache})"
