"""Format adapters: one canonical document, several wire representations.

Each adapter asks its builder for the document, encodes it and returns a
`FormatEnvelope` carrying the payload plus its transport metadata. Decoding
the payload per its content type gives back a structure equal to the
builder's document; no adapter adds, drops or reorders content.
"""
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from .exceptions import SerializationError
from .openapi_builder import SpecBuilder

JSON_CONTENT_TYPE = "application/json"
YAML_CONTENT_TYPE = "application/x-yaml"


@dataclass(frozen=True)
class FormatEnvelope:
    payload: bytes
    content_type: str
    content_disposition: Optional[str] = None

    def headers(self) -> Dict[str, str]:
        headers = {"Content-Type": self.content_type}
        if self.content_disposition:
            headers["Content-Disposition"] = self.content_disposition
        return headers


def attachment(filename: str) -> str:
    return f"attachment; filename={filename}"


class _NoAliasDumper(yaml.SafeDumper):
    """Safe dumper that writes repeated sub-objects out in full."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


class FormatAdapter(ABC):
    content_type = "application/octet-stream"

    def __init__(self, builder: SpecBuilder, download_name: Optional[str] = None):
        self.builder = builder
        self.download_name = download_name

    @abstractmethod
    def serialize(self, document: Dict[str, Any]) -> bytes:
        """Encode the document; raise SerializationError if it cannot be."""

    def serve(self) -> FormatEnvelope:
        # GenerationError from the builder propagates as is
        document = self.builder.build()
        payload = self.serialize(document)
        disposition = attachment(self.download_name) if self.download_name else None
        return FormatEnvelope(payload=payload, content_type=self.content_type, content_disposition=disposition)


class JsonAdapter(FormatAdapter):
    """Compact JSON, key order preserved; byte-identical across calls."""

    content_type = JSON_CONTENT_TYPE

    def serialize(self, document: Dict[str, Any]) -> bytes:
        try:
            text = json.dumps(document, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError("document is not JSON serializable", {"reason": str(exc)}) from exc
        return text.encode("utf-8")


class YamlAdapter(FormatAdapter):
    content_type = YAML_CONTENT_TYPE

    def serialize(self, document: Dict[str, Any]) -> bytes:
        try:
            text = yaml.dump(
                document,
                Dumper=_NoAliasDumper,
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        except yaml.YAMLError as exc:
            raise SerializationError("document is not YAML serializable", {"reason": str(exc)}) from exc
        return text.encode("utf-8")


__all__ = [
    "JSON_CONTENT_TYPE",
    "YAML_CONTENT_TYPE",
    "FormatEnvelope",
    "FormatAdapter",
    "JsonAdapter",
    "YamlAdapter",
    "attachment",
]
