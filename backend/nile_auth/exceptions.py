"""Exceptions raised while producing the published API documents.

DocumentError
├── GenerationError     the canonical document could not be assembled
└── SerializationError  the document could not be encoded for the wire

Both surface as a plain 500 from the HTTP layer. `context` is meant for logs
only and is never returned to clients.
"""
from typing import Any, Dict, Optional


class DocumentError(Exception):
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class GenerationError(DocumentError):
    """Builder inputs are malformed or the document misses required fields."""


class SerializationError(DocumentError):
    """A well-formed document failed to encode in the requested format."""


__all__ = ["DocumentError", "GenerationError", "SerializationError"]
