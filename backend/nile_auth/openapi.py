"""Public entry points for the published OpenAPI documents.

Keeps a stable import path while the implementation lives in
`openapi_builder.py`. Two document variants exist:

- ``default``: every documented route, served at `/swagger/spec`
- ``v2``: the `/v2/` routes only, served at `/v2/swagger/spec` and `/v2/openapi`
"""
from functools import lru_cache
from typing import Any, Dict, Mapping

from .config.openapi import metadata_kwargs, openapi_config_from_env
from .openapi_builder import DocumentMetadata, SpecBuilder, build_document  # noqa: F401
from .openapi_parts.registry import COMPONENTS, default_source, v2_source

VARIANTS = ("default", "v2")


def make_builders(config: Mapping[str, Any]) -> Dict[str, SpecBuilder]:
    cache = bool(config.get("OPENAPI_CACHE", True))
    return {
        "default": SpecBuilder(
            DocumentMetadata(**metadata_kwargs(config)), default_source(), COMPONENTS, cache=cache
        ),
        "v2": SpecBuilder(
            DocumentMetadata(**metadata_kwargs(config, "V2")), v2_source(), COMPONENTS, cache=cache
        ),
    }


@lru_cache(maxsize=None)
def _env_builders() -> Dict[str, SpecBuilder]:
    return make_builders(openapi_config_from_env())


def get_builder(variant: str = "default") -> SpecBuilder:
    """Process-wide builder configured from the environment."""
    try:
        return _env_builders()[variant]
    except KeyError:
        raise ValueError(f"unknown document variant {variant!r}; expected one of {VARIANTS}") from None


def get_spec() -> Dict[str, Any]:
    return get_builder("default").build()


def get_v2_spec() -> Dict[str, Any]:
    return get_builder("v2").build()


__all__ = [
    "VARIANTS",
    "DocumentMetadata",
    "SpecBuilder",
    "build_document",
    "make_builders",
    "get_builder",
    "get_spec",
    "get_v2_spec",
]
