from flask import Blueprint, Response, current_app

from ..formats import FormatEnvelope, JsonAdapter, YamlAdapter
from ..openapi_builder import SpecBuilder
from ..openapi_parts.constants import YAML_DOWNLOAD_NAME

docs_bp = Blueprint('docs', __name__)

SWAGGER_UI_CDN = 'https://cdn.jsdelivr.net/npm/swagger-ui-dist@5'


def _builder(variant: str) -> SpecBuilder:
    return current_app.extensions['openapi'][variant]


def _respond(envelope: FormatEnvelope) -> Response:
    resp = Response(envelope.payload, status=200, content_type=envelope.content_type)
    if envelope.content_disposition:
        resp.headers['Content-Disposition'] = envelope.content_disposition
    return resp


def _swagger_page(spec_url: str) -> str:
    # Swagger UI straight from the CDN; nothing is rendered server side
    return (
        "<!DOCTYPE html><html><head><title>Nile auth API</title>"
        f"<link rel=\"stylesheet\" href=\"{SWAGGER_UI_CDN}/swagger-ui.css\" />"
        "</head><body><div id=\"swagger-ui\"></div>"
        f"<script src=\"{SWAGGER_UI_CDN}/swagger-ui-bundle.js\"></script>"
        f"<script>window.ui = SwaggerUIBundle({{url: '{spec_url}', dom_id: '#swagger-ui'}});</script>"
        "</body></html>"
    )


@docs_bp.get('/swagger/spec')
def swagger_spec():
    return _respond(JsonAdapter(_builder('default')).serve())


@docs_bp.get('/v2/swagger/spec')
def v2_swagger_spec():
    return _respond(JsonAdapter(_builder('v2')).serve())


@docs_bp.get('/v2/openapi')
def v2_openapi():
    """YAML download of the v2 document."""
    return _respond(YamlAdapter(_builder('v2'), download_name=YAML_DOWNLOAD_NAME).serve())


@docs_bp.get('/swagger')
def swagger_ui():
    return _swagger_page('/swagger/spec')


@docs_bp.get('/v2/swagger')
def v2_swagger_ui():
    return _swagger_page('/v2/swagger/spec')
