"""Helper functions for the endpoint descriptor modules.

These only build plain dict fragments; every call returns fresh objects so
descriptors never share nested state.
"""
from typing import Any, Dict, List, Optional


def session_cookie() -> List[Dict[str, Any]]:
    return [{"sessionCookie": []}]


def ref(kind: str, name: str) -> Dict[str, str]:
    return {"$ref": f"#/components/{kind}/{name}"}


def database_param() -> Dict[str, str]:
    return ref("parameters", "database")


def path_param(name: str, description: Optional[str] = None) -> Dict[str, Any]:
    param: Dict[str, Any] = {"name": name, "in": "path", "required": True, "schema": {"type": "string"}}
    if description:
        param["description"] = description
    return param


def query_param(name: str, description: Optional[str] = None, required: bool = False) -> Dict[str, Any]:
    param: Dict[str, Any] = {"name": name, "in": "query"}
    if required:
        param["required"] = True
    param["schema"] = {"type": "string"}
    if description:
        param["description"] = description
    return param


def json_content(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


def json_body(schema_name: str, required: Optional[bool] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if required is not None:
        body["required"] = required
    body["content"] = json_content(ref("schemas", schema_name))
    return body


def json_response(description: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"description": description, "content": json_content(schema)}


def text_error(description: str) -> Dict[str, Any]:
    """Plain text failure body, the shape most route handlers reply with."""
    return {"description": description, "content": {"text/plain": {"schema": {"type": "string"}}}}


def api_error(description: str) -> Dict[str, Any]:
    return {"description": description, "content": {"text/plain": {"schema": ref("schemas", "APIError")}}}


def unauthorized() -> Dict[str, Any]:
    return {"description": "Unauthorized", "content": {}}


def standard_failures(not_found: Optional[str] = "Not found") -> Dict[str, Any]:
    """400/404/401 responses shared by the database-backed routes."""
    responses: Dict[str, Any] = {"400": text_error("API/Database failures")}
    if not_found:
        responses["404"] = text_error(not_found)
    responses["401"] = unauthorized()
    return responses


def session_user_schema(with_expiry: bool = False) -> Dict[str, Any]:
    props: Dict[str, Any] = {
        "user": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "example": "User Name"},
                "email": {"type": "string", "format": "email", "example": "user@example.com"},
                "image": {"type": "string", "format": "uri", "example": "https://example.com/user.png"},
            },
        }
    }
    if with_expiry:
        props["expires"] = {"type": "string", "format": "date-time", "example": "2024-07-16T19:20:30.45Z"}
    return {"type": "object", "properties": props}


def json_unauthorized() -> Dict[str, Any]:
    return json_response(
        "Unauthorized",
        {"type": "object", "properties": {"error": {"type": "string", "example": "Unauthorized"}}},
    )


__all__ = [
    "session_cookie",
    "ref",
    "database_param",
    "path_param",
    "query_param",
    "json_content",
    "json_body",
    "json_response",
    "text_error",
    "api_error",
    "unauthorized",
    "standard_failures",
    "session_user_schema",
    "json_unauthorized",
]
