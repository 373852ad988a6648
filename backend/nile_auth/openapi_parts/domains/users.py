"""Principal, signup and user creation routes."""
from typing import List

from ..helpers import (
    json_body,
    json_response,
    path_param,
    query_param,
    ref,
    session_cookie,
    standard_failures,
    text_error,
    unauthorized,
)
from ..sources import EndpointDescriptor
from ._common import V2_DATABASE, endpoint


def _tenant_choice_params():
    return [
        path_param("database"),
        query_param("tenantId", "A tenant id to add the user to when they are created"),
        query_param("newTenantName", "A tenant name to create, then the user to when they are created"),
    ]


def _me_routes() -> List[EndpointDescriptor]:
    path = f"{V2_DATABASE}/me"
    return [
        endpoint(path, "get", {
            "tags": ["users"],
            "summary": "Identify the principal",
            "description": "Returns information about the principal associated with the session provided",
            "operationId": "me",
            "parameters": [path_param("database")],
            "responses": {
                "200": json_response("Identified user", ref("schemas", "User")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(path, "put", {
            "tags": ["users"],
            "summary": "Update the principal profile",
            "description": "Update the principal associated with the provided session",
            "operationId": "updateMe",
            "parameters": [path_param("database")],
            "requestBody": {
                "required": True,
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string", "example": "Jane Doe"},
                                "familyName": {"type": "string", "example": "Doe"},
                                "givenName": {"type": "string", "example": "Jane"},
                                "picture": {"type": "string", "format": "uri", "example": "https://example.com/avatar.jpg"},
                                "emailVerified": {
                                    "type": "boolean",
                                    "description": "Whether the user's email is verified",
                                },
                            },
                            "required": ["name", "familyName", "givenName"],
                        }
                    }
                },
            },
            "responses": {
                "200": json_response("Identified user", ref("schemas", "User")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(path, "delete", {
            "tags": ["users"],
            "summary": "delete the current user",
            "description": "sets the current user for delete.",
            "operationId": "deleteMe",
            "parameters": [path_param("database")],
            "responses": {
                "204": {"description": "user has been deleted"},
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
    ]


def _signup_routes() -> List[EndpointDescriptor]:
    return [
        endpoint(f"{V2_DATABASE}/signup", "post", {
            "tags": ["databases"],
            "summary": "Creates a user",
            "description": "Creates a user in the database",
            "operationId": "signup",
            "parameters": _tenant_choice_params(),
            "requestBody": json_body("CreateUser"),
            "responses": {
                "201": json_response("User created", ref("schemas", "User")),
                "400": text_error("API/Database failures"),
                "401": unauthorized(),
            },
        }),
        endpoint(f"{V2_DATABASE}/users", "post", {
            "tags": ["users"],
            "summary": "Creates a user",
            "description": "Adds a brand new user to the database",
            "operationId": "createUser",
            "parameters": _tenant_choice_params(),
            "requestBody": json_body("CreateUser"),
            "responses": {
                "201": json_response("User created", ref("schemas", "User")),
                "400": text_error("API/Database failures"),
                "401": unauthorized(),
            },
        }),
    ]


def build_endpoints() -> List[EndpointDescriptor]:
    return _me_routes() + _signup_routes()


__all__ = ["build_endpoints"]
