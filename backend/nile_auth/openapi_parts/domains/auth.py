"""Session, provider, password reset and email verification routes."""
from typing import List

from ..helpers import (
    database_param,
    json_body,
    json_response,
    json_unauthorized,
    path_param,
    query_param,
    ref,
    session_user_schema,
    text_error,
    unauthorized,
)
from ..sources import EndpointDescriptor
from ._common import V2_DATABASE, endpoint

AUTH = f"{V2_DATABASE}/auth"


def _session_routes() -> List[EndpointDescriptor]:
    return [
        endpoint(f"{AUTH}/signin", "post", {
            "tags": ["auth"],
            "summary": "Sign in to the application",
            "description": "Authenticates a user and creates a session.",
            "parameters": [database_param()],
            "requestBody": {
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "properties": {
                                "email": {"type": "string", "format": "email", "example": "user@example.com"},
                                "password": {"type": "string", "format": "password", "example": "yourpassword"},
                            },
                            "required": ["email", "password"],
                        }
                    }
                }
            },
            "responses": {
                "200": json_response("Successful authentication", session_user_schema()),
                "401": json_unauthorized(),
            },
        }),
        endpoint(f"{AUTH}/signout", "post", {
            "tags": ["auth"],
            "summary": "Sign out of the application",
            "description": "Ends the user session.",
            "parameters": [database_param()],
            "responses": {
                "200": json_response(
                    "Successful sign out",
                    {"type": "object", "properties": {"message": {"type": "string", "example": "Signed out"}}},
                ),
            },
        }),
        endpoint(f"{AUTH}/session", "get", {
            "tags": ["auth"],
            "summary": "Get the current session",
            "description": "Returns the session object if the user is authenticated.",
            "parameters": [database_param()],
            "responses": {
                "200": json_response("The current session", session_user_schema(with_expiry=True)),
                "401": json_unauthorized(),
            },
        }),
        endpoint(f"{AUTH}/csrf", "get", {
            "tags": ["auth"],
            "summary": "Get CSRF token",
            "description": "Returns a CSRF token to be used in subsequent requests.",
            "parameters": [database_param()],
            "responses": {
                "200": json_response(
                    "CSRF token",
                    {"type": "object", "properties": {"csrfToken": {"type": "string", "example": "abc123"}}},
                ),
            },
        }),
        endpoint(f"{AUTH}/providers", "get", {
            "tags": ["auth"],
            "summary": "Get available providers",
            "description": "Returns a list of available authentication providers.",
            "parameters": [database_param()],
            "responses": {
                "200": json_response("List of providers", {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "id": {"type": "string", "example": "github"},
                            "name": {"type": "string", "example": "GitHub"},
                            "type": {"type": "string", "example": "oauth"},
                        },
                    },
                }),
            },
        }),
        endpoint(f"{AUTH}/callback/{{provider}}", "post", {
            "tags": ["auth"],
            "summary": "Handle provider callback",
            "description": "Handles the callback from an authentication provider.",
            "parameters": [database_param(), ref("parameters", "provider")],
            "responses": {
                "200": json_response("Successful callback", session_user_schema()),
                "401": json_unauthorized(),
            },
        }),
        endpoint(f"{AUTH}/session/token", "post", {
            "tags": ["auth"],
            "summary": "Refresh session token",
            "description": "Refreshes the session token to extend the session duration.",
            "parameters": [database_param()],
            "responses": {
                "200": json_response("Session token refreshed", session_user_schema(with_expiry=True)),
                "401": json_unauthorized(),
            },
        }),
    ]


def _token_query_params():
    return [
        path_param("database"),
        query_param("token", required=True),
        query_param("identifier", required=True),
        query_param("callbackURL", required=True),
    ]


def _reset_password_routes() -> List[EndpointDescriptor]:
    path = f"{AUTH}/reset-password"
    return [
        endpoint(path, "post", {
            "tags": ["auth"],
            "summary": "Reset password",
            "description": "Sends an email for a user to reset their password",
            "operationId": "generatePasswordToken",
            "parameters": [path_param("database")],
            "requestBody": json_body("PasswordTokenPayload"),
            "responses": {
                "200": {"description": "Nothing happened"},
                "201": {"description": "Token created and email sent to user"},
                "400": text_error("API/Database failures"),
                "404": text_error("Missing csrf"),
                "401": unauthorized(),
            },
        }),
        endpoint(path, "get", {
            "tags": ["auth"],
            "summary": "Retrieve password token",
            "description": "Responds to a link (probably in an email) by setting a cookie that allows for a password to be reset",
            "operationId": "validatePasswordToken",
            "parameters": _token_query_params(),
            "responses": {
                "200": {"description": "Token has been sent to the client via cookie, if possible"},
                "400": text_error("API/Database failures"),
                "404": text_error("Unable to find the verification token"),
                "401": unauthorized(),
            },
        }),
        endpoint(path, "put", {
            "tags": ["auth"],
            "summary": "Resets the password",
            "description": "Based on a cookie, allows a user to reset their password",
            "operationId": "resetPassword",
            "parameters": [path_param("database")],
            "requestBody": json_body("ResetPassword"),
            "responses": {
                "200": {"description": "Token has been sent to the client via cookie, if possible"},
                "400": text_error("API/Database failures"),
                "404": text_error("Unable to find the verification token"),
                "401": unauthorized(),
            },
        }),
    ]


def _verify_email_routes() -> List[EndpointDescriptor]:
    return [
        endpoint(f"{AUTH}/verify-email", "get", {
            "tags": ["auth"],
            "summary": "Takes in an email verification token and ensures it is valid",
            "operationId": "verifyEmail",
            "parameters": _token_query_params(),
            "responses": {
                "200": {"description": "Token has been sent to the client via cookie, if possible"},
                "400": text_error("API/Database failures"),
                "404": text_error("Unable to find the verification token"),
                "401": unauthorized(),
            },
        }),
    ]


def build_endpoints() -> List[EndpointDescriptor]:
    return _session_routes() + _reset_password_routes() + _verify_email_routes()


__all__ = ["build_endpoints"]
