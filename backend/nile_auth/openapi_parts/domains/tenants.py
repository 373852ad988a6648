"""Tenant, tenant membership and invite routes."""
from typing import Any, Dict, List

from ..helpers import (
    json_body,
    json_response,
    path_param,
    ref,
    session_cookie,
    standard_failures,
    text_error,
    unauthorized,
)
from ..sources import EndpointDescriptor
from ._common import V2_DATABASE, endpoint

TENANTS = f"{V2_DATABASE}/tenants"
TENANT = f"{TENANTS}/{{tenantId}}"


def _tenant_params():
    return [path_param("database"), path_param("tenantId")]


def _member_params():
    return [path_param("database"), path_param("tenantId"), path_param("userId")]


def tenant_user_operations(prefix: str = "") -> Dict[str, Dict[str, Any]]:
    """GET/POST operations on `.../tenants/{tenantId}/users`.

    ``prefix`` is prepended (lowerCamel) to the operation ids so the same
    operations can be mounted under more than one base path.
    """
    def op_id(name: str) -> str:
        return f"{prefix}{name[0].upper()}{name[1:]}" if prefix else name

    return {
        "get": {
            "tags": ["users"],
            "summary": "a list of tenant users",
            "description": "Returns a list of tenant users from the database",
            "operationId": op_id("listTenantUsers"),
            "parameters": _tenant_params(),
            "responses": {
                "200": json_response("The users of the tenant", {"type": "array", "items": ref("schemas", "TenantUser")}),
                **standard_failures(),
            },
            "security": session_cookie(),
        },
        "post": {
            "tags": ["users"],
            "summary": "create a new user and assigns them to a tenant",
            "description": "Creates a brand new user on a tenant",
            "operationId": op_id("createTenantUser"),
            "parameters": _tenant_params(),
            "requestBody": json_body("CreateUser"),
            "responses": {
                "201": json_response("update an existing tenant wih a new user", ref("schemas", "TenantUser")),
                **standard_failures(),
            },
            "security": session_cookie(),
        },
    }


def _invite_schema() -> Dict[str, Any]:
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "format": "uuid"},
                "tenant_id": {"type": "string", "format": "uuid"},
                "token": {"type": "string", "description": "Hashed invite token"},
                "identifier": {"type": "string", "format": "email"},
                "roles": {"type": "array", "items": {"type": "string"}, "nullable": True},
                "created_by": {"type": "string", "format": "uuid", "description": "ID of the user who sent the invite"},
                "expires": {"type": "string", "format": "date-time"},
            },
        },
    }


def _invite_list_operation(operation_id: str) -> Dict[str, Any]:
    return {
        "tags": ["tenants"],
        "summary": "List pending invites for a tenant",
        "description": "Returns all pending invites for a given tenant, accessible by authenticated members of the tenant.",
        "operationId": operation_id,
        "parameters": _tenant_params(),
        "responses": {
            "200": {
                "description": "List of pending invites",
                "content": {
                    "application/json": {
                        "schema": _invite_schema(),
                        "example": [
                            {
                                "id": "bd371f92-03e1-4862-9f6b-6d96d392ff18",
                                "tenant_id": "019731dc-2462-7615-8dc3-c9fd85e61966",
                                "token": "0007afb8bf432f8729491e1af35f03d111eb9a8105c0e9c3eebd8ca31585aed3",
                                "identifier": "joseph@thenile.dev",
                                "roles": None,
                                "created_by": "019731dc-2440-7fd2-88b6-b233cc0e2695",
                                "expires": "2025-06-02T22:16:40.535Z",
                            }
                        ],
                    }
                },
            },
            "400": text_error("Bad request (e.g. missing tenantId or SQL failure)"),
            "401": unauthorized(),
            "404": text_error("No invites found"),
            "500": text_error("Internal server error"),
        },
        "security": session_cookie(),
    }


def _form(required: List[str], properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "required": True,
        "content": {
            "multipart/form-data": {"schema": {"type": "object", "required": required, "properties": properties}}
        },
    }


def _tenant_routes() -> List[EndpointDescriptor]:
    return [
        endpoint(TENANTS, "post", {
            "tags": ["tenants"],
            "summary": "creates a tenant",
            "description": "makes a tenant, assigns user to that tenant",
            "operationId": "createTenant",
            "parameters": [path_param("database")],
            "requestBody": {
                "description": "A wrapper for the tenant name.",
                "content": {
                    "application/json": {
                        "schema": ref("schemas", "CreateTenantRequest"),
                        "examples": {
                            "Create Tenant Request": {
                                "summary": "Creates a named tenant",
                                "description": "Create Tenant Request",
                                "value": {"name": "My Sandbox"},
                            }
                        },
                    }
                },
            },
            "responses": {
                "201": json_response("A created tenants", ref("schemas", "Tenant")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(TENANT, "get", {
            "tags": ["tenants"],
            "summary": "get a tenant",
            "description": "get information about a tenant",
            "operationId": "getTenant",
            "parameters": _tenant_params(),
            "responses": {
                "200": json_response("the tenant", ref("schemas", "Tenant")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(TENANT, "put", {
            "tags": ["tenants"],
            "summary": "update a tenant",
            "description": "updates a tenant in the database",
            "operationId": "updateTenant",
            "parameters": _tenant_params(),
            "requestBody": json_body("UpdateTenant"),
            "responses": {
                "201": json_response("update an existing tenant", ref("schemas", "Tenant")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(TENANT, "delete", {
            "tags": ["tenants"],
            "summary": "delete a tenant",
            "description": "sets a tenant for delete in the database",
            "operationId": "deleteTenant",
            "parameters": _tenant_params(),
            "responses": {
                "204": {"description": "the tenant has been marked for delete"},
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
    ]


def _member_routes() -> List[EndpointDescriptor]:
    users = f"{TENANT}/users"
    member = f"{users}/{{userId}}"
    descriptors = [endpoint(users, method, op) for method, op in tenant_user_operations().items()]
    descriptors += [
        endpoint(member, "put", {
            "tags": ["users"],
            "summary": "update a user",
            "description": "Updates a user, provided the authorized user is in the same tenant as that user",
            "operationId": "updateTenantUser",
            "parameters": _member_params(),
            "requestBody": json_body("UpdateUser"),
            "responses": {
                "200": json_response("Identified user", ref("schemas", "TenantUser")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(f"{member}/link", "put", {
            "tags": ["users"],
            "summary": "links an existing user to a tenant",
            "description": "A user that already exists is added to a tenant",
            "operationId": "linkTenantUser",
            "parameters": _member_params(),
            "responses": {
                "201": json_response("update an existing tenant", ref("schemas", "TenantUser")),
                **standard_failures(),
            },
            "security": session_cookie(),
        }),
        endpoint(f"{member}/link", "delete", {
            "tags": ["users"],
            "summary": "Unlinks a user from a tenant",
            "description": (
                "Marks a user to be deleted from the tenant. It does not remove the user from other "
                "tenants or invalidate active sessions."
            ),
            "operationId": "deleteTenantUser",
            "parameters": _member_params(),
            "responses": {
                "204": {"description": "The user was deleted"},
                "404": text_error("Not found"),
                "401": unauthorized(),
            },
            "security": session_cookie(),
        }),
    ]
    return descriptors


def _invite_routes() -> List[EndpointDescriptor]:
    invite = f"{TENANT}/invite"
    return [
        endpoint(f"{TENANT}/invites", "get", _invite_list_operation("listTenantInvites")),
        endpoint(invite, "get", _invite_list_operation("listTenantInvite")),
        endpoint(invite, "post", {
            "tags": ["tenants"],
            "summary": "Invite a user to a tenant",
            "description": (
                "Allows an authenticated tenant member to invite another user via email. "
                "The invitee will receive an email and must accept the invitation."
            ),
            "operationId": "inviteUserToTenant",
            "parameters": _tenant_params(),
            "requestBody": _form(["identifier", "csrfToken", "redirectUrl", "callbackUrl"], {
                "identifier": {"type": "string", "format": "email", "description": "Email address of the user being invited"},
                "csrfToken": {"type": "string", "description": "CSRF token for request validation"},
                "redirectUrl": {
                    "type": "string",
                    "format": "uri",
                    "description": "URL to redirect the user to after accepting the invite",
                },
                "callbackUrl": {
                    "type": "string",
                    "format": "uri",
                    "description": "Callback URL to include in the invitation email",
                },
            }),
            "responses": {
                "200": json_response("Invite sent successfully", {
                    "type": "object",
                    "properties": {
                        "status": {"type": "string", "example": "success"},
                        "message": {"type": "string", "example": "Invite email sent"},
                    },
                }),
                "400": text_error("Bad request (validation failure, missing fields, or bad CSRF token)"),
                "401": text_error("Unauthorized (missing or invalid session)"),
                "404": text_error("Tenant not found"),
                "500": text_error("Internal server error"),
            },
            "security": session_cookie(),
        }),
        endpoint(invite, "put", {
            "tags": ["tenants"],
            "summary": "Accepts a tenant invite",
            "description": (
                "Accepts an invite for a user to join a tenant using the token and email. "
                "The invite must be valid and not expired."
            ),
            "operationId": "acceptTenantInvite",
            "parameters": _tenant_params(),
            "requestBody": _form(["identifier", "token", "callbackUrl"], {
                "identifier": {"type": "string", "format": "email"},
                "token": {"type": "string"},
                "callbackUrl": {"type": "string", "format": "uri"},
            }),
            "responses": {
                "201": json_response("Successfully created the user and accepted the invite", {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string", "format": "uuid"},
                        "email": {"type": "string"},
                        "name": {"type": "string", "nullable": True},
                        "familyName": {"type": "string", "nullable": True},
                        "givenName": {"type": "string", "nullable": True},
                        "picture": {"type": "string", "format": "uri", "nullable": True},
                        "created": {"type": "string", "format": "date-time"},
                        "updated": {"type": "string", "format": "date-time"},
                        "emailVerified": {"type": "string", "format": "date-time"},
                    },
                }),
                "400": text_error("Missing or invalid data (e.g., invalid token, malformed email, bad callback URL)"),
                "401": unauthorized(),
                "403": text_error("Inviter is no longer a member of the tenant"),
                "404": text_error("Invite not found"),
                "410": text_error("Invite has expired"),
                "500": text_error("Internal server error"),
            },
            "security": session_cookie(),
        }),
    ]


def build_endpoints() -> List[EndpointDescriptor]:
    return _tenant_routes() + _member_routes() + _invite_routes()


__all__ = ["TENANTS", "TENANT", "tenant_user_operations", "build_endpoints"]
