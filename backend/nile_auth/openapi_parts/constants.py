"""Centralized constants for the OpenAPI builder.

`COMPONENTS` is the shared component block every published document carries;
descriptor modules refer into it with `$ref`. Tests depend on deterministic
ordering and content.
"""
from typing import Any, Dict, FrozenSet, List

OPENAPI_VERSION = "3.0.0"

DEFAULT_TITLE = "Nile auth API"
DEFAULT_VERSION = "0.1"

YAML_DOWNLOAD_NAME = "nile-auth.yaml"

HTTP_METHODS: FrozenSet[str] = frozenset({"get", "put", "post", "delete", "options", "head", "patch", "trace"})

# Mirrors the errorCode values the auth service can reply with.
API_ERROR_CODES: List[str] = [
    "internal_error",
    "bad_request",
    "unsupported_operation",
    "entity_not_found",
    "duplicate_entity",
    "invalid_credentials",
    "unknown_oidc_provider",
    "unknown_oidc_party",
    "provider_already_exists",
    "provider_config_error",
    "provider_mismatch",
    "provider_update_error",
    "provider_disabled",
    "session_state_missing",
    "session_state_mismatch",
    "oidc_code_missing",
    "tenant_not_found",
    "constraint_violation",
    "sql_exception",
    "db_creation_failure",
    "db_status_failure",
    "db_initialization_failure",
    "db_config_missing",
    "unauthorized_workspace_access",
    "email_send_failure",
    "jdbc_exception",
    "oidc_exception",
    "region_mismatch",
    "credential_creation_failure",
    "credential_propagation_failure",
]

MFA_METHODS: List[str] = ["authenticator", "email"]
MFA_SCOPES: List[str] = ["challenge", "setup"]


def _string(**extra: Any) -> Dict[str, Any]:
    return {"type": "string", **extra}


def _profile_properties() -> Dict[str, Any]:
    return {
        "name": _string(),
        "givenName": _string(),
        "familyName": _string(),
        "picture": _string(),
    }


COMPONENTS: Dict[str, Any] = {
    "securitySchemes": {
        "sessionCookie": {
            "type": "apiKey",
            "in": "cookie",
            "name": "nile-auth.session-token",
            "description": "Session token stored in a cookie after user signs in, prefixed with __Secure if on https",
        },
    },
    "parameters": {
        "database": {
            "name": "database",
            "in": "path",
            "required": True,
            "schema": _string(),
            "description": "The string (id or name, depending on the credentials)",
        },
        "provider": {
            "name": "provider",
            "in": "path",
            "required": True,
            "schema": _string(),
            "description": "the name of the provider (credentials, google, etc)",
        },
    },
    "schemas": {
        "PasswordTokenPayload": {
            "type": "object",
            "required": ["callbackURL", "email"],
            "properties": {"callbackURL": _string(), "email": _string(), "redirectURL": _string()},
        },
        "ResetPassword": {
            "type": "object",
            "required": ["email", "password"],
            "properties": {"email": _string(), "password": _string()},
        },
        "CreateUser": {
            "required": ["email", "password"],
            "type": "object",
            "properties": {"email": _string(), "password": _string(), **_profile_properties()},
        },
        "LinkUser": {"type": "object", "required": ["id"], "properties": {"id": _string()}},
        "UpdateUser": {"type": "object", "properties": _profile_properties()},
        "CreateTenantRequest": {
            "required": ["name"],
            "type": "object",
            "properties": {"name": _string(), "id": _string(description="The desired uuidv7 of the tenant")},
        },
        "Tenant": {"required": ["id"], "type": "object", "properties": {"id": _string(), "name": _string()}},
        "UpdateTenant": {"type": "object", "properties": {"name": _string()}},
        "User": {
            "type": "object",
            "properties": {
                "id": _string(),
                "tenants": {"uniqueItems": True, "type": "array", "items": _string()},
                "email": _string(),
                **_profile_properties(),
                "emailVerified": _string(format="date-time"),
                "created": _string(format="date-time"),
                "updated": _string(format="date-time"),
            },
        },
        "TenantUser": {
            "type": "object",
            "properties": {
                "id": _string(),
                "email": _string(),
                **_profile_properties(),
                "created": _string(format="date-time"),
                "emailVerified": _string(format="date-time"),
                "updated": _string(format="date-time"),
            },
        },
        "APIError": {
            "required": ["errorCode", "message", "statusCode"],
            "type": "object",
            "properties": {
                "errorCode": _string(enum=list(API_ERROR_CODES)),
                "message": _string(),
                "statusCode": {"type": "integer", "format": "int32"},
            },
        },
        "MfaVerifyRequest": {
            "type": "object",
            "required": ["token", "code"],
            "properties": {
                "token": _string(description="Challenge token issued when the challenge was created"),
                "scope": _string(enum=list(MFA_SCOPES)),
                "method": _string(enum=list(MFA_METHODS)),
                "code": _string(description="One-time passcode or recovery code"),
            },
        },
        "MfaVerifyResponse": {
            "type": "object",
            "required": ["ok", "scope"],
            "properties": {
                "ok": {"type": "boolean"},
                "scope": _string(enum=list(MFA_SCOPES)),
                "recoveryCodesRemaining": {"type": "integer"},
            },
        },
        "MfaDisableRequest": {
            "type": "object",
            "properties": {
                "token": _string(),
                "scope": _string(enum=list(MFA_SCOPES)),
                "method": _string(enum=list(MFA_METHODS)),
                "code": _string(),
                "requireCode": {"type": "boolean"},
            },
        },
        "MfaDisableResponse": {
            "type": "object",
            "required": ["ok", "method"],
            "properties": {
                "ok": {"type": "boolean"},
                "method": _string(enum=list(MFA_METHODS)),
                "recoveryCodesRemaining": {"type": "integer"},
            },
        },
        "MfaSetupResponse": {
            "type": "object",
            "required": ["token", "expiresAt", "scope", "method"],
            "properties": {
                "token": _string(),
                "expiresAt": _string(format="date-time"),
                "scope": _string(enum=list(MFA_SCOPES)),
                "method": _string(enum=list(MFA_METHODS)),
                "secret": _string(description="Authenticator secret, only for authenticator setup"),
                "otpauthUrl": _string(format="uri"),
                "maskedEmail": _string(),
                "recoveryKeys": {"type": "array", "items": _string()},
            },
        },
    },
}

__all__ = [
    "OPENAPI_VERSION",
    "DEFAULT_TITLE",
    "DEFAULT_VERSION",
    "YAML_DOWNLOAD_NAME",
    "HTTP_METHODS",
    "API_ERROR_CODES",
    "MFA_METHODS",
    "MFA_SCOPES",
    "COMPONENTS",
]
