"""Multi-factor authentication routes."""
from typing import List

from ..helpers import api_error, database_param, json_body, json_response, ref, session_cookie
from ..sources import EndpointDescriptor
from ._common import V2_DATABASE, endpoint

MFA_PATH = f"{V2_DATABASE}/auth/mfa"


def build_endpoints() -> List[EndpointDescriptor]:
    return [
        endpoint(MFA_PATH, "put", {
            "tags": ["auth"],
            "summary": "Complete an MFA challenge",
            "description": (
                "Validates the second-factor code that was issued during login or MFA setup. "
                "For login challenges, a new session cookie is issued when the supplied code is valid.\n"
            ),
            "operationId": "verifyMfaChallenge",
            "security": session_cookie(),
            "parameters": [database_param()],
            "requestBody": json_body("MfaVerifyRequest", required=True),
            "responses": {
                "200": json_response("MFA challenge was satisfied.", ref("schemas", "MfaVerifyResponse")),
                "400": api_error("Invalid request payload or unsupported challenge."),
                "401": api_error("Provided MFA code was not valid."),
                "404": api_error("MFA challenge was not found."),
                "410": api_error("MFA challenge has expired."),
                "500": api_error("Unexpected server error."),
            },
        }),
        endpoint(MFA_PATH, "delete", {
            "tags": ["auth"],
            "summary": "Disable MFA for the current user",
            "description": (
                "Removes the user's active multi-factor credential. When `requireCode` is set or an email "
                "method is configured, the request must include a valid MFA code (and token for email) "
                "to confirm ownership.\n"
            ),
            "operationId": "disableMfa",
            "security": session_cookie(),
            "parameters": [database_param()],
            "requestBody": json_body("MfaDisableRequest", required=False),
            "responses": {
                "200": json_response("MFA was disabled successfully.", ref("schemas", "MfaDisableResponse")),
                "400": api_error("Invalid request payload or MFA is not enabled."),
                "401": api_error("User is not authenticated or provided code was invalid."),
                "403": api_error("Provided token does not match the current user."),
                "404": api_error("The user or challenge token could not be found."),
                "410": api_error("The provided challenge token has expired."),
                "500": api_error("Unexpected server error."),
            },
        }),
        endpoint(MFA_PATH, "post", {
            "tags": ["auth"],
            "summary": "Initiate MFA setup",
            "description": (
                "Begins the multi-factor enrollment flow for the signed-in user by issuing a setup challenge "
                "and, when applicable, returning authenticator bootstrap data."
            ),
            "operationId": "initiateMfaSetup",
            "security": session_cookie(),
            "parameters": [database_param()],
            "responses": {
                "201": json_response("MFA setup challenge created.", ref("schemas", "MfaSetupResponse")),
                "400": api_error("MFA setup is not enabled for this user or the request cannot be processed."),
                "401": api_error("User is not authenticated."),
                "500": api_error("Unexpected server error."),
            },
        }),
    ]


__all__ = ["MFA_PATH", "build_endpoints"]
