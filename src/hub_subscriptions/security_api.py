# coding: utf-8

from typing import List, Optional

from fastapi import Depends, Request
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBearer,
    SecurityScopes,
)

from hub_subscriptions.http.errors import forbidden, unauthorized
from hub_subscriptions.models.extra_models import TokenModel
from hub_subscriptions.repo.tokens import resolve_token

# Well-known request.state attribute carrying the authenticated caller.
USER_ID_KEY = "user_id"

_SCOPES = {
    "read": "Read own subscriptions",
    "subscribe": "Create or remove own subscriptions",
    "admin": "Administrative access",
}

bearer_auth = HTTPBearer(auto_error=False, description=", ".join(sorted(_SCOPES)))


async def get_token_bearerAuth(
    request: Request,
    security_scopes: SecurityScopes,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_auth),
) -> TokenModel:
    """
    Validate and decode token.

    :param credentials Token provided by Authorization header
    :type credentials: HTTPAuthorizationCredentials
    :return: Decoded token information
    :rtype: TokenModel
    """

    if credentials is None or not credentials.credentials:
        raise unauthorized()

    try:
        actor_id, scopes = await resolve_token(credentials.credentials)
    except ValueError as exc:
        raise unauthorized() from exc

    if not validate_scope_bearerAuth(security_scopes, scopes):
        raise forbidden("Insufficient scope to perform this action.")

    setattr(request.state, USER_ID_KEY, actor_id)
    return TokenModel(sub=actor_id, scopes=scopes)


def validate_scope_bearerAuth(
    required_scopes: SecurityScopes, token_scopes: List[str]
) -> bool:
    """
    Validate required scopes are included in token scope

    :param required_scopes Required scope to access called API
    :type required_scopes: List[str]
    :param token_scopes Scope present in token
    :type token_scopes: List[str]
    :return: True if access to called API is allowed
    :rtype: bool
    """

    if "admin" in token_scopes:
        return True
    return all(scope in token_scopes for scope in required_scopes.scopes)


def get_request_user_id(request: Request) -> Optional[str]:
    return getattr(request.state, USER_ID_KEY, None)
