"""Request authentication dependency

Every tenant-scoped route depends on get_current_tenant. The tenant id
comes from the verified token only, never from the request body or query.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from config import ApplicationConfig
from src.app.services.token_service import TokenService
from src.app.use_cases.auth import AuthorizeRequest, TenantIdentityDTO
from src.api.error import ClientError
from src.depends import get_token_service

bearer_scheme = HTTPBearer(auto_error=False)


def extract_credential(
    request: Request,
    authorization: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Bearer header first, then the token cookie"""
    if authorization and authorization.credentials:
        return authorization.credentials
    return request.cookies.get(ApplicationConfig.TOKEN_COOKIE_NAME)


async def get_current_tenant(
    request: Request,
    authorization: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> TenantIdentityDTO:
    result = AuthorizeRequest(token_service).execute(extract_credential(request, authorization))
    if result.is_err():
        raise ClientError(result.error)

    identity = result.value
    request.state.tenant_id = identity.tenant_id
    return identity
