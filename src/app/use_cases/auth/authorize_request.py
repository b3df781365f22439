"""AuthorizeRequest Use Case

Resolves the tenant identity behind a request credential.
"""

import logging
from typing import Optional
from libs.result import Result, Return
from src.app.services.token_service import InvalidTokenError, TokenService
from src.app.use_cases.errors import unauthorized
from .dtos import TenantIdentityDTO

logger = logging.getLogger(__name__)


class AuthorizeRequest:
    """
    Use Case: Verify a credential and resolve the tenant

    Business Rules:
    1. Missing, malformed, expired and forged credentials are all rejected
       with the same UNAUTHORIZED error
    2. The failure reason is logged, never returned
    3. No side effects
    """

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    def execute(self, credential: Optional[str]) -> Result[TenantIdentityDTO]:
        if not credential:
            return Return.err(unauthorized(reason="missing credential"))

        try:
            claims = self.token_service.verify(credential)
        except InvalidTokenError as e:
            logger.warning(f"Credential rejected: {e}")
            return Return.err(unauthorized(reason=str(e)))

        return Return.ok(TenantIdentityDTO(tenant_id=claims.tenant_id, email=claims.email))
