"""python-jose Token Service Implementation

Issues HS256-signed JWTs carrying the tenant identity.
"""

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from src.app.services.token_service import InvalidTokenError, TokenClaims, TokenService

logger = logging.getLogger(__name__)


class JoseTokenService(TokenService):
    """
    JWT implementation of TokenService

    Claims:
    - sub: tenant id as string
    - tenant_id: tenant id as integer
    - email: login email
    - iat / exp: issue and expiry timestamps
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_days: int = 7):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_days = expire_days

    def issue(self, tenant_id: int, email: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(tenant_id),
            "tenant_id": tenant_id,
            "email": email,
            "iat": now,
            "exp": now + timedelta(days=self.expire_days),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        tenant_id = payload.get("tenant_id")
        if not isinstance(tenant_id, int) or isinstance(tenant_id, bool) or tenant_id <= 0:
            raise InvalidTokenError("token carries no valid tenant_id claim")

        return TokenClaims(tenant_id=tenant_id, email=str(payload.get("email") or ""))
