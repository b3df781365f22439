"""Token Service Interface

Issues and verifies the signed credentials that carry a tenant identity.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class InvalidTokenError(Exception):
    """Raised when a credential is malformed, expired or forged"""


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token"""
    tenant_id: int
    email: str


class TokenService(ABC):
    """Service interface for credential issuance and verification"""

    @abstractmethod
    def issue(self, tenant_id: int, email: str) -> str:
        """
        Issue a signed token for a tenant

        Args:
            tenant_id: Tenant (user) identifier
            email: Tenant login email

        Returns:
            Opaque token string
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry of a token

        Raises:
            InvalidTokenError: For any verification failure
        """
        pass
