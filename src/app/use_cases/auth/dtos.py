"""Data Transfer Objects for Authentication Use Cases"""

from pydantic import BaseModel, Field


class RegisterCommandDTO(BaseModel):
    """Command DTO for registering a new tenant account"""

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plain text password (min 6 chars)")


class LoginCommandDTO(BaseModel):
    """Command DTO for logging in"""

    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Plain text password")


class UserDTO(BaseModel):
    """Public view of a user account"""

    id: int = Field(..., description="User (tenant) identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email")


class AuthResponseDTO(BaseModel):
    """
    Response DTO for register and login

    Carries the signed token the client presents on every later request.
    """

    user: UserDTO
    token: str = Field(..., description="Signed bearer token")

    class Config:
        json_schema_extra = {
            "example": {
                "user": {"id": 1, "name": "Jane Doe", "email": "jane@acme.com"},
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
            }
        }


class TenantIdentityDTO(BaseModel):
    """Identity resolved from a verified credential"""

    tenant_id: int = Field(..., description="Tenant (user) identifier")
    email: str = Field(..., description="Tenant login email")
