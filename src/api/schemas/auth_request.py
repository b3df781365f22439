"""Request schemas for Auth API"""

from pydantic import BaseModel, Field


class RegisterRequestSchema(BaseModel):
    """
    Request schema for registering an account

    Used for POST /auth/register endpoint. Format rules are applied by the
    RegisterUser use case so that every failure shares one error envelope.
    """

    name: str = Field(default="", description="Display name (required)")
    email: str = Field(default="", description="Login email (required)")
    password: str = Field(default="", description="Password, at least 6 characters")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@acme.com",
                "password": "s3cret!"
            }
        }


class LoginRequestSchema(BaseModel):
    """Request schema for POST /auth/login"""

    email: str = Field(default="", description="Login email")
    password: str = Field(default="", description="Password")

    class Config:
        json_schema_extra = {
            "example": {"email": "jane@acme.com", "password": "s3cret!"}
        }
