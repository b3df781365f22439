"""Authentication use cases"""
from .register_user import RegisterUser
from .login_user import LoginUser
from .get_current_user import GetCurrentUser
from .authorize_request import AuthorizeRequest
from .dtos import (
    RegisterCommandDTO,
    LoginCommandDTO,
    UserDTO,
    AuthResponseDTO,
    TenantIdentityDTO,
)

__all__ = [
    "RegisterUser",
    "LoginUser",
    "GetCurrentUser",
    "AuthorizeRequest",
    "RegisterCommandDTO",
    "LoginCommandDTO",
    "UserDTO",
    "AuthResponseDTO",
    "TenantIdentityDTO",
]
