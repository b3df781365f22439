"""Auth API Routes

Registration, login and identity of the calling tenant.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import get_current_tenant
from src.api.error import ClientError, error_example
from src.api.schemas.auth_request import LoginRequestSchema, RegisterRequestSchema
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.use_cases.auth import (
    AuthResponseDTO,
    GetCurrentUser,
    LoginCommandDTO,
    LoginUser,
    RegisterCommandDTO,
    RegisterUser,
    TenantIdentityDTO,
    UserDTO,
)
from src.depends import get_password_hasher, get_session, get_token_service

router = APIRouter(prefix="/auth", tags=["Auth"])


def _set_token_cookie(response: Response, token: str):
    response.set_cookie(
        key=ApplicationConfig.TOKEN_COOKIE_NAME,
        value=token,
        max_age=int(ApplicationConfig.TOKEN_EXPIRE_DAYS) * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=ApplicationConfig.ENVIRONMENT == "production",
    )


@router.post(
    "/register",
    response_model=AuthResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: error_example("VALIDATION_ERROR", "Invalid email format", "Invalid registration data"),
        409: error_example("CONFLICT", "User with this email already exists", "Email already registered"),
    },
)
async def register(
    request: RegisterRequestSchema,
    response: Response,
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Register a new account. The account is the tenant owning all data
    created with its token.

    **Request body:**
    - `name` (required)
    - `email` (required, unique)
    - `password` (required, at least 6 characters)

    **Returns:**
    - 201: `{user, token}`, token also set as httponly cookie
    - 400: Missing field, short password or malformed email
    - 409: Email already registered
    """
    use_case = RegisterUser(
        uow=SqlAlchemyUnitOfWork(session),
        user_repo=SqlAlchemyUserRepository(session),
        password_hasher=password_hasher,
        token_service=token_service,
    )
    result = await use_case.execute(RegisterCommandDTO(**request.model_dump()))

    if result.is_err():
        raise ClientError(result.error)

    _set_token_cookie(response, result.value.token)
    return result.value


@router.post(
    "/login",
    response_model=AuthResponseDTO,
    responses={
        401: error_example("UNAUTHORIZED", "Invalid email or password", "Bad credentials"),
    },
)
async def login(
    request: LoginRequestSchema,
    response: Response,
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
):
    """
    Exchange email and password for a token.

    Unknown email and wrong password fail identically.
    """
    use_case = LoginUser(
        user_repo=SqlAlchemyUserRepository(session),
        password_hasher=password_hasher,
        token_service=token_service,
    )
    result = await use_case.execute(LoginCommandDTO(**request.model_dump()))

    if result.is_err():
        raise ClientError(result.error)

    _set_token_cookie(response, result.value.token)
    return result.value


@router.get(
    "/me",
    response_model=UserDTO,
    responses={401: error_example("UNAUTHORIZED", "Unauthorized", "Missing or invalid token")},
)
async def me(
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
    session: AsyncSession = Depends(get_session),
):
    """Return the account behind the presented token"""
    result = await GetCurrentUser(SqlAlchemyUserRepository(session)).execute(tenant.tenant_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/logout",
    responses={401: error_example("UNAUTHORIZED", "Unauthorized", "Missing or invalid token")},
)
async def logout(
    response: Response,
    tenant: TenantIdentityDTO = Depends(get_current_tenant),
):
    """Clear the token cookie. Tokens are stateless, bearer clients simply drop theirs."""
    response.delete_cookie(ApplicationConfig.TOKEN_COOKIE_NAME, httponly=True, samesite="lax")
    return {"message": "Logged out successfully"}
