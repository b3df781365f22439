"""LoginUser Use Case

Verifies email and password and issues a signed token.
"""

import asyncio
from libs.result import Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import internal_error, unauthorized, validation_error
from .dtos import AuthResponseDTO, LoginCommandDTO, UserDTO


class LoginUser:
    """
    Use Case: Log a tenant in

    Business Rules:
    1. Unknown email and wrong password fail identically
    2. Token carries tenant_id and email
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, command: LoginCommandDTO) -> Result[AuthResponseDTO]:
        email = command.email.strip().lower()
        if not email or not command.password:
            return Return.err(validation_error("Email and password are required"))

        try:
            user = await self.user_repo.get_by_email(email)
            verified = False
            if user is not None:
                loop = asyncio.get_running_loop()
                verified = await loop.run_in_executor(
                    None, self.password_hasher.verify, command.password, user.password_hash
                )
            if not verified:
                return Return.err(
                    unauthorized(reason="invalid credentials", message="Invalid email or password")
                )

            return Return.ok(
                AuthResponseDTO(
                    user=UserDTO(id=user.id, name=user.name, email=user.email),
                    token=self.token_service.issue(user.id, user.email),
                )
            )

        except Exception as e:
            return Return.err(internal_error("Failed to log in", e))
