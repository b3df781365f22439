"""RegisterUser Use Case

Creates a tenant account and returns a signed token for it.
"""

import asyncio
import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import conflict, internal_error, validation_error
from src.domain.user import User
from src.domain.validation import MIN_PASSWORD_LENGTH, is_valid_email
from .dtos import AuthResponseDTO, RegisterCommandDTO, UserDTO

logger = logging.getLogger(__name__)


class RegisterUser:
    """
    Use Case: Register a new tenant

    Business Rules:
    1. name, email and password are required
    2. password has at least 6 characters
    3. email is unique (case-insensitive)
    4. Only the bcrypt hash of the password is stored

    Flow:
    1. Validate input
    2. Reject already registered email
    3. Hash password and create user
    4. Commit transaction
    5. Issue token
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, command: RegisterCommandDTO) -> Result[AuthResponseDTO]:
        name = command.name.strip()
        email = command.email.strip().lower()

        if not name or not email or not command.password:
            return Return.err(validation_error("Name, email, and password are required"))

        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                validation_error(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                    field="password",
                )
            )

        if not is_valid_email(email):
            return Return.err(validation_error("Invalid email format", field="email"))

        try:
            existing = await self.user_repo.get_by_email(email)
            if existing:
                return Return.err(conflict("User with this email already exists"))

            # bcrypt is CPU bound, keep it off the event loop
            loop = asyncio.get_running_loop()
            password_hash = await loop.run_in_executor(None, self.password_hasher.hash, command.password)

            user = User(name=name, email=email, password_hash=password_hash)
            created = await self.user_repo.create(user)
            await self.uow.commit()

            logger.info(f"Registered tenant {created.id}")

            return Return.ok(
                AuthResponseDTO(
                    user=UserDTO(id=created.id, name=created.name, email=created.email),
                    token=self.token_service.issue(created.id, created.email),
                )
            )

        except IntegrityError as e:
            # Lost a race against a concurrent registration of the same email
            await self.uow.rollback()
            return Return.err(conflict("User with this email already exists", reason=str(e)))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(internal_error("Failed to create account", e))
