"""GetCurrentUser Use Case"""

from libs.result import Result, Return
from src.app.repositories.user_repository import UserRepository
from src.app.use_cases.errors import internal_error, not_found
from .dtos import UserDTO


class GetCurrentUser:
    """
    Use Case: Load the account behind a resolved identity

    Returns NOT_FOUND when the account no longer exists.
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, tenant_id: int) -> Result[UserDTO]:
        try:
            user = await self.user_repo.get_by_id(tenant_id)
            if user is None:
                return Return.err(not_found("User"))
            return Return.ok(UserDTO(id=user.id, name=user.name, email=user.email))
        except Exception as e:
            return Return.err(internal_error("Failed to load user", e))
