"""User query handlers."""

from src.application.queries.user_queries import GetUser
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import UserError
from src.domain.protocols.user_repository import UserRepository


class GetUserHandler:
    """Handler for GetUser query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[User, DomainError]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=UserError.USER_NOT_FOUND,
                    resource_type="User",
                    resource_id=str(query.user_id),
                )
            )
        return Success(value=user)
