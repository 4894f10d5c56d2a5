"""Definition registry query handlers.

Definitions are shared reference data, so reads are not scoped to a user.
"""

from src.application.queries.definition_queries import (
    GetDefinition,
    GetDefinitionByAbbreviation,
    ListDefinitions,
    SearchDefinitions,
)
from src.application.queries.pagination import (
    DEFINITION_DEFAULT_LIMIT,
    clamp_pagination,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.definition import Definition
from src.domain.errors import DefinitionError
from src.domain.protocols.definition_repository import DefinitionRepository


def _not_found(resource_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.DEFINITION_NOT_FOUND,
        message=DefinitionError.DEFINITION_NOT_FOUND,
        resource_type="Definition",
        resource_id=resource_id,
    )


class GetDefinitionHandler:
    """Handler for GetDefinition query."""

    def __init__(self, definition_repo: DefinitionRepository) -> None:
        self._definition_repo = definition_repo

    async def handle(self, query: GetDefinition) -> Result[Definition, DomainError]:
        definition = await self._definition_repo.find_by_id(query.definition_id)
        if definition is None:
            return Failure(error=_not_found(str(query.definition_id)))
        return Success(value=definition)


class GetDefinitionByAbbreviationHandler:
    """Handler for GetDefinitionByAbbreviation query (case-insensitive)."""

    def __init__(self, definition_repo: DefinitionRepository) -> None:
        self._definition_repo = definition_repo

    async def handle(
        self, query: GetDefinitionByAbbreviation
    ) -> Result[Definition, DomainError]:
        abbreviation = query.abbreviation.strip()
        definition = await self._definition_repo.find_by_abbreviation(abbreviation)
        if definition is None:
            return Failure(error=_not_found(abbreviation))
        return Success(value=definition)


class ListDefinitionsHandler:
    """Handler for ListDefinitions query."""

    def __init__(self, definition_repo: DefinitionRepository) -> None:
        self._definition_repo = definition_repo

    async def handle(
        self, query: ListDefinitions
    ) -> Result[list[Definition], DomainError]:
        page = clamp_pagination(
            query.limit, query.offset, default=DEFINITION_DEFAULT_LIMIT
        )
        return Success(
            value=await self._definition_repo.find_all(page.limit, page.offset)
        )


class SearchDefinitionsHandler:
    """Handler for SearchDefinitions query.

    Ranking is done by the repository: exact abbreviation, abbreviation
    prefix, exact name, name prefix, then anything containing the term.
    """

    def __init__(self, definition_repo: DefinitionRepository) -> None:
        self._definition_repo = definition_repo

    async def handle(
        self, query: SearchDefinitions
    ) -> Result[list[Definition], DomainError]:
        term = query.term.strip() if query.term else ""
        if not term:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.SEARCH_TERM_REQUIRED,
                    message=DefinitionError.SEARCH_TERM_REQUIRED,
                    field="q",
                )
            )
        page = clamp_pagination(
            query.limit, query.offset, default=DEFINITION_DEFAULT_LIMIT
        )
        results = await self._definition_repo.search(term, page.limit, page.offset)
        return Success(value=results)
