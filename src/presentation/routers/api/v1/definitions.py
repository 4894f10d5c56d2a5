"""Definitions resource handlers.

Definitions are a global registry of unit descriptors (name,
abbreviation, suffix) shared by every user's assets.

Handlers:
    create_definition             - Register a definition
    list_definitions              - Paginated listing
    search_definitions            - Ranked search by abbreviation or name
    get_definition_by_abbreviation
    get_definition
    update_definition
    delete_definition             - Refused while assets reference it
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.definition_commands import (
    CreateDefinition,
    DeleteDefinition,
    UpdateDefinition,
)
from src.application.commands.handlers.definition_handlers import (
    CreateDefinitionHandler,
    DeleteDefinitionHandler,
    UpdateDefinitionHandler,
)
from src.application.queries.definition_queries import (
    GetDefinition,
    GetDefinitionByAbbreviation,
    ListDefinitions,
    SearchDefinitions,
)
from src.application.queries.handlers.definition_handlers import (
    GetDefinitionByAbbreviationHandler,
    GetDefinitionHandler,
    ListDefinitionsHandler,
    SearchDefinitionsHandler,
)
from src.core.container import handler_factory
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.query_params import parse_int
from src.schemas.definition_schemas import (
    DefinitionListResponse,
    DefinitionRequest,
    DefinitionResponse,
)


async def create_definition(
    request: Request,
    data: DefinitionRequest,
    handler: CreateDefinitionHandler = Depends(
        handler_factory(CreateDefinitionHandler)
    ),
) -> DefinitionResponse | JSONResponse:
    """POST /api/v1/definitions → 201 Created"""
    command = CreateDefinition(
        name=data.name, abbreviation=data.abbreviation, suffix=data.suffix
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=definition):
            return DefinitionResponse.from_entity(definition)


async def list_definitions(
    request: Request,
    limit: Annotated[str | None, Query(description="Page size (max 100)")] = None,
    offset: Annotated[str | None, Query(description="Rows to skip")] = None,
    handler: ListDefinitionsHandler = Depends(handler_factory(ListDefinitionsHandler)),
) -> DefinitionListResponse | JSONResponse:
    """GET /api/v1/definitions → 200 OK"""
    query = ListDefinitions(limit=parse_int(limit), offset=parse_int(offset))
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=definitions):
            return DefinitionListResponse.from_entities(definitions)


async def search_definitions(
    request: Request,
    q: Annotated[str, Query(description="Abbreviation or name fragment")] = "",
    limit: Annotated[str | None, Query()] = None,
    offset: Annotated[str | None, Query()] = None,
    handler: SearchDefinitionsHandler = Depends(
        handler_factory(SearchDefinitionsHandler)
    ),
) -> DefinitionListResponse | JSONResponse:
    """Search definitions.

    GET /api/v1/definitions/search?q=btc → 200 OK

    Exact abbreviation matches rank first, then abbreviation prefixes,
    exact names and name prefixes.
    """
    query = SearchDefinitions(
        term=q, limit=parse_int(limit), offset=parse_int(offset)
    )
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=definitions):
            return DefinitionListResponse.from_entities(definitions)


async def get_definition_by_abbreviation(
    request: Request,
    abbreviation: Annotated[str, Path(description="Abbreviation (any case)")],
    handler: GetDefinitionByAbbreviationHandler = Depends(
        handler_factory(GetDefinitionByAbbreviationHandler)
    ),
) -> DefinitionResponse | JSONResponse:
    """GET /api/v1/definitions/abbreviation/{abbreviation} → 200 OK"""
    query = GetDefinitionByAbbreviation(abbreviation=abbreviation)
    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=definition):
            return DefinitionResponse.from_entity(definition)


async def get_definition(
    request: Request,
    definition_id: Annotated[UUID, Path(description="Definition UUID")],
    handler: GetDefinitionHandler = Depends(handler_factory(GetDefinitionHandler)),
) -> DefinitionResponse | JSONResponse:
    """GET /api/v1/definitions/{definition_id} → 200 OK"""
    match await handler.handle(GetDefinition(definition_id=definition_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=definition):
            return DefinitionResponse.from_entity(definition)


async def update_definition(
    request: Request,
    definition_id: Annotated[UUID, Path(description="Definition UUID")],
    data: DefinitionRequest,
    handler: UpdateDefinitionHandler = Depends(
        handler_factory(UpdateDefinitionHandler)
    ),
) -> DefinitionResponse | JSONResponse:
    """PUT /api/v1/definitions/{definition_id} → 200 OK"""
    command = UpdateDefinition(
        definition_id=definition_id,
        name=data.name,
        abbreviation=data.abbreviation,
        suffix=data.suffix,
    )
    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success(value=definition):
            return DefinitionResponse.from_entity(definition)


async def delete_definition(
    request: Request,
    definition_id: Annotated[UUID, Path(description="Definition UUID")],
    handler: DeleteDefinitionHandler = Depends(
        handler_factory(DeleteDefinitionHandler)
    ),
) -> Response:
    """DELETE /api/v1/definitions/{definition_id} → 204 No Content"""
    match await handler.handle(DeleteDefinition(definition_id=definition_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
