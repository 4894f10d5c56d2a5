"""Unit tests for definition registry handlers."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

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
from src.application.queries.definition_queries import SearchDefinitions
from src.application.queries.handlers.definition_handlers import (
    SearchDefinitionsHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.errors import DuplicateAbbreviationError
from tests.conftest import make_definition


@pytest.fixture
def definition_repo():
    repo = AsyncMock()
    repo.find_by_abbreviation.return_value = None
    return repo


@pytest.mark.unit
class TestCreateDefinitionHandler:
    async def test_create_trims_fields(self, definition_repo):
        handler = CreateDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(
            CreateDefinition(name=" Bitcoin ", abbreviation=" BTC ", suffix="BTC")
        )

        assert isinstance(result, Success)
        assert result.value.name == "Bitcoin"
        assert result.value.abbreviation == "BTC"
        definition_repo.save.assert_awaited_once()

    async def test_blank_abbreviation(self, definition_repo):
        handler = CreateDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(CreateDefinition(name="Bitcoin", abbreviation=" "))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_ABBREVIATION

    async def test_existing_abbreviation_conflicts(self, definition_repo):
        definition_repo.find_by_abbreviation.return_value = make_definition()
        handler = CreateDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(CreateDefinition(name="Bitcoin", abbreviation="btc"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.ABBREVIATION_ALREADY_EXISTS
        definition_repo.save.assert_not_awaited()

    async def test_store_race_maps_to_conflict(self, definition_repo):
        definition_repo.save.side_effect = DuplicateAbbreviationError("BTC")
        handler = CreateDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(CreateDefinition(name="Bitcoin", abbreviation="BTC"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)


@pytest.mark.unit
class TestUpdateDefinitionHandler:
    async def test_keeping_own_abbreviation_is_not_a_conflict(self, definition_repo):
        definition = make_definition(abbreviation="BTC")
        definition_repo.find_by_id.return_value = definition
        definition_repo.find_by_abbreviation.return_value = definition
        handler = UpdateDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(
            UpdateDefinition(
                definition_id=definition.id,
                name="Bitcoin Core",
                abbreviation="btc",
            )
        )

        assert isinstance(result, Success)
        assert definition.abbreviation == "btc"
        definition_repo.update.assert_awaited_once_with(definition)

    async def test_taking_another_abbreviation_conflicts(self, definition_repo):
        definition = make_definition(abbreviation="BTC")
        definition_repo.find_by_id.return_value = definition
        definition_repo.find_by_abbreviation.return_value = make_definition(
            abbreviation="ETH"
        )
        handler = UpdateDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(
            UpdateDefinition(definition_id=definition.id, name="x", abbreviation="ETH")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)


@pytest.mark.unit
class TestDeleteDefinitionHandler:
    async def test_referenced_definition_is_in_use(self, definition_repo):
        definition = make_definition()
        definition_repo.find_by_id.return_value = definition
        definition_repo.is_referenced.return_value = True
        handler = DeleteDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(DeleteDefinition(definition_id=definition.id))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DEFINITION_IN_USE
        definition_repo.delete.assert_not_awaited()

    async def test_missing_definition(self, definition_repo):
        definition_repo.find_by_id.return_value = None
        handler = DeleteDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(DeleteDefinition(definition_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    async def test_unreferenced_definition_is_deleted(self, definition_repo):
        definition = make_definition()
        definition_repo.find_by_id.return_value = definition
        definition_repo.is_referenced.return_value = False
        handler = DeleteDefinitionHandler(
            definition_repo=definition_repo, logger=MagicMock()
        )

        result = await handler.handle(DeleteDefinition(definition_id=definition.id))

        assert isinstance(result, Success)
        definition_repo.delete.assert_awaited_once_with(definition.id)


@pytest.mark.unit
class TestSearchDefinitionsHandler:
    async def test_blank_term_rejected(self, definition_repo):
        handler = SearchDefinitionsHandler(definition_repo=definition_repo)

        result = await handler.handle(SearchDefinitions(term="   "))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SEARCH_TERM_REQUIRED
        definition_repo.search.assert_not_awaited()

    async def test_term_trimmed_and_page_clamped(self, definition_repo):
        definition_repo.search.return_value = []
        handler = SearchDefinitionsHandler(definition_repo=definition_repo)

        result = await handler.handle(SearchDefinitions(term=" bit ", limit=999))

        assert isinstance(result, Success)
        definition_repo.search.assert_awaited_once_with("bit", 100, 0)
