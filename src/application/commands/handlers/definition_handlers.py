"""Definition registry command handlers.

Abbreviation uniqueness is checked twice: an optimistic lookup that yields
a precise error message, and the store's unique constraint, which the
repository surfaces as ``DuplicateAbbreviationError`` when a concurrent
write slips past the lookup. Both paths answer with ConflictError.
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.definition_commands import (
    CreateDefinition,
    DeleteDefinition,
    UpdateDefinition,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.definition import Definition
from src.domain.errors import DefinitionError, DuplicateAbbreviationError
from src.domain.protocols.definition_repository import DefinitionRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


def _validate(name: str, abbreviation: str) -> ValidationError | None:
    if not name or not name.strip():
        return ValidationError(
            code=ErrorCode.INVALID_NAME,
            message=DefinitionError.INVALID_NAME,
            field="name",
        )
    if not abbreviation or not abbreviation.strip():
        return ValidationError(
            code=ErrorCode.INVALID_ABBREVIATION,
            message=DefinitionError.INVALID_ABBREVIATION,
            field="abbreviation",
        )
    return None


def _abbreviation_conflict(abbreviation: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.ABBREVIATION_ALREADY_EXISTS,
        message=DefinitionError.ABBREVIATION_EXISTS,
        resource_type="Definition",
        conflicting_field="abbreviation",
        details={"abbreviation": abbreviation},
    )


def _not_found(definition_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.DEFINITION_NOT_FOUND,
        message=DefinitionError.DEFINITION_NOT_FOUND,
        resource_type="Definition",
        resource_id=str(definition_id),
    )


class CreateDefinitionHandler:
    """Handler for CreateDefinition command."""

    def __init__(
        self, definition_repo: DefinitionRepository, logger: LoggerProtocol
    ) -> None:
        self._definition_repo = definition_repo
        self._logger = logger

    async def handle(self, cmd: CreateDefinition) -> Result[Definition, DomainError]:
        """Validate and register a definition.

        Returns:
            Success(Definition): Newly registered definition.
            Failure(ValidationError): Blank name or abbreviation.
            Failure(ConflictError): Abbreviation already taken (any case).
        """
        if error := _validate(cmd.name, cmd.abbreviation):
            return Failure(error=error)
        abbreviation = cmd.abbreviation.strip()

        if await self._definition_repo.find_by_abbreviation(abbreviation) is not None:
            return Failure(error=_abbreviation_conflict(abbreviation))

        now = datetime.now(UTC)
        definition = Definition(
            id=uuid7(),
            name=cmd.name.strip(),
            abbreviation=abbreviation,
            suffix=cmd.suffix.strip(),
            created_at=now,
            updated_at=now,
        )
        try:
            await self._definition_repo.save(definition)
        except DuplicateAbbreviationError:
            return Failure(error=_abbreviation_conflict(abbreviation))

        self._logger.info(
            "definition_created",
            definition_id=str(definition.id),
            abbreviation=definition.abbreviation,
        )
        return Success(value=definition)


class UpdateDefinitionHandler:
    """Handler for UpdateDefinition command.

    Keeping a definition's own abbreviation (in any case) is not a conflict.
    """

    def __init__(
        self, definition_repo: DefinitionRepository, logger: LoggerProtocol
    ) -> None:
        self._definition_repo = definition_repo
        self._logger = logger

    async def handle(self, cmd: UpdateDefinition) -> Result[Definition, DomainError]:
        if error := _validate(cmd.name, cmd.abbreviation):
            return Failure(error=error)
        abbreviation = cmd.abbreviation.strip()

        definition = await self._definition_repo.find_by_id(cmd.definition_id)
        if definition is None:
            return Failure(error=_not_found(cmd.definition_id))

        holder = await self._definition_repo.find_by_abbreviation(abbreviation)
        if holder is not None and holder.id != definition.id:
            return Failure(error=_abbreviation_conflict(abbreviation))

        definition.update(
            name=cmd.name.strip(),
            abbreviation=abbreviation,
            suffix=cmd.suffix.strip(),
        )
        try:
            await self._definition_repo.update(definition)
        except DuplicateAbbreviationError:
            return Failure(error=_abbreviation_conflict(abbreviation))

        self._logger.info("definition_updated", definition_id=str(definition.id))
        return Success(value=definition)


class DeleteDefinitionHandler:
    """Handler for DeleteDefinition command.

    A definition still referenced by an asset cannot be deleted
    (ConflictError); the assets' foreign key enforces the same rule.
    """

    def __init__(
        self, definition_repo: DefinitionRepository, logger: LoggerProtocol
    ) -> None:
        self._definition_repo = definition_repo
        self._logger = logger

    async def handle(self, cmd: DeleteDefinition) -> Result[None, DomainError]:
        definition = await self._definition_repo.find_by_id(cmd.definition_id)
        if definition is None:
            return Failure(error=_not_found(cmd.definition_id))

        if await self._definition_repo.is_referenced(definition.id):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.DEFINITION_IN_USE,
                    message=DefinitionError.DEFINITION_IN_USE,
                    resource_type="Definition",
                    conflicting_field="id",
                )
            )

        await self._definition_repo.delete(definition.id)
        self._logger.info("definition_deleted", definition_id=str(definition.id))
        return Success(value=None)
