"""Definition registry errors."""


class DefinitionError:
    """Definition error constants."""

    INVALID_NAME = "Definition name cannot be empty"
    INVALID_ABBREVIATION = "Definition abbreviation cannot be empty"
    ABBREVIATION_EXISTS = "A definition with this abbreviation already exists"
    DEFINITION_NOT_FOUND = "Definition not found"
    DEFINITION_IN_USE = "Definition is still referenced by assets"
    SEARCH_TERM_REQUIRED = "Search term is required"


class DuplicateAbbreviationError(Exception):
    """Raised by the store when the abbreviation unique constraint rejects a write.

    The definition handlers pre-check uniqueness, but a concurrent create can
    still race past the check; the repository converts the constraint
    violation into this exception so the handler can answer with a conflict.
    """

    def __init__(self, abbreviation: str) -> None:
        super().__init__(f"Abbreviation already exists: {abbreviation}")
        self.abbreviation = abbreviation
