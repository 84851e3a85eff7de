"""
Universe Manager exceptions

Every error raised by the title ledger, roster manager and command facade
inherits from UniverseError.
"""

from typing import Optional, Union


class UniverseError(Exception):
    """Base exception for the championship and roster engine"""

    def __init__(self, message: str, entity: Optional[str] = None):
        self.message = message
        self.entity = entity
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.entity:
            return f"[{self.entity}] {self.message}"
        return self.message


class NotFoundError(UniverseError):
    """
    Referenced entity does not exist

    Attributes:
        entity_id: Identifier that was looked up
    """

    def __init__(self, entity: str, entity_id: Union[int, str]):
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found", entity)


class ValidationError(UniverseError):
    """
    Input rejected by a business rule

    Raised for gender restriction mismatches and malformed input.
    Terminal for the call; the caller should show it to the user.
    """


class ConflictError(UniverseError):
    """
    Write conflict

    A concurrent write invalidated an assumption, or a delete was refused
    because history still references the row.

    Attributes:
        original_error: Underlying storage exception (if any)
    """

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.original_error = original_error
        super().__init__(message, entity)


class StorageError(UniverseError):
    """
    Connection or transaction failure

    Attributes:
        original_error: Underlying storage exception (if any)
    """

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.original_error = original_error
        super().__init__(message, entity)
