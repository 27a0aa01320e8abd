"""Error types raised by the store and the operation dispatcher."""

from __future__ import annotations


class UserStoreError(Exception):
    """Base class for every failure surfaced to the command line."""

    exit_code = 1


class MissingFlagError(UserStoreError):
    """A required flag was not given or was empty."""

    exit_code = 2

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"-{flag} flag has to be specified")


class UnknownOperationError(UserStoreError):
    exit_code = 2

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


class NotFoundError(UserStoreError):
    exit_code = 3

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"Item with id {user_id} not found")


class DuplicateIdError(UserStoreError):
    exit_code = 4

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"Item with id {user_id} already exists")


class DataError(UserStoreError):
    """Malformed JSON, or JSON that does not describe user records."""

    exit_code = 65


class StorageError(UserStoreError):
    """The backing file could not be opened, read or written."""

    exit_code = 74

