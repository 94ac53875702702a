"""Error kinds raised by the reward services and mapped to HTTP responses."""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    NO_DATA = "no_data"


class RewardsError(Exception):
    """Base class for expected, client-facing failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(RewardsError):
    kind = ErrorKind.INVALID_INPUT


class NotFound(RewardsError):
    kind = ErrorKind.NOT_FOUND


class NoData(RewardsError):
    kind = ErrorKind.NO_DATA


STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NO_DATA: 400,
}
