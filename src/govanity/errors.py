"""Govanity exception hierarchy."""

from enum import Enum


class GovanityError(Exception):
    """Base for all govanity-specific errors."""


class NoMatchReason(Enum):
    """Why an import path did not resolve."""

    ROOT_MISMATCH = "root mismatch"
    NO_CHILD_SEGMENT = "no child segment"
    NO_MAPPING = "no mapping"


class NoMatchError(GovanityError):
    """The requested path is not covered by a mapping.

    Recoverable: the router tries the next mapping, the HTTP layer
    answers 404 once every mapping has failed.
    """

    def __init__(
        self,
        path: str,
        from_path: str | None,
        reason: NoMatchReason,
    ) -> None:
        self.path = path
        self.from_path = from_path
        self.reason = reason
        if from_path is None:
            message = f"{path}: {reason.value}"
        else:
            message = f"{path}: {reason.value} for {from_path}"
        super().__init__(message)
