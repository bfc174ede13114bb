"""Application error types and the policy for surfacing unexpected failures.

Every failure this package raises on purpose is an ``AppError`` carrying an
``ErrorCode`` and an explicit ``ErrorKind``. Anything else reaching a
classification boundary is an unexpected error: it is either re-raised as is
(debug posture) or masked behind a generic ``UnexpectedError`` (production
posture).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, NoReturn

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    APPLICATION = "application"
    UNEXPECTED = "unexpected"


class ErrorCode(str, Enum):
    INVALID_CONFIGURATION = "invalid_configuration"
    SOURCE_NOT_FOUND = "source_not_found"
    STRICT_INGESTION_FAILURE = "strict_ingestion_failure"
    RECORD_PROCESSING_FAILURE = "record_processing_failure"
    UNEXPECTED = "unexpected"


class AppError(Exception):
    """Base class for failures raised explicitly by this application."""

    code: ErrorCode = ErrorCode.UNEXPECTED
    kind: ErrorKind = ErrorKind.APPLICATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code.value, "kind": self.kind.value, "message": self.message}


class InvalidConfigurationError(AppError):
    code = ErrorCode.INVALID_CONFIGURATION


class SourceNotFoundError(AppError):
    code = ErrorCode.SOURCE_NOT_FOUND

    def __init__(self, path: Any) -> None:
        super().__init__(f"The provided file is not present at {path}.")
        self.path = path


class StrictIngestionError(AppError):
    code = ErrorCode.STRICT_INGESTION_FAILURE

    def __init__(self, line_index: int) -> None:
        super().__init__(f"Error in reading customer data at line {line_index}")
        self.line_index = line_index


class RecordProcessingError(AppError):
    code = ErrorCode.RECORD_PROCESSING_FAILURE

    def __init__(self, record: Any, label: str) -> None:
        super().__init__(f"There was an error in checking eligibility for {label}")
        self.record = record


class UnexpectedError(AppError):
    """Generic wrapper standing in for a masked unexpected failure."""

    code = ErrorCode.UNEXPECTED
    kind = ErrorKind.UNEXPECTED


def classify(exc: BaseException) -> ErrorKind:
    if isinstance(exc, AppError):
        return exc.kind
    return ErrorKind.UNEXPECTED


def raise_classified(message: str, cause: BaseException | None = None, *, show_unhandled: bool) -> NoReturn:
    """Raise the most specific error for ``cause``.

    Application errors are re-raised unchanged. Unexpected causes are re-raised
    verbatim when ``show_unhandled`` is set, otherwise replaced by an
    ``UnexpectedError`` carrying ``message``.
    """

    if cause is not None:
        if isinstance(cause, AppError):
            raise cause
        if show_unhandled:
            raise cause
        logger.error("%s: %s", message, cause, exc_info=cause)
        raise UnexpectedError(message) from None
    raise UnexpectedError(message)
