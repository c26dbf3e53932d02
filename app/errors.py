"""
Error taxonomy shared by the presentation, auth and service layers.

Every error is an AppError tagged with an ErrorKind. The kind carries the HTTP
status, so the exception handler in main.py never needs a second mapping.
Services wrap storage calls in `translate_storage_errors`, which re-raises
classified errors untouched and reclassifies everything else.
"""
import re
from contextlib import contextmanager
from enum import Enum
from http import HTTPStatus
from typing import Iterator, List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.logger import get_logger
from app.messages import ResponseMessage, ServiceMessage

logger = get_logger(__name__)

Message = Union[str, Enum]


class ErrorKind(Enum):
    VALIDATION_FAILURE = HTTPStatus.BAD_REQUEST
    UNAUTHORIZED = HTTPStatus.UNAUTHORIZED
    FORBIDDEN = HTTPStatus.FORBIDDEN
    NOT_FOUND = HTTPStatus.NOT_FOUND
    UNIQUE_CONSTRAINT = HTTPStatus.CONFLICT
    SERVER_ERROR = HTTPStatus.INTERNAL_SERVER_ERROR

    @property
    def status_code(self) -> int:
        return int(self.value)


def _text(message: Message) -> str:
    return message.value if isinstance(message, Enum) else str(message)


class AppError(Exception):
    """A classified failure that ends the request with `kind.status_code`."""

    def __init__(self, kind: ErrorKind, message: Message, errors: Optional[List[Message]] = None):
        self.kind = kind
        self.message = _text(message)
        self.errors = [_text(error) for error in errors or []]
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_response_body(self) -> dict:
        body = {"message": self.message}
        if self.kind is ErrorKind.VALIDATION_FAILURE:
            body["errors"] = [{"message": error} for error in self.errors]
        return body


class ValidationFailure(AppError):
    def __init__(self, errors: List[Message]):
        super().__init__(ErrorKind.VALIDATION_FAILURE, ResponseMessage.BAD_REQUEST, errors)


class UnauthorizedError(AppError):
    def __init__(self, message: Message):
        super().__init__(ErrorKind.UNAUTHORIZED, message)


class ForbiddenError(AppError):
    def __init__(self, message: Message):
        super().__init__(ErrorKind.FORBIDDEN, message)


class NotFoundError(AppError):
    def __init__(self, message: Message):
        super().__init__(ErrorKind.NOT_FOUND, message)


class UniqueConstraintError(AppError):
    def __init__(self, message: Message):
        super().__init__(ErrorKind.UNIQUE_CONSTRAINT, message)


class ServerError(AppError):
    def __init__(self, message: Message = ServiceMessage.SERVER_ERROR):
        super().__init__(ErrorKind.SERVER_ERROR, message)


# SQLite: "UNIQUE constraint failed: users.username"
# PostgreSQL: "duplicate key value ... DETAIL:  Key (username)=(bob) already exists."
# MySQL: "Duplicate entry 'bob' for key 'users.username'"
_UNIQUE_PATTERNS = (
    re.compile(r"UNIQUE constraint failed: \w+\.(\w+)"),
    re.compile(r"Key \((\w+)\)=\(.*\) already exists"),
    re.compile(r"Duplicate entry .* for key '(?:\w+\.)?(\w+)'"),
)


def unique_violation_field(exc: IntegrityError) -> Optional[str]:
    """Return the offending column when `exc` is a uniqueness violation, else None."""
    detail = str(exc.orig)
    for pattern in _UNIQUE_PATTERNS:
        match = pattern.search(detail)
        if match:
            return match.group(1)
    if "unique" in detail.lower() or "duplicate" in detail.lower():
        return "value"
    return None


@contextmanager
def translate_storage_errors(db: Session, operation: str) -> Iterator[None]:
    """
    Reclassify failures raised by repository calls.

    AppError passes through unchanged. A uniqueness violation becomes
    UniqueConstraintError (409); anything else becomes ServerError (500).
    The session is rolled back before re-raising.
    """
    try:
        yield
    except AppError:
        raise
    except IntegrityError as exc:
        db.rollback()
        field = unique_violation_field(exc)
        if field is None:
            logger.error(f"{operation} failed with integrity error: {exc.orig}")
            raise ServerError() from exc
        # The client gets the column name, never the raw driver text
        logger.info(f"{operation} rejected: duplicate {field}")
        raise UniqueConstraintError(ServiceMessage.DUPLICATE_VALUE.value.format(field=field)) from exc
    except Exception as exc:
        db.rollback()
        logger.error(f"{operation} failed: {exc}", exc_info=True)
        raise ServerError() from exc
