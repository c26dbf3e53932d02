"""
Authentication gate for protected routes.

Three stages run in order as chained FastAPI dependencies: the Authorization
header check, token verification and the user existence check. The first
stage that fails raises and ends the request.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.db import get_db
from app.errors import ForbiddenError, NotFoundError, UnauthorizedError, ValidationFailure
from app.logger import get_logger
from app.messages import AuthMessage
from app.models import User
from app.user_service import retrieve_user_by_username
from app.validation import validate
from auth.jwt_handler import decode_access_token, strip_bearer_prefix
from auth.rules import HEADER_VALIDATION_RULES

logger = get_logger(__name__)


def require_authorization_header(request: Request) -> str:
    authorization = request.headers.get("Authorization")
    if authorization is None:
        raise UnauthorizedError(AuthMessage.AUTH_HEADER_REQUIRED)

    errors = validate(HEADER_VALIDATION_RULES, {"Authorization": authorization.strip()})
    if errors:
        raise ValidationFailure(errors)
    return authorization


def verify_token(request: Request, authorization: str = Depends(require_authorization_header)) -> str:
    """Return the `username` claim of a valid token and store it on `request.state`."""
    payload = decode_access_token(strip_bearer_prefix(authorization))
    username = payload.get("username") if payload else None
    if not username:
        raise ForbiddenError(AuthMessage.TOKEN_INVALID)

    request.state.username = username
    return username


def get_current_user(username: str = Depends(verify_token), db: Session = Depends(get_db)) -> User:
    try:
        return retrieve_user_by_username(db, username)
    except NotFoundError:
        logger.warning(f"Token presented for unknown user {username}")
        raise UnauthorizedError(AuthMessage.USER_NOT_AUTHORIZED)
