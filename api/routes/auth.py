from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.deps import ValidatedBody, parse_payload
from app.db import get_db
from app.errors import NotFoundError, UnauthorizedError
from app.logger import get_logger
from app.messages import AuthMessage
from app.user_service import retrieve_user_by_username
from auth.jwt_handler import create_access_token
from auth.rules import USER_LOGIN_RULES
from auth.security import verify_password
from schemas.auth import LoginRequest, Token

router = APIRouter(prefix="/api", tags=["Auth"])
logger = get_logger(__name__)


@router.post("/login", response_model=Token)
def login(body: dict = Depends(ValidatedBody(USER_LOGIN_RULES)), db: Session = Depends(get_db)):
    """Exchange a username and password for a bearer token."""
    credentials = parse_payload(LoginRequest, body)

    # Unknown user and wrong password share one message
    try:
        user = retrieve_user_by_username(db, credentials.username)
    except NotFoundError:
        raise UnauthorizedError(AuthMessage.AUTH_FAILED)

    if not verify_password(credentials.password, str(user.password)):
        logger.info(f"Rejected login for {credentials.username}")
        raise UnauthorizedError(AuthMessage.AUTH_FAILED)

    token = create_access_token({"username": user.username})
    return {"token": token}
