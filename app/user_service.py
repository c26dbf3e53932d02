"""
User business rules on top of db.user_repository.

Every function runs its repository calls inside `translate_storage_errors`,
so callers only ever see NotFoundError, UniqueConstraintError or ServerError.
"""
from sqlalchemy.orm import Session

from app.errors import NotFoundError, translate_storage_errors
from app.logger import get_logger
from app.messages import ServiceMessage
from app.models import User
from auth.security import hash_password
from db import user_repository
from schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


def retrieve_user_by_username(db: Session, username: str) -> User:
    with translate_storage_errors(db, "retrieve_user_by_username"):
        user = user_repository.get_user_by_username(db, username)
        if user is None:
            raise NotFoundError(ServiceMessage.USER_NOT_FOUND)
        return user


def retrieve_user_by_email(db: Session, email: str) -> User:
    with translate_storage_errors(db, "retrieve_user_by_email"):
        user = user_repository.get_user_by_email(db, email.lower())
        if user is None:
            raise NotFoundError(ServiceMessage.USER_NOT_FOUND)
        return user


def retrieve_user_by_id(db: Session, user_id: str) -> User:
    with translate_storage_errors(db, "retrieve_user_by_id"):
        user = user_repository.get_user_by_id(db, user_id)
        if user is None:
            raise NotFoundError(ServiceMessage.USER_NOT_FOUND)
        return user


def create_user_profile(db: Session, payload: UserCreate) -> User:
    """Hash the password and persist a new user. Duplicate username/email raises 409."""
    with translate_storage_errors(db, "create_user_profile"):
        new_user = User(
            username=payload.username,
            email=payload.email.lower(),
            password=hash_password(payload.password),
        )
        user = user_repository.add_user(db, new_user)
        logger.info(f"Registered user {user.username} ({user.id})")
        return user


def update_user_profile(db: Session, payload: UserUpdate) -> User:
    """
    Apply the supplied fields to an existing user.

    The stored password hash is replaced only when a new password is given.
    """
    update_data = payload.changes()
    if "password" in update_data:
        update_data["password"] = hash_password(update_data["password"])
    if "email" in update_data:
        update_data["email"] = update_data["email"].lower()

    with translate_storage_errors(db, "update_user_profile"):
        user = user_repository.update_user_info(db, payload.id, update_data)
        if user is None:
            raise NotFoundError(ServiceMessage.USER_NOT_FOUND)
        logger.info(f"Updated user {user.id}: {sorted(update_data)}")
        return user
