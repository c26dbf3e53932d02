"""
Queries against the `users` collection.
"""
from typing import Optional

from sqlalchemy.orm import Session

from app.models import User


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def add_user(db: Session, new_user: User) -> User:
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    return new_user


def update_user_info(db: Session, user_id: str, update_data: dict) -> Optional[User]:
    """Apply `update_data` to the user document; returns None when no user has `user_id`."""
    user = get_user_by_id(db, user_id)
    if user is None:
        return None

    for key, value in update_data.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user
