from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.deps import ValidatedBody, parse_payload
from api.rules.user_rules import USER_REGISTRATION_RULES, USER_UPDATE_RULES
from app.db import get_db
from app.messages import ResponseMessage
from app.models import User
from app.user_service import create_user_profile, update_user_profile
from auth.dependencies import get_current_user
from schemas.common import MessageResponse
from schemas.user import UserCreate, UserUpdate

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(body: dict = Depends(ValidatedBody(USER_REGISTRATION_RULES)), db: Session = Depends(get_db)):
    create_user_profile(db, parse_payload(UserCreate, body))
    return {"message": ResponseMessage.USER_REGISTERED.value}


@router.put("/update", response_model=MessageResponse)
def update(
    body: dict = Depends(ValidatedBody(USER_UPDATE_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    update_user_profile(db, parse_payload(UserUpdate, body))
    return {"message": ResponseMessage.USER_UPDATED.value}
