"""
Task routes. Every route validates its body before the authentication gate runs.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.deps import ValidatedBody, parse_payload
from api.rules.task_rules import (
    TASK_CREATION_RULES,
    TASK_DELETION_RULES,
    TASK_FETCHING_BY_STATUS_RULES,
    TASK_FETCHING_BY_SUBJECT_RULES,
    TASK_FETCHING_BY_USERNAME_RULES,
    TASK_UPDATE_RULES,
)
from app import task_service
from app.db import get_db
from app.messages import ResponseMessage
from app.models import User
from auth.dependencies import get_current_user
from schemas.common import MessageResponse
from schemas.task import TaskCreate, TaskListResponse, TaskResponse, TaskUpdate

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    body: dict = Depends(ValidatedBody(TASK_CREATION_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task_service.create_task_record(db, parse_payload(TaskCreate, body))
    return {"message": ResponseMessage.TASK_CREATED.value}


@router.put("", response_model=MessageResponse)
def update_task(
    body: dict = Depends(ValidatedBody(TASK_UPDATE_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task_service.update_task_record(db, parse_payload(TaskUpdate, body))
    return {"message": ResponseMessage.TASK_UPDATED.value}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_task(
    body: dict = Depends(ValidatedBody(TASK_DELETION_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task_service.delete_task_record(db, body["id"])
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=TaskListResponse)
def get_all_tasks(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return {"data": task_service.retrieve_all_tasks(db)}


@router.get("/status", response_model=TaskListResponse)
def get_tasks_by_status(
    body: dict = Depends(ValidatedBody(TASK_FETCHING_BY_STATUS_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"data": task_service.retrieve_tasks_by_status(db, body["status"])}


@router.get("/username", response_model=TaskListResponse)
def get_tasks_by_username(
    body: dict = Depends(ValidatedBody(TASK_FETCHING_BY_USERNAME_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"data": task_service.retrieve_tasks_by_username(db, body["username"])}


@router.get("/subject", response_model=TaskResponse)
def get_task_by_subject(
    body: dict = Depends(ValidatedBody(TASK_FETCHING_BY_SUBJECT_RULES)),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"data": task_service.retrieve_task_by_subject(db, body["subject"])}
