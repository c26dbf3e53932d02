"""
Task business rules on top of db.task_repository.
"""
from typing import List

from sqlalchemy.orm import Session

from app.errors import NotFoundError, translate_storage_errors
from app.logger import get_logger
from app.messages import ServiceMessage
from app.models import Task
from db import task_repository, user_repository
from schemas.task import TaskCreate, TaskUpdate

logger = get_logger(__name__)


def _non_empty(tasks: List[Task]) -> List[Task]:
    if not tasks:
        raise NotFoundError(ServiceMessage.TASKS_NOT_FOUND)
    return tasks


def retrieve_all_tasks(db: Session) -> List[Task]:
    with translate_storage_errors(db, "retrieve_all_tasks"):
        return _non_empty(task_repository.get_tasks(db))


def retrieve_tasks_by_status(db: Session, status: str) -> List[Task]:
    with translate_storage_errors(db, "retrieve_tasks_by_status"):
        return _non_empty(task_repository.get_tasks_by_status(db, status))


def retrieve_tasks_by_username(db: Session, username: str) -> List[Task]:
    with translate_storage_errors(db, "retrieve_tasks_by_username"):
        return _non_empty(task_repository.get_tasks_by_username(db, username))


def retrieve_task_by_subject(db: Session, subject: str) -> Task:
    with translate_storage_errors(db, "retrieve_task_by_subject"):
        task = task_repository.get_task_by_subject(db, subject)
        if task is None:
            raise NotFoundError(ServiceMessage.TASK_NOT_FOUND)
        return task


def create_task_record(db: Session, payload: TaskCreate) -> Task:
    """Persist a task for an existing user. Unknown owner raises 404, duplicate subject 409."""
    with translate_storage_errors(db, "create_task_record"):
        # Owners are referenced by username only, so the check lives here
        if user_repository.get_user_by_username(db, payload.username) is None:
            raise NotFoundError(ServiceMessage.USER_NOT_FOUND)

        new_task = Task(
            subject=payload.subject,
            description=payload.description,
            status=payload.status.value,
            username=payload.username,
        )
        task = task_repository.add_task(db, new_task)
        logger.info(f"Created task {task.id} for {task.username}")
        return task


def update_task_record(db: Session, payload: TaskUpdate) -> Task:
    update_data = payload.changes()
    with translate_storage_errors(db, "update_task_record"):
        task = task_repository.update_task(db, payload.id, update_data)
        if task is None:
            raise NotFoundError(ServiceMessage.TASK_NOT_FOUND)
        logger.info(f"Updated task {task.id}: {sorted(update_data)}")
        return task


def delete_task_record(db: Session, task_id: str) -> None:
    with translate_storage_errors(db, "delete_task_record"):
        if task_repository.delete_task(db, task_id) is None:
            raise NotFoundError(ServiceMessage.TASK_NOT_FOUND)
        logger.info(f"Deleted task {task_id}")
