"""
Queries against the `tasks` collection.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Task


def get_tasks(db: Session) -> List[Task]:
    return db.query(Task).order_by(Task.created_at.asc(), Task.id.asc()).all()


def get_tasks_by_status(db: Session, status: str) -> List[Task]:
    return (
        db.query(Task)
        .filter(Task.status == status)
        .order_by(Task.created_at.asc(), Task.id.asc())
        .all()
    )


def get_tasks_by_username(db: Session, username: str) -> List[Task]:
    return (
        db.query(Task)
        .filter(Task.username == username)
        .order_by(Task.created_at.asc(), Task.id.asc())
        .all()
    )


def get_task_by_subject(db: Session, subject: str) -> Optional[Task]:
    return db.query(Task).filter(Task.subject == subject).first()


def add_task(db: Session, new_task: Task) -> Task:
    db.add(new_task)
    db.commit()
    db.refresh(new_task)
    return new_task


def update_task(db: Session, task_id: str, update_data: dict) -> Optional[Task]:
    """Apply `update_data` to the task document; returns None when no task has `task_id`."""
    task = db.query(Task).filter(Task.id == task_id).first()
    if task is None:
        return None

    for key, value in update_data.items():
        setattr(task, key, value)
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: str) -> Optional[Task]:
    """Delete the task document and return it, or None when it does not exist."""
    task = db.query(Task).filter(Task.id == task_id).first()
    if task is None:
        return None

    db.delete(task)
    db.commit()
    return task
