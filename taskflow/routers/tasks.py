from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from ..database import get_db
from ..logger import get_logger
from ..models import Task as TaskModel, TaskStatus, User
from ..schemas.task import Task as TaskSchema, TaskCompletedResponse, TaskCreate, TaskUpdate
from ..services.motivation import MotivationService, get_motivation_service
from .auth import get_current_user

router = APIRouter()

logger = get_logger(__name__)

# Largest id a 64-bit INTEGER primary key can hold
MAX_TASK_ID = 2**63 - 1


def _owned_tasks(db: Session, current_user: User):
    return db.query(TaskModel).filter(TaskModel.user_id == current_user.username)


def _get_owned_task(db: Session, task_id: int, current_user: User, action: str) -> TaskModel:
    """Load a task the caller owns; someone else's task is reported as missing."""
    task = None
    if 1 <= task_id <= MAX_TASK_ID:
        task = _owned_tasks(db, current_user).filter(TaskModel.id == task_id).first()
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task with ID {task_id} not found {action}.",
        )
    return task


@router.get("", response_model=List[TaskSchema])
def list_tasks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get all tasks of the current user, newest first."""
    return (
        _owned_tasks(db, current_user)
        .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
        .all()
    )


@router.get("/{task_id}", response_model=TaskSchema)
def get_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a specific task by ID."""
    return _get_owned_task(db, task_id, current_user, "for this user")


@router.post("", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new task for the current user."""
    db_task = TaskModel(
        title=task.title,
        description=task.description,
        due_date=task.due_date,
        status=TaskStatus.PENDING,
        user_id=current_user.username,
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)

    logger.info("task_created", task_id=db_task.id, username=current_user.username)
    return db_task


@router.put(
    "/{task_id}",
    response_model=None,
    responses={
        status.HTTP_200_OK: {"model": TaskCompletedResponse},
        status.HTTP_204_NO_CONTENT: {"description": "Task updated"},
    },
)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    motivation: MotivationService = Depends(get_motivation_service),
):
    """Replace a task's editable fields.

    Moving a task into Completed answers 200 with a motivational message,
    every other update answers 204.
    """
    task = _get_owned_task(db, task_id, current_user, "to update")

    just_completed = (
        task.status != TaskStatus.COMPLETED and task_update.status == TaskStatus.COMPLETED
    )

    task.title = task_update.title
    task.description = task_update.description
    task.status = task_update.status
    task.due_date = task_update.due_date

    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning("task_update_conflict", task_id=task_id, username=current_user.username)
        still_exists = _owned_tasks(db, current_user).filter(TaskModel.id == task_id).first()
        if still_exists is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Task with ID {task_id} not found to update.",
            )
        raise

    logger.info("task_updated", task_id=task_id, username=current_user.username)

    if just_completed:
        db.refresh(task)
        return TaskCompletedResponse(
            task=TaskSchema.model_validate(task),
            motivational_message=motivation.random_message(),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a specific task."""
    task = _get_owned_task(db, task_id, current_user, "to delete")

    db.delete(task)
    db.commit()

    logger.info("task_deleted", task_id=task_id, username=current_user.username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
