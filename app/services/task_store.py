from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import StorageError, ValidationError, format_validation_errors
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _parse_id(task_id: Union[UUID, str]) -> UUID:
    if isinstance(task_id, UUID):
        return task_id
    try:
        return UUID(str(task_id))
    except ValueError as exc:
        raise ValidationError(
            f'Cast to UUID failed for value "{task_id}"', task_id=str(task_id)
        ) from exc


def _coerce(model: Type[M], fields: Union[M, Mapping[str, Any]]) -> M:
    if isinstance(fields, model):
        return fields
    try:
        return model.model_validate(fields)
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from exc


class TaskStore:
    """
    Task persistence on top of a SQLModel session.

    One store per request; the session (and so the connection) comes from
    the app-owned engine. Every write is a single-row commit.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_all(self) -> list[Task]:
        try:
            return list(self.session.exec(select(Task)).all())
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def get(self, task_id: Union[UUID, str]) -> Optional[Task]:
        key = _parse_id(task_id)
        try:
            return self.session.get(Task, key)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc), task_id=str(key)) from exc

    def create(self, fields: Union[TaskCreate, Mapping[str, Any]]) -> Task:
        payload = _coerce(TaskCreate, fields)
        task = Task(**payload.model_dump())
        self.session.add(task)
        self._commit(task)
        logger.info("Task created id=%s", task.id)
        return task

    def update(
        self,
        task_id: Union[UUID, str],
        fields: Union[TaskUpdate, Mapping[str, Any]],
    ) -> Optional[Task]:
        """Apply only the fields the caller set. Returns None if no task matches."""
        key = _parse_id(task_id)
        payload = _coerce(TaskUpdate, fields)

        task = self.get(key)
        if task is None:
            logger.info("Task update skipped, not found id=%s", key)
            return None

        task.sqlmodel_update(payload.model_dump(exclude_unset=True))
        self.session.add(task)
        self._commit(task)
        logger.info("Task updated id=%s", key)
        return task

    def delete(self, task_id: Union[UUID, str]) -> bool:
        """Hard delete. A missing id is not an error; returns whether a row went away."""
        key = _parse_id(task_id)
        task = self.get(key)
        if task is None:
            return False

        self.session.delete(task)
        self._commit()
        logger.info("Task deleted id=%s", key)
        return True

    def _commit(self, task: Optional[Task] = None) -> None:
        try:
            self.session.commit()
            if task is not None:
                self.session.refresh(task)
        except IntegrityError as exc:
            self.session.rollback()
            raise ValidationError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(str(exc)) from exc
        except (UnicodeError, ValueError, TypeError) as exc:
            # driver rejected a value before SQLAlchemy could wrap it (eg. lone surrogates)
            self.session.rollback()
            raise ValidationError(str(exc)) from exc
