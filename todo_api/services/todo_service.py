import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from todo_api.core.exceptions import TodoNotFoundError
from todo_api.models.entities.todo import Todo
from todo_api.models.domain.todo import TodoCreate, TodoResponse, TodoUpdate
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.utils.helpers import handle_service_error

logger = logging.getLogger(__name__)


def merge_todo(existing: Todo, update: TodoUpdate) -> Todo:
    """
    Build the record an update should persist.

    Returns a new, transient Todo carrying the id of ``existing`` and the
    title and completion flag of ``update``. ``existing`` is left untouched.
    """
    return Todo(
        id=existing.id,
        title=update.title,
        completed=update.completed
    )


class TodoService:
    def __init__(self, repository: TodoRepository):
        self.repository = repository

    async def get_todos(self) -> List[TodoResponse]:
        try:
            todos = await self.repository.get_all()
            return [TodoResponse.model_validate(todo) for todo in todos]
        except SQLAlchemyError as e:
            handle_service_error(e, "todo_service", "get_todos")

    async def create_todo(self, todo_data: TodoCreate) -> TodoResponse:
        try:
            todo = Todo(
                title=todo_data.title,
                completed=todo_data.completed
            )

            created_todo = await self.repository.save(todo)
            return TodoResponse.model_validate(created_todo)
        except SQLAlchemyError as e:
            handle_service_error(e, "todo_service", "create_todo")

    async def update_todo(self, todo_id: int, todo_data: TodoUpdate) -> TodoResponse:
        try:
            existing = await self.repository.get_by_id(todo_id)

            if not existing:
                logger.warning(f"Todo with id {todo_id} not found")
                raise TodoNotFoundError(todo_id)

            updated_todo = await self.repository.save(merge_todo(existing, todo_data))
            return TodoResponse.model_validate(updated_todo)
        except SQLAlchemyError as e:
            handle_service_error(e, "todo_service", "update_todo")

    async def delete_todo(self, todo_id: int) -> None:
        try:
            await self.repository.delete_by_id(todo_id)
        except SQLAlchemyError as e:
            handle_service_error(e, "todo_service", "delete_todo")
