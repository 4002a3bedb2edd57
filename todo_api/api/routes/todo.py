import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response, status

from todo_api.api.dependencies import get_todo_service
from todo_api.models.domain.todo import TodoCreate, TodoResponse, TodoUpdate
from todo_api.services.todo_service import TodoService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/todos", tags=["todo"])

# Signed 64-bit range of the INTEGER primary key
MAX_TODO_ID = 2**63 - 1

TodoIdPath = Annotated[
    int,
    Path(ge=-MAX_TODO_ID - 1, le=MAX_TODO_ID, description="Identifier of the target todo")
]


@router.get("", response_model=List[TodoResponse])
async def list_todos(service: Annotated[TodoService, Depends(get_todo_service)]):
    return await service.get_todos()


@router.post("", response_model=TodoResponse)
async def create_todo(
    todo: TodoCreate,
    service: Annotated[TodoService, Depends(get_todo_service)]
):
    return await service.create_todo(todo)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: TodoIdPath,
    todo: TodoUpdate,
    service: Annotated[TodoService, Depends(get_todo_service)]
):
    """Replace title and completion flag; the path id selects the record."""
    return await service.update_todo(todo_id, todo)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_todo(
    todo_id: TodoIdPath,
    service: Annotated[TodoService, Depends(get_todo_service)]
):
    await service.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
