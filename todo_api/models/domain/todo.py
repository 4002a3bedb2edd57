from pydantic import BaseModel, ConfigDict, Field

class TodoBase(BaseModel):
    title: str = Field(..., description="Free-form label for the task")
    completed: bool = Field(False, description="Whether the task is done")

class TodoCreate(TodoBase):
    """Body of a create request. Any client-supplied id is ignored."""

class TodoUpdate(TodoBase):
    """Replacement title and completion flag for an existing todo."""

class TodoResponse(TodoBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
