from datetime import datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"
DEFAULT_CATEGORY_COLOR = "#6366f1"

# Responses are serialized with camelCase keys, requests accept either form.
camel_case_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def strip_text(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def reject_explicit_nulls(
    model: BaseModel, nullable_fields: frozenset[str] = frozenset()
) -> None:
    for name in model.model_fields_set:
        if name not in nullable_fields and getattr(model, name) is None:
            raise ValueError(f"'{name}' cannot be null")


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Category(BaseModel):
    model_config = camel_case_config

    id: str
    name: str
    color: str
    created_at: datetime


class InsertCategory(BaseModel):
    model_config = camel_case_config

    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(default=DEFAULT_CATEGORY_COLOR, pattern=HEX_COLOR_PATTERN)

    @field_validator("name", mode="before")
    def strip_name(cls, v: Any):
        return strip_text(v)


class CategoryUpdate(BaseModel):
    model_config = camel_case_config

    name: str | None = Field(default=None, min_length=1, max_length=100)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    @field_validator("name", mode="before")
    def strip_name(cls, v: Any):
        return strip_text(v)

    @model_validator(mode="after")
    def validate_no_nulls(self):
        reject_explicit_nulls(self)
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, mode="json")


class Task(BaseModel):
    model_config = camel_case_config

    id: str
    text: str
    completed: bool
    date: str
    priority: Priority
    category_id: str | None
    order: int
    created_at: datetime


class InsertTask(BaseModel):
    model_config = camel_case_config

    text: str = Field(..., min_length=1)
    date: str = Field(..., pattern=DATE_PATTERN)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category_id: str | None = None
    order: int = 0

    @field_validator("text", mode="before")
    def strip_task_text(cls, v: Any):
        return strip_text(v)


class TaskUpdate(BaseModel):
    model_config = camel_case_config

    text: str | None = Field(default=None, min_length=1)
    completed: bool | None = None
    date: str | None = Field(default=None, pattern=DATE_PATTERN)
    priority: Priority | None = None
    category_id: str | None = None
    order: int | None = None

    @field_validator("text", mode="before")
    def strip_task_text(cls, v: Any):
        return strip_text(v)

    @model_validator(mode="after")
    def validate_no_nulls(self):
        # A null category_id detaches the task from its category
        reject_explicit_nulls(self, nullable_fields=frozenset({"category_id"}))
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, mode="json")
