from pydantic import BaseModel

from src.storage.schemas import camel_case_config


class TaskStats(BaseModel):
    model_config = camel_case_config

    date: str
    total: int
    completed: int
    pending: int
