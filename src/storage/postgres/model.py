from datetime import datetime
from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

from src.storage.schemas import DEFAULT_CATEGORY_COLOR, Priority


Base = declarative_base()


class CategoryModel(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(
        String(7), nullable=False, default=DEFAULT_CATEGORY_COLOR
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __init__(
        self,
        id: str,
        name: str,
        created_at: datetime,
        color: str = DEFAULT_CATEGORY_COLOR,
    ):
        self.id = id
        self.name = name
        self.color = color
        self.created_at = created_at


class TaskModel(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Stored as YYYY-MM-DD text, not a native date
    date: Mapped[str] = mapped_column(String, nullable=False, index=True)
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Priority.MEDIUM.value
    )
    # No foreign key constraint, references are weak
    category_id: Mapped[str | None] = mapped_column(String, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __init__(
        self,
        id: str,
        text: str,
        date: str,
        created_at: datetime,
        completed: bool = False,
        priority: str = Priority.MEDIUM.value,
        category_id: str | None = None,
        order: int = 0,
    ):
        self.id = id
        self.text = text
        self.date = date
        self.created_at = created_at
        self.completed = completed
        self.priority = priority
        self.category_id = category_id
        self.order = order
