from datetime import datetime, timezone
from uuid import uuid4
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.common.current_datetime import get_current_datetime
from src.storage.base import StorageBackend, category_sort_key
from src.storage.postgres.model import Base, CategoryModel, TaskModel
from src.storage.schemas import (
    Category,
    CategoryUpdate,
    InsertCategory,
    InsertTask,
    Task,
    TaskUpdate,
)


def as_utc(timestamp: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def to_task(task: TaskModel) -> Task:
    return Task(
        id=task.id,
        text=task.text,
        completed=task.completed,
        date=task.date,
        priority=task.priority,
        category_id=task.category_id,
        order=task.order,
        created_at=as_utc(task.created_at),
    )


def to_category(category: CategoryModel) -> Category:
    return Category(
        id=category.id,
        name=category.name,
        color=category.color,
        created_at=as_utc(category.created_at),
    )


class PostgresStore(StorageBackend):
    def __init__(self, database_url: str):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False)
        Base.metadata.create_all(self.engine)

    def get_tasks_by_date(self, date: str) -> list[Task]:
        with self.Session() as session:
            tasks = (
                session.query(TaskModel)
                .filter_by(date=date)
                .order_by(TaskModel.order, TaskModel.created_at)
                .all()
            )
            return [to_task(task) for task in tasks]

    def get_task(self, task_id: str) -> Task | None:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)
            return to_task(task) if task else None

    def create_task(self, task_input: InsertTask) -> Task:
        with self.Session() as session:
            new_task = TaskModel(
                id=str(uuid4()),
                text=task_input.text,
                date=task_input.date,
                completed=task_input.completed,
                priority=task_input.priority.value,
                category_id=task_input.category_id,
                order=task_input.order,
                created_at=get_current_datetime(),
            )
            session.add(new_task)
            session.commit()

            return to_task(new_task)

    def update_task(self, task_id: str, updates: TaskUpdate) -> Task | None:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                return None

            for field, value in updates.changes().items():
                setattr(task, field, value)

            session.commit()

            return to_task(task)

    def delete_task(self, task_id: str) -> bool:
        with self.Session() as session:
            deleted = session.query(TaskModel).filter_by(id=task_id).delete()
            session.commit()
            return deleted > 0

    def get_all_tasks(self) -> list[Task]:
        with self.Session() as session:
            tasks = (
                session.query(TaskModel)
                .order_by(TaskModel.date, TaskModel.order, TaskModel.created_at)
                .all()
            )
            return [to_task(task) for task in tasks]

    def get_all_categories(self) -> list[Category]:
        with self.Session() as session:
            categories = session.query(CategoryModel).all()
            return sorted(
                (to_category(category) for category in categories),
                key=category_sort_key,
            )

    def get_category(self, category_id: str) -> Category | None:
        with self.Session() as session:
            category = session.get(CategoryModel, category_id)
            return to_category(category) if category else None

    def create_category(self, category_input: InsertCategory) -> Category:
        with self.Session() as session:
            new_category = CategoryModel(
                id=str(uuid4()),
                name=category_input.name,
                color=category_input.color,
                created_at=get_current_datetime(),
            )
            session.add(new_category)
            session.commit()

            return to_category(new_category)

    def update_category(
        self, category_id: str, updates: CategoryUpdate
    ) -> Category | None:
        with self.Session() as session:
            category = session.get(CategoryModel, category_id)

            if not category:
                return None

            for field, value in updates.changes().items():
                setattr(category, field, value)

            session.commit()

            return to_category(category)

    def delete_category(self, category_id: str) -> bool:
        with self.Session() as session:
            deleted = session.query(CategoryModel).filter_by(id=category_id).delete()

            if deleted:
                session.query(TaskModel).filter_by(category_id=category_id).update(
                    {TaskModel.category_id: None}
                )

            session.commit()
            return deleted > 0

    def close(self) -> None:
        self.engine.dispose()
