import logging

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.storage.base import StorageBackend
from src.storage.schemas import Category, CategoryUpdate, InsertCategory

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, storage: StorageBackend):
        self.storage = storage

    def list_categories(self) -> list[Category]:
        return self.storage.get_all_categories()

    def get_category(self, category_id: str) -> Category:
        category = self.storage.get_category(category_id)

        if not category:
            raise ResourceNotFoundException(ResourceType.CATEGORY, category_id)

        return category

    def create_category(self, category_input: InsertCategory) -> Category:
        category = self.storage.create_category(category_input)
        logger.info(f"Created category {category.id} '{category.name}'")
        return category

    def update_category(self, category_id: str, updates: CategoryUpdate) -> Category:
        category = self.storage.update_category(category_id, updates)

        if not category:
            raise ResourceNotFoundException(ResourceType.CATEGORY, category_id)

        return category

    def delete_category(self, category_id: str) -> None:
        if not self.storage.delete_category(category_id):
            raise ResourceNotFoundException(ResourceType.CATEGORY, category_id)

        logger.info(f"Deleted category {category_id}")
