from fastapi import Depends

from src.categories.service import CategoryService
from src.storage.base import StorageBackend
from src.storage.dependencies import get_storage


def get_category_service(
    storage: StorageBackend = Depends(get_storage),
) -> CategoryService:
    return CategoryService(storage=storage)
