from fastapi import APIRouter, Depends, status

from src.categories.dependencies import get_category_service
from src.categories.service import CategoryService
from src.common.exceptions import ResourceType, resource_not_found_response
from src.storage.schemas import Category, CategoryUpdate, InsertCategory


router = APIRouter(
    prefix="/api/categories",
    tags=["Categories"],
)


@router.get("")
def list_categories(
    category_service: CategoryService = Depends(get_category_service),
) -> list[Category]:
    return category_service.list_categories()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    category_input: InsertCategory,
    category_service: CategoryService = Depends(get_category_service),
) -> Category:
    return category_service.create_category(category_input)


@router.get(
    "/{category_id}",
    responses={**resource_not_found_response(ResourceType.CATEGORY)},
)
def get_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
) -> Category:
    return category_service.get_category(category_id)


@router.patch(
    "/{category_id}",
    responses={**resource_not_found_response(ResourceType.CATEGORY)},
)
def update_category(
    category_id: str,
    updates: CategoryUpdate,
    category_service: CategoryService = Depends(get_category_service),
) -> Category:
    return category_service.update_category(category_id, updates)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.CATEGORY)},
)
def delete_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
):
    category_service.delete_category(category_id)
