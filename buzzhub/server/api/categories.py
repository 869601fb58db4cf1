"""
API endpoints for post categories.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from buzzhub.core.database.entities import Category
from buzzhub.core.errors import NotFoundError
from buzzhub.core.logging_config import get_logger
from buzzhub.core.models.io import CategoryCreate, CategoryRead, CategoryUpdate
from buzzhub.server.services.deps import StorageDep

logger = get_logger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


def _not_found(category_id: int) -> NotFoundError:
    return NotFoundError("Category", category_id)


@router.get("", response_model=List[CategoryRead], summary="List Categories")
async def list_categories(storage: StorageDep) -> List[CategoryRead]:
    return [CategoryRead.model_validate(category) for category in await storage.get_categories()]


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get Category",
    responses={404: {"description": "Category not found"}},
)
async def get_category(category_id: int, storage: StorageDep) -> CategoryRead:
    category = await storage.get_category(category_id)
    if category is None:
        raise _not_found(category_id)
    return CategoryRead.model_validate(category)


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    responses={
        201: {"description": "Category created"},
        409: {"description": "A category with this name already exists"},
    },
)
async def create_category(data: CategoryCreate, storage: StorageDep) -> CategoryRead:
    """
    Create a new category.

    Category names are unique; posts reference their category by name.
    """
    if await storage.get_category_by_name(data.name) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Category '{data.name}' already exists")
    category = await storage.create_category(Category(**data.model_dump()))
    logger.info(f"Created category {category.id} '{category.name}'")
    return CategoryRead.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update Category",
    description="Partially update a category. Only provided fields are changed.",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "A category with this name already exists"},
    },
)
async def update_category(category_id: int, data: CategoryUpdate, storage: StorageDep) -> CategoryRead:
    updates = data.model_dump(exclude_unset=True)
    if updates.get("name"):
        existing = await storage.get_category_by_name(updates["name"])
        if existing is not None and existing.id != category_id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=f"Category '{updates['name']}' already exists"
            )
    category = await storage.update_category(category_id, updates)
    if category is None:
        raise _not_found(category_id)
    return CategoryRead.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Category",
    responses={404: {"description": "Category not found"}},
)
async def delete_category(category_id: int, storage: StorageDep) -> None:
    """
    Delete a category.

    Posts keep their category name; they are not deleted or reassigned.
    """
    if not await storage.delete_category(category_id):
        raise _not_found(category_id)
