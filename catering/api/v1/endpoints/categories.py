# catering/api/v1/endpoints/categories.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List

from catering.schemas.category import (
    CategoryCreateSchema,
    CategoryUpdateSchema,
    CategoryResponseSchema
)
from catering.services.category_service import CategoryService
from catering.api.v1.dependencies.auth import get_current_user, require_admin
from catering.models.user import User
from catering.exceptions.catalog_exceptions import (
    CategoryNotFoundError,
    CategoryAlreadyExistsError,
    CategoryInUseError
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponseSchema])
async def get_categories(
        _: User = Depends(get_current_user)
) -> List[CategoryResponseSchema]:
    """Retrieve all ingredient categories ordered by name."""
    categories = await CategoryService.get_all_categories()
    return [CategoryResponseSchema.from_orm_category(c) for c in categories]


@router.get("/{category_id}", response_model=CategoryResponseSchema)
async def get_category(
        category_id: str,
        _: User = Depends(get_current_user)
) -> CategoryResponseSchema:
    try:
        category = await CategoryService.get_category_by_id(category_id)
        return CategoryResponseSchema.from_orm_category(category)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.post(
    "",
    response_model=CategoryResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_category(
        category_data: CategoryCreateSchema,
        _: User = Depends(require_admin)
) -> CategoryResponseSchema:
    """
    Create a new category.

    Raises:
        HTTPException: 409 if the name is taken
    """
    try:
        category = await CategoryService.create_category(category_data)
        return CategoryResponseSchema.from_orm_category(category)
    except CategoryAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.put("/{category_id}", response_model=CategoryResponseSchema)
async def update_category(
        category_id: str,
        category_data: CategoryUpdateSchema,
        _: User = Depends(require_admin)
) -> CategoryResponseSchema:
    """
    Rename a category.

    Raises:
        HTTPException: 404 if category not found, 409 if the name is taken
    """
    try:
        category = await CategoryService.update_category(category_id, category_data)
        return CategoryResponseSchema.from_orm_category(category)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except CategoryAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
        category_id: str,
        _: User = Depends(require_admin)
) -> None:
    """
    Delete a category that holds no ingredients.

    Raises:
        HTTPException: 404 if category not found, 409 if ingredients use it
    """
    try:
        await CategoryService.delete_category(category_id)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except CategoryInUseError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
