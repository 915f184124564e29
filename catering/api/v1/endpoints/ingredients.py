# catering/api/v1/endpoints/ingredients.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List

from catering.schemas.ingredient import (
    IngredientCreateSchema,
    IngredientUpdateSchema,
    IngredientResponseSchema
)
from catering.services.ingredient_service import IngredientService
from catering.api.v1.dependencies.auth import get_current_user, require_admin
from catering.models.user import User
from catering.exceptions.catalog_exceptions import (
    CategoryNotFoundError,
    IngredientNotFoundError,
    IngredientAlreadyExistsError,
    IngredientInUseError
)

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("", response_model=List[IngredientResponseSchema])
async def get_ingredients(
        _: User = Depends(get_current_user)
) -> List[IngredientResponseSchema]:
    """Retrieve all ingredients with their category."""
    ingredients = await IngredientService.get_all_ingredients()
    return [IngredientResponseSchema.from_orm_ingredient(i) for i in ingredients]


@router.get("/{ingredient_id}", response_model=IngredientResponseSchema)
async def get_ingredient(
        ingredient_id: str,
        _: User = Depends(get_current_user)
) -> IngredientResponseSchema:
    try:
        ingredient = await IngredientService.get_ingredient_by_id(ingredient_id)
        return IngredientResponseSchema.from_orm_ingredient(ingredient)
    except IngredientNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.post(
    "",
    response_model=IngredientResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_ingredient(
        ingredient_data: IngredientCreateSchema,
        _: User = Depends(require_admin)
) -> IngredientResponseSchema:
    """
    Create an ingredient.

    Raises:
        HTTPException: 404 if category not found, 409 if the name is taken
    """
    try:
        ingredient = await IngredientService.create_ingredient(ingredient_data)
        return IngredientResponseSchema.from_orm_ingredient(ingredient)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except IngredientAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.put("/{ingredient_id}", response_model=IngredientResponseSchema)
async def update_ingredient(
        ingredient_id: str,
        ingredient_data: IngredientUpdateSchema,
        _: User = Depends(require_admin)
) -> IngredientResponseSchema:
    """
    Update an ingredient.

    Raises:
        HTTPException: 404 if ingredient or category not found, 409 if the name is taken
    """
    try:
        ingredient = await IngredientService.update_ingredient(ingredient_id, ingredient_data)
        return IngredientResponseSchema.from_orm_ingredient(ingredient)
    except (IngredientNotFoundError, CategoryNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except IngredientAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(
        ingredient_id: str,
        _: User = Depends(require_admin)
) -> None:
    """
    Delete an ingredient.

    Raises:
        HTTPException: 404 if ingredient not found, 409 if recipes or orders use it
    """
    try:
        await IngredientService.delete_ingredient(ingredient_id)
    except IngredientNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except IngredientInUseError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
