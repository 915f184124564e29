# catering/api/v1/endpoints/dishes.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List

from catering.schemas.dish import (
    DishCreateSchema,
    DishUpdateSchema,
    DishResponseSchema,
    RecipeLineResponseSchema
)
from catering.services.dish_service import DishService
from catering.services.order_service import OrderService
from catering.api.v1.dependencies.auth import get_current_user, require_admin
from catering.api.v1.dependencies.services import get_order_service
from catering.models.user import User
from catering.exceptions.dish_exceptions import (
    DishNotFoundError,
    DishAlreadyExistsError,
    DishInUseError,
    DuplicateRecipeLineError
)
from catering.exceptions.catalog_exceptions import IngredientNotFoundError

router = APIRouter(prefix="/dishes", tags=["dishes"])


@router.get("", response_model=List[DishResponseSchema])
async def get_dishes(
        _: User = Depends(get_current_user)
) -> List[DishResponseSchema]:
    """
    Retrieve all dishes with their recipes.

    Returns:
        List of dishes
    """
    dishes = await DishService.get_all_dishes()
    return [DishResponseSchema.from_orm_dish(dish) for dish in dishes]


@router.get("/{dish_id}", response_model=DishResponseSchema)
async def get_dish(
        dish_id: str,
        _: User = Depends(get_current_user)
) -> DishResponseSchema:
    """
    Retrieve a single dish by ID.

    Raises:
        HTTPException: 404 if dish not found
    """
    try:
        dish = await DishService.get_dish_by_id(dish_id)
        return DishResponseSchema.from_orm_dish(dish)
    except DishNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("/{dish_id}/recipe", response_model=List[RecipeLineResponseSchema])
async def get_dish_recipe(
        dish_id: str,
        _: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> List[RecipeLineResponseSchema]:
    """
    Recipe lines of a dish, ordered by ingredient name.

    Raises:
        HTTPException: 404 if dish not found
    """
    try:
        lines = await order_service.resolve_recipe(dish_id)
        return [RecipeLineResponseSchema.from_recipe_line(line) for line in lines]
    except DishNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.post(
    "",
    response_model=DishResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_dish(
        dish_data: DishCreateSchema,
        _: User = Depends(require_admin)
) -> DishResponseSchema:
    """
    Create a new dish with its recipe.

    Args:
        dish_data: Dish creation data including recipe lines

    Returns:
        Created dish data

    Raises:
        HTTPException: 400 if the recipe is invalid, 404 if an ingredient is missing,
            409 if the name is taken
    """
    try:
        dish = await DishService.create_dish(dish_data)
        return DishResponseSchema.from_orm_dish(dish)
    except IngredientNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except DuplicateRecipeLineError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except DishAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.put("/{dish_id}", response_model=DishResponseSchema)
async def update_dish(
        dish_id: str,
        dish_data: DishUpdateSchema,
        _: User = Depends(require_admin)
) -> DishResponseSchema:
    """
    Update an existing dish.

    Args:
        dish_id: UUID of the dish to update
        dish_data: Updated dish data

    Returns:
        Updated dish data

    Raises:
        HTTPException: 404 if dish or ingredient not found, 400 if the recipe is invalid,
            409 if the name is taken
    """
    try:
        dish = await DishService.update_dish(dish_id, dish_data)
        return DishResponseSchema.from_orm_dish(dish)
    except (DishNotFoundError, IngredientNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except DuplicateRecipeLineError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except DishAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete("/{dish_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dish(
        dish_id: str,
        _: User = Depends(require_admin)
) -> None:
    """
    Delete a dish.

    Raises:
        HTTPException: 404 if dish not found, 409 if orders reference it
    """
    try:
        await DishService.delete_dish(dish_id)
    except DishNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except DishInUseError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
