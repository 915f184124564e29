# catering/services/ingredient_service.py
import logging
from typing import List

from tortoise.exceptions import IntegrityError

from catering.models.category import Category
from catering.models.dish import DishIngredient
from catering.models.ingredient import Ingredient
from catering.models.order import OrderIngredient
from catering.schemas.ingredient import IngredientCreateSchema, IngredientUpdateSchema
from catering.exceptions.catalog_exceptions import (
    CategoryNotFoundError,
    IngredientNotFoundError,
    IngredientAlreadyExistsError,
    IngredientInUseError
)

logger = logging.getLogger(__name__)


class IngredientService:
    """Service for managing ingredients."""

    @staticmethod
    async def get_all_ingredients() -> List[Ingredient]:
        return await Ingredient.all().order_by("name").prefetch_related("category")

    @staticmethod
    async def get_ingredient_by_id(ingredient_id: str) -> Ingredient:
        """
        Raises:
            IngredientNotFoundError: If ingredient doesn't exist
        """
        ingredient = await Ingredient.get_or_none(id=ingredient_id).prefetch_related("category")
        if not ingredient:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    @staticmethod
    async def _ensure_category(category_id: str) -> Category:
        category = await Category.get_or_none(id=category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    @staticmethod
    async def create_ingredient(data: IngredientCreateSchema) -> Ingredient:
        """
        Create an ingredient in an existing category.

        Raises:
            CategoryNotFoundError: If category doesn't exist
            IngredientAlreadyExistsError: If the name is taken
        """
        category = await IngredientService._ensure_category(data.category_id)

        if await Ingredient.exists(name=data.name):
            raise IngredientAlreadyExistsError(data.name)

        try:
            ingredient = await Ingredient.create(name=data.name, category=category)
        except IntegrityError:
            raise IngredientAlreadyExistsError(data.name)

        logger.info(f"Ingredient created: {ingredient.id} - {ingredient.name}")
        return await IngredientService.get_ingredient_by_id(ingredient.id)

    @staticmethod
    async def update_ingredient(ingredient_id: str, data: IngredientUpdateSchema) -> Ingredient:
        """
        Raises:
            IngredientNotFoundError: If ingredient doesn't exist
            CategoryNotFoundError: If the new category doesn't exist
            IngredientAlreadyExistsError: If the new name is taken
        """
        ingredient = await IngredientService.get_ingredient_by_id(ingredient_id)

        update_fields = {}

        if data.name is not None and data.name != ingredient.name:
            if await Ingredient.exists(name=data.name):
                raise IngredientAlreadyExistsError(data.name)
            update_fields['name'] = data.name

        if data.category_id is not None:
            category = await IngredientService._ensure_category(data.category_id)
            update_fields['category_id'] = category.id

        if update_fields:
            try:
                await ingredient.update_from_dict(update_fields).save()
            except IntegrityError:
                raise IngredientAlreadyExistsError(data.name)

        return await IngredientService.get_ingredient_by_id(ingredient_id)

    @staticmethod
    async def delete_ingredient(ingredient_id: str) -> None:
        """
        Delete an ingredient that no recipe or order uses.

        Raises:
            IngredientNotFoundError: If ingredient doesn't exist
            IngredientInUseError: If a recipe line or order line references it
        """
        ingredient = await IngredientService.get_ingredient_by_id(ingredient_id)

        in_recipes = await DishIngredient.exists(ingredient_id=ingredient.id)
        in_orders = await OrderIngredient.exists(ingredient_id=ingredient.id)
        if in_recipes or in_orders:
            logger.warning(f"Refusing to delete ingredient {ingredient.id}: still referenced")
            raise IngredientInUseError(ingredient_id)

        await ingredient.delete()
        logger.info(f"Ingredient deleted: {ingredient_id}")
