# catering/services/dish_service.py
import logging
from typing import List, Optional

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from catering.core.security import utc_now
from catering.models.dish import Dish, DishIngredient
from catering.models.ingredient import Ingredient
from catering.models.order import OrderItem
from catering.schemas.dish import DishCreateSchema, DishUpdateSchema, RecipeLineSchema
from catering.exceptions.dish_exceptions import (
    DishNotFoundError,
    DishAlreadyExistsError,
    DishInUseError,
    DuplicateRecipeLineError
)
from catering.exceptions.catalog_exceptions import IngredientNotFoundError

logger = logging.getLogger(__name__)


class DishService:
    """Service for managing dishes and their recipes."""

    @staticmethod
    async def get_all_dishes() -> List[Dish]:
        """
        Retrieve all dishes with their recipe lines.

        Returns:
            List of dishes ordered by name
        """
        return await Dish.all().order_by("name").prefetch_related("recipe_lines__ingredient")

    @staticmethod
    async def get_dish_by_id(dish_id: str) -> Dish:
        """
        Retrieve a single dish by ID.

        Args:
            dish_id: UUID of the dish

        Returns:
            Dish instance

        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        dish = await Dish.get_or_none(id=dish_id).prefetch_related("recipe_lines__ingredient")
        if not dish:
            raise DishNotFoundError(dish_id)
        return dish

    @staticmethod
    async def _validate_recipe(lines: List[RecipeLineSchema]) -> None:
        """
        Check that recipe ingredients exist and appear once.

        Raises:
            DuplicateRecipeLineError: If an ingredient is listed twice
            IngredientNotFoundError: If an ingredient doesn't exist
        """
        seen = set()
        for line in lines:
            if line.ingredient_id in seen:
                raise DuplicateRecipeLineError(line.ingredient_id)
            seen.add(line.ingredient_id)

        if not seen:
            return

        found = await Ingredient.filter(id__in=list(seen)).values_list("id", flat=True)
        found = {str(i) for i in found}
        for ingredient_id in seen:
            if ingredient_id not in found:
                raise IngredientNotFoundError(ingredient_id)

    @staticmethod
    async def _write_recipe(conn, dish_id, lines: List[RecipeLineSchema]) -> None:
        if not lines:
            return
        await DishIngredient.bulk_create(
            [
                DishIngredient(
                    dish_id=dish_id,
                    ingredient_id=line.ingredient_id,
                    amount_per_base=line.amount_per_base,
                    unit=line.unit
                )
                for line in lines
            ],
            using_db=conn
        )

    @staticmethod
    async def create_dish(dish_data: DishCreateSchema) -> Dish:
        """
        Create a new dish together with its recipe.

        Args:
            dish_data: Dish creation data including recipe lines

        Returns:
            Created dish instance

        Raises:
            DishAlreadyExistsError: If the name is taken
            DuplicateRecipeLineError: If an ingredient is listed twice
            IngredientNotFoundError: If a recipe ingredient doesn't exist
        """
        await DishService._validate_recipe(dish_data.ingredients)

        if await Dish.exists(name=dish_data.name):
            raise DishAlreadyExistsError(dish_data.name)

        try:
            async with in_transaction() as conn:
                dish = await Dish.create(
                    using_db=conn,
                    name=dish_data.name,
                    base_quantity=dish_data.base_quantity,
                    base_unit=dish_data.base_unit,
                    price_per_base=dish_data.price_per_base,
                    cost_per_base=dish_data.cost_per_base
                )
                await DishService._write_recipe(conn, dish.id, dish_data.ingredients)
        except IntegrityError:
            raise DishAlreadyExistsError(dish_data.name)

        logger.info(f"Dish created: {dish.id} - {dish.name} ({len(dish_data.ingredients)} ingredients)")

        return await DishService.get_dish_by_id(dish.id)

    @staticmethod
    async def update_dish(dish_id: str, dish_data: DishUpdateSchema) -> Dish:
        """
        Update an existing dish.

        Omitted fields keep their value; a supplied ingredient list replaces
        the whole recipe.

        Args:
            dish_id: UUID of the dish to update
            dish_data: Updated dish data

        Returns:
            Updated dish instance

        Raises:
            DishNotFoundError: If dish doesn't exist
            DishAlreadyExistsError: If the new name is taken
            DuplicateRecipeLineError: If an ingredient is listed twice
            IngredientNotFoundError: If a recipe ingredient doesn't exist
        """
        dish = await DishService.get_dish_by_id(dish_id)

        update_fields = dish_data.model_dump(exclude={'ingredients'}, exclude_none=True)
        new_name: Optional[str] = update_fields.get('name')

        if new_name is not None and new_name != dish.name:
            if await Dish.exists(name=new_name):
                raise DishAlreadyExistsError(new_name)

        if dish_data.ingredients is not None:
            await DishService._validate_recipe(dish_data.ingredients)

        try:
            async with in_transaction() as conn:
                await Dish.filter(id=dish.id).using_db(conn).update(
                    updated_at=utc_now(), **update_fields
                )
                if dish_data.ingredients is not None:
                    await DishIngredient.filter(dish_id=dish.id).using_db(conn).delete()
                    await DishService._write_recipe(conn, dish.id, dish_data.ingredients)
        except IntegrityError:
            raise DishAlreadyExistsError(new_name or dish.name)

        logger.info(f"Dish updated: {dish.id}")

        return await DishService.get_dish_by_id(dish_id)

    @staticmethod
    async def delete_dish(dish_id: str) -> None:
        """
        Delete a dish and its recipe lines.

        Args:
            dish_id: UUID of the dish to delete

        Raises:
            DishNotFoundError: If dish doesn't exist
            DishInUseError: If order items reference the dish
        """
        dish = await DishService.get_dish_by_id(dish_id)

        if await OrderItem.exists(dish_id=dish.id):
            logger.warning(f"Refusing to delete dish {dish.id}: orders reference it")
            raise DishInUseError(dish_id)

        async with in_transaction() as conn:
            await DishIngredient.filter(dish_id=dish.id).using_db(conn).delete()
            await Dish.filter(id=dish.id).using_db(conn).delete()

        logger.info(f"Dish deleted: {dish_id}")
