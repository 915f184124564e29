# catering/repositories/catalog_repository.py
from typing import List

from tortoise import connections

from catering.domain.entities import CustomerInfo, DishRecipe, RecipeLine
from catering.models.customer import Customer
from catering.models.dish import Dish, DishIngredient
from catering.exceptions.customer_exceptions import CustomerNotFoundError
from catering.exceptions.dish_exceptions import DishNotFoundError


class CatalogRepository:
    """
    Read access to dishes with their recipes, and to customers.

    Bound to one named Tortoise connection so that callers decide which
    database the core reads from.
    """

    def __init__(self, connection_name: str = "default") -> None:
        self.connection_name = connection_name

    @property
    def _db(self):
        return connections.get(self.connection_name)

    async def resolve_recipe(self, dish_id: str) -> List[RecipeLine]:
        """
        Recipe lines of a dish ordered by ingredient name.

        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        if not await Dish.filter(id=dish_id).using_db(self._db).exists():
            raise DishNotFoundError(dish_id)
        return await self._recipe_lines(dish_id)

    async def _recipe_lines(self, dish_id: str) -> List[RecipeLine]:
        rows = await DishIngredient.filter(dish_id=dish_id).using_db(self._db).prefetch_related("ingredient")
        rows.sort(key=lambda row: row.ingredient.name)
        return [
            RecipeLine(
                ingredient_id=str(row.ingredient_id),
                ingredient_name=row.ingredient.name,
                amount_per_base=row.amount_per_base,
                unit=row.unit
            )
            for row in rows
        ]

    async def get_dish(self, dish_id: str) -> DishRecipe:
        """
        Dish with base size, pricing and recipe.

        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        dish = await Dish.get_or_none(id=dish_id, using_db=self._db)
        if not dish:
            raise DishNotFoundError(dish_id)

        return DishRecipe(
            id=str(dish.id),
            name=dish.name,
            base_quantity=dish.base_quantity,
            base_unit=dish.base_unit,
            price_per_base=dish.price_per_base,
            cost_per_base=dish.cost_per_base,
            lines=await self._recipe_lines(dish.id)
        )

    async def get_customer(self, customer_id: str) -> CustomerInfo:
        """
        Raises:
            CustomerNotFoundError: If customer doesn't exist
        """
        customer = await Customer.get_or_none(id=customer_id, using_db=self._db)
        if not customer:
            raise CustomerNotFoundError(customer_id)
        return CustomerInfo(
            id=str(customer.id),
            name=customer.name,
            phone=customer.phone,
            email=customer.email,
            address=customer.address
        )
