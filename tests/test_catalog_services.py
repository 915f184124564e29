# tests/test_catalog_services.py
import uuid

import pytest
from pydantic import ValidationError

from catering.models.dish import DishIngredient
from catering.schemas.category import CategoryCreateSchema, CategoryUpdateSchema
from catering.schemas.customer import CustomerCreateSchema, CustomerUpdateSchema
from catering.schemas.dish import DishCreateSchema, DishUpdateSchema
from catering.schemas.ingredient import IngredientCreateSchema
from catering.schemas.order import OrderCreateSchema, OrderDishSchema
from catering.services.category_service import CategoryService
from catering.services.customer_service import CustomerService
from catering.services.dish_service import DishService
from catering.services.ingredient_service import IngredientService
from catering.exceptions.catalog_exceptions import (
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
    IngredientInUseError,
    IngredientNotFoundError,
)
from catering.exceptions.customer_exceptions import CustomerInUseError
from catering.exceptions.dish_exceptions import (
    DishAlreadyExistsError,
    DishInUseError,
    DuplicateRecipeLineError,
)


class TestCategories:
    async def test_names_are_unique(self):
        await CategoryService.create_category(CategoryCreateSchema(name="Dairy"))

        with pytest.raises(CategoryAlreadyExistsError):
            await CategoryService.create_category(CategoryCreateSchema(name="Dairy"))

    async def test_rename(self):
        category = await CategoryService.create_category(CategoryCreateSchema(name="Dairy"))

        renamed = await CategoryService.update_category(
            str(category.id), CategoryUpdateSchema(name="Milk products")
        )

        assert renamed.name == "Milk products"

    async def test_category_with_ingredients_cannot_be_deleted(self, catalog):
        category_id = str(catalog.ingredients["Rice"].category_id)

        with pytest.raises(CategoryInUseError):
            await CategoryService.delete_category(category_id)

    async def test_empty_category_is_deleted(self):
        category = await CategoryService.create_category(CategoryCreateSchema(name="Spices"))

        await CategoryService.delete_category(str(category.id))

        with pytest.raises(CategoryNotFoundError):
            await CategoryService.get_category_by_id(str(category.id))


class TestIngredients:
    async def test_create_requires_existing_category(self):
        with pytest.raises(CategoryNotFoundError):
            await IngredientService.create_ingredient(
                IngredientCreateSchema(name="Basil", category_id=str(uuid.uuid4()))
            )

    async def test_ingredient_in_recipe_cannot_be_deleted(self, catalog):
        with pytest.raises(IngredientInUseError):
            await IngredientService.delete_ingredient(str(catalog.ingredients["Salt"].id))

    async def test_unused_ingredient_is_deleted(self, catalog):
        category_id = str(catalog.ingredients["Rice"].category_id)
        basil = await IngredientService.create_ingredient(
            IngredientCreateSchema(name="Basil", category_id=category_id)
        )

        await IngredientService.delete_ingredient(str(basil.id))

        with pytest.raises(IngredientNotFoundError):
            await IngredientService.get_ingredient_by_id(str(basil.id))


class TestDishes:
    async def test_create_with_recipe(self, catalog):
        dish = await DishService.create_dish(DishCreateSchema(
            name="Fried rice",
            base_quantity=2,
            base_unit="kg",
            price_per_base=12,
            ingredients=[
                {"ingredient_id": str(catalog.ingredients["Rice"].id), "amount_per_base": 0.9, "unit": "kg"},
                {"ingredient_id": str(catalog.ingredients["Salt"].id), "amount_per_base": 8, "unit": "g"},
            ]
        ))

        assert dish.base_unit == "kg"
        assert sorted(line.ingredient.name for line in dish.recipe_lines) == ["Rice", "Salt"]

    async def test_duplicate_recipe_line_is_rejected(self, catalog):
        rice = str(catalog.ingredients["Rice"].id)

        with pytest.raises(DuplicateRecipeLineError):
            await DishService.create_dish(DishCreateSchema(
                name="Double rice",
                base_quantity=1,
                base_unit="kg",
                ingredients=[
                    {"ingredient_id": rice, "amount_per_base": 1, "unit": "kg"},
                    {"ingredient_id": rice, "amount_per_base": 2, "unit": "kg"},
                ]
            ))

    async def test_unknown_recipe_ingredient_is_rejected(self, catalog):
        with pytest.raises(IngredientNotFoundError):
            await DishService.create_dish(DishCreateSchema(
                name="Mystery",
                base_quantity=1,
                base_unit="kg",
                ingredients=[{"ingredient_id": str(uuid.uuid4()), "amount_per_base": 1, "unit": "kg"}]
            ))

    async def test_names_are_unique(self, catalog):
        with pytest.raises(DishAlreadyExistsError):
            await DishService.create_dish(DishCreateSchema(name="Soup", base_quantity=1, base_unit="litre"))

    async def test_update_replaces_recipe_when_given(self, catalog):
        water = str(catalog.ingredients["Water"].id)

        dish = await DishService.update_dish(str(catalog.pilaf.id), DishUpdateSchema(
            price_per_base=11,
            ingredients=[{"ingredient_id": water, "amount_per_base": 2, "unit": "litre"}]
        ))

        assert dish.price_per_base == 11
        assert dish.base_quantity == 1
        assert [(line.ingredient.name, line.amount_per_base) for line in dish.recipe_lines] == [("Water", 2)]
        assert await DishIngredient.filter(dish_id=catalog.pilaf.id).count() == 1

    async def test_update_without_ingredients_keeps_recipe(self, catalog):
        dish = await DishService.update_dish(str(catalog.pilaf.id), DishUpdateSchema(name="Pilaf"))

        assert dish.name == "Pilaf"
        assert len(dish.recipe_lines) == 3

    async def test_dish_used_by_order_cannot_be_deleted(self, catalog, order_service, staff):
        await order_service.create_order(OrderCreateSchema(
            customer_id=str(catalog.customer.id),
            dishes=[{"dish_id": str(catalog.soup.id), "requested_quantity": 2, "requested_unit": "litre"}]
        ), staff)

        with pytest.raises(DishInUseError):
            await DishService.delete_dish(str(catalog.soup.id))

    async def test_unused_dish_is_deleted_with_recipe(self, catalog):
        await DishService.delete_dish(str(catalog.pilaf.id))

        assert await DishIngredient.filter(dish_id=catalog.pilaf.id).count() == 0

    def test_recipe_amount_must_be_positive(self):
        with pytest.raises(ValidationError):
            DishCreateSchema(
                name="Bad",
                base_quantity=1,
                base_unit="kg",
                ingredients=[{"ingredient_id": "x", "amount_per_base": 0, "unit": "kg"}]
            )


    @pytest.mark.parametrize("field", ["base_quantity", "price_per_base", "cost_per_base"])
    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_dish_numbers_must_be_finite(self, field, value):
        with pytest.raises(ValidationError):
            DishUpdateSchema(**{field: value})

    def test_requested_quantity_must_be_finite(self):
        with pytest.raises(ValidationError):
            OrderDishSchema(dish_id="d", requested_quantity=float("inf"), requested_unit="kg")


class TestCustomers:
    async def test_blank_optional_fields_are_stored_as_null(self):
        customer = await CustomerService.create_customer(
            CustomerCreateSchema(name=" Bistro ", phone="", email="  ")
        )

        assert customer.name == "Bistro"
        assert customer.phone is None
        assert customer.email is None

    def test_invalid_email_is_rejected(self):
        with pytest.raises(ValidationError):
            CustomerCreateSchema(name="Bistro", email="not-an-email")

    async def test_partial_update(self, catalog):
        customer = await CustomerService.update_customer(
            str(catalog.customer.id), CustomerUpdateSchema(email="orders@acme.com")
        )

        assert customer.email == "orders@acme.com"
        assert customer.name == "Acme Corp"

    async def test_customer_with_orders_cannot_be_deleted(self, catalog, order_service, staff):
        await order_service.create_order(OrderCreateSchema(
            customer_id=str(catalog.customer.id),
            dishes=[{"dish_id": str(catalog.pilaf.id), "requested_quantity": 1, "requested_unit": "kg"}]
        ), staff)

        with pytest.raises(CustomerInUseError):
            await CustomerService.delete_customer(str(catalog.customer.id))
