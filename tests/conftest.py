# tests/conftest.py
from dataclasses import dataclass
from typing import Dict

import pytest
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from catering.core.config import settings
from catering.core.database import tortoise_config
from catering.main import app
from catering.models.category import Category
from catering.models.customer import Customer
from catering.models.dish import Dish, DishIngredient
from catering.models.ingredient import Ingredient
from catering.models.user import User, UserRole
from catering.repositories.catalog_repository import CatalogRepository
from catering.repositories.order_repository import OrderRepository
from catering.services.auth_service import AuthService
from catering.services.order_service import OrderService
from catering.services.report_service import ReportService


@pytest.fixture(autouse=True)
async def db():
    await Tortoise.init(config=tortoise_config("sqlite://:memory:", with_migrations=False))
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()


@pytest.fixture
async def admin() -> User:
    return await User.create(email="admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
async def staff() -> User:
    return await User.create(email="staff@example.com")


@pytest.fixture
async def other_staff() -> User:
    return await User.create(email="other@example.com")


@dataclass
class Catalog:
    ingredients: Dict[str, Ingredient]
    pilaf: Dish
    soup: Dish
    customer: Customer


@pytest.fixture
async def catalog() -> Catalog:
    """Rice pilaf per 1 kg (rice, water, salt) and a soup per 2 litre that also uses salt."""
    staples = await Category.create(name="Staples")
    ingredients = {
        name: await Ingredient.create(name=name, category=staples)
        for name in ("Rice", "Water", "Salt")
    }

    pilaf = await Dish.create(
        name="Rice pilaf",
        base_quantity=1,
        base_unit="kg",
        price_per_base=10.0,
        cost_per_base=4.0
    )
    await DishIngredient.create(dish=pilaf, ingredient=ingredients["Rice"], amount_per_base=1, unit="kg")
    await DishIngredient.create(dish=pilaf, ingredient=ingredients["Water"], amount_per_base=1.5, unit="litre")
    await DishIngredient.create(dish=pilaf, ingredient=ingredients["Salt"], amount_per_base=10, unit="g")

    soup = await Dish.create(name="Soup", base_quantity=2, base_unit="litre", price_per_base=6.0)
    await DishIngredient.create(dish=soup, ingredient=ingredients["Water"], amount_per_base=1.8, unit="litre")
    await DishIngredient.create(dish=soup, ingredient=ingredients["Salt"], amount_per_base=5, unit="g")

    customer = await Customer.create(name="Acme Corp", phone="+15550100", address="1 Main St")

    return Catalog(ingredients=ingredients, pilaf=pilaf, soup=soup, customer=customer)


@pytest.fixture
def order_service() -> OrderService:
    return OrderService(CatalogRepository("default"), OrderRepository("default"))


@pytest.fixture
def report_service() -> ReportService:
    return ReportService(OrderRepository("default"))


async def _client_for(user: User) -> AsyncClient:
    token, _ = await AuthService.open_session(user)
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}={token}"}
    )


@pytest.fixture
async def anonymous_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def admin_client(admin):
    async with await _client_for(admin) as client:
        yield client


@pytest.fixture
async def staff_client(staff):
    async with await _client_for(staff) as client:
        yield client


@pytest.fixture
async def other_client(other_staff):
    async with await _client_for(other_staff) as client:
        yield client
