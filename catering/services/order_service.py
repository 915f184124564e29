# catering/services/order_service.py
import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from catering.domain.entities import ItemRequest, OrderRecord, PlannedItem, RecipeLine
from catering.domain.projections import (
    IngredientSlip,
    OrderSlip,
    build_ingredient_slip,
    build_order_slip,
)
from catering.domain.scaling import plan_item
from catering.models.user import User
from catering.repositories.catalog_repository import CatalogRepository
from catering.repositories.order_repository import OrderRepository
from catering.schemas.order import OrderCreateSchema, OrderUpdateSchema
from catering.exceptions.order_exceptions import EmptyOrderError, OrderAccessDeniedError

logger = logging.getLogger(__name__)


class OrderService:
    """
    Builds, stores and projects catering orders.

    Every item of an order is validated and scaled before anything is
    written; a single bad item (unknown dish, wrong unit, bad quantity)
    rejects the whole order.
    """

    def __init__(self, catalog: CatalogRepository, orders: OrderRepository) -> None:
        self.catalog = catalog
        self.orders = orders

    async def resolve_recipe(self, dish_id: str) -> List[RecipeLine]:
        """
        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        return await self.catalog.resolve_recipe(dish_id)

    async def plan_items(self, requests: Sequence[ItemRequest]) -> List[PlannedItem]:
        """
        Scale every requested dish.

        Raises:
            EmptyOrderError: If no dish is requested
            DishNotFoundError: If a dish doesn't exist
            UnitMismatchError: If a requested unit isn't the dish base unit
            InvalidQuantityError: If a quantity isn't a positive number
        """
        if not requests:
            raise EmptyOrderError()

        planned = []
        for request in requests:
            dish = await self.catalog.get_dish(request.dish_id)
            planned.append(plan_item(
                dish,
                request.requested_quantity,
                request.requested_unit,
                request.overrides
            ))
        return planned

    @staticmethod
    def verify_order_access(order: OrderRecord, user: User) -> None:
        """
        Raises:
            OrderAccessDeniedError: If user is neither owner nor admin
        """
        if not user.is_admin and order.user_id != str(user.id):
            raise OrderAccessDeniedError()

    async def create_order(self, order_data: OrderCreateSchema, user: User) -> OrderRecord:
        """
        Build and store an order with all of its items.

        Args:
            order_data: Validated order command
            user: Owner of the new order

        Returns:
            Stored order

        Raises:
            CustomerNotFoundError: If customer doesn't exist
            EmptyOrderError: If no dish is requested
            DishNotFoundError: If a dish doesn't exist
            UnitMismatchError: If a requested unit isn't the dish base unit
            InvalidQuantityError: If a quantity isn't a positive number
        """
        customer = await self.catalog.get_customer(order_data.customer_id)
        planned = await self.plan_items([d.to_request() for d in order_data.dishes])

        order_id = await self.orders.insert_order(
            user_id=str(user.id),
            customer_id=customer.id,
            metadata=order_data.to_metadata(),
            items=planned
        )

        logger.info(f"Order created: {order_id} by user {user.id} ({len(planned)} dishes)")

        return await self.orders.get_order(order_id)

    async def get_order(self, order_id: str, user: User) -> OrderRecord:
        """
        Raises:
            OrderNotFoundError: If order doesn't exist
            OrderAccessDeniedError: If user is neither owner nor admin
        """
        order = await self.orders.get_order(order_id)
        self.verify_order_access(order, user)
        return order

    async def list_orders(
            self,
            user: User,
            customer_id: Optional[str] = None,
            created_from: Optional[date] = None,
            created_to: Optional[date] = None
    ) -> List[OrderRecord]:
        """Orders visible to user: their own, or all of them for an admin."""
        return await self.orders.list_orders(
            user_id=None if user.is_admin else str(user.id),
            customer_id=customer_id,
            created_from=created_from,
            created_to=created_to
        )

    async def update_order(
            self,
            order_id: str,
            order_data: OrderUpdateSchema,
            user: User
    ) -> OrderRecord:
        """
        Update header fields and optionally replace every item.

        Raises:
            OrderNotFoundError: If order doesn't exist
            OrderAccessDeniedError: If user is neither owner nor admin
            CustomerNotFoundError: If the new customer doesn't exist
            EmptyOrderError: If an empty dish list is supplied
            DishNotFoundError: If a dish doesn't exist
            UnitMismatchError: If a requested unit isn't the dish base unit
            InvalidQuantityError: If a quantity isn't a positive number
        """
        await self.get_order(order_id, user)

        header = order_data.header_changes()
        if 'customer_id' in header:
            customer = await self.catalog.get_customer(header['customer_id'])
            header['customer_id'] = customer.id

        planned = None
        if order_data.dishes is not None:
            planned = await self.plan_items([d.to_request() for d in order_data.dishes])

        await self.orders.update_order(order_id, header, planned)

        logger.info(
            f"Order updated: {order_id} by user {user.id}"
            + (f" ({len(planned)} dishes replaced)" if planned is not None else "")
        )

        return await self.orders.get_order(order_id)

    async def delete_order(self, order_id: str, user: User) -> None:
        """
        Raises:
            OrderNotFoundError: If order doesn't exist
            OrderAccessDeniedError: If user is neither owner nor admin
        """
        await self.get_order(order_id, user)
        await self.orders.delete_order(order_id)
        logger.info(f"Order deleted: {order_id} by user {user.id}")

    async def get_slips(self, order_id: str, user: User) -> Tuple[IngredientSlip, OrderSlip]:
        """
        Ingredient slip and order slip of one order.

        Raises:
            OrderNotFoundError: If order doesn't exist
            OrderAccessDeniedError: If user is neither owner nor admin
        """
        order = await self.get_order(order_id, user)
        return build_ingredient_slip(order), build_order_slip(order)
