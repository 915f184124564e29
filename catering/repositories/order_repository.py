# catering/repositories/order_repository.py
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, List, Optional

from tortoise import connections
from tortoise.transactions import in_transaction

from catering.domain.entities import (
    CustomerInfo,
    OrderItemRecord,
    OrderLineRecord,
    OrderMetadata,
    OrderRecord,
    PlannedItem,
)
from catering.core.security import utc_now
from catering.models.order import Order, OrderIngredient, OrderItem
from catering.exceptions.order_exceptions import OrderNotFoundError

ORDER_PREFETCH = ("customer", "items__dish", "items__ingredients__ingredient")


class OrderRepository:
    """
    Persistence of orders with their items and ingredient lines.

    Every write runs in a single transaction on the bound connection, so an
    order header never exists without its items.
    """

    def __init__(self, connection_name: str = "default") -> None:
        self.connection_name = connection_name

    @property
    def _db(self):
        return connections.get(self.connection_name)

    async def insert_order(
            self,
            user_id: str,
            customer_id: str,
            metadata: OrderMetadata,
            items: List[PlannedItem]
    ) -> str:
        """
        Insert an order header with all items and lines.

        Returns:
            Id of the new order
        """
        async with in_transaction(self.connection_name) as conn:
            order = await Order.create(
                using_db=conn,
                user_id=user_id,
                customer_id=customer_id,
                person_count=metadata.person_count,
                booking_date=metadata.booking_date,
                booking_time=metadata.booking_time,
                delivery_date=metadata.delivery_date,
                delivery_time=metadata.delivery_time,
                delivery_address=metadata.delivery_address,
                notes=metadata.notes
            )
            await self._insert_items(conn, order.id, items)

        return str(order.id)

    async def update_order(
            self,
            order_id: str,
            header: Dict[str, Any],
            items: Optional[List[PlannedItem]] = None
    ) -> None:
        """
        Update header fields and, when items are given, replace all items.

        updated_at is bumped on every call, including item-only replacements.

        Args:
            order_id: Order UUID
            header: Order fields to overwrite
            items: New item list, or None to keep the current items
        """
        async with in_transaction(self.connection_name) as conn:
            await Order.filter(id=order_id).using_db(conn).update(updated_at=utc_now(), **header)
            if items is not None:
                await self._delete_items(conn, order_id)
                await self._insert_items(conn, order_id, items)

    async def delete_order(self, order_id: str) -> None:
        """Delete an order together with its items and ingredient lines."""
        async with in_transaction(self.connection_name) as conn:
            await self._delete_items(conn, order_id)
            await Order.filter(id=order_id).using_db(conn).delete()

    async def get_order(self, order_id: str) -> OrderRecord:
        """
        Raises:
            OrderNotFoundError: If order doesn't exist
        """
        order = await Order.get_or_none(id=order_id, using_db=self._db).prefetch_related(*ORDER_PREFETCH)
        if not order:
            raise OrderNotFoundError(order_id)
        return self._to_record(order)

    async def list_orders(
            self,
            user_id: Optional[str] = None,
            customer_id: Optional[str] = None,
            created_from: Optional[date] = None,
            created_to: Optional[date] = None
    ) -> List[OrderRecord]:
        """
        Orders newest first, optionally filtered.

        Args:
            user_id: Only orders owned by this user
            customer_id: Only orders of this customer
            created_from: First creation day included
            created_to: Last creation day included
        """
        query = Order.all().using_db(self._db)

        if user_id:
            query = query.filter(user_id=user_id)
        if customer_id:
            query = query.filter(customer_id=customer_id)
        if created_from:
            query = query.filter(
                created_at__gte=datetime.combine(created_from, time.min, tzinfo=timezone.utc)
            )
        if created_to:
            query = query.filter(
                created_at__lt=datetime.combine(
                    created_to + timedelta(days=1), time.min, tzinfo=timezone.utc
                )
            )

        orders = await query.order_by("-created_at").prefetch_related(*ORDER_PREFETCH)
        return [self._to_record(order) for order in orders]

    @staticmethod
    async def _insert_items(conn, order_id: str, items: List[PlannedItem]) -> None:
        for position, planned in enumerate(items):
            item = await OrderItem.create(
                using_db=conn,
                order_id=order_id,
                dish_id=planned.dish_id,
                position=position,
                requested_quantity=planned.requested_quantity,
                requested_unit=planned.requested_unit,
                scale_factor=planned.scale_factor
            )
            lines = [
                OrderIngredient(
                    order_item_id=item.id,
                    ingredient_id=line.ingredient_id,
                    position=line_position,
                    scaled_amount=line.scaled_amount,
                    unit=line.unit
                )
                for line_position, line in enumerate(planned.lines)
            ]
            if lines:
                await OrderIngredient.bulk_create(lines, using_db=conn)

    @staticmethod
    async def _delete_items(conn, order_id: str) -> None:
        item_ids = await OrderItem.filter(order_id=order_id).using_db(conn).values_list("id", flat=True)
        if item_ids:
            await OrderIngredient.filter(order_item_id__in=list(item_ids)).using_db(conn).delete()
            await OrderItem.filter(id__in=list(item_ids)).using_db(conn).delete()

    @staticmethod
    def _to_record(order: Order) -> OrderRecord:
        items = sorted(order.items, key=lambda i: i.position)
        return OrderRecord(
            id=str(order.id),
            user_id=str(order.user_id),
            customer=CustomerInfo(
                id=str(order.customer.id),
                name=order.customer.name,
                phone=order.customer.phone,
                email=order.customer.email,
                address=order.customer.address
            ),
            metadata=OrderMetadata(
                person_count=order.person_count,
                booking_date=order.booking_date,
                booking_time=order.booking_time,
                delivery_date=order.delivery_date,
                delivery_time=order.delivery_time,
                delivery_address=order.delivery_address,
                notes=order.notes
            ),
            created_at=order.created_at,
            items=[
                OrderItemRecord(
                    id=str(item.id),
                    dish_id=str(item.dish_id),
                    dish_name=item.dish.name,
                    requested_quantity=item.requested_quantity,
                    requested_unit=item.requested_unit,
                    scale_factor=item.scale_factor,
                    price_per_base=item.dish.price_per_base,
                    cost_per_base=item.dish.cost_per_base,
                    lines=[
                        OrderLineRecord(
                            ingredient_id=str(line.ingredient_id),
                            ingredient_name=line.ingredient.name,
                            scaled_amount=line.scaled_amount,
                            unit=line.unit
                        )
                        for line in sorted(item.ingredients, key=lambda ln: ln.position)
                    ]
                )
                for item in items
            ]
        )
