# catering/api/v1/endpoints/orders.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status, Depends, Query

from catering.schemas.order import (
    OrderCreateSchema,
    OrderUpdateSchema,
    OrderResponseSchema,
    OrderSlipsResponseSchema,
    IngredientSlipSchema,
    OrderSlipSchema
)
from catering.services.order_service import OrderService
from catering.api.v1.dependencies.auth import get_current_user
from catering.api.v1.dependencies.services import get_order_service
from catering.models.user import User
from catering.exceptions.order_exceptions import (
    EmptyOrderError,
    InvalidQuantityError,
    UnitMismatchError,
    OrderNotFoundError,
    OrderAccessDeniedError
)
from catering.exceptions.dish_exceptions import DishNotFoundError
from catering.exceptions.customer_exceptions import CustomerNotFoundError

router = APIRouter(prefix="/orders", tags=["orders"])


def _raise_for_order_error(e: Exception) -> None:
    if isinstance(e, (OrderNotFoundError, DishNotFoundError, CustomerNotFoundError)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    if isinstance(e, OrderAccessDeniedError):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(e)
    )


@router.post(
    "",
    response_model=OrderResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_order(
        order_data: OrderCreateSchema,
        current_user: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> OrderResponseSchema:
    """
    Create an order; every dish is scaled to the requested quantity.

    Args:
        order_data: Customer, header fields and requested dishes
        current_user: Owner of the new order

    Returns:
        Stored order with its scaled ingredient lines

    Raises:
        HTTPException: 404 if customer or a dish is missing,
            400 if a unit or quantity is invalid or no dish is given
    """
    try:
        order = await order_service.create_order(order_data, current_user)
        return OrderResponseSchema.from_order_record(order)
    except (
        CustomerNotFoundError,
        DishNotFoundError,
        EmptyOrderError,
        InvalidQuantityError,
        UnitMismatchError
    ) as e:
        _raise_for_order_error(e)


@router.get("", response_model=List[OrderResponseSchema])
async def get_orders(
        customer_id: Optional[str] = Query(None, description="Filter by customer ID"),
        start: Optional[date] = Query(None, description="Created on or after this day"),
        end: Optional[date] = Query(None, description="Created on or before this day"),
        current_user: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> List[OrderResponseSchema]:
    """
    List orders visible to the current user, newest first.

    Admins see every order; other users see their own.
    """
    orders = await order_service.list_orders(
        current_user,
        customer_id=customer_id,
        created_from=start,
        created_to=end
    )
    return [OrderResponseSchema.from_order_record(order) for order in orders]


@router.get("/{order_id}", response_model=OrderResponseSchema)
async def get_order(
        order_id: str,
        current_user: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> OrderResponseSchema:
    """
    Raises:
        HTTPException: 404 if order not found, 403 if access denied
    """
    try:
        order = await order_service.get_order(order_id, current_user)
        return OrderResponseSchema.from_order_record(order)
    except (OrderNotFoundError, OrderAccessDeniedError) as e:
        _raise_for_order_error(e)


@router.put("/{order_id}", response_model=OrderResponseSchema)
async def update_order(
        order_id: str,
        order_data: OrderUpdateSchema,
        current_user: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> OrderResponseSchema:
    """
    Update an order; a dishes list replaces every item.

    Raises:
        HTTPException: 404 if order, customer or dish not found, 403 if access denied,
            400 if a unit or quantity is invalid
    """
    try:
        order = await order_service.update_order(order_id, order_data, current_user)
        return OrderResponseSchema.from_order_record(order)
    except (
        OrderNotFoundError,
        OrderAccessDeniedError,
        CustomerNotFoundError,
        DishNotFoundError,
        EmptyOrderError,
        InvalidQuantityError,
        UnitMismatchError
    ) as e:
        _raise_for_order_error(e)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
        order_id: str,
        current_user: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> None:
    """
    Delete an order with its items and ingredient lines.

    Raises:
        HTTPException: 404 if order not found, 403 if access denied
    """
    try:
        await order_service.delete_order(order_id, current_user)
    except (OrderNotFoundError, OrderAccessDeniedError) as e:
        _raise_for_order_error(e)


@router.get("/{order_id}/slips", response_model=OrderSlipsResponseSchema)
async def get_order_slips(
        order_id: str,
        current_user: User = Depends(get_current_user),
        order_service: OrderService = Depends(get_order_service)
) -> OrderSlipsResponseSchema:
    """
    Ingredient slip and order slip of one order.

    Raises:
        HTTPException: 404 if order not found, 403 if access denied
    """
    try:
        ingredient_slip, order_slip = await order_service.get_slips(order_id, current_user)
        return OrderSlipsResponseSchema(
            ingredient_slip=IngredientSlipSchema.model_validate(ingredient_slip),
            order_slip=OrderSlipSchema.model_validate(order_slip)
        )
    except (OrderNotFoundError, OrderAccessDeniedError) as e:
        _raise_for_order_error(e)
