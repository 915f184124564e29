# catering/schemas/order.py
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime, time
from typing import Any, List, Optional

from catering.domain.entities import (
    IngredientOverride,
    ItemRequest,
    OrderMetadata,
    OrderRecord,
)


class IngredientOverrideSchema(BaseModel):
    """
    Replacement amount for one recipe ingredient.

    Entries with unknown ingredients or unusable amounts are dropped by the
    scaling engine rather than rejected here.
    """

    ingredient_id: Any = None
    scaled_amount: Any = None
    unit: Optional[str] = None

    def to_override(self) -> IngredientOverride:
        return IngredientOverride(
            ingredient_id=self.ingredient_id,
            scaled_amount=self.scaled_amount,
            unit=self.unit or None
        )


class OrderDishSchema(BaseModel):
    """One dish requested in an order."""

    dish_id: str = Field(..., min_length=1, description="Dish UUID")
    requested_quantity: float = Field(..., allow_inf_nan=False, description="Quantity in the dish base unit")
    requested_unit: str = Field(..., min_length=1, max_length=20)
    overrides: List[IngredientOverrideSchema] = Field(default_factory=list)

    @field_validator('requested_unit')
    @classmethod
    def validate_unit(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Unit is required')
        return value

    def to_request(self) -> ItemRequest:
        return ItemRequest(
            dish_id=self.dish_id,
            requested_quantity=self.requested_quantity,
            requested_unit=self.requested_unit,
            overrides=[o.to_override() for o in self.overrides]
        )


class _OrderHeaderSchema(BaseModel):
    person_count: Optional[int] = Field(None, ge=1)
    booking_date: Optional[date] = None
    booking_time: Optional[time] = None
    delivery_date: Optional[date] = None
    delivery_time: Optional[time] = None
    delivery_address: Optional[str] = Field(None, max_length=1000)
    notes: Optional[str] = Field(None, max_length=5000)


class OrderCreateSchema(_OrderHeaderSchema):
    """Schema for creating an order with one or more dishes."""

    customer_id: str = Field(..., min_length=1, description="Customer UUID")
    dishes: List[OrderDishSchema] = Field(default_factory=list)

    def to_metadata(self) -> OrderMetadata:
        return OrderMetadata(
            person_count=self.person_count,
            booking_date=self.booking_date,
            booking_time=self.booking_time,
            delivery_date=self.delivery_date,
            delivery_time=self.delivery_time,
            delivery_address=self.delivery_address,
            notes=self.notes
        )


class OrderUpdateSchema(_OrderHeaderSchema):
    """
    Schema for updating an order.

    Header fields left out (or null) keep their value. A dishes list, when
    present, replaces every item of the order.
    """

    customer_id: Optional[str] = Field(None, min_length=1)
    dishes: Optional[List[OrderDishSchema]] = None

    def header_changes(self) -> dict:
        return self.model_dump(exclude={'dishes'}, exclude_none=True)


class OrderIngredientResponseSchema(BaseModel):
    ingredient_id: str
    name: str
    scaled_amount: float
    unit: str


class OrderItemResponseSchema(BaseModel):
    id: str
    dish_id: str
    dish_name: str
    requested_quantity: float
    requested_unit: str
    scale_factor: float
    ingredients: List[OrderIngredientResponseSchema]


class OrderResponseSchema(BaseModel):
    """Schema for order responses."""

    id: str
    user_id: str
    customer_id: str
    customer_name: str
    customer_phone: Optional[str]
    customer_email: Optional[str]
    customer_address: Optional[str]
    person_count: Optional[int]
    booking_date: Optional[date]
    booking_time: Optional[time]
    delivery_date: Optional[date]
    delivery_time: Optional[time]
    delivery_address: Optional[str]
    notes: Optional[str]
    created_at: datetime
    items: List[OrderItemResponseSchema]

    @classmethod
    def from_order_record(cls, order: OrderRecord) -> 'OrderResponseSchema':
        """
        Create response schema from a stored order.

        Args:
            order: Order read back from the repository

        Returns:
            OrderResponseSchema instance
        """
        meta = order.metadata
        return cls(
            id=order.id,
            user_id=order.user_id,
            customer_id=order.customer.id,
            customer_name=order.customer.name,
            customer_phone=order.customer.phone,
            customer_email=order.customer.email,
            customer_address=order.customer.address,
            person_count=meta.person_count,
            booking_date=meta.booking_date,
            booking_time=meta.booking_time,
            delivery_date=meta.delivery_date,
            delivery_time=meta.delivery_time,
            delivery_address=meta.delivery_address,
            notes=meta.notes,
            created_at=order.created_at,
            items=[
                OrderItemResponseSchema(
                    id=item.id,
                    dish_id=item.dish_id,
                    dish_name=item.dish_name,
                    requested_quantity=item.requested_quantity,
                    requested_unit=item.requested_unit,
                    scale_factor=item.scale_factor,
                    ingredients=[
                        OrderIngredientResponseSchema(
                            ingredient_id=line.ingredient_id,
                            name=line.ingredient_name,
                            scaled_amount=line.scaled_amount,
                            unit=line.unit
                        )
                        for line in item.lines
                    ]
                )
                for item in order.items
            ]
        )


class SlipDishSchema(BaseModel):
    model_config = {"from_attributes": True}

    dish_name: str
    quantity: float
    unit: str


class SlipEntrySchema(BaseModel):
    model_config = {"from_attributes": True}

    name: str
    amount: float
    unit: str


class IngredientSlipSchema(BaseModel):
    """Aggregated ingredient pull list for one order."""

    model_config = {"from_attributes": True}

    order_id: str
    customer_name: str
    customer_phone: Optional[str]
    dishes: List[SlipDishSchema]
    items: List[SlipEntrySchema]


class OrderSlipSchema(BaseModel):
    """Order header view without ingredient detail."""

    model_config = {"from_attributes": True}

    order_id: str
    customer_name: str
    customer_phone: Optional[str]
    customer_email: Optional[str]
    customer_address: Optional[str]
    person_count: Optional[int]
    booking_date: Optional[date]
    booking_time: Optional[time]
    delivery_date: Optional[date]
    delivery_time: Optional[time]
    dishes: List[SlipDishSchema]
    created_at: datetime
    notes: Optional[str]


class OrderSlipsResponseSchema(BaseModel):
    ingredient_slip: IngredientSlipSchema
    order_slip: OrderSlipSchema
