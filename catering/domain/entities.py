# catering/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, List, Optional


@dataclass(frozen=True)
class RecipeLine:
    ingredient_id: str
    ingredient_name: str
    amount_per_base: float
    unit: str


@dataclass(frozen=True)
class DishRecipe:
    """Dish as seen by the scaling engine: base size, pricing and recipe."""
    id: str
    name: str
    base_quantity: float
    base_unit: str
    price_per_base: Optional[float]
    cost_per_base: Optional[float]
    lines: List[RecipeLine]


@dataclass(frozen=True)
class IngredientOverride:
    """
    Caller-supplied replacement amount for one recipe ingredient.

    Values are kept raw; the scaling engine decides which entries are usable.
    """
    ingredient_id: Any
    scaled_amount: Any
    unit: Optional[str] = None


@dataclass(frozen=True)
class OrderIngredientLine:
    ingredient_id: str
    scaled_amount: float
    unit: str


@dataclass(frozen=True)
class ItemRequest:
    dish_id: str
    requested_quantity: Any
    requested_unit: str
    overrides: List[IngredientOverride] = field(default_factory=list)


@dataclass(frozen=True)
class PlannedItem:
    """Order item computed by the aggregator, ready to be persisted."""
    dish_id: str
    requested_quantity: float
    requested_unit: str
    scale_factor: float
    lines: List[OrderIngredientLine]


@dataclass(frozen=True)
class OrderMetadata:
    person_count: Optional[int] = None
    booking_date: Optional[date] = None
    booking_time: Optional[time] = None
    delivery_date: Optional[date] = None
    delivery_time: Optional[time] = None
    delivery_address: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class CustomerInfo:
    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class OrderLineRecord:
    ingredient_id: str
    ingredient_name: str
    scaled_amount: float
    unit: str


@dataclass(frozen=True)
class OrderItemRecord:
    id: str
    dish_id: str
    dish_name: str
    requested_quantity: float
    requested_unit: str
    scale_factor: float
    price_per_base: Optional[float] = None
    cost_per_base: Optional[float] = None
    lines: List[OrderLineRecord] = field(default_factory=list)


@dataclass(frozen=True)
class OrderRecord:
    """Persisted order read back with everything slips and reports need."""
    id: str
    user_id: str
    customer: CustomerInfo
    metadata: OrderMetadata
    created_at: datetime
    items: List[OrderItemRecord] = field(default_factory=list)
