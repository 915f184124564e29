# catering/domain/projections.py
"""
Read-side views over persisted orders: ingredient pick slips, order slips
and period-bucketed revenue/cost/profit reports.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from catering.domain.entities import OrderRecord
from catering.exceptions.order_exceptions import InvalidReportRangeError


class ReportRange(str, Enum):
    """Period granularity for revenue reports."""

    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"


PERIOD_FORMATS = {
    ReportRange.DAILY: "%Y-%m-%d",
    ReportRange.MONTHLY: "%Y-%m",
    ReportRange.YEARLY: "%Y",
}


@dataclass(frozen=True)
class SlipDish:
    dish_name: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class SlipEntry:
    name: str
    amount: float
    unit: str


@dataclass(frozen=True)
class IngredientSlip:
    order_id: str
    customer_name: str
    customer_phone: Optional[str]
    dishes: List[SlipDish]
    items: List[SlipEntry]


@dataclass(frozen=True)
class OrderSlip:
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
    dishes: List[SlipDish]
    created_at: datetime
    notes: Optional[str]


@dataclass(frozen=True)
class ReportRow:
    period: str
    orders_count: int
    revenue: float
    cost: float
    profit: float


@dataclass(frozen=True)
class Report:
    range: ReportRange
    rows: List[ReportRow]
    totals: ReportRow


def _dish_list(order: OrderRecord) -> List[SlipDish]:
    return [
        SlipDish(
            dish_name=item.dish_name,
            quantity=item.requested_quantity,
            unit=item.requested_unit
        )
        for item in order.items
    ]


def build_ingredient_slip(order: OrderRecord) -> IngredientSlip:
    """
    Merge the ingredient lines of every item in an order.

    Lines are keyed by (ingredient name, unit); the same ingredient in two
    different units stays on two lines.
    """
    merged: Dict[Tuple[str, str], float] = {}
    for item in order.items:
        for line in item.lines:
            key = (line.ingredient_name, line.unit)
            merged[key] = merged.get(key, 0.0) + line.scaled_amount

    entries = [
        SlipEntry(name=name, amount=amount, unit=unit)
        for (name, unit), amount in sorted(merged.items(), key=lambda kv: kv[0])
    ]

    return IngredientSlip(
        order_id=order.id,
        customer_name=order.customer.name,
        customer_phone=order.customer.phone,
        dishes=_dish_list(order),
        items=entries
    )


def build_order_slip(order: OrderRecord) -> OrderSlip:
    """Header view of an order without ingredient detail."""
    meta = order.metadata
    return OrderSlip(
        order_id=order.id,
        customer_name=order.customer.name,
        customer_phone=order.customer.phone,
        customer_email=order.customer.email,
        customer_address=order.customer.address or meta.delivery_address,
        person_count=meta.person_count,
        booking_date=meta.booking_date,
        booking_time=meta.booking_time,
        delivery_date=meta.delivery_date,
        delivery_time=meta.delivery_time,
        dishes=_dish_list(order),
        created_at=order.created_at,
        notes=meta.notes
    )


def parse_report_range(value: Union[str, ReportRange]) -> ReportRange:
    try:
        return ReportRange(value)
    except ValueError:
        raise InvalidReportRangeError(str(value))


def period_key(moment: datetime, granularity: ReportRange) -> str:
    return moment.strftime(PERIOD_FORMATS[granularity])


@dataclass
class _Bucket:
    orders: Set[str] = field(default_factory=set)
    revenue: float = 0.0
    cost: float = 0.0


def build_report(
        orders: Iterable[OrderRecord],
        granularity: Union[str, ReportRange],
        decimal_places: int = 2
) -> Report:
    """
    Revenue, cost and profit per period.

    Each item contributes price_per_base * scale_factor to revenue and
    cost_per_base * scale_factor to cost, a missing price or cost counting as
    zero. Sums stay unrounded until the rows and totals are emitted.

    Args:
        orders: Orders to aggregate
        granularity: daily, monthly or yearly
        decimal_places: Rounding applied to monetary output fields

    Returns:
        Report with rows sorted by period and their totals

    Raises:
        InvalidReportRangeError: If granularity is unknown
    """
    report_range = parse_report_range(granularity)
    buckets: Dict[str, _Bucket] = {}

    for order in orders:
        bucket = buckets.setdefault(period_key(order.created_at, report_range), _Bucket())
        bucket.orders.add(order.id)
        for item in order.items:
            bucket.revenue += (item.price_per_base or 0.0) * item.scale_factor
            bucket.cost += (item.cost_per_base or 0.0) * item.scale_factor

    rows = []
    total_orders = 0
    total_revenue = 0.0
    total_cost = 0.0
    # zero-padded keys sort chronologically
    for period in sorted(buckets):
        bucket = buckets[period]
        rows.append(ReportRow(
            period=period,
            orders_count=len(bucket.orders),
            revenue=round(bucket.revenue, decimal_places),
            cost=round(bucket.cost, decimal_places),
            profit=round(bucket.revenue - bucket.cost, decimal_places)
        ))
        total_orders += len(bucket.orders)
        total_revenue += bucket.revenue
        total_cost += bucket.cost

    totals = ReportRow(
        period="total",
        orders_count=total_orders,
        revenue=round(total_revenue, decimal_places),
        cost=round(total_cost, decimal_places),
        profit=round(total_revenue - total_cost, decimal_places)
    )

    return Report(range=report_range, rows=rows, totals=totals)
