# catering/services/report_service.py
from datetime import date
from typing import Optional, Union

from catering.core.config import settings
from catering.domain.projections import Report, ReportRange, build_report, parse_report_range
from catering.repositories.order_repository import OrderRepository


class ReportService:
    """Revenue, cost and profit reports over stored orders."""

    def __init__(self, orders: OrderRepository) -> None:
        self.orders = orders

    async def build_report(
            self,
            report_range: Union[str, ReportRange] = ReportRange.DAILY,
            start: Optional[date] = None,
            end: Optional[date] = None
    ) -> Report:
        """
        Aggregate all orders created between start and end, both inclusive.

        Raises:
            InvalidReportRangeError: If report_range is unknown
        """
        granularity = parse_report_range(report_range)
        orders = await self.orders.list_orders(created_from=start, created_to=end)
        return build_report(orders, granularity, settings.REPORT_DECIMAL_PLACES)
