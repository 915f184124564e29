# catering/api/v1/dependencies/services.py
from fastapi import Depends

from catering.repositories.catalog_repository import CatalogRepository
from catering.repositories.order_repository import OrderRepository
from catering.services.order_service import OrderService
from catering.services.report_service import ReportService

DEFAULT_CONNECTION = "default"


def get_catalog_repository() -> CatalogRepository:
    return CatalogRepository(DEFAULT_CONNECTION)


def get_order_repository() -> OrderRepository:
    return OrderRepository(DEFAULT_CONNECTION)


def get_order_service(
        catalog: CatalogRepository = Depends(get_catalog_repository),
        orders: OrderRepository = Depends(get_order_repository)
) -> OrderService:
    return OrderService(catalog, orders)


def get_report_service(
        orders: OrderRepository = Depends(get_order_repository)
) -> ReportService:
    return ReportService(orders)
