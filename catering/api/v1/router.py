# catering/api/v1/router.py
from fastapi import APIRouter
from catering.api.v1.endpoints import (
    auth,
    categories,
    ingredients,
    dishes,
    customers,
    orders,
    reports
)


api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(categories.router)
api_router.include_router(ingredients.router)
api_router.include_router(dishes.router)
api_router.include_router(customers.router)
api_router.include_router(orders.router)
api_router.include_router(reports.router)
