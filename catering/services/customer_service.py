# catering/services/customer_service.py
import logging
from typing import List

from catering.models.customer import Customer
from catering.models.order import Order
from catering.schemas.customer import CustomerCreateSchema, CustomerUpdateSchema
from catering.exceptions.customer_exceptions import (
    CustomerNotFoundError,
    CustomerInUseError
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for managing customers."""

    @staticmethod
    async def get_all_customers() -> List[Customer]:
        return await Customer.all().order_by("name")

    @staticmethod
    async def get_customer_by_id(customer_id: str) -> Customer:
        """
        Raises:
            CustomerNotFoundError: If customer doesn't exist
        """
        customer = await Customer.get_or_none(id=customer_id)
        if not customer:
            raise CustomerNotFoundError(customer_id)
        return customer

    @staticmethod
    async def create_customer(data: CustomerCreateSchema) -> Customer:
        customer = await Customer.create(
            name=data.name,
            phone=data.phone,
            email=data.email,
            address=data.address
        )
        logger.info(f"Customer created: {customer.id} - {customer.name}")
        return customer

    @staticmethod
    async def update_customer(customer_id: str, data: CustomerUpdateSchema) -> Customer:
        """
        Update the supplied fields of a customer.

        Raises:
            CustomerNotFoundError: If customer doesn't exist
        """
        customer = await CustomerService.get_customer_by_id(customer_id)

        update_fields = data.model_dump(exclude_none=True)
        if update_fields:
            await customer.update_from_dict(update_fields).save()
            await customer.refresh_from_db()

        return customer

    @staticmethod
    async def delete_customer(customer_id: str) -> None:
        """
        Delete a customer without orders.

        Raises:
            CustomerNotFoundError: If customer doesn't exist
            CustomerInUseError: If orders reference the customer
        """
        customer = await CustomerService.get_customer_by_id(customer_id)

        if await Order.exists(customer_id=customer.id):
            logger.warning(f"Refusing to delete customer {customer.id}: orders reference it")
            raise CustomerInUseError(customer_id)

        await customer.delete()
        logger.info(f"Customer deleted: {customer_id}")
