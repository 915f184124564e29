# catering/api/v1/endpoints/customers.py
from fastapi import APIRouter, HTTPException, status, Depends
from typing import List

from catering.schemas.customer import (
    CustomerCreateSchema,
    CustomerUpdateSchema,
    CustomerResponseSchema
)
from catering.services.customer_service import CustomerService
from catering.api.v1.dependencies.auth import get_current_user, require_admin
from catering.models.user import User
from catering.exceptions.customer_exceptions import (
    CustomerNotFoundError,
    CustomerInUseError
)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerResponseSchema])
async def get_customers(
        _: User = Depends(get_current_user)
) -> List[CustomerResponseSchema]:
    customers = await CustomerService.get_all_customers()
    return [CustomerResponseSchema.from_orm_customer(c) for c in customers]


@router.get("/{customer_id}", response_model=CustomerResponseSchema)
async def get_customer(
        customer_id: str,
        _: User = Depends(get_current_user)
) -> CustomerResponseSchema:
    try:
        customer = await CustomerService.get_customer_by_id(customer_id)
        return CustomerResponseSchema.from_orm_customer(customer)
    except CustomerNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.post(
    "",
    response_model=CustomerResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_customer(
        customer_data: CustomerCreateSchema,
        _: User = Depends(require_admin)
) -> CustomerResponseSchema:
    """Register a customer."""
    customer = await CustomerService.create_customer(customer_data)
    return CustomerResponseSchema.from_orm_customer(customer)


@router.put("/{customer_id}", response_model=CustomerResponseSchema)
async def update_customer(
        customer_id: str,
        customer_data: CustomerUpdateSchema,
        _: User = Depends(require_admin)
) -> CustomerResponseSchema:
    """
    Update customer contact details.

    Raises:
        HTTPException: 404 if customer not found
    """
    try:
        customer = await CustomerService.update_customer(customer_id, customer_data)
        return CustomerResponseSchema.from_orm_customer(customer)
    except CustomerNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
        customer_id: str,
        _: User = Depends(require_admin)
) -> None:
    """
    Delete a customer without orders.

    Raises:
        HTTPException: 404 if customer not found, 409 if orders reference it
    """
    try:
        await CustomerService.delete_customer(customer_id)
    except CustomerNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except CustomerInUseError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
