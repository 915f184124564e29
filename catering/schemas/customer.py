# catering/schemas/customer.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from catering.core.security import is_valid_email, is_valid_phone


class CustomerCreateSchema(BaseModel):
    """Schema for creating a customer."""

    name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=1000)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Name is required')
        return value

    @field_validator('phone', 'email', 'address')
    @classmethod
    def normalize_optional(cls, value: Optional[str]) -> Optional[str]:
        """Blank optional fields are stored as null."""
        if value is None:
            return value
        return value.strip() or None

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_email(value):
            raise ValueError('Invalid email format')
        return value

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_phone(value):
            raise ValueError('Invalid phone format')
        return value


class CustomerUpdateSchema(CustomerCreateSchema):
    """Schema for updating a customer; omitted fields are kept."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError('Name must not be blank')
        return value


class CustomerResponseSchema(BaseModel):
    """Schema for customer responses."""

    id: str
    name: str
    phone: Optional[str]
    email: Optional[str]
    address: Optional[str]
    created_at: str

    @classmethod
    def from_orm_customer(cls, customer) -> 'CustomerResponseSchema':
        return cls(
            id=str(customer.id),
            name=customer.name,
            phone=customer.phone,
            email=customer.email,
            address=customer.address,
            created_at=customer.created_at.isoformat()
        )
