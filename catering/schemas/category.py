# catering/schemas/category.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class CategoryCreateSchema(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Name is required')
        return value


class CategoryUpdateSchema(BaseModel):
    """Schema for renaming a category."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError('Name must not be blank')
        return value


class CategoryResponseSchema(BaseModel):
    """Schema for category responses."""

    id: str
    name: str
    created_at: str

    @classmethod
    def from_orm_category(cls, category) -> 'CategoryResponseSchema':
        return cls(
            id=str(category.id),
            name=category.name,
            created_at=category.created_at.isoformat()
        )
