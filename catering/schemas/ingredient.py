# catering/schemas/ingredient.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class IngredientCreateSchema(BaseModel):
    """Schema for creating an ingredient."""

    name: str = Field(..., min_length=1, max_length=100)
    category_id: str = Field(..., description="Category UUID")

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Name is required')
        return value


class IngredientUpdateSchema(BaseModel):
    """Schema for updating an ingredient."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: Optional[str] = Field(None, description="Category UUID")

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError('Name must not be blank')
        return value


class IngredientResponseSchema(BaseModel):
    """Schema for ingredient responses."""

    id: str
    name: str
    category_id: str
    category_name: str
    created_at: str

    @classmethod
    def from_orm_ingredient(cls, ingredient) -> 'IngredientResponseSchema':
        """
        Create response schema from ORM model.

        Args:
            ingredient: Ingredient ORM model with category fetched

        Returns:
            IngredientResponseSchema instance
        """
        return cls(
            id=str(ingredient.id),
            name=ingredient.name,
            category_id=str(ingredient.category_id),
            category_name=ingredient.category.name,
            created_at=ingredient.created_at.isoformat()
        )
