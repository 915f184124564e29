# catering/schemas/dish.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List


class RecipeLineSchema(BaseModel):
    """One ingredient of a recipe, per base quantity of the dish."""

    ingredient_id: str = Field(..., description="Ingredient UUID")
    amount_per_base: float = Field(..., gt=0, allow_inf_nan=False)
    unit: str = Field(..., min_length=1, max_length=20)

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('Unit is required')
        return value


class DishCreateSchema(BaseModel):
    """Schema for creating a new dish."""

    name: str = Field(..., min_length=1, max_length=100)
    base_quantity: float = Field(..., gt=0, allow_inf_nan=False, description="Quantity the recipe makes")
    base_unit: str = Field(..., min_length=1, max_length=20)
    price_per_base: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    cost_per_base: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    ingredients: List[RecipeLineSchema] = Field(default_factory=list)

    @field_validator('name', 'base_unit')
    @classmethod
    def validate_text_fields(cls, value: str) -> str:
        """Strip and require text fields."""
        value = value.strip()
        if not value:
            raise ValueError('Field must not be blank')
        return value


class DishUpdateSchema(BaseModel):
    """Schema for updating a dish; ingredients, when given, replace the recipe."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    base_quantity: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    base_unit: Optional[str] = Field(None, min_length=1, max_length=20)
    price_per_base: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    cost_per_base: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    ingredients: Optional[List[RecipeLineSchema]] = None

    @field_validator('name', 'base_unit')
    @classmethod
    def validate_text_fields(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError('Field must not be blank')
        return value


class RecipeLineResponseSchema(BaseModel):
    """Schema for recipe line responses."""

    ingredient_id: str
    ingredient_name: str
    amount_per_base: float
    unit: str

    @classmethod
    def from_recipe_line(cls, line) -> 'RecipeLineResponseSchema':
        return cls(
            ingredient_id=str(line.ingredient_id),
            ingredient_name=line.ingredient_name,
            amount_per_base=line.amount_per_base,
            unit=line.unit
        )


class DishResponseSchema(BaseModel):
    """Schema for dish responses."""

    id: str
    name: str
    base_quantity: float
    base_unit: str
    price_per_base: Optional[float]
    cost_per_base: Optional[float]
    ingredients: List[RecipeLineResponseSchema]
    created_at: str
    updated_at: str

    @classmethod
    def from_orm_dish(cls, dish: 'Dish') -> 'DishResponseSchema':
        """
        Create response schema from ORM model.

        Args:
            dish: Dish ORM model with recipe_lines__ingredient prefetched

        Returns:
            DishResponseSchema instance
        """
        lines = sorted(dish.recipe_lines, key=lambda line: line.ingredient.name)
        return cls(
            id=str(dish.id),
            name=dish.name,
            base_quantity=dish.base_quantity,
            base_unit=dish.base_unit,
            price_per_base=dish.price_per_base,
            cost_per_base=dish.cost_per_base,
            ingredients=[
                RecipeLineResponseSchema(
                    ingredient_id=str(line.ingredient_id),
                    ingredient_name=line.ingredient.name,
                    amount_per_base=line.amount_per_base,
                    unit=line.unit
                )
                for line in lines
            ],
            created_at=dish.created_at.isoformat(),
            updated_at=dish.updated_at.isoformat()
        )
