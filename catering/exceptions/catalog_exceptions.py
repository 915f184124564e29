# catering/exceptions/catalog_exceptions.py
class CatalogException(Exception):
    """Base exception for category and ingredient errors."""
    pass


class CategoryNotFoundError(CatalogException):
    """Raised when category is not found."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Category with id {category_id} not found")


class CategoryAlreadyExistsError(CatalogException):
    """Raised when a category with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Category '{name}' already exists")


class CategoryInUseError(CatalogException):
    """Raised when deleting a category that still has ingredients."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(
            "Cannot delete category that has ingredients. "
            "Please remove or reassign ingredients first."
        )


class IngredientNotFoundError(CatalogException):
    """Raised when ingredient is not found."""

    def __init__(self, ingredient_id: str):
        self.ingredient_id = ingredient_id
        super().__init__(f"Ingredient with id {ingredient_id} not found")


class IngredientAlreadyExistsError(CatalogException):
    """Raised when an ingredient with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Ingredient '{name}' already exists")


class IngredientInUseError(CatalogException):
    """Raised when deleting an ingredient used by recipes or orders."""

    def __init__(self, ingredient_id: str):
        self.ingredient_id = ingredient_id
        super().__init__(
            f"Ingredient with id {ingredient_id} is used by dishes or orders and cannot be deleted"
        )
