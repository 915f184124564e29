# catering/exceptions/dish_exceptions.py
class DishException(Exception):
    """Base exception for dish-related errors."""
    pass


class DishNotFoundError(DishException):
    """Raised when dish is not found in database."""

    def __init__(self, dish_id: str):
        self.dish_id = dish_id
        super().__init__(f"Dish with id {dish_id} not found")


class DishAlreadyExistsError(DishException):
    """Raised when a dish with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Dish '{name}' already exists")


class DishInUseError(DishException):
    """Raised when deleting a dish that existing orders still reference."""

    def __init__(self, dish_id: str):
        self.dish_id = dish_id
        super().__init__(
            f"Dish with id {dish_id} is used by existing orders and cannot be deleted"
        )


class DuplicateRecipeLineError(DishException):
    """Raised when a recipe lists the same ingredient more than once."""

    def __init__(self, ingredient_id: str):
        self.ingredient_id = ingredient_id
        super().__init__(f"Ingredient {ingredient_id} appears more than once in the recipe")
