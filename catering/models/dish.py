# catering/models/dish.py
from tortoise import Model, fields


class Dish(Model):
    """
    Dish (recipe) defined against a base production quantity.

    Recipe line amounts are expressed per one base quantity of the dish,
    e.g. 1 kg of rice needs 1.5 litre of water.
    """

    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=100, unique=True, index=True)
    base_quantity = fields.FloatField()
    base_unit = fields.CharField(max_length=20)
    price_per_base = fields.FloatField(null=True)
    cost_per_base = fields.FloatField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    recipe_lines: fields.ReverseRelation["DishIngredient"]
    order_items: fields.ReverseRelation["OrderItem"]

    class Meta:
        table = "dishes"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.base_quantity} {self.base_unit})"


class DishIngredient(Model):
    """
    Recipe line: amount of one ingredient per base quantity of a dish.
    """

    id = fields.UUIDField(pk=True)
    dish = fields.ForeignKeyField(
        "models.Dish",
        related_name="recipe_lines",
        on_delete=fields.CASCADE
    )
    ingredient = fields.ForeignKeyField(
        "models.Ingredient",
        related_name="recipe_lines",
        on_delete=fields.RESTRICT
    )
    amount_per_base = fields.FloatField()
    unit = fields.CharField(max_length=20)

    class Meta:
        table = "dish_ingredients"
        unique_together = (("dish", "ingredient"),)

    def __str__(self) -> str:
        return f"{self.amount_per_base} {self.unit} of {self.ingredient_id}"
