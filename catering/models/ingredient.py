from tortoise import Model, fields


class Ingredient(Model):
    """
    Inventory ingredient belonging to exactly one category.
    """

    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=100, unique=True, index=True)
    category = fields.ForeignKeyField(
        "models.Category",
        related_name="ingredients",
        on_delete=fields.RESTRICT
    )
    created_at = fields.DatetimeField(auto_now_add=True)

    recipe_lines: fields.ReverseRelation["DishIngredient"]
    order_lines: fields.ReverseRelation["OrderIngredient"]

    class Meta:
        table = "ingredients"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
