from tortoise import Model, fields


class Category(Model):
    """
    Ingredient category (e.g. 'spices', 'dairy').
    """

    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=100, unique=True, index=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    ingredients: fields.ReverseRelation["Ingredient"]

    class Meta:
        table = "categories"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
