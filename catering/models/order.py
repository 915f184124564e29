from tortoise import Model, fields


class Order(Model):
    """
    Catering order placed by a user on behalf of a customer.
    """

    id = fields.UUIDField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="orders",
        on_delete=fields.RESTRICT
    )
    customer = fields.ForeignKeyField(
        "models.Customer",
        related_name="orders",
        on_delete=fields.RESTRICT
    )
    person_count = fields.IntField(null=True)
    booking_date = fields.DateField(null=True)
    booking_time = fields.TimeField(null=True)
    delivery_date = fields.DateField(null=True)
    delivery_time = fields.TimeField(null=True)
    delivery_address = fields.TextField(null=True)
    notes = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    items: fields.ReverseRelation["OrderItem"]

    class Meta:
        table = "orders"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Order {self.id} for customer {self.customer_id}"


class OrderItem(Model):
    """
    One dish within an order, scaled from the dish's base quantity.
    """

    id = fields.UUIDField(pk=True)
    order = fields.ForeignKeyField(
        "models.Order",
        related_name="items",
        on_delete=fields.CASCADE
    )
    dish = fields.ForeignKeyField(
        "models.Dish",
        related_name="order_items",
        on_delete=fields.RESTRICT
    )
    position = fields.IntField(default=0)
    requested_quantity = fields.FloatField()
    requested_unit = fields.CharField(max_length=20)
    scale_factor = fields.FloatField()

    ingredients: fields.ReverseRelation["OrderIngredient"]

    class Meta:
        table = "order_items"
        ordering = ["position"]

    def __str__(self) -> str:
        return f"{self.requested_quantity} {self.requested_unit} of {self.dish_id}"


class OrderIngredient(Model):
    """
    Scaled ingredient amount pulled from inventory for an order item.
    """

    id = fields.UUIDField(pk=True)
    order_item = fields.ForeignKeyField(
        "models.OrderItem",
        related_name="ingredients",
        on_delete=fields.CASCADE
    )
    ingredient = fields.ForeignKeyField(
        "models.Ingredient",
        related_name="order_lines",
        on_delete=fields.RESTRICT
    )
    position = fields.IntField(default=0)
    scaled_amount = fields.FloatField()
    unit = fields.CharField(max_length=20)

    class Meta:
        table = "order_ingredients"
        ordering = ["position"]

    def __str__(self) -> str:
        return f"{self.scaled_amount} {self.unit} of {self.ingredient_id}"
