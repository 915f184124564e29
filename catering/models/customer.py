from tortoise import Model, fields


class Customer(Model):
    """
    Customer placing catering orders.
    """

    id = fields.UUIDField(pk=True)
    name = fields.CharField(max_length=255, index=True)
    phone = fields.CharField(max_length=20, null=True)
    email = fields.CharField(max_length=255, null=True)
    address = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    orders: fields.ReverseRelation["Order"]

    class Meta:
        table = "customers"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
