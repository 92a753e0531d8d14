from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .validators import validate_not_blank


PRICE_MIN = Decimal("0")
PRICE_MAX = Decimal("9999")

PRICE_ERROR_MESSAGES = {
    "null": "price must not be null",
    "blank": "price must not be null",
    "required": "price must not be null",
    "invalid": "price must be a number",
    "max_digits": "price exceeds allowed precision",
    "max_decimal_places": "price exceeds allowed precision",
    "max_whole_digits": "price exceeds allowed precision",
}


class NamedEntity(models.Model):
    name = models.CharField(
        max_length=80,
        validators=[validate_not_blank],
        error_messages={"blank": "name must not be empty", "null": "name must not be empty"},
    )

    class Meta:
        abstract = True

    def __str__(self):
        return self.name


class Drug(NamedEntity):
    price = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        validators=[
            MinValueValidator(PRICE_MIN, message="price must be ≥ 0"),
            MaxValueValidator(PRICE_MAX, message="price must be ≤ 9999"),
        ],
        error_messages=PRICE_ERROR_MESSAGES,
    )

    class Meta:
        db_table = "drugs"
        ordering = ["name", "id"]
