from decimal import Decimal

import django.core.validators
from django.db import migrations, models

import drugs.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Drug",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "name",
                    models.CharField(
                        error_messages={"blank": "name must not be empty", "null": "name must not be empty"},
                        max_length=80,
                        validators=[drugs.validators.validate_not_blank],
                    ),
                ),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        error_messages={
                            "null": "price must not be null",
                            "blank": "price must not be null",
                            "required": "price must not be null",
                            "invalid": "price must be a number",
                            "max_digits": "price exceeds allowed precision",
                            "max_decimal_places": "price exceeds allowed precision",
                            "max_whole_digits": "price exceeds allowed precision",
                        },
                        max_digits=6,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0"), message="price must be ≥ 0"),
                            django.core.validators.MaxValueValidator(Decimal("9999"), message="price must be ≤ 9999"),
                        ],
                    ),
                ),
            ],
            options={
                "db_table": "drugs",
                "ordering": ["name", "id"],
            },
        ),
    ]
