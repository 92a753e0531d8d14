from decimal import Decimal

from django.core.management.base import BaseCommand

from drugs.models import Drug
from drugs.repositories import get_drug_repository

SAMPLE_DRUGS = [
    ("Amoxicillin", Decimal("12.50")),
    ("Carprofen", Decimal("24.00")),
    ("Doxycycline", Decimal("18.75")),
    ("Enrofloxacin", Decimal("31.20")),
    ("Meloxicam", Decimal("9.99")),
    ("Metronidazole", Decimal("7.40")),
    ("Prednisolone", Decimal("5.25")),
]


class Command(BaseCommand):
    help = "Seed the drugs table with sample veterinary drugs"

    def handle(self, *args, **kwargs):
        drugs = get_drug_repository()
        created = 0

        for name, price in SAMPLE_DRUGS:
            if Drug.objects.filter(name=name).exists():
                self.stdout.write(f"Drug already exists: {name}")
                continue
            drugs.save(Drug(name=name, price=price))
            created += 1
            self.stdout.write(f"Drug created: {name} ({price})")

        self.stdout.write(self.style.SUCCESS(f"Seeding complete: {created} drug(s) created"))
