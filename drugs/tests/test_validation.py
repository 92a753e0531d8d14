from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from drugs.forms import DrugForm
from drugs.models import Drug
from drugs.validators import collect_drug_errors


class CollectDrugErrorsTest(SimpleTestCase):
    def test_valid_drug_has_no_errors(self):
        self.assertEqual(collect_drug_errors(Drug(name="Amoxicillin", price=Decimal("12.50"))), {})

    def test_all_field_errors_are_collected_together(self):
        errors = collect_drug_errors(Drug(name="", price=None))
        self.assertEqual(errors["name"], ["name must not be empty"])
        self.assertEqual(errors["price"], ["price must not be null"])

    def test_whitespace_name_is_blank(self):
        errors = collect_drug_errors(Drug(name="   ", price=Decimal("1")))
        self.assertEqual(errors, {"name": ["name must not be empty"]})

    def test_negative_price(self):
        errors = collect_drug_errors(Drug(name="X", price=Decimal("-1")))
        self.assertEqual(errors, {"price": ["price must be ≥ 0"]})

    def test_price_above_maximum(self):
        errors = collect_drug_errors(Drug(name="X", price=Decimal("10000")))
        self.assertIn("price must be ≤ 9999", errors["price"])
        self.assertIn("price exceeds allowed precision", errors["price"])

    def test_price_with_three_fraction_digits(self):
        errors = collect_drug_errors(Drug(name="X", price=Decimal("12.345")))
        self.assertEqual(errors, {"price": ["price exceeds allowed precision"]})

    def test_bounds_are_inclusive(self):
        self.assertEqual(collect_drug_errors(Drug(name="X", price=Decimal("0"))), {})
        self.assertEqual(collect_drug_errors(Drug(name="X", price=Decimal("9999.00"))), {})

    def test_non_numeric_price(self):
        errors = collect_drug_errors(Drug(name="X", price="abc"))
        self.assertEqual(errors, {"price": ["price must be a number"]})


class DrugFormTest(TestCase):
    def test_id_is_not_bound(self):
        form = DrugForm({"id": "99", "name": "X", "price": "1.00"})
        self.assertNotIn("id", form.fields)
        self.assertTrue(form.is_valid())
        self.assertIsNone(form.save(commit=False).pk)

    def test_price_is_decimal(self):
        form = DrugForm({"name": "X", "price": "12.50"})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data["price"], Decimal("12.50"))

    def test_empty_name_and_negative_price_are_both_reported(self):
        form = DrugForm({"name": "", "price": "-1"})
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["name"], ["name must not be empty"])
        self.assertEqual(form.errors["price"], ["price must be ≥ 0"])

    def test_name_length_limit(self):
        self.assertTrue(DrugForm({"name": "A" * 80, "price": "1.00"}).is_valid())
        form = DrugForm({"name": "A" * 81, "price": "1.00"})
        self.assertFalse(form.is_valid())
        self.assertIn("name", form.errors)

    def test_missing_price(self):
        form = DrugForm({"name": "X", "price": ""})
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["price"], ["price must not be null"])

    def test_precision_rules(self):
        for price in ("10000", "12.345"):
            with self.subTest(price=price):
                form = DrugForm({"name": "X", "price": price})
                self.assertFalse(form.is_valid())
                self.assertIn("price exceeds allowed precision", form.errors["price"])

        self.assertTrue(DrugForm({"name": "X", "price": "9999.00"}).is_valid())
