from django import forms

from .models import Drug, PRICE_ERROR_MESSAGES


# ----------------- DRUG -----------------
class DrugForm(forms.ModelForm):
    """Binds ``name`` and ``price`` only; the identifier never comes from the request."""

    class Meta:
        model = Drug
        fields = ["name", "price"]
        error_messages = {
            "name": {"required": "name must not be empty"},
            "price": PRICE_ERROR_MESSAGES,
        }
        widgets = {
            "name": forms.TextInput(attrs={"class": "form-control"}),
            "price": forms.NumberInput(attrs={"class": "form-control", "step": "0.01", "min": "0", "max": "9999"}),
        }
