from django.core.exceptions import ValidationError


def validate_not_blank(value):
    if value is None or not str(value).strip():
        raise ValidationError("name must not be empty", code="blank")


def collect_drug_errors(drug):
    """Return every field error for ``drug`` as ``{field: [messages]}``.

    An empty dict means the drug may be persisted. Nothing is raised, so all
    problems of one submission are reported together.
    """
    try:
        drug.clean_fields(exclude=["id"])
    except ValidationError as exc:
        return exc.message_dict
    return {}
