import logging

from django.contrib import messages
from django.core.exceptions import BadRequest
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from .forms import DrugForm
from .models import Drug
from .pagination import PageRequest
from .repositories import get_drug_repository

logger = logging.getLogger(__name__)

VIEWS_DRUG_CREATE_OR_UPDATE_FORM = "drugs/createOrUpdateDrugForm.html"
VIEWS_DRUG_LIST = "drugs/drugList.html"
PAGE_SIZE = 5


def drug_not_found(drug_id):
    return Http404(
        f"Drug not found with id: {drug_id}. Please ensure the ID is correct "
        "and the drug exists in the database."
    )


def find_drug(drug_id=None):
    """Pre-load the drug addressed by the URL, or a fresh one for the create form."""
    if drug_id is None:
        return Drug()

    drug = get_drug_repository().find_by_id(drug_id)
    if drug is None:
        logger.warning("Drug %s requested but not found", drug_id)
        raise drug_not_found(drug_id)
    return drug


def bind_drug_form(request, drug):
    missing = [name for name in DrugForm.Meta.fields if name not in request.POST]
    if missing:
        raise BadRequest(f"Missing form field(s): {', '.join(missing)}")
    return DrugForm(request.POST, instance=drug)


def parse_page(value):
    try:
        page = int(value)
    except (TypeError, ValueError):
        raise BadRequest(f"Page must be an integer, got {value!r}")
    if page < 1:
        raise BadRequest(f"Page must be 1 or greater, got {page}")
    return page


# =======================================================
# CREATE
# =======================================================

@require_http_methods(["GET", "POST"])
def create_drug(request):
    drug = find_drug()

    if request.method == "POST":
        form = bind_drug_form(request, drug)
        if form.is_valid():
            drug = get_drug_repository().save(form.save(commit=False))
            messages.success(request, "New Drug Created")
            return redirect("drugs:drug_list")

        messages.error(request, "There was an error in creating the drug.")
    else:
        form = DrugForm(instance=drug)

    return render(request, VIEWS_DRUG_CREATE_OR_UPDATE_FORM, {"drug": drug, "form": form})


# =======================================================
# LIST
# =======================================================

@require_GET
def drug_list(request):
    page = parse_page(request.GET.get("page") or "1")
    name = request.GET.get("name", "").strip()

    drugs = get_drug_repository()
    page_request = PageRequest(page - 1, PAGE_SIZE)
    if name:
        paginated = drugs.find_by_name_starting_with(name, page_request)
    else:
        paginated = drugs.find_all(page_request)

    return render(request, VIEWS_DRUG_LIST, {
        "currentPage": page,
        "totalPages": paginated.total_pages,
        "totalItems": paginated.total_elements,
        "listDrugs": paginated.content,
        "name": name,
    })


# =======================================================
# UPDATE
# =======================================================

@require_http_methods(["GET", "POST"])
def update_drug(request, drug_id):
    drug = find_drug(drug_id)

    if request.method == "POST":
        form = bind_drug_form(request, drug)
        if form.is_valid():
            drug = form.save(commit=False)
            drug.id = drug_id
            try:
                get_drug_repository().save(drug)
            except Drug.DoesNotExist:
                raise drug_not_found(drug_id)
            messages.success(request, "Drug Values Updated")
            return redirect("drugs:drug_list")

        messages.error(request, "There was an error in updating the drug.")
    else:
        form = DrugForm(instance=drug)

    return render(request, VIEWS_DRUG_CREATE_OR_UPDATE_FORM, {"drug": drug, "form": form})


# =======================================================
# DELETE
# =======================================================

@require_GET
def delete_drug(request, drug_id):
    get_drug_repository().delete_by_id(drug_id)
    messages.success(request, "Drug Deleted")
    return redirect("drugs:drug_list")
