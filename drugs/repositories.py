"""
Drug Repository

Persistence contract for drugs: lookup by id, prefix search by name,
paginated listing, upsert by id presence and delete by id.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.paginator import EmptyPage, Paginator
from django.db import transaction
from django.utils.module_loading import import_string

from .models import Drug
from .pagination import Page, PageRequest
from .validators import collect_drug_errors

logger = logging.getLogger(__name__)

DRUG_ORDERING = ("name", "id")


class DrugRepository(ABC):
    """
    Narrow interface the views depend on.

    Implementations must keep the listing order stable (``DRUG_ORDERING``)
    so that pages do not overlap.
    """

    @abstractmethod
    def find_by_id(self, drug_id: int) -> Optional[Drug]:
        """Return the drug with ``drug_id`` or None."""

    @abstractmethod
    def find_by_name_starting_with(self, name: str, page_request: PageRequest) -> Page:
        """Return one page of drugs whose name starts with ``name``."""

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page:
        """Return one page of all drugs."""

    @abstractmethod
    def save(self, drug: Drug) -> Drug:
        """
        Insert ``drug`` when it has no id, otherwise update the existing row.

        Raises:
            ValidationError: the drug breaks a field rule
            Drug.DoesNotExist: an update targets a missing id
        """

    @abstractmethod
    def delete_by_id(self, drug_id: int) -> bool:
        """Delete the drug; return False when no row had ``drug_id``."""

    @staticmethod
    def check_valid(drug: Drug) -> None:
        errors = collect_drug_errors(drug)
        if errors:
            raise ValidationError(errors)


class OrmDrugRepository(DrugRepository):
    """DrugRepository backed by the ``drugs`` table through the Django ORM."""

    def find_by_id(self, drug_id):
        return Drug.objects.filter(pk=drug_id).first()

    def find_by_name_starting_with(self, name, page_request):
        return self._page(Drug.objects.filter(name__startswith=name), page_request)

    def find_all(self, page_request):
        return self._page(Drug.objects.all(), page_request)

    def save(self, drug):
        self.check_valid(drug)
        with transaction.atomic():
            if drug.pk is None:
                drug.save(force_insert=True)
                logger.info("Created drug %s (%s)", drug.pk, drug.name)
            else:
                if not Drug.objects.filter(pk=drug.pk).exists():
                    raise Drug.DoesNotExist(f"Drug not found with id: {drug.pk}")
                drug.save(force_update=True)
                logger.info("Updated drug %s (%s)", drug.pk, drug.name)
        return drug

    def delete_by_id(self, drug_id):
        deleted, _ = Drug.objects.filter(pk=drug_id).delete()
        if deleted:
            logger.info("Deleted drug %s", drug_id)
        else:
            logger.warning("Delete requested for drug %s but it does not exist", drug_id)
        return deleted > 0

    def _page(self, queryset, page_request):
        paginator = Paginator(
            queryset.order_by(*DRUG_ORDERING),
            page_request.size,
            allow_empty_first_page=False,
        )
        try:
            content = list(paginator.page(page_request.page + 1).object_list)
        except EmptyPage:
            # past the last page: no rows, totals still reported
            content = []
        return Page(
            content=content,
            number=page_request.page,
            size=page_request.size,
            total_elements=paginator.count,
        )


def get_drug_repository() -> DrugRepository:
    """Instantiate the repository class named by ``settings.DRUG_REPOSITORY``."""
    return import_string(settings.DRUG_REPOSITORY)()
