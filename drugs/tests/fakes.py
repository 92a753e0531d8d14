import itertools

from drugs.models import Drug
from drugs.pagination import Page
from drugs.repositories import DrugRepository


class InMemoryDrugRepository(DrugRepository):
    """Dict-backed DrugRepository for tests; rows are copied in and out."""

    def __init__(self):
        self._rows = {}
        self._ids = itertools.count(1)

    def find_by_id(self, drug_id):
        row = self._rows.get(drug_id)
        return self._to_drug(drug_id, row) if row else None

    def find_by_name_starting_with(self, name, page_request):
        return self._page([d for d in self._sorted() if d.name.startswith(name)], page_request)

    def find_all(self, page_request):
        return self._page(self._sorted(), page_request)

    def save(self, drug):
        self.check_valid(drug)
        if drug.pk is None:
            drug.id = next(self._ids)
        elif drug.pk not in self._rows:
            raise Drug.DoesNotExist(f"Drug not found with id: {drug.pk}")
        self._rows[drug.pk] = (drug.name, drug.price)
        return drug

    def delete_by_id(self, drug_id):
        return self._rows.pop(drug_id, None) is not None

    def _sorted(self):
        drugs = [self._to_drug(pk, row) for pk, row in self._rows.items()]
        return sorted(drugs, key=lambda d: (d.name, d.pk))

    @staticmethod
    def _to_drug(pk, row):
        name, price = row
        return Drug(id=pk, name=name, price=price)

    @staticmethod
    def _page(drugs, page_request):
        start = page_request.offset
        return Page(
            content=drugs[start:start + page_request.size],
            number=page_request.page,
            size=page_request.size,
            total_elements=len(drugs),
        )
