"""Page value objects shared by the repositories and the list view."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PageRequest:
    """A 0-based page number and a positive page size."""

    page: int
    size: int

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"Page index must not be less than zero, got {self.page}")
        if self.size < 1:
            raise ValueError(f"Page size must not be less than one, got {self.size}")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page:
    """One slice of a result set plus the totals of the whole set."""

    content: List = field(default_factory=list)
    number: int = 0
    size: int = 1
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        # ceil(total / size); an empty result set has no pages
        return -(-self.total_elements // self.size)
