import dataclasses
import math
from typing import (
    Generic,
    TypeVar,
)

import pydantic

T = TypeVar("T")


class PaginationOptions(pydantic.BaseModel):
    page: int = pydantic.Field(default=1, ge=1)
    page_size: int = pydantic.Field(default=20, ge=1)


@dataclasses.dataclass
class Page(Generic[T]):
    """A bounded slice of a result set along with its pagination metadata."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    @classmethod
    def from_results(
        cls, items: list[T], total: int, options: PaginationOptions
    ) -> "Page[T]":
        return cls(
            items=list(items),
            total=total,
            page=options.page,
            page_size=options.page_size,
        )

    def map(self, func) -> "Page":
        return dataclasses.replace(self, items=[func(item) for item in self.items])
