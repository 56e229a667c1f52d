import math
from dataclasses import dataclass, field
from typing import Optional

from videotube.domain.entities.video import Video

# Public sort keys mapped to table columns
SORTABLE_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "title": "title",
    "duration": "duration",
}

DEFAULT_SORT_BY = "createdAt"
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


@dataclass(frozen=True)
class VideoQuery:
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    search: Optional[str] = None
    owner: Optional[str] = None
    sort_by: str = DEFAULT_SORT_BY
    descending: bool = True

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def sort_column(self) -> str:
        return SORTABLE_FIELDS[self.sort_by]


@dataclass
class VideoPage:
    items: list[Video] = field(default_factory=list)
    total: int = 0

    def total_pages(self, limit: int) -> int:
        return math.ceil(self.total / limit) if limit > 0 else 0
