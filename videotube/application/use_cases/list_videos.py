from typing import Any, Optional

from videotube.domain.entities.video import is_valid_id
from videotube.domain.entities.video_query import (
    DEFAULT_PAGE_LIMIT,
    DEFAULT_SORT_BY,
    MAX_PAGE_LIMIT,
    SORTABLE_FIELDS,
    VideoQuery,
)
from videotube.domain.errors import ValidationError
from videotube.domain.repositories.video_repository import VideoRepository


class ListVideosUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_LIMIT,
        search: Optional[str] = None,
        sort_by: str = DEFAULT_SORT_BY,
        sort_type: str = "desc",
        owner: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Filtered, sorted, offset-paginated listing.
        Returns the page of videos with the totals the client needs to paginate.
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater.")
        if limit < 1 or limit > MAX_PAGE_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_LIMIT}.")
        if sort_by not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Invalid sortBy field. Use one of: {', '.join(SORTABLE_FIELDS)}."
            )
        if sort_type not in ("asc", "desc"):
            raise ValidationError("sortType must be 'asc' or 'desc'.")
        if owner and not is_valid_id(owner):
            raise ValidationError("Invalid user ID.")

        query = VideoQuery(
            page=page,
            limit=limit,
            search=search.strip() if search and search.strip() else None,
            owner=owner or None,
            sort_by=sort_by,
            descending=sort_type != "asc",
        )
        result = self.video_repo.list(query)

        return {
            "videos": result.items,
            "totalPages": result.total_pages(limit),
            "totalVideos": result.total,
        }
