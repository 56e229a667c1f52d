import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from postgrest.exceptions import APIError

from videotube.domain.entities.video import Video
from videotube.domain.entities.video_query import VideoPage, VideoQuery
from videotube.domain.errors import UpstreamServiceError
from videotube.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)

SEARCH_COLUMNS = ("title", "description")


def _literal_pattern(text: str) -> str:
    """
    Case-insensitive regex (imatch) for the literal text, quoted for use inside
    a PostgREST or=() filter. PostgREST rewrites every `*` in like/ilike
    patterns to `%`, so substring search goes through imatch instead.
    """
    pattern = re.escape(text)
    quoted = pattern.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{quoted}"'


def search_filter(text: str) -> str:
    value = _literal_pattern(text)
    return ",".join(f"{column}.imatch.{value}" for column in SEARCH_COLUMNS)


class SupabaseVideoRepository(VideoRepository):
    def __init__(self, client, table: str = "videos"):
        self.client = client
        self.table = table

    def _query(self):
        return self.client.table(self.table)

    def list(self, query: VideoQuery) -> VideoPage:
        try:
            request = self._query().select("*", count="exact")
            if query.search:
                request = request.or_(search_filter(query.search))
            if query.owner:
                request = request.eq("owner", query.owner)

            res = (
                request
                .order(query.sort_column, desc=query.descending)
                .range(query.skip, query.skip + query.limit - 1)
                .execute()
            )
        except APIError as e:
            logger.error("List videos database error: %s", e)
            raise UpstreamServiceError("Failed to fetch videos.")

        items = [Video.from_row(row) for row in res.data or []]
        total = res.count if res.count is not None else len(items)
        return VideoPage(items=items, total=total)

    def create(self, fields: dict[str, Any]) -> Video:
        try:
            res = self._query().insert(fields).execute()
        except APIError as e:
            logger.error("Create video database error: %s", e)
            raise UpstreamServiceError("Failed to save video to database.")

        if not res.data:
            raise UpstreamServiceError("Failed to save video to database.")
        return Video.from_row(res.data[0])

    def get_by_id(self, video_id: str) -> Optional[Video]:
        try:
            res = self._query().select("*").eq("id", video_id).limit(1).execute()
        except APIError as e:
            logger.error("Get video %s database error: %s", video_id, e)
            raise UpstreamServiceError("Failed to fetch video.")

        if not res.data:
            return None
        return Video.from_row(res.data[0])

    def update(self, video_id: str, fields: dict[str, Any]) -> Optional[Video]:
        payload = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        try:
            res = self._query().update(payload).eq("id", video_id).execute()
        except APIError as e:
            logger.error("Update video %s database error: %s", video_id, e)
            raise UpstreamServiceError("Failed to update video.")

        if not res.data:
            return None
        return Video.from_row(res.data[0])

    def delete(self, video_id: str) -> bool:
        try:
            res = self._query().delete().eq("id", video_id).execute()
        except APIError as e:
            logger.error("Delete video %s database error: %s", video_id, e)
            raise UpstreamServiceError("Failed to delete video.")
        return bool(res.data)

    def toggle_publish(self, video_id: str) -> Optional[Video]:
        video = self.get_by_id(video_id)
        if not video:
            return None
        return self.update(video_id, {"is_published": not video.is_published})
