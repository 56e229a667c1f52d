import logging
from pathlib import Path
from typing import Any, Optional, Union

from videotube.application.use_cases.get_video import require_video
from videotube.domain.entities.media import ResourceKind, detect_resource_kind
from videotube.domain.entities.video import Video, is_valid_id
from videotube.domain.errors import ForbiddenError, NotFoundError, UpstreamServiceError, ValidationError
from videotube.domain.repositories.media_gateway import MediaGateway
from videotube.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class UpdateVideoUseCase:
    def __init__(self, video_repo: VideoRepository, media_gateway: MediaGateway):
        self.video_repo = video_repo
        self.media_gateway = media_gateway

    def execute(
        self,
        video_id: str,
        user_id: str,
        title: Optional[str],
        description: Optional[str],
        thumbnail_path: Optional[Union[str, Path]],
    ) -> Video:
        """
        Replaces the thumbnail and whichever of title/description were sent.
        """
        if not is_valid_id(video_id):
            raise ValidationError("Invalid video ID.")

        title = (title or "").strip()
        description = (description or "").strip()
        if not title and not description:
            raise ValidationError("At least one of title or description is required.")

        if not thumbnail_path:
            raise ValidationError("Thumbnail file is required.")
        if detect_resource_kind(thumbnail_path) != ResourceKind.IMAGE:
            raise ValidationError("Thumbnail must be an image.")

        # 1. Existence and ownership, before anything is uploaded
        video = require_video(self.video_repo, video_id)
        if video.owner != user_id:
            raise ForbiddenError("You are not allowed to modify this video.")

        # 2. Upload the replacement thumbnail
        thumbnail = self.media_gateway.store(thumbnail_path)
        if not thumbnail:
            raise UpstreamServiceError("Error while uploading thumbnail file.")

        updated_fields: dict[str, Any] = {"thumbnail": thumbnail.url}
        if title:
            updated_fields["title"] = title
        if description:
            updated_fields["description"] = description

        # 3. Persist; drop the new upload if the record vanished meanwhile
        updated = self.video_repo.update(video_id, updated_fields)
        if not updated:
            if not self.media_gateway.remove(thumbnail.url, thumbnail.resource_kind):
                logger.error("Orphaned thumbnail left in storage: %s", thumbnail.url)
            raise NotFoundError("Video not found.")

        # 4. The replaced thumbnail is no longer referenced
        if video.thumbnail and video.thumbnail != thumbnail.url:
            if not self.media_gateway.remove(video.thumbnail, ResourceKind.IMAGE):
                logger.warning("Could not remove replaced thumbnail %s", video.thumbnail)

        return updated
