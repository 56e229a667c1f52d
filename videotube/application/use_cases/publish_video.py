import logging
from pathlib import Path
from typing import Optional, Union

from videotube.domain.entities.media import ResourceKind, StoredMedia, detect_resource_kind
from videotube.domain.entities.video import Video
from videotube.domain.errors import UpstreamServiceError, ValidationError
from videotube.domain.repositories.media_gateway import MediaGateway
from videotube.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)

LocalPath = Optional[Union[str, Path]]


class PublishVideoUseCase:
    def __init__(self, video_repo: VideoRepository, media_gateway: MediaGateway, publish_by_default: bool = True):
        self.video_repo = video_repo
        self.media_gateway = media_gateway
        self.publish_by_default = publish_by_default

    def execute(
        self,
        owner_id: str,
        title: Optional[str],
        description: Optional[str],
        video_path: LocalPath,
        thumbnail_path: LocalPath,
    ) -> Video:
        """
        Uploads the video and its thumbnail, then creates the record.
        Nothing is uploaded until every input check has passed, and uploads are
        removed again if a later step fails.
        """
        title = (title or "").strip()
        description = (description or "").strip()
        if not title or not description:
            raise ValidationError("Both title and description are required.")

        if not video_path:
            raise ValidationError("Video file is required.")
        if not thumbnail_path:
            raise ValidationError("Thumbnail file is required.")

        if detect_resource_kind(video_path) != ResourceKind.VIDEO:
            raise ValidationError("Video file must be a video.")
        if detect_resource_kind(thumbnail_path) != ResourceKind.IMAGE:
            raise ValidationError("Thumbnail must be an image.")

        video_file = self.media_gateway.store(video_path)
        if not video_file:
            raise UpstreamServiceError("Error while uploading video file.")

        thumbnail = self.media_gateway.store(thumbnail_path)
        if not thumbnail:
            self._discard(video_file)
            raise UpstreamServiceError("Error while uploading thumbnail file.")

        try:
            return self.video_repo.create({
                "video_file": video_file.url,
                "thumbnail": thumbnail.url,
                "title": title,
                "description": description,
                "duration": video_file.duration or 0,
                "owner": owner_id,
                "is_published": self.publish_by_default,
            })
        except UpstreamServiceError:
            self._discard(video_file)
            self._discard(thumbnail)
            raise UpstreamServiceError("Something went wrong while publishing the video.")

    def _discard(self, media: StoredMedia) -> None:
        if not self.media_gateway.remove(media.url, media.resource_kind):
            logger.error("Orphaned %s left in storage: %s", media.resource_kind.value, media.url)
