import logging

from videotube.application.use_cases.get_video import require_video
from videotube.domain.entities.media import ResourceKind
from videotube.domain.errors import ForbiddenError, NotFoundError, UpstreamServiceError
from videotube.domain.repositories.media_gateway import MediaGateway
from videotube.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class DeleteVideoUseCase:
    def __init__(self, video_repo: VideoRepository, media_gateway: MediaGateway):
        self.video_repo = video_repo
        self.media_gateway = media_gateway

    def execute(self, video_id: str, user_id: str) -> None:
        """
        Removes the stored video file and thumbnail, then the record.
        The record stays in place whenever a media deletion fails.
        """
        video = require_video(self.video_repo, video_id)
        if video.owner != user_id:
            raise ForbiddenError("You are not allowed to delete this video.")

        if not self.media_gateway.remove(video.video_file, ResourceKind.VIDEO):
            raise UpstreamServiceError("Error deleting files from storage.")

        if not self.media_gateway.remove(video.thumbnail, ResourceKind.IMAGE):
            # No way to restore the removed video file
            logger.error("Video %s now references a deleted video file: %s", video_id, video.video_file)
            raise UpstreamServiceError("Error deleting files from storage.")

        if not self.video_repo.delete(video_id):
            raise NotFoundError("Video not found.")
