from videotube.application.use_cases.get_video import require_video
from videotube.domain.entities.video import Video
from videotube.domain.errors import ForbiddenError, NotFoundError
from videotube.domain.repositories.video_repository import VideoRepository


class TogglePublishStatusUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self, video_id: str, user_id: str) -> Video:
        video = require_video(self.video_repo, video_id)
        if video.owner != user_id:
            raise ForbiddenError("You are not allowed to modify this video.")

        updated = self.video_repo.toggle_publish(video_id)
        if not updated:
            raise NotFoundError("Video not found.")
        return updated
