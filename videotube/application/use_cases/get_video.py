from videotube.domain.entities.video import Video, is_valid_id
from videotube.domain.errors import NotFoundError, ValidationError
from videotube.domain.repositories.video_repository import VideoRepository


def require_video(video_repo: VideoRepository, video_id: str) -> Video:
    """Fetches a video or raises: 400 for a malformed id, 404 when absent."""
    if not is_valid_id(video_id):
        raise ValidationError("Invalid video ID.")

    video = video_repo.get_by_id(video_id)
    if not video:
        raise NotFoundError("Video not found.")
    return video


class GetVideoByIdUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self, video_id: str) -> Video:
        return require_video(self.video_repo, video_id)
