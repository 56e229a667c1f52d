from abc import ABC, abstractmethod
from typing import Any, Optional

from videotube.domain.entities.video import Video
from videotube.domain.entities.video_query import VideoPage, VideoQuery


class VideoRepository(ABC):
    @abstractmethod
    def list(self, query: VideoQuery) -> VideoPage:
        pass

    @abstractmethod
    def create(self, fields: dict[str, Any]) -> Video:
        pass

    @abstractmethod
    def get_by_id(self, video_id: str) -> Optional[Video]:
        pass

    @abstractmethod
    def update(self, video_id: str, fields: dict[str, Any]) -> Optional[Video]:
        pass

    @abstractmethod
    def delete(self, video_id: str) -> bool:
        pass

    @abstractmethod
    def toggle_publish(self, video_id: str) -> Optional[Video]:
        pass
