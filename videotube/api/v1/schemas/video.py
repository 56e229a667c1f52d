from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from videotube.domain.entities.video import Video


class VideoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    video_file: str = Field(serialization_alias="videoFile")
    thumbnail: str
    title: str
    description: str
    duration: float = 0.0
    owner: str
    is_published: bool = Field(serialization_alias="isPublished")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    @classmethod
    def dump(cls, video: Video) -> dict[str, Any]:
        return cls.model_validate(video).model_dump(by_alias=True, mode="json")


class VideoListOut(BaseModel):
    videos: list[VideoOut]
    total_pages: int = Field(serialization_alias="totalPages")
    total_videos: int = Field(serialization_alias="totalVideos")

    @classmethod
    def dump(cls, result: dict[str, Any]) -> dict[str, Any]:
        return cls(
            videos=[VideoOut.model_validate(v) for v in result["videos"]],
            total_pages=result["totalPages"],
            total_videos=result["totalVideos"],
        ).model_dump(by_alias=True, mode="json")
