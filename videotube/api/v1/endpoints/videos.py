from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from videotube.api.auth import get_current_user
from videotube.api.dependencies import get_media_gateway, get_video_repository
from videotube.api.responses import ApiResponse
from videotube.api.v1.schemas.video import VideoListOut, VideoOut
from videotube.application.use_cases.delete_video import DeleteVideoUseCase
from videotube.application.use_cases.get_video import GetVideoByIdUseCase
from videotube.application.use_cases.list_videos import ListVideosUseCase
from videotube.application.use_cases.publish_video import PublishVideoUseCase
from videotube.application.use_cases.toggle_publish import TogglePublishStatusUseCase
from videotube.application.use_cases.update_video import UpdateVideoUseCase
from videotube.config import Settings, get_settings
from videotube.domain.entities.video_query import DEFAULT_PAGE_LIMIT, DEFAULT_SORT_BY, MAX_PAGE_LIMIT
from videotube.domain.repositories.media_gateway import MediaGateway
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.infrastructure.workspace_manager import LocalWorkspace

router = APIRouter(prefix="/videos", tags=["Videos"])


# Wire up the dependencies
def list_videos_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return ListVideosUseCase(repo)


def publish_video_use_case(
    repo: VideoRepository = Depends(get_video_repository),
    gateway: MediaGateway = Depends(get_media_gateway),
    settings: Settings = Depends(get_settings),
):
    return PublishVideoUseCase(repo, gateway, publish_by_default=settings.publish_by_default)


def get_video_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return GetVideoByIdUseCase(repo)


def update_video_use_case(
    repo: VideoRepository = Depends(get_video_repository),
    gateway: MediaGateway = Depends(get_media_gateway),
):
    return UpdateVideoUseCase(repo, gateway)


def delete_video_use_case(
    repo: VideoRepository = Depends(get_video_repository),
    gateway: MediaGateway = Depends(get_media_gateway),
):
    return DeleteVideoUseCase(repo, gateway)


def toggle_publish_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return TogglePublishStatusUseCase(repo)


@router.get("")
def list_videos(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    query: Optional[str] = Query(None),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy"),
    sort_type: str = Query("desc", alias="sortType"),
    user_id: Optional[str] = Query(None, alias="userId"),
    user=Depends(get_current_user),
    use_case: ListVideosUseCase = Depends(list_videos_use_case),
):
    result = use_case.execute(
        page=page,
        limit=limit,
        search=query,
        sort_by=sort_by,
        sort_type=sort_type,
        owner=user_id,
    )
    return ApiResponse(200, VideoListOut.dump(result), "Videos retrieved successfully").to_response()


@router.post("")
def publish_video(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    video_file: Optional[UploadFile] = File(None, alias="videoFile"),
    thumbnail: Optional[UploadFile] = File(None),
    user=Depends(get_current_user),
    use_case: PublishVideoUseCase = Depends(publish_video_use_case),
):
    with LocalWorkspace(prefix="publish_") as ws:
        video = use_case.execute(
            owner_id=str(user.id),
            title=title,
            description=description,
            video_path=ws.stage(video_file),
            thumbnail_path=ws.stage(thumbnail),
        )
    return ApiResponse(201, VideoOut.dump(video), "Video published successfully").to_response()


@router.get("/{video_id}")
def get_video(
    video_id: str,
    user=Depends(get_current_user),
    use_case: GetVideoByIdUseCase = Depends(get_video_use_case),
):
    video = use_case.execute(video_id)
    return ApiResponse(200, VideoOut.dump(video), "Video retrieved successfully").to_response()


@router.patch("/{video_id}")
def update_video(
    video_id: str,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    user=Depends(get_current_user),
    use_case: UpdateVideoUseCase = Depends(update_video_use_case),
):
    with LocalWorkspace(prefix="update_") as ws:
        video = use_case.execute(
            video_id=video_id,
            user_id=str(user.id),
            title=title,
            description=description,
            thumbnail_path=ws.stage(thumbnail),
        )
    return ApiResponse(200, VideoOut.dump(video), "Video updated successfully").to_response()


@router.delete("/{video_id}")
def delete_video(
    video_id: str,
    user=Depends(get_current_user),
    use_case: DeleteVideoUseCase = Depends(delete_video_use_case),
):
    use_case.execute(video_id, str(user.id))
    return ApiResponse(200, {}, "Video deleted successfully").to_response()


@router.patch("/{video_id}/publish")
def toggle_publish_status(
    video_id: str,
    user=Depends(get_current_user),
    use_case: TogglePublishStatusUseCase = Depends(toggle_publish_use_case),
):
    video = use_case.execute(video_id, str(user.id))
    return ApiResponse(200, VideoOut.dump(video), "Publish status toggled successfully").to_response()
