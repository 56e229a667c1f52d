from functools import lru_cache

from fastapi import Depends

from videotube.config import Settings, get_settings
from videotube.domain.repositories.media_gateway import MediaGateway
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.infrastructure.google_client import create_storage_client
from videotube.infrastructure.media_probe import FFprobeDurationProbe
from videotube.infrastructure.repositories.supabase_video_repository import SupabaseVideoRepository
from videotube.infrastructure.storage_service import GCSMediaGateway
from videotube.infrastructure.supabase_client import create_supabase_client


# Clients are built on first use and shared; both are safe across threads
@lru_cache
def get_supabase_client():
    return create_supabase_client(get_settings())


@lru_cache
def _build_media_gateway() -> MediaGateway:
    settings = get_settings()
    return GCSMediaGateway(
        storage_client=create_storage_client(settings),
        bucket_name=settings.media_bucket,
        duration_probe=FFprobeDurationProbe(settings.ffprobe_binary),
    )


def get_video_repository(
    client=Depends(get_supabase_client),
    settings: Settings = Depends(get_settings),
) -> VideoRepository:
    return SupabaseVideoRepository(client, settings.videos_table)


def get_media_gateway() -> MediaGateway:
    return _build_media_gateway()
