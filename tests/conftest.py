"""Shared fixtures: in-memory repository, recording media gateway and an authenticated client."""

import dataclasses
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from server import app
from videotube.api.auth import get_current_user
from videotube.api.dependencies import get_media_gateway, get_video_repository
from videotube.domain.entities.media import ResourceKind, StoredMedia, detect_resource_kind
from videotube.domain.entities.video import Video
from videotube.domain.entities.video_query import VideoPage, VideoQuery
from videotube.domain.errors import UpstreamServiceError
from videotube.domain.repositories.media_gateway import MediaGateway
from videotube.domain.repositories.video_repository import VideoRepository

OWNER_ID = "0f8e1c9a-3b52-4d7e-9a61-2c4b8d0e7f13"
OTHER_USER_ID = "7a1d2e3f-4b5c-4d6e-8f90-a1b2c3d4e5f6"
BUCKET_URL = "https://storage.googleapis.com/test-bucket"


class InMemoryVideoRepository(VideoRepository):
    def __init__(self):
        self.rows: dict[str, Video] = {}
        self.fail_create = False
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    def add(self, **overrides: Any) -> Video:
        public_id = uuid.uuid4().hex
        fields = {
            "video_file": f"{BUCKET_URL}/video/{public_id}.mp4",
            "thumbnail": f"{BUCKET_URL}/image/{public_id}.png",
            "title": "Untitled",
            "description": "No description",
            "owner": OWNER_ID,
            "duration": 30.0,
            "is_published": True,
        }
        fields.update(overrides)
        return self.create(fields)

    def list(self, query: VideoQuery) -> VideoPage:
        items = list(self.rows.values())
        if query.search:
            needle = query.search.lower()
            items = [v for v in items if needle in v.title.lower() or needle in v.description.lower()]
        if query.owner:
            items = [v for v in items if v.owner == query.owner]
        items.sort(key=lambda v: getattr(v, query.sort_column), reverse=query.descending)
        return VideoPage(items=items[query.skip:query.skip + query.limit], total=len(items))

    def create(self, fields: dict[str, Any]) -> Video:
        if self.fail_create:
            raise UpstreamServiceError("Failed to save video to database.")
        now = self._tick()
        video = Video(id=str(uuid.uuid4()), created_at=now, updated_at=now, **fields)
        self.rows[video.id] = video
        return video

    def get_by_id(self, video_id: str) -> Optional[Video]:
        return self.rows.get(video_id)

    def update(self, video_id: str, fields: dict[str, Any]) -> Optional[Video]:
        video = self.rows.get(video_id)
        if not video:
            return None
        updated = dataclasses.replace(video, updated_at=self._tick(), **fields)
        self.rows[video_id] = updated
        return updated

    def delete(self, video_id: str) -> bool:
        return self.rows.pop(video_id, None) is not None

    def toggle_publish(self, video_id: str) -> Optional[Video]:
        video = self.rows.get(video_id)
        if not video:
            return None
        return self.update(video_id, {"is_published": not video.is_published})


class RecordingMediaGateway(MediaGateway):
    """Pretends to upload; remembers every call. Fails on demand."""

    def __init__(self):
        self.stored: list[str] = []
        self.removed: list[tuple] = []
        self.fail_store_suffixes: set[str] = set()
        self.fail_remove_kinds: set[ResourceKind] = set()

    def store(self, local_path) -> Optional[StoredMedia]:
        path = Path(local_path)
        self.stored.append(path.suffix)
        path.unlink(missing_ok=True)
        if path.suffix in self.fail_store_suffixes:
            return None

        kind = detect_resource_kind(path)
        public_id = uuid.uuid4().hex
        return StoredMedia(
            url=f"{BUCKET_URL}/{kind.value}/{public_id}{path.suffix}",
            public_id=public_id,
            resource_kind=kind,
            duration=12.5 if kind == ResourceKind.VIDEO else None,
        )

    def remove(self, remote_url, resource_kind) -> bool:
        kind = ResourceKind(resource_kind)
        self.removed.append((remote_url, kind))
        if not remote_url:
            return False
        return kind not in self.fail_remove_kinds


@pytest.fixture
def repo():
    return InMemoryVideoRepository()


@pytest.fixture
def gateway():
    return RecordingMediaGateway()


@pytest.fixture
def user():
    return SimpleNamespace(id=OWNER_ID, email="owner@example.com")


@pytest.fixture
def client(repo, gateway, user):
    """Test client with storage, database and auth replaced by doubles."""
    app.dependency_overrides[get_video_repository] = lambda: repo
    app.dependency_overrides[get_media_gateway] = lambda: gateway
    app.dependency_overrides[get_current_user] = lambda: user

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def upload_files():
    return {
        "videoFile": ("clip.mp4", b"\x00\x00\x00\x18ftypmp42", "video/mp4"),
        "thumbnail": ("thumb.png", b"\x89PNG\r\n\x1a\n", "image/png"),
    }
