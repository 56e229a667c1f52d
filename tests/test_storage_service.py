"""Unit tests for the Google Cloud Storage media gateway, against in-memory bucket fakes."""

import pytest

from videotube.domain.entities.media import ResourceKind
from videotube.infrastructure.storage_service import GCSMediaGateway, public_id_from_url


class FakeBlob:
    def __init__(self, bucket, name):
        self.bucket = bucket
        self.name = name

    @property
    def public_url(self):
        return f"https://storage.googleapis.com/{self.bucket.name}/{self.name}"

    def upload_from_filename(self, filename):
        if self.bucket.fail_upload:
            raise ConnectionError("storage unavailable")
        with open(filename, "rb") as f:
            self.bucket.objects[self.name] = f.read()

    def delete(self):
        if self.bucket.fail_delete:
            raise ConnectionError("storage unavailable")
        del self.bucket.objects[self.name]


class FakeBucket:
    def __init__(self, name):
        self.name = name
        self.objects = {}
        self.fail_upload = False
        self.fail_delete = False

    def blob(self, name):
        return FakeBlob(self, name)

    def list_blobs(self, prefix=None):
        return [FakeBlob(self, n) for n in list(self.objects) if n.startswith(prefix or "")]


class FakeStorageClient:
    def __init__(self):
        self.buckets = {}

    def bucket(self, name):
        return self.buckets.setdefault(name, FakeBucket(name))


class FakeProbe:
    def __init__(self, duration=42.0, error=None):
        self.duration = duration
        self.error = error
        self.calls = []

    def get_duration(self, path):
        self.calls.append(path)
        if self.error:
            raise self.error
        return self.duration


@pytest.fixture
def storage_client():
    return FakeStorageClient()


@pytest.fixture
def probe():
    return FakeProbe()


@pytest.fixture
def gateway(storage_client, probe):
    return GCSMediaGateway(storage_client, "test-bucket", duration_probe=probe)


@pytest.fixture
def bucket(storage_client):
    return storage_client.bucket("test-bucket")


def staged(tmp_path, name, content=b"data"):
    path = tmp_path / name
    path.write_bytes(content)
    return path


class TestStore:
    def test_store_video(self, gateway, bucket, probe, tmp_path):
        path = staged(tmp_path, "clip.MP4", b"movie")

        media = gateway.store(path)

        assert media is not None
        assert media.resource_kind == ResourceKind.VIDEO
        assert media.duration == 42.0
        assert media.url == f"https://storage.googleapis.com/test-bucket/video/{media.public_id}.mp4"
        assert bucket.objects[f"video/{media.public_id}.mp4"] == b"movie"
        assert probe.calls == [path]
        assert not path.exists()

    def test_store_image_skips_duration_probe(self, gateway, probe, tmp_path):
        path = staged(tmp_path, "thumb.jpg")

        media = gateway.store(path)

        assert media.resource_kind == ResourceKind.IMAGE
        assert media.duration is None
        assert probe.calls == []
        assert "/image/" in media.url

    def test_upload_failure_returns_none_and_removes_file(self, gateway, bucket, tmp_path):
        bucket.fail_upload = True
        path = staged(tmp_path, "clip.mp4")

        assert gateway.store(path) is None
        assert not path.exists()
        assert bucket.objects == {}

    def test_probe_failure_returns_none_and_removes_file(self, storage_client, tmp_path):
        gateway = GCSMediaGateway(storage_client, "test-bucket", duration_probe=FakeProbe(error=RuntimeError("ffprobe")))
        path = staged(tmp_path, "clip.mp4")

        assert gateway.store(path) is None
        assert not path.exists()

    def test_missing_path(self, gateway):
        assert gateway.store(None) is None


class TestRemove:
    def test_remove_stored_object(self, gateway, bucket, tmp_path):
        media = gateway.store(staged(tmp_path, "thumb.png"))

        assert gateway.remove(media.url, ResourceKind.IMAGE) is True
        assert bucket.objects == {}

    def test_remove_accepts_plain_kind_string(self, gateway, bucket, tmp_path):
        media = gateway.store(staged(tmp_path, "clip.mov"))

        assert gateway.remove(media.url, "video") is True
        assert bucket.objects == {}

    def test_remove_with_wrong_kind(self, gateway, bucket, tmp_path):
        media = gateway.store(staged(tmp_path, "thumb.png"))

        assert gateway.remove(media.url, ResourceKind.VIDEO) is False
        assert len(bucket.objects) == 1

    def test_remove_without_url(self, gateway):
        assert gateway.remove(None, ResourceKind.IMAGE) is False
        assert gateway.remove("", ResourceKind.IMAGE) is False

    def test_remove_unknown_object(self, gateway):
        url = "https://storage.googleapis.com/test-bucket/image/doesnotexist.png"

        assert gateway.remove(url, ResourceKind.IMAGE) is False

    def test_remove_does_not_touch_ids_sharing_a_prefix(self, gateway, bucket):
        bucket.objects["image/abc.png"] = b"1"
        bucket.objects["image/abcdef.png"] = b"2"

        assert gateway.remove("https://storage.googleapis.com/test-bucket/image/abc.png", ResourceKind.IMAGE)
        assert list(bucket.objects) == ["image/abcdef.png"]

    def test_delete_failure(self, gateway, bucket, tmp_path):
        media = gateway.store(staged(tmp_path, "thumb.png"))
        bucket.fail_delete = True

        assert gateway.remove(media.url, ResourceKind.IMAGE) is False


@pytest.mark.parametrize("url, expected", [
    ("https://storage.googleapis.com/bucket/video/ab12cd.mp4", "ab12cd"),
    ("https://storage.googleapis.com/bucket/image/ab12cd.thumb.png", "ab12cd"),
    ("https://storage.googleapis.com/bucket/raw/noext", "noext"),
    ("https://storage.googleapis.com/bucket/image/ab12cd.png?generation=3", "ab12cd"),
])
def test_public_id_from_url(url, expected):
    assert public_id_from_url(url) == expected
