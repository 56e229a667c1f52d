import logging
import os
import uuid
from pathlib import Path, PurePosixPath
from typing import Optional, Union
from urllib.parse import unquote, urlparse

from videotube.domain.entities.media import ResourceKind, StoredMedia, detect_resource_kind
from videotube.domain.repositories.media_gateway import MediaGateway

logger = logging.getLogger(__name__)


def public_id_from_url(remote_url: str) -> str:
    """
    https://storage.googleapis.com/bucket/video/ab12cd.mp4 -> ab12cd
    """
    last_segment = unquote(urlparse(remote_url).path).rstrip("/").split("/")[-1]
    return last_segment.split(".")[0]


class GCSMediaGateway(MediaGateway):
    """
    Keeps uploaded media in a Google Cloud Storage bucket.

    Objects are named ``<resource kind>/<public id><suffix>`` and served from
    their public URL, so the public id can always be recovered from the URL.
    """

    def __init__(self, storage_client, bucket_name: str, duration_probe=None):
        self.storage_client = storage_client
        self.bucket_name = bucket_name
        self.duration_probe = duration_probe

    def _bucket(self):
        return self.storage_client.bucket(self.bucket_name)

    def store(self, local_path: Union[str, Path]) -> Optional[StoredMedia]:
        if not local_path:
            return None

        local_path = Path(local_path)
        try:
            kind = detect_resource_kind(local_path)
            public_id = uuid.uuid4().hex
            blob_name = f"{kind.value}/{public_id}{local_path.suffix.lower()}"

            duration = None
            if kind == ResourceKind.VIDEO and self.duration_probe is not None:
                duration = self.duration_probe.get_duration(local_path)

            logger.info("Uploading %s to %s/%s", local_path.name, self.bucket_name, blob_name)
            blob = self._bucket().blob(blob_name)
            blob.upload_from_filename(str(local_path))

            return StoredMedia(
                url=blob.public_url,
                public_id=public_id,
                resource_kind=kind,
                duration=duration,
            )
        except Exception:
            logger.exception("Upload failed for %s", local_path.name)
            return None
        finally:
            # The staged copy is single use, keep nothing around for retries
            try:
                os.remove(local_path)
            except FileNotFoundError:
                pass
            except OSError:
                logger.warning("Could not remove staged file %s", local_path, exc_info=True)

    def remove(self, remote_url: Optional[str], resource_kind: ResourceKind) -> bool:
        if not remote_url:
            return False

        kind = ResourceKind(resource_kind)
        public_id = public_id_from_url(remote_url)
        if not public_id:
            logger.warning("Could not derive a public id from %s", remote_url)
            return False

        try:
            candidates = self._bucket().list_blobs(prefix=f"{kind.value}/{public_id}")
            matches = [b for b in candidates if PurePosixPath(b.name).name.split(".")[0] == public_id]
            if not matches:
                logger.warning("No %s object found for public id %s", kind.value, public_id)
                return False

            for blob in matches:
                blob.delete()
            logger.info("Deleted %s object %s", kind.value, public_id)
            return True
        except Exception:
            logger.exception("Failed to delete %s object %s", kind.value, public_id)
            return False
