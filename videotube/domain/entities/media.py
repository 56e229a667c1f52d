import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ResourceKind(str, Enum):
    VIDEO = "video"
    IMAGE = "image"
    RAW = "raw"


@dataclass(frozen=True)
class StoredMedia:
    """A file that now lives in remote storage."""
    url: str
    public_id: str
    resource_kind: ResourceKind
    duration: Optional[float] = None


def detect_resource_kind(path: Union[str, Path]) -> ResourceKind:
    mime_type, _ = mimetypes.guess_type(str(path))
    if mime_type:
        if mime_type.startswith("video/"):
            return ResourceKind.VIDEO
        if mime_type.startswith("image/"):
            return ResourceKind.IMAGE
    return ResourceKind.RAW
