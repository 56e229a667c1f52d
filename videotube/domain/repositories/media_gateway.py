from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from videotube.domain.entities.media import ResourceKind, StoredMedia


class MediaGateway(ABC):
    @abstractmethod
    def store(self, local_path: Union[str, Path]) -> Optional[StoredMedia]:
        """
        Uploads a staged local file and returns where it now lives.
        Returns None on failure. The local file is removed either way.
        """
        pass

    @abstractmethod
    def remove(self, remote_url: Optional[str], resource_kind: ResourceKind) -> bool:
        """Deletes the object behind a public URL. False unless the deletion is confirmed."""
        pass
