import mimetypes
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from videotube.config import TEMP_DIR


def _suffix_for_content_type(content_type: Optional[str]) -> str:
    if not content_type:
        return ""
    return mimetypes.guess_extension(content_type.split(";")[0].strip().lower()) or ""


class LocalWorkspace:
    """
    Context manager for a request's temporary upload workspace.
    Staged files are removed together with the folder on exit.
    """
    def __init__(self, prefix: str = "upload_", base_dir: Optional[Path] = None):
        self.prefix = prefix
        self.base_dir = Path(base_dir) if base_dir else TEMP_DIR
        self.path: Optional[Path] = None

    def __enter__(self):
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.path = Path(tempfile.mkdtemp(prefix=self.prefix, dir=str(self.base_dir)))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.path and self.path.exists():
            shutil.rmtree(self.path, ignore_errors=True)

    def stage(self, upload) -> Optional[Path]:
        """
        Copies an incoming upload (anything with .filename and .file) to disk.
        A name without an extension gets one from the upload's content type.
        Returns None when no file was sent.
        """
        if upload is None or not getattr(upload, "filename", None):
            return None

        suffix = Path(upload.filename).suffix.lower()
        if not suffix:
            suffix = _suffix_for_content_type(getattr(upload, "content_type", None))
        target = self.path / f"{uuid.uuid4().hex}{suffix}"
        upload.file.seek(0)
        with open(target, "wb") as out:
            shutil.copyfileobj(upload.file, out)
        return target
