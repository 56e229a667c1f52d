import json
import shutil
import subprocess
from pathlib import Path
from typing import Union


class FFprobeDurationProbe:
    """Reads container duration of a media file with ffprobe."""

    def __init__(self, binary: str = "ffprobe"):
        self.binary = binary

    def run_cmd(self, cmd):
        # Only video uploads need FFmpeg on the host
        if shutil.which(self.binary) is None:
            raise RuntimeError(f"{self.binary} not found. Install FFmpeg and add it to PATH.")
        p = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
        if p.returncode != 0:
            raise RuntimeError(f"Command failed:\n{' '.join(str(c) for c in cmd)}\n\nSTDERR:\n{p.stderr[:4000]}")
        return p.stdout, p.stderr

    def get_duration(self, path: Union[str, Path]) -> float:
        out, _ = self.run_cmd([
            self.binary, "-v", "error",
            "-show_entries", "format=duration",
            "-of", "json", str(path)
        ])
        j = json.loads(out)
        # Streams without a container duration report nothing
        duration_str = j.get("format", {}).get("duration", "0")
        return float(duration_str)
