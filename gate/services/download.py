from __future__ import annotations

import os
from pathlib import Path

from gate.config import Settings
from gate.core.exceptions import DownloadError


def resolve_download(settings: Settings) -> Path:
    """Locate the reward archive, raising DownloadError if it cannot be served."""
    path = Path(settings.DOWNLOAD_PATH)
    if not path.is_file():
        raise DownloadError(message="Download error", detail=f"missing file: {path.name}")
    if not os.access(path, os.R_OK):
        raise DownloadError(message="Download error", detail=f"unreadable file: {path.name}")
    return path
