import logging
import os
import stat
from pathlib import Path

from .errors import AlreadyProcessedError, NotAFileError
from .models import FileRecord, Options
from .utils import ensure_text, looks_like_digest, split_name

logger = logging.getLogger(__name__)

class FileClassifier:
    """Decides whether a path may be hashed and splits its name into stem and extension."""

    def __init__(self, options: Options):
        self.force_rehash = options.force_rehash

    def classify(self, raw: str) -> FileRecord:
        # lstat/stat errors (vanished file, permissions) propagate as OSError.
        if stat.S_ISLNK(os.lstat(raw).st_mode):
            raise NotAFileError()
        if not stat.S_ISREG(os.stat(raw).st_mode):
            raise NotAFileError()

        path = Path(raw)
        stem, ext = split_name(path.name)
        ensure_text(stem)
        ensure_text(ext)

        if not self.force_rehash and looks_like_digest(stem):
            raise AlreadyProcessedError()

        logger.debug("%s: eligible (stem=%r, ext=%r)", raw, stem, ext)
        return FileRecord(path=path, stem=stem, ext=ext)
