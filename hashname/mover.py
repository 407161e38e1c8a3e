import logging
import os
import shutil
from pathlib import Path

from .errors import AlreadyExistsError
from .models import Options, RenameResult

logger = logging.getLogger(__name__)

class SafeMover:
    def __init__(self, options: Options):
        self.dry_run = options.dry_run
        self.copy = options.copy
        self.force_rename = options.force_rename

    def check_destination(self, dest: Path) -> None:
        # lexists: a dangling symlink still occupies the name
        if not self.force_rename and os.path.lexists(dest):
            raise AlreadyExistsError()

    def move_one(self, src: Path, dest: Path) -> RenameResult:
        self.check_destination(dest)

        if self.dry_run:
            return RenameResult(src, dest, performed=False)

        # Only reachable with force_rename; renaming or copying onto itself is a no-op
        if _same_file(src, dest):
            logger.debug("%s: already at %s", src, dest)
            return RenameResult(src, dest, performed=False)

        if self.copy:
            # copyfile, unlike copy, refuses a directory destination
            shutil.copyfile(src, dest)
            shutil.copymode(src, dest)
        else:
            os.replace(src, dest)
        return RenameResult(src, dest, performed=True)


def _same_file(a: Path, b: Path) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False
