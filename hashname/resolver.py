import glob
import logging
import os
from typing import Iterable, List

from .errors import InvalidPatternError

logger = logging.getLogger(__name__)

class PathResolver:
    """Turns command-line arguments into paths that exist: literal names first, globs otherwise."""

    def __init__(self, recursive: bool = True):
        self.recursive = recursive

    def resolve(self, args: Iterable[str]) -> List[str]:
        paths: List[str] = []
        for arg in args:
            # Follows symlinks, like the later checks; a dangling link falls through to globbing.
            if os.path.exists(arg):
                logger.debug("%s: literal path", arg)
                paths.append(arg)
                continue
            try:
                matches = self.expand(arg)
            except InvalidPatternError as e:
                logger.warning("Skipping %r: %s", arg, e)
                continue
            logger.debug("%s: %d glob match(es)", arg, len(matches))
            paths.extend(matches)
        return paths

    def expand(self, pattern: str) -> List[str]:
        if "\x00" in pattern:
            raise InvalidPatternError("Invalid glob pattern: embedded null byte")
        try:
            matches = sorted(glob.glob(pattern, recursive=self.recursive))
        except (ValueError, OSError) as e:
            raise InvalidPatternError(f"Invalid glob pattern: {e}") from e
        return [m for m in matches if os.path.exists(m)]
